"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from areamanager.geometry.shapes import ClosedShape


class ShapeIn(BaseModel):
    id: str = Field(..., description="Opaque shape handle from the drawing")
    points: list[list[float]] = Field(..., description="Boundary vertices [[x, y(, z)], ...]")
    category: str = Field(default="", description="cut, disposition or boundary-candidate")
    layer: str = Field(default="", description="Drawing layer name")

    def to_shape(self) -> ClosedShape:
        return ClosedShape.from_points(
            self.id, self.points, category=self.category, layer=self.layer
        )


class DimensionParseRequest(BaseModel):
    text: str = Field(..., description="Free-form annotation text")
    identifier: str = Field(default="", description="Workspace identifier, e.g. W7")


class BlockIn(BaseModel):
    name: str = Field(..., description="Effective block name")
    attributes: dict[str, str] = Field(default_factory=dict, description="Attribute tag → text")


class TempAreasRequest(BaseModel):
    blocks: list[BlockIn] = Field(..., description="Inserted annotation blocks")


class AssignmentRequest(BaseModel):
    prefix: str = Field(..., description="Activity code, e.g. W or LD")
    vertices: list[list[float]] = Field(..., description="Ordered reference polyline vertices")
    candidates: list[ShapeIn] = Field(..., description="Closed shapes that may receive labels")
    labels: dict[str, str] = Field(
        default_factory=dict,
        description="Current shape id → label object data",
    )
    filter_layers: bool = Field(
        default=False,
        description="Keep only candidates drawn on the temporary-area layers",
    )


class WorkspaceAreasRequest(BaseModel):
    boundaries: list[ShapeIn] = Field(..., description="Labeled workspace boundary shapes")
    disturbances: list[ShapeIn] = Field(
        default_factory=list,
        description="Existing cut / disposition shapes",
    )
    labels: dict[str, str] = Field(..., description="Shape id → workspace label object data")
    dimensions: dict[str, str] = Field(
        default_factory=dict,
        description="Workspace label → annotation text (area fallback)",
    )


class WorkspaceTableRequest(BaseModel):
    cells: list[list[str]] = Field(..., description="Rendered table cell text, row major")
