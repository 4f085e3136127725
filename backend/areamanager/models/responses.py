"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from areamanager.engine.dimensions import DimensionRecord
from areamanager.engine.records import BoundaryAggregate, GroupSummary, TempAreaRow, WorkspaceAreaRow
from areamanager.engine.units import WorkspaceTotalsRow


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    operations_registered: int = 0


class DimensionOut(BaseModel):
    identifier: str
    text: str
    width: str
    length: str
    area_text: str
    area_ha: float | None = None
    source: str

    @classmethod
    def from_record(cls, record: DimensionRecord) -> DimensionOut:
        return cls(
            identifier=record.identifier,
            text=record.text,
            width=record.width,
            length=record.length,
            area_text=record.area_text,
            area_ha=record.area_ha,
            source=record.source.value,
        )


class TempAreaRowOut(BaseModel):
    description: str
    identifier: str
    width: str
    length: str
    area_ha: str
    within_existing_disposition: str
    existing_cut_disturbance: str
    new_cut_disturbance: str

    @classmethod
    def from_row(cls, row: TempAreaRow) -> TempAreaRowOut:
        return cls(
            description=row.description,
            identifier=row.identifier,
            width=row.width,
            length=row.length,
            area_ha=row.area_ha,
            within_existing_disposition=row.within_existing_disposition,
            existing_cut_disturbance=row.existing_cut_disturbance,
            new_cut_disturbance=row.new_cut_disturbance,
        )


class TempAreasResponse(BaseModel):
    pairs: list[list[str]] = Field(default_factory=list)
    rows: list[TempAreaRowOut] = Field(default_factory=list)


class AssignmentResponse(BaseModel):
    prefix: str
    label_field: str = Field(default="", description="Object data field the labels are stored in")
    assignments: dict[str, str] = Field(default_factory=dict)
    cleared: list[str] = Field(default_factory=list)
    stale: list[str] = Field(default_factory=list)
    labels: dict[str, str] = Field(
        default_factory=dict,
        description="Object data after the update (non-empty labels only)",
    )


class AggregateOut(BaseModel):
    identifier: str
    shape_id: str
    boundary_area_ha: float
    existing_cut_ha: float
    within_disposition_ha: float
    existing_cut_disturbance_ha: float
    new_cut_disturbance_ha: float
    within_disposition: str
    enclosed_shape_ids: list[str] = Field(default_factory=list)

    @classmethod
    def from_aggregate(cls, agg: BoundaryAggregate) -> AggregateOut:
        return cls(
            identifier=agg.identifier,
            shape_id=agg.shape_id,
            boundary_area_ha=agg.boundary_area_ha,
            existing_cut_ha=agg.existing_cut_ha,
            within_disposition_ha=agg.within_disposition_ha,
            existing_cut_disturbance_ha=agg.existing_cut_disturbance_ha,
            new_cut_disturbance_ha=agg.new_cut_disturbance_ha,
            within_disposition=agg.within_disposition,
            enclosed_shape_ids=list(agg.enclosed_shape_ids),
        )


class GroupOut(BaseModel):
    key: str
    is_grand_total: bool = False
    row_count: int = 0
    existing_cut_ha: float = 0.0
    existing_disposition_ha: float = 0.0
    total_ha: float = 0.0
    existing_cut_disturbance_ha: float = 0.0
    new_cut_disturbance_ha: float = 0.0

    @classmethod
    def from_summary(cls, summary: GroupSummary) -> GroupOut:
        return cls(
            key=summary.key,
            is_grand_total=summary.is_grand_total,
            row_count=summary.row_count,
            existing_cut_ha=summary.existing_cut_ha,
            existing_disposition_ha=summary.existing_disposition_ha,
            total_ha=summary.total_ha,
            existing_cut_disturbance_ha=summary.existing_cut_disturbance_ha,
            new_cut_disturbance_ha=summary.new_cut_disturbance_ha,
        )


class WorkspaceRowOut(BaseModel):
    workspace_id: str
    existing_cut_ha: float
    existing_disposition_ha: float
    total_ha: float
    existing_cut_disturbance_ha: float
    new_cut_disturbance_ha: float

    @classmethod
    def from_row(cls, row: WorkspaceAreaRow) -> WorkspaceRowOut:
        return cls(
            workspace_id=row.workspace_id,
            existing_cut_ha=row.existing_cut_ha,
            existing_disposition_ha=row.existing_disposition_ha,
            total_ha=row.total_ha,
            existing_cut_disturbance_ha=row.existing_cut_disturbance_ha,
            new_cut_disturbance_ha=row.new_cut_disturbance_ha,
        )


class TotalsRowOut(BaseModel):
    workspace_id: str
    cells: list[str] = Field(..., description="Formatted ha/ac values, 3 decimals")

    @classmethod
    def from_row(cls, row: WorkspaceTotalsRow) -> TotalsRowOut:
        return cls(workspace_id=row.workspace_id, cells=row.as_cells())


class WorkspaceAreasResponse(BaseModel):
    aggregates: list[AggregateOut] = Field(default_factory=list)
    rows: list[WorkspaceRowOut] = Field(default_factory=list)
    groups: list[GroupOut] = Field(default_factory=list)
    totals: list[TotalsRowOut] = Field(default_factory=list)


class WorkspaceTableResponse(BaseModel):
    rows: list[WorkspaceRowOut] = Field(default_factory=list)
    groups: list[GroupOut] = Field(default_factory=list)
    totals: list[TotalsRowOut] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
