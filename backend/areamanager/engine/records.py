"""Result records produced by the aggregation and grouping stages.

All areas are hectares.
"""

from __future__ import annotations

from dataclasses import dataclass

from areamanager.utils.text import format_area

WITHIN_NO = "No"
WITHIN_YES = "Yes"


@dataclass
class BoundaryAggregate:
    """Disturbance accounting for one labeled boundary."""

    identifier: str
    shape_id: str
    boundary_area_ha: float
    existing_cut_ha: float
    within_disposition_ha: float
    existing_cut_disturbance_ha: float
    new_cut_disturbance_ha: float
    within_disposition: str = WITHIN_NO
    enclosed_shape_ids: tuple[str, ...] = ()

    @property
    def total_area_ha(self) -> float:
        return self.boundary_area_ha

    def to_row(self) -> WorkspaceAreaRow:
        return WorkspaceAreaRow(
            workspace_id=self.identifier,
            existing_cut_ha=self.existing_cut_ha,
            existing_disposition_ha=self.within_disposition_ha,
            total_ha=self.boundary_area_ha,
            existing_cut_disturbance_ha=self.existing_cut_disturbance_ha,
            new_cut_disturbance_ha=self.new_cut_disturbance_ha,
        )


@dataclass
class WorkspaceAreaRow:
    workspace_id: str
    existing_cut_ha: float = 0.0
    existing_disposition_ha: float = 0.0
    total_ha: float = 0.0
    existing_cut_disturbance_ha: float = 0.0
    new_cut_disturbance_ha: float = 0.0


@dataclass
class GroupSummary:
    """Summed row values for one category. ``key == ""`` marks the grand total."""

    key: str
    existing_cut_ha: float = 0.0
    existing_disposition_ha: float = 0.0
    total_ha: float = 0.0
    existing_cut_disturbance_ha: float = 0.0
    new_cut_disturbance_ha: float = 0.0
    row_count: int = 0

    @property
    def is_grand_total(self) -> bool:
        return self.key == ""

    def add(self, row: WorkspaceAreaRow | GroupSummary) -> None:
        self.existing_cut_ha += row.existing_cut_ha
        self.existing_disposition_ha += row.existing_disposition_ha
        self.total_ha += row.total_ha
        self.existing_cut_disturbance_ha += row.existing_cut_disturbance_ha
        self.new_cut_disturbance_ha += row.new_cut_disturbance_ha
        self.row_count += row.row_count if isinstance(row, GroupSummary) else 1


@dataclass
class TempAreaRow:
    """One line of the temporary areas information table (display strings)."""

    description: str
    identifier: str
    width: str
    length: str
    area_ha: str
    within_existing_disposition: str = WITHIN_NO
    existing_cut_disturbance: str = ""
    new_cut_disturbance: str = format_area(0.0)

    def as_cells(self) -> list[str]:
        return [
            self.description,
            self.identifier,
            self.width,
            self.length,
            self.area_ha,
            self.within_existing_disposition,
            self.existing_cut_disturbance,
            self.new_cut_disturbance,
        ]
