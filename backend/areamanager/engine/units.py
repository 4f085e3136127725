"""Hectare/acre conversion and the totals-table values derived from workspace rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from areamanager.engine.config import HECTARES_PER_ACRE, EngineConfig
from areamanager.engine.records import WorkspaceAreaRow
from areamanager.utils.text import format_area


def hectares_to_acres(hectares: float, hectares_per_acre: float = HECTARES_PER_ACRE) -> float:
    return hectares / hectares_per_acre


def acres_to_hectares(acres: float, hectares_per_acre: float = HECTARES_PER_ACRE) -> float:
    return acres * hectares_per_acre


@dataclass
class WorkspaceTotalsRow:
    """One line of the crown area usage table."""

    workspace_id: str
    within_ha: float
    within_ac: float
    outside_ha: float
    outside_ac: float
    total_ha: float
    total_ac: float
    existing_cut_disturbance_ha: float
    new_cut_disturbance_ha: float

    def as_cells(self) -> list[str]:
        return [
            self.workspace_id,
            format_area(self.within_ha),
            format_area(self.within_ac),
            format_area(self.outside_ha),
            format_area(self.outside_ac),
            format_area(self.total_ha),
            format_area(self.total_ac),
            format_area(self.existing_cut_disturbance_ha),
            format_area(self.new_cut_disturbance_ha),
        ]


def workspace_totals_rows(
    rows: Iterable[WorkspaceAreaRow],
    config: EngineConfig | None = None,
) -> list[WorkspaceTotalsRow]:
    cfg = config or EngineConfig()
    factor = cfg.hectares_per_acre
    totals = []
    for row in rows:
        within = row.existing_disposition_ha
        outside = max(0.0, row.total_ha - within)
        totals.append(
            WorkspaceTotalsRow(
                workspace_id=row.workspace_id,
                within_ha=within,
                within_ac=hectares_to_acres(within, factor),
                outside_ha=outside,
                outside_ac=hectares_to_acres(outside, factor),
                total_ha=row.total_ha,
                total_ac=hectares_to_acres(row.total_ha, factor),
                existing_cut_disturbance_ha=row.existing_cut_disturbance_ha,
                new_cut_disturbance_ha=row.new_cut_disturbance_ha,
            )
        )
    return totals
