"""Read workspace rows back from an already rendered table.

The source is normally the temporary areas table this tool produces:

    0 DESCRIPTION | 1 ID | 2 WIDTH | 3 LENGTH | 4 AREA (ha) |
    5 WITHIN EXISTING DISPOSITIONS | 6 EXISTING CUT DISTURBANCE (ha) |
    7 NEW CUT DISTURBANCE (ha)

but any table whose headers name these columns works. "Within existing
dispositions" may hold "No" (0), "Yes" (the whole total) or a number.
"Existing cut disturbance" is the combined cut + disposition figure; the
cut-only part is derived by subtracting the disposition.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Sequence

from areamanager.engine.config import AREA_DIVISOR, EngineConfig
from areamanager.engine.records import WITHIN_YES, WorkspaceAreaRow
from areamanager.utils.text import identifier_sort_key, last_number, parse_float

logger = logging.getLogger(__name__)

_HEADER_SCAN_ROWS = 2
_HEADER_WORDS = ("DESCRIPTION", "WORKSPACE", "W#", "ID")


@dataclass
class ColumnMap:
    workspace_id: int = -1
    width: int = -1
    length: int = -1
    area: int = -1
    total: int = -1
    disposition: int = -1
    existing_cut_disturbance: int = -1
    new_cut_disturbance: int = -1

    @classmethod
    def default_layout(cls) -> ColumnMap:
        return cls(
            workspace_id=1,
            width=2,
            length=3,
            area=4,
            disposition=5,
            existing_cut_disturbance=6,
            new_cut_disturbance=7,
        )


@dataclass
class TableEntry:
    workspace_id: str
    width: float | None = None
    length: float | None = None
    area_ha: float | None = None
    total_ha: float | None = None
    disposition_ha: float | None = None
    disposition_text: str = ""
    existing_cut_disturbance_ha: float | None = None
    new_cut_disturbance_ha: float | None = None

    @property
    def comparable_area(self) -> float:
        """Area used to pick between conflicting duplicates."""
        if self.total_ha is not None:
            return self.total_ha
        if self.width is not None and self.length is not None:
            return self.width * self.length / AREA_DIVISOR
        return self.area_ha if self.area_ha is not None else 0.0


@dataclass
class WorkspaceTableResult:
    rows: list[WorkspaceAreaRow] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def _cell(cells: Sequence[Sequence[str]], row: int, col: int) -> str:
    if row < 0 or row >= len(cells) or col < 0 or col >= len(cells[row]):
        return ""
    return cells[row][col] or ""


def _cell_number(cells: Sequence[Sequence[str]], row: int, col: int) -> float | None:
    number = last_number(_cell(cells, row, col))
    if not number:
        return None
    return parse_float(number, default=None)


def _is_header_text(text: str) -> bool:
    upper = text.strip().upper()
    return bool(upper) and any(word in upper for word in _HEADER_WORDS)


def find_header_row(cells: Sequence[Sequence[str]]) -> int:
    """Index of the header row within the first two rows, or -1."""
    for row in range(min(len(cells), _HEADER_SCAN_ROWS)):
        if any(_is_header_text(text or "") for text in cells[row]):
            return row
    return -1


def map_columns(cells: Sequence[Sequence[str]], header_row: int) -> ColumnMap:
    """Assign column roles from header text; first matching column wins."""
    if header_row < 0:
        return ColumnMap.default_layout()

    columns = ColumnMap()
    description_col = -1
    for col, raw in enumerate(cells[header_row]):
        header = (raw or "").strip().upper()
        if not header:
            continue

        if columns.workspace_id < 0 and ("WORKSPACE" in header or "W#" in header or header == "ID"):
            columns.workspace_id = col
        elif description_col < 0 and "DESCRIPTION" in header:
            description_col = col
        elif columns.width < 0 and "WIDTH" in header:
            columns.width = col
        elif columns.length < 0 and "LENGTH" in header:
            columns.length = col
        elif columns.disposition < 0 and ("DISPOSITION" in header or "WITHIN" in header):
            columns.disposition = col
        elif columns.existing_cut_disturbance < 0 and ("EXISTING CUT" in header or "CUT DIST" in header):
            columns.existing_cut_disturbance = col
        elif columns.new_cut_disturbance < 0 and "NEW CUT" in header:
            columns.new_cut_disturbance = col
        elif columns.total < 0 and "TOTAL" in header:
            columns.total = col
        elif columns.area < 0 and "AREA" in header:
            columns.area = col

    if columns.workspace_id < 0:
        columns.workspace_id = description_col if description_col >= 0 else 1
    return columns


def resolve_total(entry: TableEntry, config: EngineConfig | None = None) -> float | None:
    """Total → area → width×length → existing + new disturbance."""
    cfg = config or EngineConfig()
    if entry.total_ha is not None:
        return entry.total_ha
    if entry.area_ha is not None:
        return entry.area_ha
    if entry.width is not None and entry.length is not None:
        return entry.width * entry.length / cfg.area_divisor
    if entry.existing_cut_disturbance_ha is not None or entry.new_cut_disturbance_ha is not None:
        return (entry.existing_cut_disturbance_ha or 0.0) + (entry.new_cut_disturbance_ha or 0.0)
    return None


def _values_match(first: float | None, second: float | None, tolerance: float) -> bool:
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return abs(first - second) < tolerance


def entries_match(first: TableEntry, second: TableEntry, tolerance: float = 1e-4) -> bool:
    for f in fields(TableEntry):
        if f.name == "workspace_id":
            continue
        a = getattr(first, f.name)
        b = getattr(second, f.name)
        if f.name == "disposition_text":
            if a.strip().upper() != b.strip().upper():
                return False
        elif not _values_match(a, b, tolerance):
            return False
    return True


def resolve_duplicate(existing: TableEntry, candidate: TableEntry) -> TableEntry:
    """Keep the entry with the larger resolved area; ties keep the first."""
    return candidate if candidate.comparable_area > existing.comparable_area else existing


def build_workspace_row(entry: TableEntry) -> WorkspaceAreaRow:
    total = entry.total_ha or 0.0

    if entry.disposition_ha is not None:
        disposition = entry.disposition_ha
    elif entry.disposition_text.strip().upper() == WITHIN_YES.upper():
        disposition = total
    else:
        disposition = 0.0

    existing = entry.existing_cut_disturbance_ha
    if existing is None:
        if entry.new_cut_disturbance_ha is not None:
            existing = max(0.0, total - entry.new_cut_disturbance_ha)
        else:
            existing = 0.0

    new_cut = entry.new_cut_disturbance_ha
    if new_cut is None:
        new_cut = max(0.0, total - existing)

    return WorkspaceAreaRow(
        workspace_id=entry.workspace_id,
        existing_cut_ha=max(0.0, existing - disposition),
        existing_disposition_ha=disposition,
        total_ha=total,
        existing_cut_disturbance_ha=existing,
        new_cut_disturbance_ha=new_cut,
    )


def read_workspace_entries(
    cells: Sequence[Sequence[str]],
    config: EngineConfig | None = None,
) -> tuple[list[TableEntry], list[str]]:
    """One entry per workspace id; conflicting duplicates resolved with a warning."""
    cfg = config or EngineConfig()
    header_row = find_header_row(cells)
    columns = map_columns(cells, header_row)
    start = header_row + 1 if header_row >= 0 else 0

    unique: dict[str, TableEntry] = {}
    warnings: list[str] = []

    for row in range(start, len(cells)):
        workspace_id = _cell(cells, row, columns.workspace_id).strip()
        if not workspace_id:
            continue

        entry = TableEntry(
            workspace_id=workspace_id,
            width=_cell_number(cells, row, columns.width),
            length=_cell_number(cells, row, columns.length),
            area_ha=_cell_number(cells, row, columns.area),
            total_ha=_cell_number(cells, row, columns.total),
            disposition_ha=_cell_number(cells, row, columns.disposition),
            disposition_text=_cell(cells, row, columns.disposition),
            existing_cut_disturbance_ha=_cell_number(cells, row, columns.existing_cut_disturbance),
            new_cut_disturbance_ha=_cell_number(cells, row, columns.new_cut_disturbance),
        )
        entry.total_ha = resolve_total(entry, cfg)

        key = workspace_id.upper()
        existing = unique.get(key)
        if existing is None:
            unique[key] = entry
            continue
        if entries_match(existing, entry, cfg.row_match_tolerance):
            continue

        unique[key] = resolve_duplicate(existing, entry)
        message = (
            f"Duplicate workspace '{workspace_id}' with different sizes/areas detected. "
            "Using the larger area."
        )
        logger.warning(message)
        warnings.append(message)

    return list(unique.values()), warnings


def read_workspace_table(
    cells: Sequence[Sequence[str]],
    config: EngineConfig | None = None,
) -> WorkspaceTableResult:
    entries, warnings = read_workspace_entries(cells, config)
    rows = [build_workspace_row(entry) for entry in entries]
    rows.sort(key=lambda r: identifier_sort_key(r.workspace_id))
    return WorkspaceTableResult(rows=rows, warnings=warnings)
