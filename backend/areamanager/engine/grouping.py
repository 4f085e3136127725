"""Category grouping and grand totals for workspace rows."""

from __future__ import annotations

import logging
from typing import Iterable

from areamanager.engine.records import GroupSummary, WorkspaceAreaRow
from areamanager.utils.text import identifier_sort_key

logger = logging.getLogger(__name__)

# Checked in order; "W" only counts when a digit follows (W7, not WX).
_PREFIX_DESCRIPTIONS: list[tuple[str, str]] = [
    ("LD", "LOG DECK"),
    ("AR", "ACCESS ROAD"),
    ("BP", "BORROW PIT"),
    ("BS", "BANK STABILIZATION"),
]


def describe_identifier(identifier: str | None) -> str:
    """Activity description for a workspace identifier, "" when unknown."""
    upper = (identifier or "").strip().upper()
    if not upper:
        return ""
    if upper.startswith("W") and len(upper) > 1 and upper[1].isdigit():
        return "WORKSPACE"
    for prefix, description in _PREFIX_DESCRIPTIONS:
        if upper.startswith(prefix):
            return description
    return ""


def group_key(identifier: str | None) -> str:
    """Grouping category; unknown prefixes group under the identifier itself."""
    return describe_identifier(identifier) or (identifier or "").strip()


def group_and_summarize(rows: Iterable[WorkspaceAreaRow]) -> list[GroupSummary]:
    """Sum rows per category, in identifier order; grand total only for 2+ groups."""
    groups: dict[str, GroupSummary] = {}
    for row in sorted(rows, key=lambda r: identifier_sort_key(r.workspace_id)):
        if not (row.workspace_id or "").strip():
            # "" is reserved for the grand total
            logger.warning("Skipping row without a workspace id (total %.3f ha)", row.total_ha)
            continue
        key = group_key(row.workspace_id)
        if key not in groups:
            groups[key] = GroupSummary(key=key)
        groups[key].add(row)

    summaries = list(groups.values())
    if len(summaries) >= 2:
        grand_total = GroupSummary(key="")
        for summary in summaries:
            grand_total.add(summary)
        summaries.append(grand_total)

    logger.debug("Grouped rows into %d categor(ies)", len(groups))
    return summaries
