"""Temporary areas information rows from annotation pairs."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from areamanager.engine.config import EngineConfig
from areamanager.engine.dimensions import DimensionRecord, parse_dimension
from areamanager.engine.grouping import describe_identifier
from areamanager.engine.records import BoundaryAggregate, TempAreaRow
from areamanager.utils.text import format_area, identifier_sort_key

logger = logging.getLogger(__name__)


def temp_area_row(
    record: DimensionRecord,
    aggregate: BoundaryAggregate | None = None,
) -> TempAreaRow:
    """Display row for one parsed annotation.

    Without a measured boundary the whole area is reported as existing cut
    disturbance and nothing as new cut.
    """
    row = TempAreaRow(
        description=describe_identifier(record.identifier),
        identifier=record.identifier,
        width=record.width,
        length=record.length,
        area_ha=record.area_text,
        existing_cut_disturbance=record.area_text,
    )
    if aggregate is not None:
        row.within_existing_disposition = aggregate.within_disposition
        row.existing_cut_disturbance = format_area(aggregate.existing_cut_disturbance_ha)
        row.new_cut_disturbance = format_area(aggregate.new_cut_disturbance_ha)
    return row


def build_temp_area_rows(
    pairs: Iterable[tuple[str, str]],
    aggregates: Mapping[str, BoundaryAggregate] | None = None,
    *,
    config: EngineConfig | None = None,
) -> list[TempAreaRow]:
    """Parse every (identifier, text) pair and return rows in identifier order."""
    by_label = {key.strip().upper(): agg for key, agg in (aggregates or {}).items()}

    rows = []
    for identifier, text in pairs:
        record = parse_dimension(text, identifier, config=config)
        rows.append(temp_area_row(record, by_label.get(record.identifier.upper())))

    rows.sort(key=lambda row: identifier_sort_key(row.identifier))
    logger.info("Built %d temporary area row(s)", len(rows))
    return rows
