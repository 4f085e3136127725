"""Dimension text parser — width/length/area from free-form annotation text.

Decision order (first branch that yields a record wins):
  1. irregular marker ``/P=`` or ``\\P=`` → last number after the marker is the area
  2. ``<width> x <length> [<area>]`` → width from the last number before the
     separator, length from the first number after it; a trailing number is an
     explicit area and overrides width×length when the two disagree
  3. anything else → the numeric literals themselves, unclassified

The parser never raises; unusable text yields an ``N/A`` record.
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass

from areamanager.engine.config import EngineConfig
from areamanager.utils.text import all_numbers, format_area, format_length, last_number, numbers_in

logger = logging.getLogger(__name__)

IRREGULAR = "IRREGULAR"
NOT_AVAILABLE = "N/A"

_MARKER_RE = re.compile(r"[/\\]P=", re.IGNORECASE)
_SEPARATOR_RE = re.compile(r"[xX×]\s*(?=\d)")


class AreaSource(str, enum.Enum):
    COMPUTED = "computed"  # width × length
    EXTRACTED = "extracted"  # numeric literal taken from the text
    UNPARSABLE = "unparsable"  # no number → N/A


@dataclass
class DimensionRecord:
    identifier: str
    text: str
    width: str = IRREGULAR
    length: str = IRREGULAR
    area_text: str = NOT_AVAILABLE
    area_ha: float | None = None
    source: AreaSource = AreaSource.UNPARSABLE
    width_value: float | None = None
    length_value: float | None = None

    @property
    def is_irregular(self) -> bool:
        return self.width == IRREGULAR or self.length == IRREGULAR


def _area_record(
    identifier: str,
    text: str,
    area: float | None,
    source: AreaSource = AreaSource.EXTRACTED,
    **extra,
) -> DimensionRecord:
    if area is None:
        return DimensionRecord(identifier=identifier, text=text, **extra)
    return DimensionRecord(
        identifier=identifier,
        text=text,
        area_text=format_area(area),
        area_ha=area,
        source=source,
        **extra,
    )


def _parse_marker(identifier: str, text: str, marker: re.Match) -> DimensionRecord:
    number = last_number(text[marker.end():])
    area = float(number) if number else None
    return _area_record(identifier, text, area)


def _find_separator(text: str) -> re.Match | None:
    """First x/X/× followed by a number with at least one number before it."""
    for match in _SEPARATOR_RE.finditer(text):
        if numbers_in(text[: match.start()]):
            return match
    return None


def _parse_width_length(
    identifier: str,
    text: str,
    separator: re.Match,
    cfg: EngineConfig,
) -> DimensionRecord | None:
    width_text = last_number(text[: separator.start()])
    after = numbers_in(text[separator.end():])
    if not width_text or not after:
        return None

    width = float(width_text)
    length = float(after[0])
    explicit = float(after[-1]) if len(after) > 1 else None

    if width > 0 and length > 0:
        computed = width * length / cfg.area_divisor
        if explicit is not None and abs(explicit - computed) > cfg.explicit_area_tolerance:
            # Authored area wins over authored dimensions
            return _area_record(
                identifier, text, explicit, width_value=width, length_value=length
            )
        return _area_record(
            identifier,
            text,
            computed,
            source=AreaSource.COMPUTED,
            width=format_length(width),
            length=format_length(length),
            width_value=width,
            length_value=length,
        )

    if explicit is not None:
        return _area_record(identifier, text, explicit, width_value=width, length_value=length)
    return None


def _parse_numbers(identifier: str, text: str) -> DimensionRecord:
    found = numbers_in(text)
    if not found:
        return DimensionRecord(identifier=identifier, text=text)
    if len(found) == 1:
        return _area_record(identifier, text, float(found[0]))
    # Several unrelated numbers: keep them for the reader, no usable area
    return DimensionRecord(
        identifier=identifier,
        text=text,
        area_text=all_numbers(text),
        source=AreaSource.EXTRACTED,
    )


def parse_dimension(
    text: str | None,
    identifier: str = "",
    *,
    config: EngineConfig | None = None,
) -> DimensionRecord:
    """Parse one annotation string. Never raises."""
    cfg = config or EngineConfig()
    raw = (text or "").strip()
    identifier = (identifier or "").strip()

    try:
        marker = _MARKER_RE.search(raw)
        if marker:
            return _parse_marker(identifier, raw, marker)

        separator = _find_separator(raw)
        if separator:
            record = _parse_width_length(identifier, raw, separator, cfg)
            if record is not None:
                return record

        return _parse_numbers(identifier, raw)
    except Exception as e:
        logger.warning("Could not parse dimension text %r for %s: %s", raw, identifier or "?", e)
        return DimensionRecord(identifier=identifier, text=raw)
