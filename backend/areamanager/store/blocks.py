"""Temporary-area annotation blocks → (identifier, annotation text) pairs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

logger = logging.getLogger(__name__)

SUPPORTED_BLOCK_NAMES = frozenset({
    "Dyn_temp_area",
    "TempArea-Blue",
    "TempArea_County",
    "Work_Area_Stretchy",
    "Temp_Area_Pink",
})

IDENTIFIER_TAG = "TEMP_AREA_W1"
TEXT_TAG = "ENTER_TEXT"


@dataclass
class BlockReference:
    """An inserted block as read from the drawing: effective name + attribute values."""

    name: str
    attributes: dict[str, str] = field(default_factory=dict)


def collect_attribute_pairs(blocks: Iterable[BlockReference]) -> list[tuple[str, str]]:
    """Identifier/annotation pairs from supported blocks, deduplicated by exact pair.

    Block names and attribute tags are matched case-sensitively. Blocks missing
    either value are skipped. First-seen order is kept.
    """
    pairs: list[tuple[str, str]] = []
    seen: set[tuple[str, str]] = set()
    skipped = 0

    for block in blocks:
        if block.name not in SUPPORTED_BLOCK_NAMES:
            skipped += 1
            continue

        identifier = block.attributes.get(IDENTIFIER_TAG, "")
        text = block.attributes.get(TEXT_TAG, "")
        if not identifier.strip() or not text.strip():
            skipped += 1
            continue

        pair = (identifier, text)
        if pair in seen:
            continue
        seen.add(pair)
        pairs.append(pair)

    logger.info("Collected %d attribute pair(s), %d block(s) skipped", len(pairs), skipped)
    return pairs
