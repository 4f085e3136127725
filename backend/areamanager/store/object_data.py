"""Object-data store: one label string per shape identity."""

from __future__ import annotations

import logging
from typing import Mapping, Protocol

logger = logging.getLogger(__name__)


class ObjectDataStore(Protocol):
    def read_label(self, shape_id: str) -> str | None: ...

    def write_label(self, shape_id: str, value: str) -> None: ...

    def clear_label(self, shape_id: str) -> None: ...


class InMemoryObjectDataStore:
    """Dict-backed store used by the HTTP surface and tests.

    A cleared label is kept as an empty record (``""``) the way a drawing's
    object-data table keeps the row after its value is blanked.
    """

    def __init__(self, labels: Mapping[str, str] | None = None) -> None:
        self._labels: dict[str, str] = dict(labels or {})

    def read_label(self, shape_id: str) -> str | None:
        return self._labels.get(shape_id)

    def write_label(self, shape_id: str, value: str) -> None:
        logger.debug("write %s = %r", shape_id, value)
        self._labels[shape_id] = value

    def clear_label(self, shape_id: str) -> None:
        if shape_id in self._labels:
            logger.debug("clear %s (was %r)", shape_id, self._labels[shape_id])
            self._labels[shape_id] = ""

    def labels(self) -> dict[str, str]:
        """Snapshot of non-empty labels."""
        return {sid: value for sid, value in self._labels.items() if value}

    def __len__(self) -> int:
        return len(self.labels())
