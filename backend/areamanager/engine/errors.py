"""Engine exceptions. Anything raised here aborts a run before the write phase."""

from __future__ import annotations


class AreaManagerError(Exception):
    """Base class for fatal engine conditions."""


class UnassignedVertexError(AreaManagerError):
    """No candidate shape contains a reference vertex."""

    def __init__(self, vertex_index: int, label: str) -> None:
        self.vertex_index = vertex_index
        self.label = label
        super().__init__(
            f"No closed shape found for vertex {vertex_index} ({label}). Operation cancelled."
        )


class DuplicateLabelError(AreaManagerError):
    """Two or more distinct shapes carry the same label."""

    def __init__(self, conflicts: dict[str, list[str]]) -> None:
        self.conflicts = conflicts
        listing = "; ".join(
            f"{label}: {', '.join(ids)}" for label, ids in sorted(conflicts.items())
        )
        super().__init__(f"Duplicate workspace labels found: {listing}")

    @property
    def shape_ids(self) -> list[str]:
        return [sid for ids in self.conflicts.values() for sid in ids]


class AssignmentIntegrityError(AreaManagerError):
    """An assignment references a shape outside the run's candidate set."""

    def __init__(self, unknown_ids: list[str]) -> None:
        self.unknown_ids = unknown_ids
        super().__init__(f"Assignments reference unknown shapes: {', '.join(unknown_ids)}")
