"""Engine configuration — tolerances and constants for the area workflow."""

from __future__ import annotations

from dataclasses import dataclass, field

# Candidate boundary layers drawn by the temporary-area workflow.
DEFAULT_BOUNDARY_LAYERS = frozenset({
    "P-TEMP_ACCESS ROAD",
    "P-TEMP_BANK STABILIZATION",
    "P-TEMP_BORROW PIT",
    "P-TEMP_CAMP SITE",
    "P-TEMP_LOG DECK",
    "P-TEMP_PUSHOUT",
    "P-TEMP_REMOTE SUMP",
    "P-TEMP_WORKSPACE",
    "P-TEMP-BLUE",
})

HECTARES_PER_ACRE = 0.4047
AREA_DIVISOR = 10_000.0

CATEGORY_CUT = "cut"
CATEGORY_DISPOSITION = "disposition"


@dataclass
class EngineConfig:
    """Controls tolerances and unit conversion used across the engine."""

    # Point-on-boundary distance that still counts as contained (drawing units)
    containment_tolerance: float = 1e-7

    # Perpendicular jitter applied to the ray direction in the parity test
    ray_offset_fraction: float = 0.1234567

    # Square drawing units (m²) per hectare
    area_divisor: float = AREA_DIVISOR

    # Explicit trailing area vs width×length disagreement
    explicit_area_tolerance: float = 1e-6

    # Field-by-field comparison of re-read table rows
    row_match_tolerance: float = 1e-4

    # Within-disposition area equal to the boundary area → "Yes"
    full_disposition_tolerance: float = 0.0005

    # Fixed, locale-independent conversion constant
    hectares_per_acre: float = HECTARES_PER_ACRE

    boundary_layers: frozenset[str] = DEFAULT_BOUNDARY_LAYERS
    disturbance_categories: frozenset[str] = field(
        default_factory=lambda: frozenset({CATEGORY_CUT, CATEGORY_DISPOSITION})
    )

    def is_boundary_layer(self, layer: str | None) -> bool:
        wanted = (layer or "").upper()
        return any(wanted == name.upper() for name in self.boundary_layers)
