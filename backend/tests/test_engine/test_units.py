"""Tests for hectare/acre conversion and totals rows."""

from __future__ import annotations

import pytest

from areamanager.engine.records import WorkspaceAreaRow
from areamanager.engine.units import acres_to_hectares, hectares_to_acres, workspace_totals_rows
from areamanager.utils.text import format_area


def test_hectares_to_acres():
    assert format_area(hectares_to_acres(0.4047)) == "1.000"
    assert hectares_to_acres(1.0) == pytest.approx(2.471, abs=1e-3)


def test_acres_to_hectares():
    assert acres_to_hectares(1.0) == pytest.approx(0.4047)
    assert acres_to_hectares(hectares_to_acres(3.2)) == pytest.approx(3.2)


def test_totals_row():
    row = WorkspaceAreaRow(
        "W1",
        existing_cut_ha=0.1,
        existing_disposition_ha=0.4047,
        total_ha=1.0,
        existing_cut_disturbance_ha=0.5047,
        new_cut_disturbance_ha=0.4953,
    )
    (totals,) = workspace_totals_rows([row])
    assert totals.outside_ha == pytest.approx(0.5953)
    assert totals.as_cells() == [
        "W1", "0.405", "1.000", "0.595", "1.471", "1.000", "2.471", "0.505", "0.495",
    ]


def test_outside_area_never_negative():
    row = WorkspaceAreaRow("W1", existing_disposition_ha=0.6, total_ha=0.5)
    (totals,) = workspace_totals_rows([row])
    assert totals.outside_ha == 0.0
    assert totals.outside_ac == 0.0
