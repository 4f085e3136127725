"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from areamanager.main import app
from tests.conftest import HECTARE_SQUARE, SQUARE_A, SQUARE_B, TEMP_AREAS_TABLE, WORKSPACE_LAYER, rect

client = TestClient(app)


def _shape(id: str, points, category: str = "", layer: str = WORKSPACE_LAYER) -> dict:
    return {"id": id, "points": points, "category": category, "layer": layer}


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["operations_registered"] == 4


def test_parse_dimension():
    response = client.post("/api/dimensions/parse", json={"text": "10.0x50.0", "identifier": "W1"})
    assert response.status_code == 200
    data = response.json()
    assert data["width"] == "10.0"
    assert data["length"] == "50.0"
    assert data["area_text"] == "0.050"
    assert data["source"] == "computed"


def test_parse_dimension_unparsable():
    response = client.post("/api/dimensions/parse", json={"text": "see plan"})
    assert response.status_code == 200
    assert response.json()["area_text"] == "N/A"
    assert response.json()["area_ha"] is None


def test_temp_areas():
    blocks = [
        {"name": "Dyn_temp_area", "attributes": {"TEMP_AREA_W1": "W2", "ENTER_TEXT": "10x50"}},
        {"name": "Dyn_temp_area", "attributes": {"TEMP_AREA_W1": "W2", "ENTER_TEXT": "10x50"}},
        {"name": "TempArea-Blue", "attributes": {"TEMP_AREA_W1": "LD1", "ENTER_TEXT": "IRREGULAR /P=0.25"}},
        {"name": "Unrelated", "attributes": {"TEMP_AREA_W1": "W9", "ENTER_TEXT": "1x1"}},
    ]
    response = client.post("/api/temp-areas", json={"blocks": blocks})
    assert response.status_code == 200
    data = response.json()
    assert data["pairs"] == [["W2", "10x50"], ["LD1", "IRREGULAR /P=0.25"]]
    assert [r["identifier"] for r in data["rows"]] == ["LD1", "W2"]
    assert data["rows"][0]["description"] == "LOG DECK"
    assert data["rows"][1]["area_ha"] == "0.050"


def test_assignments():
    payload = {
        "prefix": "W",
        "vertices": [[5, 5], [25, 5, 0]],
        "candidates": [_shape("A", SQUARE_A), _shape("B", SQUARE_B), _shape("C", rect(40, 0, 50, 10))],
        "labels": {"C": "W3", "B": "LD1"},
    }
    response = client.post("/api/assignments", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data["assignments"] == {"A": "W1", "B": "W2"}
    assert data["stale"] == ["C"]
    assert data["labels"] == {"A": "W1", "B": "W2"}
    assert data["label_field"] == "WORKSPACENUM"


def test_assignments_unassigned_vertex():
    payload = {
        "prefix": "W",
        "vertices": [[5, 5], [500, 500]],
        "candidates": [_shape("A", SQUARE_A)],
    }
    response = client.post("/api/assignments", json=payload)
    assert response.status_code == 422
    assert "vertex 2" in response.json()["detail"]


def test_assignments_layer_filter():
    payload = {
        "prefix": "W",
        "vertices": [[5, 5]],
        "candidates": [_shape("A", SQUARE_A, layer="0")],
        "filter_layers": True,
    }
    response = client.post("/api/assignments", json=payload)
    assert response.status_code == 422


def test_workspace_areas():
    payload = {
        "boundaries": [_shape("S1", HECTARE_SQUARE), _shape("S2", rect(200, 0, 250, 100))],
        "disturbances": [_shape("D1", rect(0, 0, 40, 100), "disposition")],
        "labels": {"S1": "W1", "S2": "LD1"},
    }
    response = client.post("/api/workspace-areas", json=payload)
    assert response.status_code == 200
    data = response.json()

    assert [a["identifier"] for a in data["aggregates"]] == ["LD1", "W1"]
    w1 = data["aggregates"][1]
    assert w1["within_disposition"] == "0.400"
    assert w1["enclosed_shape_ids"] == ["D1"]
    assert [r["workspace_id"] for r in data["rows"]] == ["LD1", "W1"]
    assert data["groups"][-1]["is_grand_total"]
    assert abs(data["groups"][-1]["total_ha"] - 1.5) < 1e-9
    assert data["totals"][1]["cells"][:3] == ["W1", "0.400", "0.988"]


def test_workspace_areas_duplicate_labels():
    payload = {
        "boundaries": [_shape("S1", HECTARE_SQUARE), _shape("S2", rect(200, 0, 250, 100))],
        "labels": {"S1": "W7", "S2": "W7"},
    }
    response = client.post("/api/workspace-areas", json=payload)
    assert response.status_code == 409
    detail = response.json()["detail"]
    assert detail["conflicts"] == {"W7": ["S1", "S2"]}


def test_workspace_table():
    response = client.post("/api/workspace-areas/table", json={"cells": TEMP_AREAS_TABLE})
    assert response.status_code == 200
    data = response.json()
    assert [r["workspace_id"] for r in data["rows"]] == ["LD1", "W1", "W2"]
    assert [g["key"] for g in data["groups"]] == ["LOG DECK", "WORKSPACE", ""]
    assert data["warnings"] == []


def test_workspace_areas_malformed_shape():
    payload = {
        "boundaries": [_shape("S1", [[0], [1, 1], [2, 0]])],
        "labels": {"S1": "W1"},
    }
    response = client.post("/api/workspace-areas", json=payload)
    assert response.status_code == 422
    assert "S1" in response.json()["detail"]


def test_assignments_malformed_candidate():
    payload = {
        "prefix": "W",
        "vertices": [[5, 5]],
        "candidates": [_shape("A", [[0, 0], [10], [10, 10]])],
    }
    response = client.post("/api/assignments", json=payload)
    assert response.status_code == 422
    assert "vertex 1" in response.json()["detail"]
