from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from config import Settings


@pytest.fixture
def client():
    with TestClient(create_app(Settings())) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_parse_returns_normalized_text_and_ast(client):
    response = client.post("/expressions/parse", json={"text": "2x+1"})

    assert response.status_code == 200
    body = response.json()
    assert body["normalized"] == "2*x+1"
    assert body["shown"] == "2 * x + 1"
    assert body["ast"]["node_type"] == "binop"
    assert body["ast"]["right"] == {"node_type": "constant", "value": 1.0}


def test_simplify_with_steps(client):
    response = client.post("/expressions/simplify", json={"text": "x*1", "with_steps": True})

    assert response.status_code == 200
    body = response.json()
    assert body["shown"] == "x"
    assert body["ast"] == {"node_type": "variable", "name": "x"}
    assert body["steps"] == ["x * 1", "x", "1", "x"]


def test_simplify_without_steps(client):
    response = client.post("/expressions/simplify", json={"text": "ln(e^x) + 0"})

    assert response.status_code == 200
    assert response.json()["shown"] == "x"
    assert response.json()["steps"] == []


def test_evaluate_with_variables(client):
    response = client.post(
        "/expressions/evaluate", json={"text": "x^2 + y", "variables": {"x": 3, "y": 1}}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["value"] == 10
    assert body["shown_value"] == "10"
    assert body["steps"][-1] == "9 + 1 = 10"


def test_evaluate_nan_is_reported_as_null(client):
    response = client.post("/expressions/evaluate", json={"text": "(-8)^(1/3)"})

    assert response.status_code == 200
    assert response.json()["value"] is None
    assert response.json()["shown_value"] == "nan"


def test_parse_error_maps_to_422(client):
    response = client.post("/expressions/parse", json={"text": "2+"})

    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "1005"
    assert body["expression"] == "2+"


@pytest.mark.parametrize(
    "payload, code",
    [
        ({"text": "1/0"}, "3002"),
        ({"text": "x + 1"}, "3001"),
        ({"text": "sqrt(-1)"}, "3003"),
    ],
)
def test_evaluation_errors_map_to_400(client, payload, code):
    response = client.post("/expressions/evaluate", json=payload)

    assert response.status_code == 400
    assert response.json()["code"] == code


def test_expression_length_is_limited():
    with TestClient(create_app(Settings(max_expression_length=5))) as client:
        response = client.post("/expressions/simplify", json={"text": "x+x+x+x"})

    assert response.status_code == 413
