"""End-to-end tests for the HTTP service."""

import json
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from matbench.config import Settings
from matbench.main import create_app

MULTIPLY = {
    "taskName": "matrix_multiplication",
    "matrixA": [[1, 2], [3, 4]],
    "matrixB": [[5, 6], [7, 8]],
}


def test_matrix_multiplication(client, results_path):
    """Test a valid task returns the product and logs one record."""
    response = client.post("/", json=MULTIPLY)

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "result": [[19, 22], [43, 50]]}

    stored = json.loads(results_path.read_text())
    assert len(stored) == 1
    assert stored[0]["taskName"] == "matrix_multiplication"
    assert stored[0]["matrixA"] == MULTIPLY["matrixA"]
    assert stored[0]["matrixB"] == MULTIPLY["matrixB"]
    assert stored[0]["result"] == [[19, 22], [43, 50]]
    assert stored[0]["timestamp"].endswith("Z")


def test_response_body_is_integral(client):
    """Test integer products are sent without a fractional part."""
    response = client.post("/", json=MULTIPLY)

    assert b"[[19,22],[43,50]]" in response.content.replace(b" ", b"")


def test_repeated_requests_accumulate(client, results_path):
    for _ in range(3):
        assert client.post("/", json=MULTIPLY).status_code == 200

    assert len(json.loads(results_path.read_text())) == 3


def test_any_path_is_the_endpoint(client, results_path):
    """Test the endpoint ignores the request path."""
    response = client.post("/some/other/path", json=MULTIPLY)

    assert response.status_code == 200
    assert response.json()["result"] == [[19, 22], [43, 50]]


def test_unknown_task(client, results_path):
    """Test an unrecognized task is a 400 with no file mutation."""
    response = client.post("/", json={**MULTIPLY, "taskName": "unknown_task"})

    assert response.status_code == 400
    assert response.json() == {"status": "error", "message": "Unknown task"}
    assert not results_path.exists()


def test_missing_task_name(client, results_path):
    response = client.post("/", json={"matrixA": [[1]], "matrixB": [[1]]})

    assert response.status_code == 400
    assert response.json() == {"status": "error", "message": "Unknown task"}
    assert not results_path.exists()


@pytest.mark.parametrize("path", ["/", "/results", "/health"])
def test_get_is_not_found(client, path):
    """Test non-POST requests are answered with not_found."""
    response = client.get(path)

    assert response.status_code == 404
    assert response.json() == {"status": "not_found"}


@pytest.mark.parametrize("method", ["PUT", "PATCH", "DELETE", "OPTIONS"])
def test_other_methods_are_not_found(client, results_path, method):
    response = client.request(method, "/", json=MULTIPLY)

    assert response.status_code == 404
    assert response.json() == {"status": "not_found"}
    assert not results_path.exists()


def test_docs_routes_disabled(client):
    """Test the OpenAPI routes do not shadow the endpoint."""
    assert client.get("/docs").json() == {"status": "not_found"}
    assert client.get("/openapi.json").json() == {"status": "not_found"}


def test_invalid_json(client, results_path):
    """Test an unparseable body is a 500 carrying the parser message."""
    response = client.post("/", content=b"not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 500
    data = response.json()
    assert data["status"] == "error"
    assert "Expecting value" in data["message"]
    assert not results_path.exists()


@pytest.mark.parametrize("payload", [[1, 2], 42, "text"])
def test_non_object_body_is_unknown_task(client, results_path, payload):
    """Test JSON values without task fields are rejected as unknown tasks."""
    response = client.post("/", json=payload)

    assert response.status_code == 400
    assert response.json() == {"status": "error", "message": "Unknown task"}
    assert not results_path.exists()


def test_null_body(client, results_path):
    response = client.post("/", content=b"null")

    assert response.status_code == 500
    assert response.json()["status"] == "error"
    assert not results_path.exists()


def test_integer_beyond_digit_limit(client, results_path):
    """Test an over-long integer literal still gets the JSON error body."""
    raw = b'{"taskName":"matrix_multiplication","matrixA":[[' + b"9" * 5000 + b']],"matrixB":[[1]]}'

    response = client.post("/", content=raw)

    assert response.status_code == 500
    assert response.headers["content-type"] == "application/json"
    assert response.json()["status"] == "error"
    assert not results_path.exists()


def test_unexpected_error_returns_json(settings, results_path):
    """Test errors outside the domain hierarchy are still answered as JSON."""
    client = TestClient(create_app(settings), raise_server_exceptions=False)

    with patch("matbench.tasks.router.run_task", side_effect=RuntimeError("boom")):
        response = client.post("/", json=MULTIPLY)

    assert response.status_code == 500
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"status": "error", "message": "boom"}
    assert not results_path.exists()


def test_dimension_mismatch(client, results_path):
    """Test B with too few rows is a 500, not a truncated matrix."""
    response = client.post("/", json={
        "taskName": "matrix_multiplication",
        "matrixA": [[1, 2, 3]],
        "matrixB": [[1], [2]],
    })

    assert response.status_code == 500
    assert response.json() == {"status": "error", "message": "list index out of range"}
    assert not results_path.exists()


def test_corrupt_results_file(client, results_path):
    """Test a corrupt log fails the request and is left as it was."""
    results_path.write_text("{broken")

    response = client.post("/", json=MULTIPLY)

    assert response.status_code == 500
    assert "Corrupt results file" in response.json()["message"]
    assert results_path.read_text() == "{broken"


class TestBodySizeLimit:
    """Tests for the optional request body cap."""

    @pytest.fixture
    def limited_client(self, results_path) -> TestClient:
        settings = Settings(RESULTS_FILE=str(results_path), MAX_BODY_BYTES=128)
        return TestClient(create_app(settings))

    def test_small_body_allowed(self, limited_client):
        response = limited_client.post("/", json={"taskName": "matrix_multiplication", "matrixA": [[2]], "matrixB": [[3]]})

        assert response.status_code == 200
        assert response.json()["result"] == [[6]]

    def test_large_body_rejected(self, limited_client, results_path):
        big = {**MULTIPLY, "matrixA": [[1] * 100]}

        response = limited_client.post("/", json=big)

        assert response.status_code == 413
        assert response.json()["status"] == "error"
        assert "exceeds limit of 128 bytes" in response.json()["message"]
        assert not results_path.exists()

    def test_cap_disabled_by_default(self, client):
        big = {"taskName": "matrix_multiplication", "matrixA": [[1] * 500], "matrixB": [[1]] * 500}

        response = client.post("/", json=big)

        assert response.status_code == 200
        assert response.json()["result"] == [[500]]
