from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from jsv.config import get_validation_settings
from jsv.main import create_app

SCHEMA = {
    "type": "object",
    "required": ["id"],
    "properties": {
        "id": {"type": "integer", "title": "ID", "description": "The record identifier"},
        "name": {"type": "string"},
    },
}


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app())


def _files(csv_text: str, schema_text: str | None = None) -> dict:
    return {
        "file": ("data.csv", csv_text.encode("utf-8"), "text/csv"),
        "schema": ("schema.json", (schema_text or json.dumps(SCHEMA)).encode("utf-8"), "application/json"),
    }


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_validate_csv_reports_failures(client: TestClient) -> None:
    response = client.post("/validate-csv", files=_files("id,name\n0,Adam\n1,Bobby\nTwo,Cassandra\n"))

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is False
    assert body["records_processed"] == 3
    assert body["records_failed"] == 1
    assert body["total_violations"] == 1
    assert body["truncated"] is False

    (record,) = body["failed_records"]
    assert record["record_number"] == 3
    (violation,) = record["violations"]
    assert violation["kind"] == "type"
    assert violation["instance_path"] == "/id"
    assert violation["schema_path"] == "/properties/id/type"
    assert violation["instance"] == "Two"
    assert violation["schema_node"]["type"] == "integer"
    assert violation["description"] == "The record identifier"
    assert body["report"].endswith("Validation failed with 1 errors\n")


def test_validate_csv_success(client: TestClient) -> None:
    response = client.post("/validate-csv", files=_files("id,name\n0,Adam\n"))

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert response.json()["report"] == "Successfully validated 1 records\n"


def test_invalid_schema_is_bad_request(client: TestClient) -> None:
    response = client.post("/validate-csv", files=_files("id\n1\n", schema_text="[1, 2]"))

    assert response.status_code == 400
    assert "Schema root must be a JSON object" in response.json()["detail"]


def test_non_csv_upload_is_rejected(client: TestClient) -> None:
    files = _files("id\n1\n")
    files["file"] = ("data.txt", b"id\n1\n", "text/plain")

    response = client.post("/validate-csv", files=files)

    assert response.status_code == 400
    assert response.json()["detail"] == "Only CSV files are allowed."


def test_reported_records_are_capped(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSV_MAX_REPORTED_RECORDS", "1")
    get_validation_settings.cache_clear()
    try:
        response = client.post("/validate-csv", files=_files("id,name\nx,Adam\ny,Bobby\n3,Cass\n"))
    finally:
        get_validation_settings.cache_clear()

    assert response.status_code == 200
    body = response.json()
    assert body["records_failed"] == 2
    assert body["truncated"] is True
    assert [record["record_number"] for record in body["failed_records"]] == [1]
    assert "Validation error on record 2:" in body["report"]
