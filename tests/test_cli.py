from __future__ import annotations

import json
from pathlib import Path

import pytest

from jsv.cli import EXIT_BAD_INPUT, EXIT_OK, EXIT_VALIDATION_FAILED, main

SCHEMA = {
    "type": "object",
    "required": ["id"],
    "properties": {
        "id": {"type": "integer", "description": "The record identifier"},
        "name": {"type": "string"},
    },
}


@pytest.fixture()
def schema_path(tmp_path: Path) -> Path:
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(SCHEMA), encoding="utf-8")
    return path


def _write_csv(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "data.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_valid_file_exits_zero(tmp_path: Path, schema_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    csv_path = _write_csv(tmp_path, "id,name\n0,Adam\n1,Bobby\n2,Cassandra\n")

    code = main(["--schema", str(schema_path), str(csv_path)])

    assert code == EXIT_OK
    assert capsys.readouterr().out == "Successfully validated 3 records\n"


def test_invalid_record_exits_non_zero(tmp_path: Path, schema_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    csv_path = _write_csv(tmp_path, "id,name\n0,Adam\n1,Bobby\nTwo,Cassandra\n")

    code = main(["-s", str(schema_path), str(csv_path)])

    out = capsys.readouterr().out
    assert code == EXIT_VALIDATION_FAILED
    assert "Validation error on record 3:" in out
    assert "At schema path /properties/id/type:" in out
    assert "Documentation for this node:\n    The record identifier" in out
    assert out.endswith("Validation failed with 1 errors\n")


def test_utf8_bom_header_is_stripped(tmp_path: Path, schema_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    csv_path = tmp_path / "bom.csv"
    csv_path.write_bytes(b"\xef\xbb\xbfid,name\n1,Adam\n")

    code = main(["--schema", str(schema_path), str(csv_path)])

    assert code == EXIT_OK
    assert capsys.readouterr().out == "Successfully validated 1 records\n"


def test_missing_schema_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    csv_path = _write_csv(tmp_path, "id\n1\n")

    code = main(["--schema", str(tmp_path / "nope.json"), str(csv_path)])

    assert code == EXIT_BAD_INPUT
    assert "failed to open schema file" in capsys.readouterr().err


def test_schema_that_is_not_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    schema = tmp_path / "schema.json"
    schema.write_text("not json", encoding="utf-8")
    csv_path = _write_csv(tmp_path, "id\n1\n")

    code = main(["--schema", str(schema), str(csv_path)])

    assert code == EXIT_BAD_INPUT
    assert "failed to parse schema as JSON" in capsys.readouterr().err


def test_missing_csv_file(tmp_path: Path, schema_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--schema", str(schema_path), str(tmp_path / "missing.csv")])

    assert code == EXIT_BAD_INPUT
    assert "failed to open csv file" in capsys.readouterr().err
