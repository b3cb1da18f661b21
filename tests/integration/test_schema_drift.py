"""Integration tests for schema generation and drift detection."""
from __future__ import annotations

import shutil
import subprocess
import sys
from pathlib import Path

import pytest

from wcif_types.schemas import SCHEMA_DIR, list_schemas, schema_path
from wcif_types.schemas import generate
from wcif_types.schemas.generate import check_drift, generate_all_schemas, schema_to_json


def test_schema_drift_check_passes() -> None:
    """--check mode passes when committed schemas match the payload models."""
    result = subprocess.run(
        [sys.executable, "-m", "wcif_types.schemas.generate", "--check"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, f"Schema drift check failed: {result.stderr}"
    assert "up to date" in result.stdout


@pytest.mark.parametrize("name", list_schemas())
def test_committed_schema_is_generator_output(name: str) -> None:
    expected = schema_to_json(generate_all_schemas()[name])
    assert schema_path(name).read_text(encoding="utf-8") == expected


@pytest.fixture
def schema_copy(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the generator at a scratch copy of the committed schemas."""
    for path in SCHEMA_DIR.glob("*.schema.json"):
        shutil.copy(path, tmp_path / path.name)
    monkeypatch.setattr(generate, "SCHEMA_DIR", tmp_path)
    return tmp_path


def test_check_drift_detects_modification(
    schema_copy: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    schema_file = schema_copy / "groupifier_competition_config.schema.json"
    original = schema_file.read_text(encoding="utf-8")
    schema_file.write_text(
        original.replace(
            '"scorecardsBackgroundUrl": {\n',
            '"scorecardsBackgroundUrl": {\n      "default": null,\n',
        ),
        encoding="utf-8",
    )

    assert check_drift() == 1
    assert "drift detected" in capsys.readouterr().err.lower()


def test_check_drift_detects_missing_file(
    schema_copy: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (schema_copy / "groupifier_room_config.schema.json").unlink()

    assert check_drift() == 1
    assert "Missing schema file" in capsys.readouterr().err


def test_check_drift_detects_orphan(
    schema_copy: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (schema_copy / "vendorx_scoreboard.schema.json").write_text("{}\n", encoding="utf-8")

    assert check_drift() == 1
    assert "Orphaned schema vendorx_scoreboard.schema.json" in capsys.readouterr().err


def test_check_drift_clean_copy(schema_copy: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert check_drift() == 0
    assert "All 7 schemas are up to date." in capsys.readouterr().out
