# Shared pytest fixtures
from __future__ import annotations
import tempfile
from datetime import date
from pathlib import Path

import pytest

from src.models.row_data import COLUMNS


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "out").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
output_directory: ./out
repository_uri: /repositories/2
header_markers:
  - resources_basicinformation_title
file_types: [.csv, .xlsx]
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "import.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def fixed_today() -> date:
    return date(2024, 5, 17)


def make_raw_row(**values: str) -> list[str | None]:
    """Positional row with the given named cells filled, everything else empty."""
    unknown = set(values) - set(COLUMNS)
    if unknown:
        raise KeyError(f"unknown columns: {sorted(unknown)}")
    return [values.get(name) for name in COLUMNS]


@pytest.fixture()
def raw_row():
    return make_raw_row


@pytest.fixture()
def write_csv(temp_workdir: Path):
    """Write rows (lists of cells) as a CSV collection sheet under data/."""
    import csv

    def _write(name: str, rows: list[list[str | None]]) -> Path:
        path = temp_workdir / "data" / name
        with path.open("w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            for row in rows:
                writer.writerow(["" if c is None else c for c in row])
        return path

    return _write
