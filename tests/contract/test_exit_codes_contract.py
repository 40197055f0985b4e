from __future__ import annotations

import re
from pathlib import Path

import pytest

from src.cli.__main__ import main as cli_main
from src.logging.init import reset_logging

"""Exit code contract tests: 0 all success, 2 partial failure, 1 fatal."""


@pytest.fixture(autouse=True)
def _clean_state(monkeypatch):
    reset_logging()
    monkeypatch.delenv("ASPACE_REPOSITORY_URI", raising=False)


def test_exit_code_fatal_startup(temp_workdir: Path, capsys):
    # config/import.yml 無し → exit 1
    code = cli_main([])

    assert code == 1
    assert "ERROR config:" in capsys.readouterr().out


def test_exit_code_all_success(temp_workdir: Path, write_config, write_csv, raw_row, capsys):
    write_csv("first.csv", [raw_row(title="Smith Papers", resource_id="MS 123")])
    write_csv("second.csv", [raw_row(title="Jones Papers", resource_id="MS 124")])

    code = cli_main([])

    out = capsys.readouterr().out
    assert code == 0
    assert "SUMMARY files=2/2 success=2 failed=0 records=2" in out


def test_exit_code_partial_failure(temp_workdir: Path, write_config, write_csv, raw_row, capsys):
    write_csv("good.csv", [raw_row(title="Smith Papers", resource_id="MS 123")])
    (temp_workdir / "data" / "broken.xlsx").write_bytes(b"")

    code = cli_main([])

    out = capsys.readouterr().out
    assert code == 2
    assert "SUMMARY files=2/2" in out
    match = re.search(r"failed=(\d+)", out)
    assert match is not None, f"No 'failed=' found in output: {out}"
    assert int(match.group(1)) == 1
