from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from ..models.resource_record import ResourceRecord

"""Record writer (output collaborator).

Serializes finished ResourceRecords to a JSON array file, appending records
in the order received. The batch hands records over in sheet row order, so
the file preserves spreadsheet order.

The file is written to a temporary sibling and renamed into place, so a failed
write never leaves a partial output file behind.
"""


class RecordWriteError(Exception):
    pass


@dataclass(frozen=True)
class WriteResult:
    written_records: int
    output_path: Path


def output_path_for(sheet_path: Path, output_directory: Path) -> Path:
    """Output file for a sheet: <output_directory>/<sheet stem>.json"""
    return output_directory / f"{sheet_path.stem}.json"


def write_records(
    path: Path,
    records: Iterable[ResourceRecord],
    indent: int | None = 2,
) -> WriteResult:
    """Write records as a JSON array.

    Parameters
    ----------
    path: Output file path (parent directories are created)
    records: records in output order
    indent: JSON indentation (None for compact output)
    """
    payload = [r.to_dict() for r in records]

    tmp_path = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=indent)
            f.write("\n")
        tmp_path.replace(path)
    except (OSError, TypeError, ValueError) as e:
        tmp_path.unlink(missing_ok=True)
        raise RecordWriteError(f"failed writing {path}: {e}") from e

    return WriteResult(written_records=len(payload), output_path=path)
