from __future__ import annotations

import zipfile
from datetime import datetime
from pathlib import Path
from typing import Any

import pandas as pd

from ..models.row_data import COLUMNS

"""Collection sheet reader.

Reads a .csv or .xlsx collection sheet into positional raw rows (lists of
cells). No header handling happens here: header and blank rows are filtered
later by the row parser, so every physical row is returned.

CSV cells are kept as text (``keep_default_na=False`` so strings like "NA"
survive); XLSX cells are read as objects to avoid float upcasting of numbers.
"""

__all__ = [
    "SUPPORTED_SUFFIXES",
    "SheetReadError",
    "read_sheet",
]

SUPPORTED_SUFFIXES = (".csv", ".xlsx")


class SheetReadError(Exception):
    """Raised when a collection sheet cannot be read."""


def _truncate_line(bad_line: list[str]) -> list[str]:
    # cells beyond the declared columns carry nothing we map
    return bad_line[: len(COLUMNS)]


def _excel_cell(cell: Any) -> Any:
    if isinstance(cell, datetime):
        if (cell.hour, cell.minute, cell.second, cell.microsecond) == (0, 0, 0, 0):
            return cell.date().isoformat()
        return cell.isoformat()
    return cell


def _read_csv(path: Path, encoding: str) -> pd.DataFrame:
    return pd.read_csv(
        path,
        header=None,
        names=list(range(len(COLUMNS))),
        index_col=False,
        dtype=str,
        keep_default_na=False,
        encoding=encoding,
        engine="python",
        on_bad_lines=_truncate_line,
    )


def _read_xlsx(path: Path) -> pd.DataFrame:
    df = pd.read_excel(path, header=None, dtype=object)
    return df.map(_excel_cell)


def read_sheet(path: Path, encoding: str = "utf-8-sig") -> list[list[Any]]:
    """Read every physical row of a collection sheet.

    Parameters
    ----------
    path: .csv or .xlsx sheet path
    encoding: CSV text encoding (ignored for .xlsx)

    Raises
    ------
    SheetReadError: unsupported suffix, missing file or unparsable content
    """
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise SheetReadError(f"unsupported sheet type '{suffix}': {path.name}")
    if not path.exists():
        raise SheetReadError(f"sheet not found: {path}")

    try:
        if suffix == ".csv":
            df = _read_csv(path, encoding)
        else:
            df = _read_xlsx(path)
    except pd.errors.EmptyDataError:
        return []
    # pandas OptionError (zip without workbook parts) is a KeyError
    except (OSError, ValueError, KeyError, zipfile.BadZipFile) as e:
        raise SheetReadError(f"failed reading {path.name}: {e}") from e

    return df.to_numpy(dtype=object).tolist()
