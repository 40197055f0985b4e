from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from ..models.config_models import DEFAULT_HEADER_MARKERS
from ..models.row_data import COLUMNS, FieldRow

"""Positional row parsing for collection sheets.

Cells are zipped against COLUMNS by position. Rows that are entirely blank or
whose title looks like a header (literal "Title" or a header marker
substring) produce no FieldRow.
"""

__all__ = [
    "HEADER_TITLE",
    "is_header_title",
    "parse_row",
    "parse_rows",
    "row_values",
]

HEADER_TITLE = "Title"


def _cell_value(cell: Any) -> str | None:
    if cell is None:
        return None
    # pandas yields float NaN for empty cells
    if isinstance(cell, float) and math.isnan(cell):
        return None
    text = str(cell).strip()
    return text or None


def row_values(raw: Sequence[Any]) -> list[str | None]:
    """Trim every cell; blank or missing cells become None."""
    return [_cell_value(c) for c in raw]


def is_header_title(title: str | None, header_markers: Iterable[str] = DEFAULT_HEADER_MARKERS) -> bool:
    """True when a title cell cannot name a collection."""
    if title is None or title == "":
        return True
    if title == HEADER_TITLE:
        return True
    return any(marker in title for marker in header_markers)


def parse_row(
    raw: Sequence[Any],
    row_number: int = 0,
    header_markers: Iterable[str] = DEFAULT_HEADER_MARKERS,
) -> FieldRow | None:
    """Build a FieldRow from a positional row, or None when the row is skipped."""
    values = row_values(raw)
    if all(v is None for v in values):
        return None

    # zip drops cells past the last declared column
    named = dict(zip(COLUMNS, values))
    if is_header_title(named.get("title"), header_markers):
        return None
    return FieldRow(row_number=row_number, **named)


def parse_rows(
    raws: Iterable[Sequence[Any]],
    header_markers: Iterable[str] = DEFAULT_HEADER_MARKERS,
) -> Iterator[FieldRow]:
    """Yield FieldRows for every usable row; row numbers are 1-based."""
    markers = tuple(header_markers)
    for index, raw in enumerate(raws, start=1):
        row = parse_row(raw, row_number=index, header_markers=markers)
        if row is not None:
            yield row
