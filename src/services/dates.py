from __future__ import annotations

import re
from dataclasses import dataclass

from ..models.resource_record import DateRange, DateType

"""Date normalization for collection sheet dates.

Sheets carry dates in day/month/year order, either slash or dash separated,
with the day optional: ``15/06/1990``, ``06/1990``, ``1-6-1990``. Matched
values are rewritten as partial ISO dates (``1990-06-15``, ``1990-06``);
anything else passes through untouched. No calendar validation happens here.
"""

__all__ = [
    "MatchedDate",
    "UnmatchedDate",
    "convert_date_format",
    "match_partial_date",
    "normalize_dates",
]

# Tried in order; unanchored like the sheets' historic import behaviour.
_DATE_PATTERNS = (
    re.compile(r"(?:(\d{1,2})/)?(\d{1,2})/(\d{4})"),
    re.compile(r"(?:(\d{1,2})-)?(\d{1,2})-(\d{4})"),
)


@dataclass(frozen=True)
class MatchedDate:
    year: str
    month: str
    day: str | None = None

    def isoformat(self) -> str:
        parts = [self.year, self.month]
        if self.day is not None:
            parts.append(self.day)
        return "-".join(parts)


@dataclass(frozen=True)
class UnmatchedDate:
    original: str


def match_partial_date(value: str) -> MatchedDate | UnmatchedDate:
    for pattern in _DATE_PATTERNS:
        m = pattern.search(value)
        if m is not None:
            day, month, year = m.groups()
            return MatchedDate(year=year, month=month, day=day)
    return UnmatchedDate(original=value)


def convert_date_format(value: str | None) -> str | None:
    """Rewrite a day/month/year string as year-month[-day].

    >>> convert_date_format("15/06/1990")
    '1990-06-15'
    >>> convert_date_format("06/1990")
    '1990-06'
    >>> convert_date_format("not-a-date")
    'not-a-date'
    """
    if value is None:
        return None
    result = match_partial_date(value)
    if isinstance(result, MatchedDate):
        return result.isoformat()
    return result.original


def normalize_dates(
    expression: str | None,
    begin: str | None,
    end: str | None,
) -> DateRange | None:
    """Build the creation date of a record, or None when no date is given.

    The date is inclusive when the expression contains a dash or when both
    bounds are present; otherwise it is single.
    """
    if expression is None and begin is None and end is None:
        return None

    inclusive = (expression is not None and "-" in expression) or (
        begin is not None and end is not None
    )
    return DateRange(
        date_type=DateType.INCLUSIVE if inclusive else DateType.SINGLE,
        expression=expression,
        begin=convert_date_format(begin),
        end=convert_date_format(end),
    )
