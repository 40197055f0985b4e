from __future__ import annotations

from datetime import date

from ..models.resource_record import RightsNote, RightsStatement
from ..models.row_data import FieldRow

"""Rights statement synthesis.

Every record carries exactly one donor rights statement dated today; the
access, use and granted condition columns become its notes.
"""

__all__ = [
    "RIGHTS_NOTE_LABELS",
    "build_rights_statement",
]

# (source column, label) in output order
RIGHTS_NOTE_LABELS: tuple[tuple[str, str], ...] = (
    ("access_conditions", "Access Conditions (eg Available for Reference. Not for Loan)"),
    ("use_conditions", "Use Conditions (eg copying not permitted)"),
    ("granted_note", "Granted Notes"),
)


def build_rights_statement(row: FieldRow, today: date | None = None) -> RightsStatement:
    notes: list[RightsNote] = []
    for column, label in RIGHTS_NOTE_LABELS:
        text = row.get(column)
        if text is not None:
            notes.append(RightsNote(label=label, text=text))
    start = today or date.today()
    return RightsStatement(start_date=start.isoformat(), notes=tuple(notes))
