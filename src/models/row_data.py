from __future__ import annotations

from dataclasses import dataclass, fields

"""FieldRow model for the collection sheet converter.

A FieldRow is one spreadsheet row after positional parsing: every declared
column becomes an attribute holding a trimmed string or None.
"""

__all__ = [
    "COLUMNS",
    "FieldRow",
]


@dataclass(frozen=True)
class FieldRow:
    """Named view of a single collection sheet row.

    Attribute order matches the column order of the sheet, so ``COLUMNS`` is
    derived from the dataclass fields (``row_number`` excluded).
    """
    title: str | None = None
    resource_id: str | None = None
    access_conditions: str | None = None
    use_conditions: str | None = None
    granted_note: str | None = None
    processing_note_1: str | None = None
    processing_note_2: str | None = None
    date_expression: str | None = None
    date_begin: str | None = None
    date_end: str | None = None
    extent_container_summary: str | None = None
    extent_number: str | None = None
    extent_type: str | None = None
    lang_materials: str | None = None
    script_materials: str | None = None
    finding_aid_language: str | None = None
    finding_aid_script: str | None = None
    note_conditions_governing_access: str | None = None
    note_immediate_source_of_acquisition: str | None = None
    note_arrangement: str | None = None
    note_biographical_historical: str | None = None
    note_custodial_history: str | None = None
    note_general_subjects: str | None = None
    note_general_archival_history: str | None = None
    note_general_fa_notes: str | None = None
    note_physical_description: str | None = None
    note_preferred_citation: str | None = None
    note_related_materials: str | None = None
    note_scope_and_content: str | None = None
    note_separated_materials: str | None = None
    note_conditions_governing_use: str | None = None
    note_bibliography: str | None = None
    note_existence_and_location_of_copies: str | None = None
    note_existence_and_location_of_originals: str | None = None
    note_other_finding_aids: str | None = None
    row_number: int = 0  # 1-based position in the source sheet

    def get(self, column: str) -> str | None:
        """Value of a declared column by name."""
        if column not in _COLUMN_SET:
            raise KeyError(column)
        return getattr(self, column)


COLUMNS: tuple[str, ...] = tuple(f.name for f in fields(FieldRow) if f.name != "row_number")
_COLUMN_SET = frozenset(COLUMNS)
