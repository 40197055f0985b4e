from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..models.resource_record import Note, NoteKind
from ..models.row_data import COLUMNS, FieldRow

"""Note composition from the fixed field-to-note table.

NOTE_SPECS order is the output order of a record's notes.
"""

__all__ = [
    "NOTE_SPECS",
    "NoteSpec",
    "compose_notes",
]


@dataclass(frozen=True)
class NoteSpec:
    field: str  # source column
    kind: NoteKind
    type: str  # EAD note type code
    label: str | None = None

    def __post_init__(self) -> None:
        if self.field not in COLUMNS:
            raise ValueError(f"unknown source column for note: {self.field}")


NOTE_SPECS: tuple[NoteSpec, ...] = (
    NoteSpec("note_conditions_governing_access", NoteKind.MULTIPART, "accessrestrict"),
    NoteSpec("note_immediate_source_of_acquisition", NoteKind.MULTIPART, "acqinfo"),
    NoteSpec("note_arrangement", NoteKind.MULTIPART, "arrangement"),
    NoteSpec("note_biographical_historical", NoteKind.MULTIPART, "bioghist"),
    NoteSpec("note_custodial_history", NoteKind.MULTIPART, "custodhist"),
    NoteSpec("note_general_subjects", NoteKind.MULTIPART, "odd", "Subjects"),
    NoteSpec("note_general_archival_history", NoteKind.MULTIPART, "odd", "Archival History"),
    NoteSpec("note_general_fa_notes", NoteKind.MULTIPART, "odd", "Finding-aid Notes"),
    NoteSpec("note_physical_description", NoteKind.SINGLEPART, "physdesc"),
    NoteSpec("note_preferred_citation", NoteKind.MULTIPART, "prefercite"),
    NoteSpec("note_related_materials", NoteKind.MULTIPART, "relatedmaterial"),
    NoteSpec("note_scope_and_content", NoteKind.MULTIPART, "scopecontent"),
    NoteSpec("note_separated_materials", NoteKind.MULTIPART, "separatedmaterial"),
    NoteSpec("note_conditions_governing_use", NoteKind.MULTIPART, "userestrict"),
    NoteSpec("note_bibliography", NoteKind.BIBLIOGRAPHY, "bibliography"),
    NoteSpec("note_existence_and_location_of_copies", NoteKind.MULTIPART, "altformavail"),
    NoteSpec("note_existence_and_location_of_originals", NoteKind.MULTIPART, "originalsloc"),
    NoteSpec("note_other_finding_aids", NoteKind.MULTIPART, "otherfindaid"),
)


def compose_notes(row: FieldRow, table: Sequence[NoteSpec] = NOTE_SPECS) -> list[Note]:
    """One Note per populated source field, in table order."""
    notes: list[Note] = []
    for spec in table:
        text = row.get(spec.field)
        if text is None:
            continue
        notes.append(Note(kind=spec.kind, type=spec.type, text=text, label=spec.label))
    return notes
