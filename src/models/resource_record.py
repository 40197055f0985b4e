from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

"""Resource record models (ArchivesSpace JSONModel shapes).

Each model knows how to render itself as the JSON object the description
system expects. ``None`` values are dropped from the rendered objects, so an
absent sub-field never appears as ``null`` in the output.
"""

__all__ = [
    "DateRange",
    "DateType",
    "Extent",
    "LangMaterial",
    "Note",
    "NoteKind",
    "ResourceRecord",
    "RightsNote",
    "RightsStatement",
]

IDENTIFIER_SLOTS = 4


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


class NoteKind(Enum):
    """Structural shape of a note (maps onto the JSONModel type)."""
    MULTIPART = "note_multipart"
    SINGLEPART = "note_singlepart"
    BIBLIOGRAPHY = "note_bibliography"


class DateType(Enum):
    SINGLE = "single"
    INCLUSIVE = "inclusive"


@dataclass(frozen=True)
class Note:
    kind: NoteKind
    type: str  # EAD note type code, e.g. "scopecontent"
    text: str
    label: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "jsonmodel_type": self.kind.value,
            "type": self.type,
        }
        if self.kind is NoteKind.MULTIPART:
            data["subnotes"] = [{"jsonmodel_type": "note_text", "content": self.text}]
        else:
            data["content"] = [self.text]
        if self.label:
            data["label"] = self.label
        return data


@dataclass(frozen=True)
class DateRange:
    date_type: DateType
    expression: str | None = None
    begin: str | None = None
    end: str | None = None
    label: str = "creation"

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "jsonmodel_type": "date",
            "date_type": self.date_type.value,
            "label": self.label,
            "expression": self.expression,
            "begin": self.begin,
            "end": self.end,
        })


@dataclass(frozen=True)
class Extent:
    portion: str
    extent_type: str
    number: str
    container_summary: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "jsonmodel_type": "extent",
            "portion": self.portion,
            "extent_type": self.extent_type,
            "container_summary": self.container_summary,
            "number": self.number,
        })


@dataclass(frozen=True)
class RightsNote:
    label: str
    text: str
    type: str = "additional_information"

    def to_dict(self) -> dict[str, Any]:
        return {
            "jsonmodel_type": "note_rights_statement",
            "label": self.label,
            "type": self.type,
            "content": [self.text],
        }


@dataclass(frozen=True)
class RightsStatement:
    start_date: str  # ISO date
    notes: tuple[RightsNote, ...] = ()
    rights_type: str = "other"
    other_rights_basis: str = "donor"

    def to_dict(self) -> dict[str, Any]:
        return {
            "jsonmodel_type": "rights_statement",
            "rights_type": self.rights_type,
            "other_rights_basis": self.other_rights_basis,
            "start_date": self.start_date,
            "notes": [n.to_dict() for n in self.notes],
        }


@dataclass(frozen=True)
class LangMaterial:
    language: str | None = None
    script: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "jsonmodel_type": "lang_material",
            "language_and_script": _compact({
                "jsonmodel_type": "language_and_script",
                "language": self.language,
                "script": self.script,
            }),
        }


@dataclass(frozen=True)
class ResourceRecord:
    """One collection-level resource built from a collection sheet row."""
    uri: str  # opaque import reference, identity only
    title: str
    identifiers: tuple[str | None, ...] = (None,) * IDENTIFIER_SLOTS
    level: str = "collection"
    repository_processing_note: str | None = None
    extents: tuple[Extent, ...] = ()
    dates: tuple[DateRange, ...] = ()
    rights_statements: tuple[RightsStatement, ...] = ()
    notes: tuple[Note, ...] = ()
    finding_aid_language: str | None = None
    finding_aid_script: str | None = None
    lang_materials: tuple[LangMaterial, ...] = ()
    source_row: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if len(self.identifiers) != IDENTIFIER_SLOTS:
            raise ValueError(
                f"identifiers must have exactly {IDENTIFIER_SLOTS} slots, got {len(self.identifiers)}"
            )

    @property
    def id_0(self) -> str | None:
        return self.identifiers[0]

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "jsonmodel_type": "resource",
            "uri": self.uri,
        }
        for i, part in enumerate(self.identifiers):
            data[f"id_{i}"] = part
        data.update({
            "title": self.title,
            "level": self.level,
            "repository_processing_note": self.repository_processing_note,
            "extents": [e.to_dict() for e in self.extents],
            "dates": [d.to_dict() for d in self.dates],
            "rights_statements": [r.to_dict() for r in self.rights_statements],
            "notes": [n.to_dict() for n in self.notes],
            "finding_aid_language": self.finding_aid_language,
            "finding_aid_script": self.finding_aid_script,
            "lang_materials": [m.to_dict() for m in self.lang_materials],
        })
        return _compact(data)
