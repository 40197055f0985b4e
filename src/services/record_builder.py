from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import date

from ..models.config_models import DEFAULT_REPOSITORY_URI
from ..models.resource_record import (
    IDENTIFIER_SLOTS,
    Extent,
    LangMaterial,
    ResourceRecord,
)
from ..models.row_data import FieldRow
from .dates import normalize_dates
from .notes import compose_notes
from .rights import build_rights_statement

"""RecordBuilder: one collection-level resource per parsed row.

Identifiers, title, processing note, extent, dates, notes, rights statement
and language information are assembled here; date, note and rights logic
live in their own modules.
"""

__all__ = [
    "ConversionError",
    "RecordBuilder",
    "format_extent",
    "format_lang_material",
    "format_processing_note",
]


class ConversionError(Exception):
    """Raised when a row cannot be turned into a record."""


def format_processing_note(row: FieldRow) -> str | None:
    parts = [p for p in (row.processing_note_1, row.processing_note_2) if p is not None]
    return " ".join(parts) if parts else None


def format_extent(row: FieldRow, portion: str = "part") -> Extent | None:
    if row.extent_number is None or row.extent_type is None:
        return None
    return Extent(
        portion=portion,
        extent_type=row.extent_type,
        number=row.extent_number,
        container_summary=row.extent_container_summary,
    )


def format_lang_material(row: FieldRow) -> LangMaterial | None:
    # omitted entirely when neither language nor script is given
    if row.lang_materials is None and row.script_materials is None:
        return None
    return LangMaterial(language=row.lang_materials, script=row.script_materials)


def _identifiers(row: FieldRow) -> tuple[str | None, ...]:
    # whole resource id goes into id_0; remaining slots stay empty
    ids = [row.resource_id]
    return tuple(ids + [None] * (IDENTIFIER_SLOTS - len(ids)))


class RecordBuilder:
    """Builds ResourceRecords for a single repository.

    Args:
        repository_uri: Prefix for generated record URIs, e.g. "/repositories/2"
        today: Rights statement start date (defaults to the current date per build)
        token_factory: Source of unique URI tokens (defaults to uuid4 hex)
    """

    def __init__(
        self,
        repository_uri: str = DEFAULT_REPOSITORY_URI,
        today: date | None = None,
        token_factory: Callable[[], str] | None = None,
    ) -> None:
        self.repository_uri = repository_uri.rstrip("/")
        self.today = today
        self._token_factory = token_factory or (lambda: uuid.uuid4().hex)

    def _new_uri(self) -> str:
        return f"{self.repository_uri}/resources/import_{self._token_factory()}"

    def build(self, row: FieldRow) -> ResourceRecord:
        if row.title is None:
            raise ConversionError(f"row {row.row_number}: title is required")

        extent = format_extent(row, portion="whole")
        date_range = normalize_dates(row.date_expression, row.date_begin, row.date_end)
        lang_material = format_lang_material(row)

        try:
            return ResourceRecord(
                uri=self._new_uri(),
                title=row.title,
                identifiers=_identifiers(row),
                repository_processing_note=format_processing_note(row),
                extents=(extent,) if extent is not None else (),
                dates=(date_range,) if date_range is not None else (),
                rights_statements=(build_rights_statement(row, self.today),),
                notes=tuple(compose_notes(row)),
                finding_aid_language=row.finding_aid_language,
                finding_aid_script=row.finding_aid_script,
                lang_materials=(lang_material,) if lang_material is not None else (),
                source_row=row.row_number,
            )
        except ValueError as e:
            raise ConversionError(f"row {row.row_number}: {e}") from e
