"""Domain models for the collection sheet -> ArchivesSpace resource converter.

This package contains the domain model classes used throughout the application:
configuration, parsed rows, resource records and run results.
"""

from .config_models import ImportConfig
from .processing_result import FileStat, ProcessingResult
from .resource_record import (
    DateRange,
    DateType,
    Extent,
    LangMaterial,
    Note,
    NoteKind,
    ResourceRecord,
    RightsNote,
    RightsStatement,
)
from .row_data import COLUMNS, FieldRow

__all__ = [
    # Configuration models
    "ImportConfig",
    # Row models
    "COLUMNS",
    "FieldRow",
    # Record models
    "DateRange",
    "DateType",
    "Extent",
    "LangMaterial",
    "Note",
    "NoteKind",
    "ResourceRecord",
    "RightsNote",
    "RightsStatement",
    # Result models
    "FileStat",
    "ProcessingResult",
]
