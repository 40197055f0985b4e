from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from ..logging.init import LOGGER_NAME
from ..models.config_models import DEFAULT_HEADER_MARKERS, DEFAULT_REPOSITORY_URI
from ..models.resource_record import ResourceRecord
from ..output.writer import output_path_for, write_records
from ..sheet.reader import read_sheet
from .batch import RecordBatch
from .record_builder import RecordBuilder
from .row_parser import parse_row

"""Basic resource converter: one collection sheet -> one JSON file of resources.

This is the surface a host importer registers: it advertises its import type
and profile, is instantiated per input file, runs the conversion and exposes
the path of the written output.
"""

__all__ = [
    "BasicResourceConverter",
]

logger = logging.getLogger(f"{LOGGER_NAME}.converter")


class BasicResourceConverter:
    """Converts a Paper Collection Sheet into ArchivesSpace resource records.

    Usage::

        converter = BasicResourceConverter.instance_for("basic_resource", path)
        converter.run()
        output = converter.get_output_path()
    """

    IMPORT_TYPE = "basic_resource"
    DESCRIPTION = "Paper Collection Sheets CSV"

    @classmethod
    def instance_for(cls, type: str, input_file: Path, **kwargs: Any) -> BasicResourceConverter | None:
        """Converter for ``input_file`` when ``type`` is ours, else None."""
        if type == cls.IMPORT_TYPE:
            return cls(Path(input_file), **kwargs)
        return None

    @classmethod
    def import_types(cls, show_hidden: bool = False) -> list[dict[str, str]]:
        return [
            {
                "name": cls.IMPORT_TYPE,
                "description": cls.DESCRIPTION,
            }
        ]

    @classmethod
    def profile(cls) -> str:
        return "Convert a Paper Collection Sheets CSV to ArchivesSpace Resource records"

    def __init__(
        self,
        input_file: Path,
        *,
        output_directory: Path | None = None,
        repository_uri: str = DEFAULT_REPOSITORY_URI,
        header_markers: Iterable[str] = DEFAULT_HEADER_MARKERS,
        encoding: str = "utf-8-sig",
        builder: RecordBuilder | None = None,
    ) -> None:
        self.input_file = input_file
        self.output_directory = output_directory if output_directory is not None else input_file.parent
        self.header_markers = tuple(header_markers)
        self.encoding = encoding
        self.builder = builder or RecordBuilder(repository_uri=repository_uri)
        self.batch = RecordBatch()
        self.total_rows = 0
        self.skipped_rows = 0
        self._output_path: Path | None = None
        self._written: list[ResourceRecord] = []

    def convert_rows(self, raws: Iterable[Sequence[Any]]) -> int:
        """Parse and build every usable row into the batch; returns records added.

        Blank and header rows are skipped. Any build failure propagates and
        aborts the conversion.
        """
        added = 0
        for row_number, raw in enumerate(raws, start=self.total_rows + 1):
            self.total_rows += 1
            row = parse_row(raw, row_number=row_number, header_markers=self.header_markers)
            if row is None:
                self.skipped_rows += 1
                logger.debug(f"{self.input_file.name}: skipped row {row_number}")
                continue
            self.batch.add(self.builder.build(row))
            added += 1
        return added

    def run(self) -> int:
        raws = read_sheet(self.input_file, encoding=self.encoding)
        added = self.convert_rows(raws)
        logger.debug(
            f"{self.input_file.name}: rows={self.total_rows} records={added} skipped={self.skipped_rows}"
        )
        return added

    def records(self) -> list[ResourceRecord]:
        """Every converted record in output order (does not empty the batch)."""
        return self._written + list(self.batch)

    def get_output_path(self) -> Path:
        """Write pending records and return the output file path.

        The first call writes the file; later calls only return its path
        unless more records were converted in between, in which case the file
        is rewritten with every record so far. Records stay in the batch until
        the write succeeds.
        """
        if self._output_path is not None and len(self.batch) == 0:
            return self._output_path
        path = output_path_for(self.input_file, self.output_directory)
        result = write_records(path, self._written + list(self.batch))
        self._written.extend(self.batch.flush())
        logger.debug(f"{self.input_file.name}: wrote {result.written_records} records to {path}")
        self._output_path = result.output_path
        return self._output_path
