from __future__ import annotations

from collections.abc import Iterator

from ..models.resource_record import ResourceRecord

"""Record batch: accumulates built records for the output collaborator.

Ordering policy: records leave the batch in the order they were added, which
is sheet row order (top to bottom). The writer appends in the order received,
so the output file matches the spreadsheet.
"""

__all__ = [
    "RecordBatch",
]


class RecordBatch:
    """In-memory, append-only buffer of ResourceRecords.

    Serial use only; a batch belongs to one conversion run.
    """

    def __init__(self) -> None:
        self._records: list[ResourceRecord] = []

    def add(self, record: ResourceRecord) -> None:
        self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ResourceRecord]:
        return iter(list(self._records))

    def flush(self) -> list[ResourceRecord]:
        """Hand over every pending record in row order and empty the batch."""
        records = list(self._records)
        self._records.clear()
        return records
