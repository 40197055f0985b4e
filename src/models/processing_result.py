from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

"""Processing result models for the collection sheet converter.

FileStat holds the outcome of one sheet; ProcessingResult aggregates a whole
run and feeds the SUMMARY line.
"""


@dataclass(frozen=True)
class FileStat:
    """Per-file conversion statistics."""
    file_name: str
    status: str  # success/failed
    records: int  # records written
    skipped_rows: int  # blank or header rows ignored
    elapsed_seconds: float
    output_path: Path | None = None
    error: str | None = None


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results and summary output for a conversion run."""
    success_files: int
    failed_files: int
    total_records: int
    skipped_rows: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    file_stats: list[FileStat] | None = None
