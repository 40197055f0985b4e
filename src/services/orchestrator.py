from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..logging.error_log import ErrorLogBuffer, ErrorRecord
from ..logging.init import LOGGER_NAME
from ..models.config_models import DEFAULT_FILE_TYPES, ImportConfig
from ..models.processing_result import FileStat, ProcessingResult
from ..output.writer import RecordWriteError
from ..sheet.reader import SheetReadError
from .converter import BasicResourceConverter
from .progress import ProgressTracker
from .record_builder import ConversionError

"""Service orchestration for the collection sheet converter.

Scans the source directory, converts each sheet into its own output file,
and aggregates a ProcessingResult for the SUMMARY line.

A failing sheet never leaves partial output; it is logged, recorded in the
error log and counted as failed, and the run continues with the next sheet.
"""

logger = logging.getLogger(f"{LOGGER_NAME}.orchestrator")


class ProcessingError(Exception):
    """Fatal errors that prevent the run from starting."""
    pass


# exception class -> error log type
_ERROR_TYPES: tuple[tuple[type[Exception], str], ...] = (
    (SheetReadError, "SHEET_READ_ERROR"),
    (ConversionError, "RECORD_BUILD_ERROR"),
    (RecordWriteError, "OUTPUT_WRITE_ERROR"),
)


def scan_sheet_files(directory: Path, file_types: tuple[str, ...] = DEFAULT_FILE_TYPES) -> list[Path]:
    """Scan directory for collection sheets (non-recursive, sorted by name).

    Raises:
        ProcessingError: If directory doesn't exist or can't be read
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    suffixes = {s.lower() for s in file_types}
    try:
        return sorted(
            p for p in directory.iterdir()
            # "~$" prefixed files are office lock files
            if p.is_file() and p.suffix.lower() in suffixes and not p.name.startswith("~$")
        )
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def process_all(config: ImportConfig, repository_uri: str | None = None) -> ProcessingResult:
    """Convert every collection sheet in the configured directory.

    Args:
        config: Import configuration
        repository_uri: Overrides config.repository_uri (environment precedence)

    Returns:
        ProcessingResult with aggregated counts and per-file stats

    Raises:
        ProcessingError: For fatal errors that prevent processing
    """
    start_time = datetime.now(UTC)
    error_log = ErrorLogBuffer()

    file_paths = scan_sheet_files(Path(config.source_directory), config.file_types)
    output_directory = Path(config.output_directory)
    repo_uri = repository_uri or config.repository_uri

    file_stats: list[FileStat] = []
    success_count = 0
    failed_count = 0
    total_records = 0
    total_skipped = 0

    with ProgressTracker(len(file_paths), description="Converting sheets") as progress:
        for file_path in file_paths:
            progress.start_file(file_path)

            stat = _process_single_file(
                file_path,
                config,
                output_directory,
                repo_uri,
                error_log,
            )
            file_stats.append(stat)

            if stat.status == "success":
                success_count += 1
                total_records += stat.records
                total_skipped += stat.skipped_rows
            else:
                failed_count += 1

            progress.set_postfix(success=success_count, failed=failed_count, records=total_records)
            progress.finish_file(success=(stat.status == "success"))

    try:
        log_path = error_log.flush()
    except OSError as e:
        logger.warning(f"failed writing error log: {e}")
    else:
        if log_path is not None:
            logger.warning(f"errors logged to {log_path}")

    end_time = datetime.now(UTC)
    return ProcessingResult(
        success_files=success_count,
        failed_files=failed_count,
        total_records=total_records,
        skipped_rows=total_skipped,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        file_stats=file_stats,
    )


def _error_type(exc: Exception) -> str:
    for exc_class, error_type in _ERROR_TYPES:
        if isinstance(exc, exc_class):
            return error_type
    return "UNEXPECTED_ERROR"


def _process_single_file(
    file_path: Path,
    config: ImportConfig,
    output_directory: Path,
    repository_uri: str,
    error_log: ErrorLogBuffer,
) -> FileStat:
    """Convert one sheet; failures are recorded rather than raised."""
    file_start = datetime.now(UTC)
    converter = BasicResourceConverter(
        file_path,
        output_directory=output_directory,
        repository_uri=repository_uri,
        header_markers=config.header_markers,
        encoding=config.encoding,
    )

    try:
        converter.run()
        output_path = converter.get_output_path()
    except (SheetReadError, ConversionError, RecordWriteError) as e:
        logger.error(f"{file_path.name}: {e}")
        return _failed_file(file_path, converter, file_start, e, error_log)
    except Exception as e:
        # Unexpected errors
        logger.error(f"{file_path.name}: unexpected {type(e).__name__}: {e}")
        return _failed_file(file_path, converter, file_start, e, error_log)

    records = len(converter.records())
    elapsed = (datetime.now(UTC) - file_start).total_seconds()
    logger.info(f"{file_path.name}: {records} records -> {output_path}")
    return FileStat(
        file_name=file_path.name,
        status="success",
        records=records,
        skipped_rows=converter.skipped_rows,
        elapsed_seconds=elapsed,
        output_path=output_path,
    )


def _failed_file(
    file_path: Path,
    converter: BasicResourceConverter,
    file_start: datetime,
    exc: Exception,
    error_log: ErrorLogBuffer,
) -> FileStat:
    """Record a failed sheet in the error log; no output is kept for it."""
    error_log.append(ErrorRecord.create(
        file=file_path.name,
        row=-1,
        error_type=_error_type(exc),
        message=str(exc),
    ))
    return FileStat(
        file_name=file_path.name,
        status="failed",
        records=0,
        skipped_rows=converter.skipped_rows,
        elapsed_seconds=(datetime.now(UTC) - file_start).total_seconds(),
        error=str(exc),
    )
