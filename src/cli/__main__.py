from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from src.config.loader import ConfigError, load_config
from src.logging.init import log_summary, set_debug, setup_logging
from src.services.orchestrator import ProcessingError, process_all, scan_sheet_files
from src.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env, then config (default config/import.yml)
- Convert every collection sheet in source_directory into output_directory
- Print a SUMMARY line and exit with a contract exit code

Repository URI precedence: ASPACE_REPOSITORY_URI (.env / environment) >
config repository_uri > built-in default.
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1

DEFAULT_CONFIG_PATH = Path("config/import.yml")
REPOSITORY_URI_ENV = "ASPACE_REPOSITORY_URI"


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv (override=True: .env wins over the process env)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="collection-sheets",
        description="Collection sheet -> ArchivesSpace resource converter",
    )
    p.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to import.yml")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print parsed rows of each sheet then exit")
    return p.parse_args(argv)


def _inspect_data(cfg) -> int:
    from src.services.row_parser import parse_rows
    from src.sheet.reader import SheetReadError, read_sheet

    try:
        files = scan_sheet_files(Path(cfg.source_directory), cfg.file_types)
    except ProcessingError as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    if not files:
        print("inspect: no collection sheets")
        return EXIT_SUCCESS_ALL
    for f in files:
        print(f"FILE: {f.name}")
        try:
            raws = read_sheet(f, encoding=cfg.encoding)
        except SheetReadError as e:
            print(f"  read_error: {e}")
            continue
        rows = list(parse_rows(raws, cfg.header_markers))
        print(f"  rows={len(raws)} usable={len(rows)}")
        for row in rows[:3]:
            print(f"    row {row.row_number}: title={row.title!r} resource_id={row.resource_id!r}")
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # only read sys.argv when argv is None; [] means "no arguments"
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    directory = Path(cfg.source_directory)
    if not directory.exists():
        logger.error(f"directory not found: {directory}")
        return EXIT_FATAL

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    if args.inspect_data:
        return _inspect_data(cfg)

    repository_uri = os.getenv(REPOSITORY_URI_ENV) or cfg.repository_uri
    logger.info(f"Converting sheets from: {directory} (repository {repository_uri})")

    try:
        result = process_all(cfg, repository_uri=repository_uri)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    total_files = result.success_files + result.failed_files
    summary_line = render_summary_line(total_files, result)
    # log_summary adds the "SUMMARY " label itself
    log_summary(summary_line.removeprefix("SUMMARY "))

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
