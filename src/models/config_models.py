from __future__ import annotations

from dataclasses import dataclass

"""Config dataclasses for the collection sheet converter.

Populated by src/config/loader.py after schema validation; defaults here
mirror the defaults declared in the config schema.
"""

DEFAULT_REPOSITORY_URI = "/repositories/12345"
DEFAULT_HEADER_MARKERS = ("resources_basicinformation_title",)
DEFAULT_FILE_TYPES = (".csv", ".xlsx")


@dataclass(frozen=True)
class ImportConfig:
    """Root configuration object for a conversion run.

    Environment variable ASPACE_REPOSITORY_URI takes precedence over
    ``repository_uri`` (resolved by the CLI, see src/cli/__main__.py).
    """
    source_directory: str  # Directory to scan for collection sheets
    output_directory: str  # Directory receiving one JSON file per sheet
    repository_uri: str = DEFAULT_REPOSITORY_URI  # Prefix for generated record URIs
    header_markers: tuple[str, ...] = DEFAULT_HEADER_MARKERS  # Title substrings marking header rows
    file_types: tuple[str, ...] = DEFAULT_FILE_TYPES  # Accepted file suffixes (lower case)
    encoding: str = "utf-8-sig"  # CSV text encoding
