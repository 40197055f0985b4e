from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import (
    DEFAULT_FILE_TYPES,
    DEFAULT_HEADER_MARKERS,
    DEFAULT_REPOSITORY_URI,
    ImportConfig,
)

"""Config loader.

Responsibilities:
- Load YAML config/import.yml
- Validate against specs/001-collection-sheet-import/contracts/config_schema.json
- Apply defaults (repository_uri, header_markers, file_types, encoding)
"""

# src/config/loader.py -> src/config -> src -> repo_root
_repo_root = Path(__file__).parent.parent.parent
SCHEMA_PATH = (
    _repo_root / "specs" / "001-collection-sheet-import" / "contracts" / "config_schema.json"
)


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or the
            config data fails validation (missing required keys, wrong types,
            unknown keys).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> ImportConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    return ImportConfig(
        source_directory=data["source_directory"],
        output_directory=data["output_directory"],
        repository_uri=data.get("repository_uri", DEFAULT_REPOSITORY_URI),
        header_markers=tuple(data.get("header_markers", DEFAULT_HEADER_MARKERS)),
        file_types=tuple(s.lower() for s in data.get("file_types", DEFAULT_FILE_TYPES)),
        encoding=data.get("encoding", "utf-8-sig"),
    )
