from __future__ import annotations
import pytest
from pathlib import Path
from src.config.loader import load_config, ConfigError
from src.models.config_models import ImportConfig


def test_load_config_success(write_config: Path):
    cfg = load_config(write_config)
    assert isinstance(cfg, ImportConfig)
    assert cfg.source_directory == "./data"
    assert cfg.output_directory == "./out"
    assert cfg.repository_uri == "/repositories/2"
    assert cfg.header_markers == ("resources_basicinformation_title",)
    assert cfg.file_types == (".csv", ".xlsx")
    assert cfg.encoding == "utf-8-sig"


def test_load_config_defaults(temp_workdir: Path):
    cfg_path = temp_workdir / "config" / "import.yml"
    cfg_path.write_text("source_directory: ./data\noutput_directory: ./out\n", encoding="utf-8")
    cfg = load_config(cfg_path)
    assert cfg.repository_uri == "/repositories/12345"
    assert cfg.header_markers == ("resources_basicinformation_title",)
    assert cfg.file_types == (".csv", ".xlsx")


def test_load_config_missing_file(temp_workdir: Path):
    missing = temp_workdir / "config" / "not_exists.yml"
    with pytest.raises(ConfigError, match="config file not found"):
        load_config(missing)


def test_load_config_invalid_yaml(write_config: Path):
    write_config.write_text("source_directory: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid yaml"):
        load_config(write_config)


def test_load_config_empty_file(write_config: Path):
    write_config.write_text("", encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value) and "required property" in str(e.value)


def test_load_config_non_mapping_root(write_config: Path):
    write_config.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="must be a mapping"):
        load_config(write_config)


def test_load_config_missing_required(write_config: Path):
    text = write_config.read_text(encoding="utf-8").replace("output_directory: ./out\n", "")
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value) and "output_directory" in str(e.value)


def test_load_config_invalid_repository_uri(write_config: Path):
    text = write_config.read_text(encoding="utf-8").replace("/repositories/2", "repositories-two")
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError, match="config validation failed"):
        load_config(write_config)


def test_load_config_unsupported_file_type(write_config: Path):
    text = write_config.read_text(encoding="utf-8").replace("[.csv, .xlsx]", "[.csv, .ods]")
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError, match="config validation failed"):
        load_config(write_config)


def test_load_config_extra_field(write_config: Path):
    # additionalProperties: false
    text = write_config.read_text(encoding="utf-8") + "\nextra_field: not_allowed\n"
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value)
