"""Configuration and taxonomy loading from YAML / JSON files."""

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from domain.clc.loader import parse_taxonomy_config
from domain.schemas import TaxonomyNode
from infrastructure.config.models import ParserConfig
from infrastructure.constants import (
    ENV_LOG_LEVEL,
    ENV_TAXONOMY_FILE,
    TAXONOMY_SUFFIXES_JSON,
    TAXONOMY_SUFFIXES_YAML,
)

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> Any:
    """Load YAML file and return the parsed object."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _load_json(path: Path) -> Any:
    """Load JSON file and return the parsed object."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_taxonomy_file(path: Path) -> list[TaxonomyNode]:
    """
    Load the CLC taxonomy tree from a JSON or YAML file.

    This function handles file I/O, then delegates parsing to domain layer.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the suffix is unsupported or the tree is malformed
    """
    suffix = path.suffix.lower()
    if suffix in TAXONOMY_SUFFIXES_JSON:
        data = _load_json(path)
    elif suffix in TAXONOMY_SUFFIXES_YAML:
        data = _load_yaml(path)
    else:
        raise ValueError(f"Unsupported taxonomy format: {suffix}. Supported formats: .json, .yaml, .yml")

    try:
        nodes = parse_taxonomy_config(data)
    except ValueError as e:
        raise ValueError(f"Invalid taxonomy in {path}: {e}") from e

    logger.debug("Loaded %d taxonomy classes from %s", len(nodes), path)
    return nodes


def load_parser_config(config_path: Path | None) -> ParserConfig:
    """
    Load parser.yaml and construct a fully-resolved ParserConfig.

    With config_path=None only the built-in defaults and environment overrides apply.

    Environment overrides (applied after the file):
    - CLC_TAXONOMY_FILE: replaces `taxonomy_file`
    - CLC_LOG_LEVEL: replaces `log_level`

    Raises:
        FileNotFoundError: If config_path does not exist
        ValueError: If the YAML is not a mapping or fails validation
    """
    data = _load_yaml(config_path) if config_path is not None else {}
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {config_path}, got {type(data)}")

    taxonomy_env = os.getenv(ENV_TAXONOMY_FILE)
    if taxonomy_env:
        data["taxonomy_file"] = taxonomy_env
    log_level_env = os.getenv(ENV_LOG_LEVEL)
    if log_level_env:
        data["log_level"] = log_level_env

    try:
        return ParserConfig(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid parser config in {config_path}: {e}") from e
