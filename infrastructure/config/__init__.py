"""
Configuration management: models, loading, and validation.

Handles:
- ParserConfig: taxonomy location, cleaning mode, delimiters, log level
- Taxonomy loading from JSON / YAML
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import (
    load_parser_config,
    load_taxonomy_file,
)
from infrastructure.config.models import ParserConfig

__all__ = [
    "ParserConfig",
    "load_parser_config",
    "load_taxonomy_file",
]
