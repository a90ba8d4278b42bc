"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, JSON taxonomy files, environment)
- Dataset reading (CSV / Excel)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    ParserConfig,
    load_parser_config,
    load_taxonomy_file,
)

__all__ = [
    "load_parser_config",
    "load_taxonomy_file",
    "ParserConfig",
]
