"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure: it builds the
shared parser from configuration and runs batch resolution over tabular data.
"""

from application.parsing import build_parser, describe, get_parser, reset_parser, resolve_all
from application.serialize import segment_results, serialize_table_results
from application.tables import check_code_column, resolve_table

__all__ = [
    # Parser lifecycle
    "build_parser",
    "get_parser",
    "reset_parser",
    # Convenience entry points
    "resolve_all",
    "describe",
    # Batch workflows
    "resolve_table",
    "check_code_column",
    "serialize_table_results",
    "segment_results",
]
