"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for taxonomy nodes, match trees and CLC records
- clc: Range expansion, code cleaning, taxonomy compilation and resolution
"""

from domain.schemas import ClcRecord, TaxonomyNode

__all__ = [
    "TaxonomyNode",
    "ClcRecord",
]
