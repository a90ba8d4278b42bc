"""
CLC (Chinese Library Classification) parsing: range expansion, cleaning and resolution.

All functions in this module are pure (no file I/O).
"""

from domain.clc.cleaner import CodeCleaner
from domain.clc.loader import parse_taxonomy_config
from domain.clc.parser import ClcParser
from domain.clc.ranges import expand_code_range
from domain.clc.resolver import resolve_code
from domain.clc.tree import build_flat_index, build_match_tree, build_pattern, collect_codes

__all__ = [
    "ClcParser",
    "CodeCleaner",
    "parse_taxonomy_config",
    "expand_code_range",
    "resolve_code",
    "collect_codes",
    "build_pattern",
    "build_match_tree",
    "build_flat_index",
]
