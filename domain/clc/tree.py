"""
Build the derived lookup structures from a loaded CLC taxonomy.

- MatchTree: one compiled prefix pattern per node (class, subclass, division),
  used by the resolver.
- FlatIndex: code -> ClcRecord for every node down to division level.

All functions in this module are pure.
"""

import re
from collections.abc import Iterable, Sequence

from domain.clc.ranges import expand_code_range
from domain.schemas import ClcRecord, FlatIndex, MatchNode, MatchTree, TaxonomyNode


def collect_codes(node: TaxonomyNode) -> list[str]:
    """
    Gather the expanded codes of a node followed by those of all its descendants.

    The accumulated list is reversed at every level before being handed back to the
    parent, so codes contributed by deeper or later entries are tried first once
    they are joined into an alternation. Keep this ordering as is; it decides which
    alternative wins when several could match.
    """
    codes = expand_code_range(node.code)
    for child in node.children:
        codes.extend(collect_codes(child))
    codes.reverse()
    return codes


def build_pattern(codes: Iterable[str]) -> re.Pattern:
    """
    Compile codes into a single case-insensitive prefix matcher.

    Every alternative is matched literally and anchored at the start only, so the
    pattern for ``K8`` accepts ``K837``. An empty code set never matches.
    """
    alternation = "|".join(re.escape(code) for code in codes)
    if not alternation:
        return re.compile(r"(?!)")
    return re.compile(f"^(?:{alternation})", re.IGNORECASE)


def _build_match_node(node: TaxonomyNode, depth: int) -> MatchNode:
    children: dict[str, MatchNode] = {}
    if depth > 1:
        for child in node.children:
            children[child.code] = _build_match_node(child, depth - 1)
    return MatchNode(pattern=build_pattern(collect_codes(node)), children=children)


def build_match_tree(nodes: Sequence[TaxonomyNode]) -> MatchTree:
    """
    Build the three-level MatchTree (class -> subclass -> division).

    Mapping order follows taxonomy order. Each node's pattern also covers all codes
    nested beneath it, including entries below division level.
    """
    return {node.code: _build_match_node(node, depth=3) for node in nodes}


def build_flat_index(nodes: Sequence[TaxonomyNode]) -> FlatIndex:
    """
    Index every class, subclass and division by its own (unexpanded) code.

    Args:
        nodes: Class-level taxonomy nodes

    Returns:
        Mapping of code -> ClcRecord with the ancestor chain in `path` / `name_path`
    """
    index: FlatIndex = {}
    for first in nodes:
        for second in first.children:
            for third in second.children:
                index[third.code] = ClcRecord(
                    code=third.code,
                    name=third.name,
                    path=[first.code, second.code, third.code],
                    name_path=[first.name, second.name, third.name],
                )
            index[second.code] = ClcRecord(
                code=second.code,
                name=second.name,
                path=[first.code, second.code],
                name_path=[first.name, second.name],
            )
        index[first.code] = ClcRecord(
            code=first.code,
            name=first.name,
            path=[first.code],
            name_path=[first.name],
        )
    return index
