"""ClcParser: the public entry point for resolving CLC code strings."""

import logging
from collections.abc import Sequence

from domain.clc.cleaner import CodeCleaner
from domain.clc.resolver import resolve_code
from domain.clc.tree import build_flat_index, build_match_tree
from domain.schemas import ClcRecord, FlatIndex, MatchTree, TaxonomyNode

logger = logging.getLogger(__name__)

DEFAULT_DELIMITERS = (";", "；")


class ClcParser:
    """
    Resolve free-form CLC strings against a taxonomy.

    Both derived structures are built once in the constructor and never modified
    afterwards, so a single instance can be shared between threads.

    Examples:
        >>> parser = ClcParser(nodes)
        >>> parser.resolve_all("TP312；K825.2")
        {'TP312': ['T', 'TP', 'TP3'], 'K825.2': ['K', 'K8', 'K82']}
        >>> parser.describe("TP3").name_path
        ['工业技术', '自动化技术、计算机技术', '计算技术、计算机技术']
    """

    def __init__(
        self,
        nodes: Sequence[TaxonomyNode],
        *,
        strict_classes: bool = True,
        delimiters: Sequence[str] = DEFAULT_DELIMITERS,
    ):
        if not delimiters:
            raise ValueError("At least one segment delimiter is required")

        self.cleaner = CodeCleaner(strict=strict_classes)
        self.delimiter = delimiters[0]
        self.aliases = tuple(d for d in delimiters[1:] if d != self.delimiter)

        self.match_tree: MatchTree = build_match_tree(nodes)
        self.flat_index: FlatIndex = build_flat_index(nodes)

        logger.info(
            "CLC taxonomy compiled: %d classes, %d indexed codes (strict_classes=%s)",
            len(self.match_tree),
            len(self.flat_index),
            strict_classes,
        )

    def split(self, text: str) -> list[str]:
        """Split raw text into trimmed, non-empty segments."""
        for alias in self.aliases:
            text = text.replace(alias, self.delimiter)
        return [s.strip() for s in text.split(self.delimiter) if s.strip()]

    def clean(self, segment: str) -> str:
        return self.cleaner.clean(segment)

    def resolve(self, segment: str) -> list[str]:
        """Clean one segment and resolve it to a path of 0-3 codes."""
        code = self.clean(segment)
        if not code:
            logger.debug("No CLC code recognised in segment %r", segment)
            return []

        path = resolve_code(self.match_tree, code)
        logger.debug("Resolved %r (canonical %r) -> %s", segment, code, path)
        return path

    def resolve_all(self, text: str) -> dict[str, list[str]]:
        """
        Resolve every segment of a (possibly multi-code) CLC string.

        Segments are separated by ``;`` or the full-width ``；``. Keys are the trimmed
        segment text; a repeated segment keeps the result of its last occurrence.
        """
        return {segment: self.resolve(segment) for segment in self.split(text)}

    def describe(self, code: str) -> ClcRecord | None:
        """Look up the record of a class, subclass or division code."""
        return self.flat_index.get(code)
