"""Parser construction and the lazily built process-wide default parser."""

import logging
import threading
from pathlib import Path

from domain.clc.parser import ClcParser
from domain.schemas import ClcRecord
from infrastructure.config import ParserConfig, load_parser_config, load_taxonomy_file
from infrastructure.constants import PARSER_CONFIG_FILE

logger = logging.getLogger(__name__)

_default_parser: ClcParser | None = None
_default_lock = threading.Lock()


def build_parser(cfg: ParserConfig) -> ClcParser:
    """Load the taxonomy named by `cfg` and compile a parser from it."""
    logger.info("Loading CLC taxonomy from %s...", cfg.taxonomy_file)
    nodes = load_taxonomy_file(cfg.taxonomy_file)
    return ClcParser(nodes, strict_classes=cfg.strict_classes, delimiters=cfg.delimiters)


def get_parser(config_path: Path | None = None) -> ClcParser:
    """
    Return the shared default parser, building it on first use.

    The build happens at most once per process, even with concurrent first callers;
    later calls return the same instance and ignore `config_path`.
    If no parser.yaml exists at `config_path` (default: configs/parser.yaml),
    built-in defaults are used.
    """
    global _default_parser

    parser = _default_parser
    if parser is not None:
        return parser

    with _default_lock:
        if _default_parser is None:
            path = config_path or PARSER_CONFIG_FILE
            if not path.exists():
                logger.info("No parser config at %s; using defaults", path)
                path = None
            _default_parser = build_parser(load_parser_config(path))
        return _default_parser


def reset_parser() -> None:
    """Drop the shared default parser so the next get_parser() rebuilds it."""
    global _default_parser
    with _default_lock:
        _default_parser = None


def resolve_all(text: str) -> dict[str, list[str]]:
    """Resolve a CLC string with the default parser."""
    return get_parser().resolve_all(text)


def describe(code: str) -> ClcRecord | None:
    """Describe a code with the default parser."""
    return get_parser().describe(code)
