"""Level-by-level resolution of a canonical code against a MatchTree."""

from collections.abc import Mapping

from domain.schemas import MatchNode, MatchTree


def first_match(code: str, nodes: Mapping[str, MatchNode]) -> str | None:
    """Return the key of the first node (in stored order) whose pattern accepts `code`."""
    for key, node in nodes.items():
        if node.matches(code):
            return key
    return None


def resolve_code(tree: MatchTree, code: str) -> list[str]:
    """
    Resolve a canonical code to its class / subclass / division path.

    Resolution stops at the first level with no matching child, so the result has
    0 to 3 codes. Earlier siblings win over later ones regardless of how specific
    the later match would be.

    Args:
        tree: MatchTree built from the taxonomy
        code: Canonical code produced by the cleaner

    Returns:
        List of resolved codes, outermost first
    """
    path: list[str] = []
    if not code:
        return path

    level: Mapping[str, MatchNode] = tree
    while level:
        key = first_match(code, level)
        if key is None:
            break
        path.append(key)
        level = level[key].children
    return path
