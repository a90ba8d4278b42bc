"""Parse a raw CLC taxonomy tree (from JSON or YAML) into TaxonomyNode objects."""

from typing import Any

from domain.schemas import TaxonomyNode

# Class and subclass entries must declare their children explicitly.
_LEVELS_REQUIRING_CHILDREN = 2


def _parse_node(raw: Any, location: str, depth: int) -> TaxonomyNode:
    if not isinstance(raw, dict):
        raise ValueError(f"Taxonomy entry at {location} must be a mapping, got {type(raw).__name__}")

    code = raw.get("code")
    name = raw.get("name")
    if not isinstance(code, str) or not code.strip():
        raise ValueError(f"Taxonomy entry at {location} has a missing or empty 'code'")
    if not isinstance(name, str):
        raise ValueError(f"Taxonomy entry {code!r} at {location} has a missing or non-string 'name'")

    if "children" not in raw:
        if depth <= _LEVELS_REQUIRING_CHILDREN:
            raise ValueError(f"Taxonomy entry {code!r} at {location} is missing 'children'")
        children_raw: Any = []
    else:
        children_raw = raw["children"]
        if not isinstance(children_raw, list):
            raise ValueError(f"'children' of taxonomy entry {code!r} at {location} must be a list")

    children = [
        _parse_node(child, f"{location}.children[{i}]", depth + 1) for i, child in enumerate(children_raw)
    ]
    # code is stored as written
    return TaxonomyNode(code=code, name=name.strip(), children=children)


def parse_taxonomy_config(data: Any) -> list[TaxonomyNode]:
    """
    Parse pre-loaded taxonomy data into class-level TaxonomyNode objects.

    This is a pure function - it does NOT perform file I/O.
    The file loading happens in infrastructure.config.loader.

    Accepted shapes:
        - a list of class entries (the plain ``data.json`` layout)
        - a mapping with a ``taxonomy`` key holding that list

    Args:
        data: Object from json.load() or yaml.safe_load()

    Returns:
        Class-level nodes in taxonomy order

    Raises:
        ValueError: If the structure is malformed (fatal configuration error)
    """
    if isinstance(data, dict):
        if "taxonomy" not in data:
            raise ValueError("Taxonomy mapping must contain a 'taxonomy' key")
        data = data["taxonomy"]

    if not isinstance(data, list):
        raise ValueError(f"Taxonomy must be a list of class entries, got {type(data).__name__}")

    return [_parse_node(raw, f"taxonomy[{i}]", depth=1) for i, raw in enumerate(data)]
