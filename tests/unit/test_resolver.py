import pytest

from domain.clc.resolver import first_match, resolve_code
from domain.clc.tree import build_match_tree


@pytest.fixture
def tree(sample_nodes):
    return build_match_tree(sample_nodes)


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("TP312", ["T", "TP", "TP312"]),
        ("TP312.8", ["T", "TP", "TP312"]),
        ("K825.2", ["K", "K8", "K82"]),
        ("E251-53", ["E", "E2", "E25"]),
        ("F0-0", ["F", "F0", "F0-0"]),
        ("F08", ["F", "F0", "F08"]),
        ("X922.5", ["X", "X9", "X92"]),
        ("Z815", ["Z", "Z8", "Z813/817"]),
        ("T-15", ["T", "T-0", "[T-013/-017]"]),
    ],
)
def test_resolves_to_division(tree, code: str, expected: list[str]) -> None:
    assert resolve_code(tree, code) == expected


def test_stops_at_subclass_when_no_division_matches(tree) -> None:
    assert resolve_code(tree, "Z812") == ["Z", "Z8"]
    assert resolve_code(tree, "T-019") == ["T", "T-0"]
    assert resolve_code(tree, "T-015") == ["T", "T-0"]
    assert resolve_code(tree, "TP") == ["T", "TP"]


def test_class_only_code_resolves_to_class(tree) -> None:
    assert resolve_code(tree, "K") == ["K"]


def test_unknown_or_empty_code_resolves_to_nothing(tree) -> None:
    assert resolve_code(tree, "A81") == []
    assert resolve_code(tree, "") == []


def test_matching_ignores_case(tree) -> None:
    assert resolve_code(tree, "tp312") == ["T", "TP", "TP312"]


def test_first_sibling_in_taxonomy_order_wins(make_node) -> None:
    broad_first = build_match_tree([make_node("K", make_node("K8", make_node("K81")), make_node("K82"))])
    specific_first = build_match_tree([make_node("K", make_node("K82"), make_node("K8", make_node("K81")))])

    assert resolve_code(broad_first, "K825") == ["K", "K8"]
    assert resolve_code(specific_first, "K825") == ["K", "K82"]


def test_first_match_returns_none_without_candidates(tree) -> None:
    assert first_match("K8", {}) is None
    assert first_match("A1", tree) is None
    assert first_match("K8", tree) == "K"
