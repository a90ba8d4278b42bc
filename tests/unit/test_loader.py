import copy

import pytest

from domain.clc.loader import parse_taxonomy_config


def test_parses_plain_list(sample_raw) -> None:
    nodes = parse_taxonomy_config(sample_raw)
    assert [n.code for n in nodes] == ["F", "K", "E", "T", "X", "Z"]
    assert [c.code for c in nodes[1].children] == ["K2", "K8"]


def test_parses_mapping_with_taxonomy_key(sample_raw) -> None:
    nodes = parse_taxonomy_config({"taxonomy": sample_raw})
    assert len(nodes) == 6


def test_divisions_may_omit_children(sample_raw) -> None:
    nodes = parse_taxonomy_config(sample_raw)
    k25 = nodes[1].children[0].children[0]
    assert k25.code == "K25"
    assert k25.children == []


def test_code_is_kept_as_written_and_name_is_trimmed() -> None:
    nodes = parse_taxonomy_config([{"code": " A ", "name": " 马克思主义 ", "children": []}])
    assert nodes[0].code == " A "
    assert nodes[0].name == "马克思主义"


@pytest.mark.parametrize("data", [None, "A", 3, {"classes": []}])
def test_rejects_bad_root(data) -> None:
    with pytest.raises(ValueError):
        parse_taxonomy_config(data)


def test_class_without_children_is_fatal() -> None:
    with pytest.raises(ValueError, match="missing 'children'"):
        parse_taxonomy_config([{"code": "A", "name": "马克思主义"}])


def test_subclass_without_children_is_fatal(sample_raw) -> None:
    raw = copy.deepcopy(sample_raw)
    del raw[0]["children"][0]["children"]
    with pytest.raises(ValueError, match=r"'F0' at taxonomy\[0\]\.children\[0\]"):
        parse_taxonomy_config(raw)


@pytest.mark.parametrize("depth_path", [(0,), (0, 0)])
def test_null_children_is_fatal(sample_raw, depth_path) -> None:
    raw = copy.deepcopy(sample_raw)
    entry = raw[depth_path[0]]
    for i in depth_path[1:]:
        entry = entry["children"][i]
    entry["children"] = None
    with pytest.raises(ValueError, match="must be a list"):
        parse_taxonomy_config(raw)


def test_null_children_is_fatal_at_division_level_too(sample_raw) -> None:
    raw = copy.deepcopy(sample_raw)
    raw[0]["children"][0]["children"][0]["children"] = None
    with pytest.raises(ValueError, match=r"'F0-0' at taxonomy\[0\]\.children\[0\]\.children\[0\]"):
        parse_taxonomy_config(raw)


@pytest.mark.parametrize(
    "entry",
    [
        {"name": "no code", "children": []},
        {"code": "", "name": "empty code", "children": []},
        {"code": "A", "children": []},
        {"code": "A", "name": "bad children", "children": {"code": "A1"}},
        ["A", "name"],
    ],
)
def test_rejects_malformed_entries(entry) -> None:
    with pytest.raises(ValueError):
        parse_taxonomy_config([entry])
