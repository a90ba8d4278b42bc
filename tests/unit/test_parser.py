import pytest

from domain.clc.parser import ClcParser


@pytest.fixture
def parser(sample_nodes) -> ClcParser:
    return ClcParser(sample_nodes)


def test_resolve_all_end_to_end(parser: ClcParser) -> None:
    assert parser.resolve_all("TP312") == {"TP312": ["T", "TP", "TP312"]}


def test_full_width_semicolon_splits_segments(parser: ClcParser) -> None:
    result = parser.resolve_all("K825.2；E251-53")
    assert result == {
        "K825.2": ["K", "K8", "K82"],
        "E251-53": ["E", "E2", "E25"],
    }


def test_keys_are_original_trimmed_segments_in_input_order(parser: ClcParser) -> None:
    result = parser.resolve_all(" [T-015] ;F08:G40-054; {Z815}")
    assert list(result) == ["[T-015]", "F08:G40-054", "{Z815}"]
    assert result["[T-015]"] == ["T", "T-0"]
    assert result["F08:G40-054"] == ["F", "F0", "F08"]
    assert result["{Z815}"] == ["Z", "Z8", "Z813/817"]


def test_empty_segments_are_dropped(parser: ClcParser) -> None:
    assert parser.resolve_all(" ; ；TP312;  ") == {"TP312": ["T", "TP", "TP312"]}
    assert parser.resolve_all("") == {}


def test_duplicate_segments_collapse(parser: ClcParser) -> None:
    result = parser.resolve_all("K825.2;E25; K825.2")
    assert list(result) == ["K825.2", "E25"]


def test_unrecognised_segment_yields_empty_path(parser: ClcParser) -> None:
    assert parser.resolve_all("999") == {"999": []}
    assert parser.resolve("999") == []
    assert parser.clean("999") == ""
    assert parser.describe("") is None


def test_describe_returns_record_or_none(parser: ClcParser) -> None:
    record = parser.describe("K82")
    assert record is not None
    assert record.name == "中国人物传记"
    assert record.path == ["K", "K8", "K82"]
    assert parser.describe("K825") is None


def test_describe_agrees_with_resolved_paths(parser: ClcParser) -> None:
    text = "TP312；K825.2；E251-53；F0-0；X922.5；Z815；K；TP；T-019"
    for segment, path in parser.resolve_all(text).items():
        assert path, segment
        record = parser.describe(path[-1])
        assert record is not None
        assert record.path == path


def test_custom_delimiters(sample_nodes) -> None:
    parser = ClcParser(sample_nodes, delimiters=["|", ","])
    assert parser.resolve_all("K825.2, E25 | TP312") == {
        "K825.2": ["K", "K8", "K82"],
        "E25": ["E", "E2", "E25"],
        "TP312": ["T", "TP", "TP312"],
    }
    # ";" is no longer a delimiter; the cleaner keeps only the first code
    assert parser.resolve_all("K825.2;E25") == {"K825.2;E25": ["K", "K8", "K82"]}


def test_empty_delimiters_rejected(sample_nodes) -> None:
    with pytest.raises(ValueError):
        ClcParser(sample_nodes, delimiters=[])


def test_loose_classes(make_node) -> None:
    nodes = [make_node("TZ", make_node("TZ1", make_node("TZ12")))]
    assert ClcParser(nodes, strict_classes=False).resolve_all("TZ123") == {"TZ123": ["TZ", "TZ1", "TZ12"]}


def test_structures_are_built_once(parser: ClcParser) -> None:
    tree, index = parser.match_tree, parser.flat_index
    parser.resolve_all("TP312;K825.2")
    assert parser.match_tree is tree
    assert parser.flat_index is index
