import pytest

from domain.clc.loader import parse_taxonomy_config
from domain.schemas import TaxonomyNode

# Small CLC tree used across the unit tests. Mirrors the shape of the real data file,
# including range codes and a bracketed (discontinued) code.
SAMPLE_TAXONOMY: list[dict] = [
    {
        "code": "F",
        "name": "经济",
        "children": [
            {
                "code": "F0",
                "name": "经济学",
                "children": [
                    {"code": "F0-0", "name": "马克思主义政治经济学", "children": []},
                    {"code": "F08", "name": "各科经济学", "children": []},
                ],
            }
        ],
    },
    {
        "code": "K",
        "name": "历史、地理",
        "children": [
            {"code": "K2", "name": "中国史", "children": [{"code": "K25", "name": "半殖民地、半封建社会"}]},
            {
                "code": "K8",
                "name": "传记、文物考古、风俗习惯",
                "children": [
                    {"code": "K82", "name": "中国人物传记"},
                    {"code": "K83", "name": "各国人物传记"},
                    {"code": "K85", "name": "文物考古"},
                ],
            },
        ],
    },
    {
        "code": "E",
        "name": "军事",
        "children": [{"code": "E2", "name": "中国军事", "children": [{"code": "E25", "name": "武装力量"}]}],
    },
    {
        "code": "T",
        "name": "工业技术",
        "children": [
            {"code": "T-0", "name": "工业技术理论", "children": [{"code": "[T-013/-017]", "name": "工业技术史"}]},
            {
                "code": "TP",
                "name": "自动化技术、计算机技术",
                "children": [
                    {"code": "TP311", "name": "程序设计、软件工程"},
                    {"code": "TP312", "name": "程序语言、算法语言"},
                ],
            },
        ],
    },
    {
        "code": "X",
        "name": "环境科学、安全科学",
        "children": [
            {
                "code": "X9",
                "name": "安全科学",
                "children": [
                    {
                        "code": "X92",
                        "name": "安全管理",
                        "children": [{"code": "X922.3/.7", "name": "各类安全管理"}],
                    }
                ],
            }
        ],
    },
    {
        "code": "Z",
        "name": "综合性图书",
        "children": [
            {"code": "Z8", "name": "图书目录、文摘、索引", "children": [{"code": "Z813/817", "name": "各类型目录"}]}
        ],
    },
]


@pytest.fixture
def sample_raw() -> list[dict]:
    return SAMPLE_TAXONOMY


@pytest.fixture
def sample_nodes() -> list[TaxonomyNode]:
    return parse_taxonomy_config(SAMPLE_TAXONOMY)


@pytest.fixture
def make_node():
    """Factory for hand-built TaxonomyNode trees: make_node("K", make_node("K8"))."""

    def _make(code: str, *children: TaxonomyNode, name: str | None = None) -> TaxonomyNode:
        return TaxonomyNode(code=code, name=name or f"name-{code}", children=list(children))

    return _make
