import json

import pytest

from flowplot import Category, DiagramSource, Graph, Link, Node


def make_graph(inflows=0, outflows=0, associated=0, hub=True):
    """Hub-and-spoke graph with generated ids like the source parser."""
    nodes = []
    links = []
    if hub:
        nodes.append(Node("hub_1", "Main", Category.HUB))
    for category, count in (
        (Category.INFLOW, inflows),
        (Category.OUTFLOW, outflows),
        (Category.ASSOCIATED, associated),
    ):
        for i in range(count):
            node_id = f"{category.value}_1_{i}"
            nodes.append(Node(node_id, f"{category.value} {i}", category))
            if category == Category.INFLOW:
                links.append(Link(node_id, "hub_1"))
            else:
                links.append(Link("hub_1", node_id))
    return Graph(nodes=tuple(nodes), links=tuple(links))


@pytest.fixture
def full_graph():
    return make_graph(inflows=3, outflows=2, associated=3)


@pytest.fixture
def char_measure():
    """Monotonic width estimate: half an em per character."""
    return lambda line, font_size: len(line) * font_size * 0.5


@pytest.fixture
def sources():
    return [
        DiagramSource(
            identifier="101",
            display_name="Emerald Lake",
            inflows="Whispering River, Stone Creek, Clearwater Reservoir",
            outflows="Sunset Basin, Valley Canal",
            associated="Hydroelectric Dam, Lake Fisheries Inc., Public Rec. Area",
        ),
        DiagramSource(
            identifier="102",
            display_name="Lake Solitude",
            inflows="Glacier Melt",
        ),
    ]


@pytest.fixture
def sources_file(tmp_path, sources):
    path = tmp_path / "sources.json"
    path.write_text(json.dumps([
        {
            "identifier": s.identifier,
            "display_name": s.display_name,
            "inflows": s.inflows,
            "outflows": s.outflows,
            "associated": s.associated,
        }
        for s in sources
    ]))
    return path
