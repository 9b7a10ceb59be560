"""Data models for flowplot diagrams."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

import networkx as nx

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping


class Category(Enum):
    """Role of a node in the hub-and-spoke diagram."""

    HUB = "hub"
    INFLOW = "inflow"
    OUTFLOW = "outflow"
    ASSOCIATED = "associated"

    @classmethod
    def parse(cls, value: Category | str) -> Category:
        """Convert a category name (or legacy alias) to the enum."""
        if isinstance(value, Category):
            return value
        aliases = {
            "main_reservoir": cls.HUB,
            "project": cls.ASSOCIATED,
        }
        key = value.strip().lower()
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(
                f"Unknown node category '{value}', must be one of "
                f"{', '.join(c.value for c in cls)}"
            ) from None


@dataclass(frozen=True)
class Node:
    """A node in the diagram.

    Position fields stay ``None`` until the layout engine places the node.
    """

    id: str
    label: str
    category: Category
    x: float | None = None
    y: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", Category.parse(self.category))

    @property
    def is_placed(self) -> bool:
        return self.x is not None and self.y is not None

    @property
    def position(self) -> tuple[float, float]:
        if not self.is_placed:
            raise ValueError(f"Node '{self.id}' has not been laid out")
        return self.x, self.y  # type: ignore[return-value]

    def placed(self, x: float, y: float) -> Node:
        """Return a copy of this node at (x, y)."""
        return replace(self, x=float(x), y=float(y))


@dataclass(frozen=True)
class Link:
    """A directed connection between two node ids."""

    source_id: str
    target_id: str


@dataclass(frozen=True)
class Graph:
    """Input graph: nodes and links in insertion order."""

    nodes: tuple[Node, ...] = ()
    links: tuple[Link, ...] = ()

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "links", tuple(self.links))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Graph:
        """Build a graph from a plain mapping.

        Nodes are ``{"id", "label", "type"}`` (``"category"`` is accepted as
        well) and links are ``{"source", "target"}``.
        """
        nodes = [
            Node(
                id=str(item["id"]),
                label=str(item.get("label", item["id"])),
                category=Category.parse(item.get("category", item.get("type", ""))),
            )
            for item in data.get("nodes", [])
        ]
        links = [
            Link(source_id=str(item["source"]), target_id=str(item["target"]))
            for item in data.get("links", [])
        ]
        return cls(nodes=tuple(nodes), links=tuple(links))


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def union(self, other: Bounds) -> Bounds:
        return Bounds(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )


@dataclass(frozen=True)
class LaidOutGraph:
    """A graph whose nodes all carry concrete positions.

    Built once per layout pass and never patched. The id index is a
    ``networkx.DiGraph`` whose nodes hold the positioned :class:`Node` under
    the ``"node"`` attribute.
    """

    nodes: tuple[Node, ...]
    links: tuple[Link, ...]
    content_bounds: Bounds
    _index: nx.DiGraph = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for node in self.nodes:
            if not node.is_placed:
                raise ValueError(f"Node '{node.id}' has no position")

        index = nx.DiGraph()
        for node in self.nodes:
            # First occurrence wins on duplicate ids
            if node.id not in index:
                index.add_node(node.id, node=node)
        for link in self.links:
            if link.source_id in index and link.target_id in index:
                index.add_edge(link.source_id, link.target_id)
        object.__setattr__(self, "_index", index)

    def node(self, node_id: str) -> Node | None:
        """Look up a positioned node by id."""
        if node_id not in self._index:
            return None
        return self._index.nodes[node_id]["node"]

    def resolved_links(self) -> Iterator[tuple[Link, Node, Node]]:
        """Yield links whose both endpoints exist, in input order."""
        for link in self.links:
            if not self._index.has_edge(link.source_id, link.target_id):
                continue
            yield (
                link,
                self._index.nodes[link.source_id]["node"],
                self._index.nodes[link.target_id]["node"],
            )

    def nodes_in(self, category: Category) -> list[Node]:
        return [n for n in self.nodes if n.category == category]

    @property
    def hub(self) -> Node | None:
        hubs = self.nodes_in(Category.HUB)
        return hubs[0] if hubs else None

    @property
    def bottom_y(self) -> float:
        """Largest y among all nodes, hub included (0 when empty)."""
        return max((n.y for n in self.nodes), default=0.0)  # type: ignore[type-var]
