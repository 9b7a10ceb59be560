"""Layout algorithm for flowplot diagrams."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .models import Bounds, Category, LaidOutGraph

if TYPE_CHECKING:
    from .models import Graph, Node

logger = logging.getLogger(__name__)


@dataclass
class LayoutConfig:
    """Configuration for layout calculations."""

    node_spacing: float = 40  # Vertical distance between stacked nodes
    horizontal_spacing: float = 220  # Hub to column distance
    padding: float = 100
    legend_margin: float = 100  # Extra room on the right for the legend
    hub_width: float = 180
    hub_height: float = 80
    hub_padding: float = 10
    hub_radius: float = 12
    node_radius: float = 12
    label_offset: float = 20
    legend_width: float = 63
    legend_item_height: float = 14
    legend_padding: float = 16
    legend_offset: float = 40  # Gap between the lowest node and the legend


def column_offsets(count: int, spacing: float) -> list[float]:
    """Y offsets for ``count`` nodes centered on y=0.

    With a single node the offset is 0.
    """
    start = -(count - 1) * spacing / 2
    return [start + i * spacing for i in range(count)]


def partition_nodes(
    nodes: tuple[Node, ...],
) -> tuple[Node | None, list[Node], list[Node], list[Node], list[Node]]:
    """Split nodes by category, keeping input order.

    Returns:
        (hub, inflows, outflows, associated, extra_hubs)
    """
    hub = None
    extra_hubs: list[Node] = []
    columns: dict[Category, list[Node]] = {
        Category.INFLOW: [],
        Category.OUTFLOW: [],
        Category.ASSOCIATED: [],
    }

    for node in nodes:
        if node.category == Category.HUB:
            if hub is None:
                hub = node
            else:
                extra_hubs.append(node)
        else:
            columns[node.category].append(node)

    return (
        hub,
        columns[Category.INFLOW],
        columns[Category.OUTFLOW],
        columns[Category.ASSOCIATED],
        extra_hubs,
    )


def compute_content_bounds(nodes: list[Node], config: LayoutConfig) -> Bounds:
    """Bounding box of placed nodes plus padding and legend margin.

    An empty node list is treated as a single point at the origin.
    """
    xs = [n.x for n in nodes] or [0.0]
    ys = [n.y for n in nodes] or [0.0]

    return Bounds(
        min(xs) - config.padding,
        min(ys) - config.padding,
        max(xs) + config.padding + config.legend_margin,
        max(ys) + config.padding,
    )


def layout(graph: Graph, config: LayoutConfig | None = None) -> LaidOutGraph:
    """Calculate positions for every node in a graph.

    The input graph is left untouched; placed nodes are new records. Only the
    first hub is positioned, any further hub is left out of the result.
    """
    if config is None:
        config = LayoutConfig()

    hub, inflows, outflows, associated, extra_hubs = partition_nodes(graph.nodes)
    if extra_hubs:
        logger.debug(
            "Ignoring %d extra hub node(s): %s",
            len(extra_hubs),
            ", ".join(n.id for n in extra_hubs),
        )

    positions: dict[int, tuple[float, float]] = {}
    spacing = config.node_spacing
    left_x = -config.horizontal_spacing
    right_x = config.horizontal_spacing

    if hub is not None:
        positions[id(hub)] = (0.0, 0.0)

    # Inflows (left column, centered)
    for node, dy in zip(inflows, column_offsets(len(inflows), spacing)):
        positions[id(node)] = (left_x, dy)

    # Outflows and associated entities share the right column
    if outflows and associated:
        # Outflows end on the upper hub anchor and grow upward,
        # associated entities start on the lower anchor and grow downward
        upper_anchor = -config.hub_height / 4
        lower_anchor = config.hub_height / 4
        outflow_start = upper_anchor - (len(outflows) - 1) * spacing

        for i, node in enumerate(outflows):
            positions[id(node)] = (right_x, outflow_start + i * spacing)
        for i, node in enumerate(associated):
            positions[id(node)] = (right_x, lower_anchor + i * spacing)
    else:
        right_nodes = outflows or associated
        for node, dy in zip(right_nodes, column_offsets(len(right_nodes), spacing)):
            positions[id(node)] = (right_x, dy)

    placed = [
        node.placed(*positions[id(node)])
        for node in graph.nodes
        if id(node) in positions
    ]
    bounds = compute_content_bounds(placed, config)

    logger.debug(
        "Laid out %d node(s): hub=%s inflows=%d outflows=%d associated=%d",
        len(placed),
        hub.id if hub else None,
        len(inflows),
        len(outflows),
        len(associated),
    )

    return LaidOutGraph(
        nodes=tuple(placed),
        links=graph.links,
        content_bounds=bounds,
    )
