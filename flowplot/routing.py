"""Orthogonal connector routing between laid-out nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from .layout import LayoutConfig
from .models import Category

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .models import Node


class Point(NamedTuple):
    x: float
    y: float


def connection_start(
    source: Node, target: Node, config: LayoutConfig
) -> Point:
    """Get the point where a connector leaves ``source``.

    The hub is drawn as a rectangle, so its connectors leave from the right
    edge: a quarter height above center for outflows, a quarter below for
    associated entities.
    """
    x, y = source.position
    if source.category != Category.HUB:
        return Point(x, y)

    x += config.hub_width / 2
    if target.category == Category.OUTFLOW:
        y -= config.hub_height / 4
    elif target.category == Category.ASSOCIATED:
        y += config.hub_height / 4
    return Point(x, y)


def route(
    source: Node, target: Node, config: LayoutConfig | None = None
) -> list[Point]:
    """Route an elbow connector from ``source`` to ``target``.

    The path is always four points: horizontal, vertical, horizontal.
    Zero-length segments are kept so every path has the same shape.
    """
    if config is None:
        config = LayoutConfig()

    start = connection_start(source, target, config)
    end = Point(*target.position)
    mid_x = (start.x + end.x) / 2

    return [
        start,
        Point(mid_x, start.y),
        Point(mid_x, end.y),
        end,
    ]


def connector_category(source: Node, target: Node) -> Category:
    """Category whose color a connector takes.

    Color reflects flow type, so links into the hub use the source category.
    """
    if target.category == Category.HUB:
        return source.category
    return target.category


def direction_changes(points: Sequence[tuple[float, float]]) -> int:
    """Count horizontal/vertical turns along an orthogonal path.

    Segments alternate H, V, H, ... by construction; a zero-length segment
    keeps its slot in that alternation.
    """
    if len(points) < 3:
        return 0

    orientations = []
    for i, (a, b) in enumerate(zip(points, points[1:])):
        dx = b[0] - a[0]
        dy = b[1] - a[1]
        if dx == 0 and dy == 0:
            orientations.append("H" if i % 2 == 0 else "V")
        elif dy == 0:
            orientations.append("H")
        elif dx == 0:
            orientations.append("V")
        else:
            raise ValueError(f"Segment {a} -> {b} is not axis-aligned")

    return sum(1 for a, b in zip(orientations, orientations[1:]) if a != b)


def path_data(points: Sequence[tuple[float, float]]) -> str:
    """Format points as SVG path data (``M x,y L x,y ...``)."""
    if not points:
        return ""
    head, *rest = points
    parts = [f"M {head[0]:g},{head[1]:g}"]
    parts.extend(f"L {x:g},{y:g}" for x, y in rest)
    return " ".join(parts)
