"""Diagram source records and their conversion to graphs."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .models import Category, Graph, Link, Node

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class SourceError(Exception):
    """Raised when diagram sources cannot be loaded or found."""


@dataclass(frozen=True)
class DiagramSource:
    """One selectable diagram: a hub plus comma-separated satellite names."""

    identifier: str
    display_name: str
    inflows: str = ""
    outflows: str = ""
    associated: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DiagramSource:
        try:
            identifier = data["identifier"]
            display_name = data["display_name"]
        except KeyError as exc:
            raise SourceError(f"Diagram source is missing field {exc}") from None

        return cls(
            identifier=str(identifier),
            display_name=str(display_name),
            inflows=str(data.get("inflows") or ""),
            outflows=str(data.get("outflows") or ""),
            associated=str(data.get("associated") or ""),
        )


def split_names(field: str) -> list[str]:
    """Split a comma-separated field, dropping blanks."""
    return [name.strip() for name in field.split(",") if name.strip()]


def parse_source(source: DiagramSource) -> Graph:
    """Build the hub-and-spoke graph described by a source record.

    Ids are ``hub_{identifier}`` for the hub and
    ``{category}_{identifier}_{index}`` for satellites. Inflows point at the
    hub, the hub points at outflows and associated entities.
    """
    hub_id = f"hub_{source.identifier}"
    nodes = [Node(id=hub_id, label=source.display_name, category=Category.HUB)]
    links: list[Link] = []

    columns = (
        (Category.INFLOW, source.inflows),
        (Category.OUTFLOW, source.outflows),
        (Category.ASSOCIATED, source.associated),
    )
    for category, field in columns:
        for index, name in enumerate(split_names(field)):
            node_id = f"{category.value}_{source.identifier}_{index}"
            nodes.append(Node(id=node_id, label=name, category=category))
            if category == Category.INFLOW:
                links.append(Link(source_id=node_id, target_id=hub_id))
            else:
                links.append(Link(source_id=hub_id, target_id=node_id))

    return Graph(nodes=tuple(nodes), links=tuple(links))


def load_sources(path: str | Path) -> list[DiagramSource]:
    """Load diagram sources from a JSON array of records."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SourceError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SourceError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, list):
        raise SourceError(f"{path} must contain a JSON array of diagram sources")

    sources = []
    for item in data:
        if not isinstance(item, dict):
            raise SourceError(f"Diagram source must be an object, got {item!r}")
        sources.append(DiagramSource.from_dict(item))

    logger.debug("Loaded %d diagram source(s) from %s", len(sources), path)
    return sources


def find_source(sources: Iterable[DiagramSource], identifier: str) -> DiagramSource:
    for source in sources:
        if source.identifier == str(identifier):
            return source
    raise SourceError(f"No diagram source with identifier '{identifier}'")
