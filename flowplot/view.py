"""Selectable diagram view tying sources, layout, rendering and zoom together."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .layout import layout
from .renderer import DiagramRenderer
from .sources import find_source, parse_source
from .viewport import ViewportController

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .layout import LayoutConfig
    from .models import LaidOutGraph
    from .renderer import Scene
    from .sources import DiagramSource
    from .viewport import ViewportTransform, ZoomConfig

logger = logging.getLogger(__name__)


class DiagramView:
    """Renders the currently selected diagram source.

    Selecting a source rebuilds the graph, layout and scene from scratch.
    The viewport controller outlives selections; its changes are written onto
    whichever scene is current.
    """

    def __init__(
        self,
        sources: Sequence[DiagramSource],
        renderer: DiagramRenderer | None = None,
        layout_config: LayoutConfig | None = None,
        zoom_config: ZoomConfig | None = None,
        viewport_size: tuple[float, float] | None = None,
    ):
        self.sources = list(sources)
        self.renderer = renderer or DiagramRenderer(config=layout_config)
        self.viewport = ViewportController(zoom_config, viewport_size)
        self.selected: DiagramSource | None = None
        self.laid_out: LaidOutGraph | None = None
        self.scene: Scene | None = None
        self.viewport.subscribe(self._on_viewport_change)

    def choices(self) -> list[tuple[str, str]]:
        """(identifier, display_name) pairs for a selector."""
        return [(s.identifier, s.display_name) for s in self.sources]

    def select(self, identifier: str) -> Scene:
        """Switch to a source and render it."""
        source = find_source(self.sources, identifier)
        graph = parse_source(source)

        # Replace, never patch, the previous pass
        self.selected = source
        self.laid_out = layout(graph, self.renderer.config)
        self.scene = self.renderer.render(self.laid_out, self.viewport.transform)

        logger.debug(
            "Selected '%s' (%s): %d node(s), %d link(s)",
            source.display_name,
            source.identifier,
            len(self.laid_out.nodes),
            len(self.laid_out.links),
        )
        return self.scene

    def as_svg(self) -> str:
        if self.scene is None:
            raise RuntimeError("No diagram selected")
        return self.scene.as_svg()

    def save(self, filename: str) -> None:
        """Save the current scene to ``<filename>.svg``."""
        if self.scene is None:
            raise RuntimeError("No diagram selected")
        self.scene.drawing.save_svg(f"{filename}.svg")

    def _on_viewport_change(self, transform: ViewportTransform) -> None:
        if self.scene is not None:
            self.scene.apply_transform(transform)
