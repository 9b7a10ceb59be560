"""SVG renderer using drawsvg."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import drawsvg as draw

from .layout import LayoutConfig, layout
from .models import Bounds, Category
from .routing import connector_category, path_data, route
from .textfit import FitConfig, estimate_text_width, fit_text

if TYPE_CHECKING:
    from .models import Graph, LaidOutGraph, Node
    from .textfit import MeasureFn
    from .viewport import ViewportTransform

FONT_FAMILY = "sans-serif"

# Legend rows, top to bottom
LEGEND_ORDER = (
    Category.INFLOW,
    Category.OUTFLOW,
    Category.ASSOCIATED,
    Category.HUB,
)


@dataclass(frozen=True)
class CategoryStyle:
    """Fill, stroke and legend label for one node category."""

    fill: str
    stroke: str
    label: str


class Theme:
    """Color theme for diagrams."""

    def __init__(
        self,
        background: str = "#F5F5F0",
        text_color: str = "#333",
        hub_text_color: str = "white",
        halo_color: str = "white",
        legend_fill: str = "white",
        legend_stroke: str = "#999",
        styles: dict[Category, CategoryStyle] | None = None,
    ):
        self.background = background
        self.text_color = text_color
        self.hub_text_color = hub_text_color
        self.halo_color = halo_color
        self.legend_fill = legend_fill
        self.legend_stroke = legend_stroke
        self.styles = styles if styles is not None else {
            Category.HUB: CategoryStyle("#5B7FDB", "#4A6BC5", "Main"),
            Category.INFLOW: CategoryStyle("#E88BA8", "#D67A97", "Inflows"),
            Category.OUTFLOW: CategoryStyle("#4DB8D8", "#3CA7C7", "Outflows"),
            Category.ASSOCIATED: CategoryStyle("#4DB89A", "#3CA789", "Associated"),
        }

    def style_for(self, category: Category) -> CategoryStyle:
        try:
            return self.styles[category]
        except KeyError:
            raise KeyError(f"Theme has no style for category '{category.value}'") from None


DEFAULT_THEME = Theme()


@dataclass
class Scene:
    """A rendered diagram and handles to its layers."""

    drawing: draw.Drawing
    main: draw.Group
    links: draw.Group
    nodes: draw.Group
    legend: draw.Group
    legend_bounds: Bounds

    def apply_transform(self, transform: ViewportTransform) -> None:
        """Write a viewport transform onto the main group."""
        self.main.args["transform"] = transform.to_svg()

    def as_svg(self) -> str:
        return self.drawing.as_svg()


class DiagramRenderer:
    """Renders laid-out graphs to SVG."""

    def __init__(
        self,
        theme: Theme | None = None,
        config: LayoutConfig | None = None,
        fit_config: FitConfig | None = None,
        measure: MeasureFn | None = None,
    ):
        self.theme = theme or DEFAULT_THEME
        self.config = config or LayoutConfig()
        self.fit_config = fit_config or FitConfig()
        self.measure = measure or estimate_text_width

    def legend_bounds(self, laid_out: LaidOutGraph) -> Bounds:
        """Box of the legend: right-aligned, below the lowest node."""
        cfg = self.config
        height = len(LEGEND_ORDER) * cfg.legend_item_height + cfg.legend_padding
        x = laid_out.content_bounds.max_x - cfg.legend_width - 10
        y = laid_out.bottom_y + cfg.legend_offset
        return Bounds(x, y, x + cfg.legend_width, y + height)

    def render(
        self,
        laid_out: LaidOutGraph,
        transform: ViewportTransform | None = None,
    ) -> Scene:
        """Render a laid-out graph to a drawsvg scene."""
        legend_box = self.legend_bounds(laid_out)
        canvas = laid_out.content_bounds.union(legend_box)

        d = draw.Drawing(
            canvas.width,
            canvas.height,
            origin=(canvas.min_x, canvas.min_y),
            preserveAspectRatio="xMidYMid meet",
        )
        d.append(
            draw.Rectangle(
                canvas.min_x, canvas.min_y, canvas.width, canvas.height,
                fill=self.theme.background,
            )
        )

        main = draw.Group(class_="main-group")
        if transform is not None:
            main.args["transform"] = transform.to_svg()
        d.append(main)

        # Links first so node glyphs cover connector ends
        links = draw.Group(class_="links")
        for _, source, target in laid_out.resolved_links():
            self._render_link(links, source, target)
        main.append(links)

        nodes = draw.Group(class_="nodes")
        for node in laid_out.nodes:
            if node.category == Category.HUB:
                self._render_hub(nodes, node)
            else:
                self._render_satellite(nodes, node)
        main.append(nodes)

        legend = draw.Group(class_="legend")
        self._render_legend(legend, legend_box)
        main.append(legend)

        return Scene(
            drawing=d,
            main=main,
            links=links,
            nodes=nodes,
            legend=legend,
            legend_bounds=legend_box,
        )

    def _render_link(self, group: draw.Group, source: Node, target: Node) -> None:
        """Render a dashed elbow connector."""
        style = self.theme.style_for(connector_category(source, target))
        points = route(source, target, self.config)

        group.append(
            draw.Path(
                d=path_data(points),
                stroke=style.stroke,
                stroke_width=2,
                stroke_dasharray="5,3",
                fill="none",
            )
        )

    def _render_hub(self, group: draw.Group, node: Node) -> None:
        """Render the hub as a rounded rectangle with fitted text."""
        cfg = self.config
        style = self.theme.style_for(Category.HUB)
        x, y = node.position

        g = draw.Group(transform=f"translate({x:g},{y:g})")
        g.append(
            draw.Rectangle(
                -cfg.hub_width / 2, -cfg.hub_height / 2,
                cfg.hub_width, cfg.hub_height,
                rx=cfg.hub_radius, ry=cfg.hub_radius,
                fill=style.fill,
                stroke=style.stroke,
                stroke_width=2,
            )
        )

        fitted = fit_text(
            node.label,
            cfg.hub_width - cfg.hub_padding * 2,
            cfg.hub_height - cfg.hub_padding * 2,
            self.measure,
            self.fit_config,
        )

        # Center the block; 0.8 of a line puts the first baseline inside it
        start_y = -fitted.block_height / 2 + fitted.line_height * 0.8
        for i, line in enumerate(fitted.lines):
            g.append(
                draw.Text(
                    line,
                    fitted.font_size,
                    0, start_y + i * fitted.line_height,
                    text_anchor="middle",
                    font_family=FONT_FAMILY,
                    font_weight="600",
                    fill=self.theme.hub_text_color,
                )
            )
        group.append(g)

    def _render_satellite(self, group: draw.Group, node: Node) -> None:
        """Render a circle with an outward-facing label."""
        cfg = self.config
        style = self.theme.style_for(node.category)
        x, y = node.position

        g = draw.Group(transform=f"translate({x:g},{y:g})")
        g.append(
            draw.Circle(
                0, 0, cfg.node_radius,
                fill=style.fill,
                stroke=style.stroke,
                stroke_width=2,
            )
        )

        # Inflows sit on the left, so their labels extend further left
        is_inflow = node.category == Category.INFLOW
        text_x = -cfg.label_offset if is_inflow else cfg.label_offset
        anchor = "end" if is_inflow else "start"

        # White halo under the label
        g.append(
            draw.Text(
                node.label,
                13,
                text_x, 5,
                text_anchor=anchor,
                font_family=FONT_FAMILY,
                stroke=self.theme.halo_color,
                stroke_width=3,
                stroke_linejoin="round",
                pointer_events="none",
            )
        )
        g.append(
            draw.Text(
                node.label,
                13,
                text_x, 5,
                text_anchor=anchor,
                font_family=FONT_FAMILY,
                fill=self.theme.text_color,
                pointer_events="none",
            )
        )
        group.append(g)

    def _render_legend(self, group: draw.Group, box: Bounds) -> None:
        """Render the category legend."""
        group.append(
            draw.Rectangle(
                box.min_x, box.min_y, box.width, box.height,
                rx=4,
                fill=self.theme.legend_fill,
                stroke=self.theme.legend_stroke,
                stroke_width=1,
                opacity=0.95,
            )
        )
        group.append(
            draw.Text(
                "Legend",
                8,
                box.min_x + 7, box.min_y + 11,
                font_family=FONT_FAMILY,
                font_weight="700",
                fill=self.theme.text_color,
            )
        )

        for i, category in enumerate(LEGEND_ORDER):
            style = self.theme.style_for(category)
            item_y = box.min_y + 23 + i * self.config.legend_item_height
            group.append(
                draw.Circle(
                    box.min_x + 9, item_y, 3.5,
                    fill=style.fill,
                    stroke=style.stroke,
                    stroke_width=0.7,
                )
            )
            group.append(
                draw.Text(
                    style.label,
                    7,
                    box.min_x + 16, item_y + 3,
                    font_family=FONT_FAMILY,
                    fill=self.theme.text_color,
                )
            )


def render_to_svg(
    graph: Graph,
    filename: str | None = None,
    renderer: DiagramRenderer | None = None,
    transform: ViewportTransform | None = None,
) -> str:
    """Lay out and render a graph to SVG.

    Args:
        graph: The graph to render
        filename: Optional filename to save to (without extension)
        renderer: Renderer to use (default theme and configs otherwise)
        transform: Optional viewport transform for the main group

    Returns:
        SVG content as string
    """
    renderer = renderer or DiagramRenderer()
    scene = renderer.render(layout(graph, renderer.config), transform)

    if filename:
        scene.drawing.save_svg(f"{filename}.svg")

    return scene.as_svg()
