"""flowplot - Hub-and-spoke flow diagrams rendered to SVG.

Example usage:
    from flowplot import DiagramSource, parse_source, render_to_svg

    source = DiagramSource(
        identifier="101",
        display_name="Emerald Lake",
        inflows="Whispering River, Stone Creek",
        outflows="Sunset Basin",
        associated="Hydroelectric Dam, Lake Fisheries Inc.",
    )
    render_to_svg(parse_source(source), filename="emerald_lake")
"""

from .layout import (
    LayoutConfig,
    layout,
)
from .models import (
    Bounds,
    Category,
    Graph,
    LaidOutGraph,
    Link,
    Node,
)
from .renderer import (
    DEFAULT_THEME,
    CategoryStyle,
    DiagramRenderer,
    Scene,
    Theme,
    render_to_svg,
)
from .routing import (
    Point,
    connector_category,
    route,
)
from .sources import (
    DiagramSource,
    SourceError,
    find_source,
    load_sources,
    parse_source,
)
from .textfit import (
    FitConfig,
    FittedText,
    estimate_text_width,
    fit_text,
)
from .view import DiagramView
from .viewport import (
    ViewportController,
    ViewportTransform,
    ZoomConfig,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "Category",
    "Node",
    "Link",
    "Graph",
    "Bounds",
    "LaidOutGraph",
    # Layout
    "LayoutConfig",
    "layout",
    # Text fitting
    "FitConfig",
    "FittedText",
    "fit_text",
    "estimate_text_width",
    # Routing
    "Point",
    "route",
    "connector_category",
    # Rendering
    "render_to_svg",
    "DiagramRenderer",
    "Scene",
    "Theme",
    "CategoryStyle",
    "DEFAULT_THEME",
    # Viewport
    "ViewportController",
    "ViewportTransform",
    "ZoomConfig",
    # Sources
    "DiagramSource",
    "SourceError",
    "parse_source",
    "load_sources",
    "find_source",
    "DiagramView",
    # Version
    "__version__",
]
