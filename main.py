"""Example usage of flowplot."""

from flowplot import (
    Category,
    DiagramSource,
    DiagramView,
    Graph,
    Link,
    Node,
    render_to_svg,
)


def reservoir_example():
    """Render a hand-built graph with all four categories."""
    graph = Graph(
        nodes=(
            # Central node
            Node("emerald_lake", "Emerald Lake", Category.HUB),
            # Inflows (left side)
            Node("whispering_river", "Whispering River", Category.INFLOW),
            Node("stone_creek", "Stone Creek", Category.INFLOW),
            Node("clearwater_reservoir", "Clearwater Reservoir", Category.INFLOW),
            # Outflows (right side, top)
            Node("sunset_basin", "Sunset Basin", Category.OUTFLOW),
            Node("valley_canal", "Valley Canal", Category.OUTFLOW),
            # Associated entities (right side, bottom)
            Node("hydro_dam", "Hydroelectric Dam", Category.ASSOCIATED),
            Node("lake_fisheries", "Lake Fisheries Inc.", Category.ASSOCIATED),
            Node("recreation_area", "Public Rec. Area", Category.ASSOCIATED),
        ),
        links=(
            Link("whispering_river", "emerald_lake"),
            Link("stone_creek", "emerald_lake"),
            Link("clearwater_reservoir", "emerald_lake"),
            Link("emerald_lake", "sunset_basin"),
            Link("emerald_lake", "valley_canal"),
            Link("emerald_lake", "hydro_dam"),
            Link("emerald_lake", "lake_fisheries"),
            Link("emerald_lake", "recreation_area"),
        ),
    )
    render_to_svg(graph, filename="output/reservoir_example")
    print("Reservoir diagram saved to output/reservoir_example.svg")


def selection_example():
    """Switch between sources and zoom, as a host UI would."""
    sources = [
        DiagramSource(
            identifier="101",
            display_name="Northern Highlands Regional Water Storage Reservoir",
            inflows="Pine River, Cedar Brook",
            outflows="Mill Canal",
            associated="Trout Hatchery, Irrigation District 4",
        ),
        DiagramSource(
            identifier="102",
            display_name="Lake Solitude",
            inflows="Glacier Melt",
        ),
    ]

    view = DiagramView(sources)
    view.viewport.subscribe(lambda t: print(f"zoom: {round(t.scale * 100)}%"))

    view.select("101")
    view.viewport.zoom_in()
    view.save("output/selection_101")

    view.select("102")
    view.viewport.reset()
    view.save("output/selection_102")
    print("Selection diagrams saved to output/")


if __name__ == "__main__":
    import os

    os.makedirs("output", exist_ok=True)
    reservoir_example()
    selection_example()
