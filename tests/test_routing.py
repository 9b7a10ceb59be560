"""
Connector Router Tests
======================

Elbow connectors: fixed four-point shape, hub exit points and colors.
"""

import pytest

from flowplot import Category, LayoutConfig, Node, Point, connector_category, route
from flowplot.routing import direction_changes, path_data

HUB = Node("hub", "Hub", Category.HUB, 0, 0)


def at(category, x, y, node_id="n"):
    return Node(node_id, node_id, category, x, y)


class TestRouteShape:

    @pytest.mark.parametrize("start,end", [
        ((-220, -40), (0, 0)),
        ((-220, 40), (220, -60)),
        ((0, 0), (100, 0)),  # same y
        ((50, 10), (50, 90)),  # same x
        ((300, 300), (-300, -300)),  # right to left
    ])
    def test_four_points_two_turns(self, start, end):
        points = route(
            at(Category.INFLOW, *start, node_id="a"),
            at(Category.OUTFLOW, *end, node_id="b"),
        )

        assert len(points) == 4
        assert direction_changes(points) == 2
        assert points[0] == Point(*start)
        assert points[-1] == Point(*end)

    def test_elbow_midpoint(self):
        points = route(at(Category.INFLOW, -220, 40), HUB)

        assert points == [
            Point(-220, 40),
            Point(-110, 40),
            Point(-110, 0),
            Point(0, 0),
        ]

    def test_degenerate_segment_kept(self):
        points = route(at(Category.INFLOW, 0, 5), at(Category.OUTFLOW, 10, 5))

        assert points[1] == points[2] == Point(5, 5)


class TestHubExit:

    def test_outflow_leaves_upper_right(self):
        points = route(HUB, at(Category.OUTFLOW, 220, -60))

        assert points[0] == Point(90, -20)
        assert points[1] == Point(155, -20)
        assert points[2] == Point(155, -60)

    def test_associated_leaves_lower_right(self):
        points = route(HUB, at(Category.ASSOCIATED, 220, 60))

        assert points[0] == Point(90, 20)

    def test_other_target_leaves_right_center(self):
        points = route(HUB, at(Category.INFLOW, -220, 0))

        assert points[0] == Point(90, 0)

    def test_uses_hub_geometry_from_config(self):
        config = LayoutConfig(hub_width=100, hub_height=40)
        points = route(HUB, at(Category.OUTFLOW, 200, 0), config)

        assert points[0] == Point(50, -10)

    def test_unplaced_endpoint_rejected(self):
        with pytest.raises(ValueError):
            route(Node("x", "x", Category.INFLOW), HUB)


class TestConnectorCategory:

    def test_target_category_by_default(self):
        assert connector_category(HUB, at(Category.OUTFLOW, 1, 1)) == Category.OUTFLOW
        assert connector_category(HUB, at(Category.ASSOCIATED, 1, 1)) == Category.ASSOCIATED

    def test_hub_target_uses_source(self):
        assert connector_category(at(Category.INFLOW, 1, 1), HUB) == Category.INFLOW
        assert connector_category(at(Category.OUTFLOW, 1, 1), HUB) == Category.OUTFLOW


class TestHelpers:

    def test_path_data(self):
        points = [(0, 0), (5, 0), (5, 10.5), (10, 10.5)]
        assert path_data(points) == "M 0,0 L 5,0 L 5,10.5 L 10,10.5"
        assert path_data([]) == ""

    def test_direction_changes_rejects_diagonal(self):
        with pytest.raises(ValueError):
            direction_changes([(0, 0), (5, 5), (10, 5)])

    def test_direction_changes_short_paths(self):
        assert direction_changes([(0, 0), (1, 0)]) == 0
