"""
Viewport Controller Tests
=========================

Clamped zoom, panning, reset and the listener contract.
"""

import pytest

from flowplot import ViewportController, ViewportTransform, ZoomConfig


class TestZoom:

    def test_initial_state(self):
        viewport = ViewportController()

        assert viewport.scale == 0.8
        assert viewport.zoom_percent == 80
        assert viewport.transform == ViewportTransform(0.8, 0, 0)

    def test_zoom_in_and_out_factors(self):
        viewport = ViewportController()

        assert viewport.zoom_in().scale == pytest.approx(1.04)
        assert viewport.zoom_percent == 104
        assert viewport.zoom_out().scale == pytest.approx(0.728)
        assert viewport.zoom_percent == 73

    def test_zoom_in_clamps_at_max(self):
        viewport = ViewportController()
        for _ in range(50):
            viewport.zoom_in()

        assert viewport.scale == 3

    def test_zoom_out_clamps_at_min(self):
        viewport = ViewportController()
        for _ in range(50):
            viewport.zoom_out()

        assert viewport.scale == 0.5

    def test_mixed_sequence_stays_in_bounds(self):
        viewport = ViewportController()
        ops = [viewport.zoom_in] * 7 + [viewport.zoom_out] * 11 + [viewport.reset]
        ops += [viewport.zoom_in, viewport.zoom_out] * 5

        for op in ops * 3:
            op()
            assert 0.5 <= viewport.scale <= 3

    def test_out_of_range_factor_clamped(self):
        viewport = ViewportController()

        assert viewport.scale_by(1000).scale == 3
        assert viewport.scale_by(0.0001).scale == 0.5

    def test_scale_by_keeps_center_fixed(self):
        viewport = ViewportController(ZoomConfig(initial_scale=1))
        viewport.pan(15, -5)
        before = viewport.transform.invert(100, 50)

        viewport.scale_by(2, center=(100, 50))
        after = viewport.transform.invert(100, 50)

        assert after == pytest.approx(before)
        assert viewport.scale == 2

    def test_default_center_is_viewport_middle(self):
        viewport = ViewportController(ZoomConfig(initial_scale=1), viewport_size=(800, 600))
        viewport.scale_by(2)

        assert viewport.transform == ViewportTransform(2, -400, -300)

    def test_wheel(self):
        viewport = ViewportController(ZoomConfig(initial_scale=1))

        assert viewport.wheel(-500).scale == pytest.approx(2)
        assert viewport.wheel(500).scale == pytest.approx(1)
        assert viewport.wheel(-100000).scale == 3

    @pytest.mark.parametrize("delta_y,expected", [(-600000, 3), (600000, 0.5), (-1e308, 3), (1e308, 0.5)])
    def test_extreme_wheel_delta_clamps(self, delta_y, expected):
        viewport = ViewportController()

        assert viewport.wheel(delta_y).scale == pytest.approx(expected)
        assert viewport.config.min_scale <= viewport.scale <= viewport.config.max_scale

    @pytest.mark.parametrize("scale,percent", [(0.625, 63), (0.875, 88), (1.125, 113), (0.8, 80)])
    def test_zoom_percent_rounds_half_up(self, scale, percent):
        viewport = ViewportController(ZoomConfig(initial_scale=scale))

        assert viewport.zoom_percent == percent


class TestPanAndReset:

    def test_pan_accumulates(self):
        viewport = ViewportController()
        viewport.pan(10, 20)
        viewport.pan(-4, 1)

        assert viewport.transform == ViewportTransform(0.8, 6, 21)

    def test_reset_restores_initial(self):
        viewport = ViewportController()
        viewport.zoom_in()
        viewport.pan(30, 40)

        assert viewport.reset() == ViewportTransform(0.8, 0, 0)

    def test_transform_mapping(self):
        transform = ViewportTransform(2, 10, 20)

        assert transform.apply(5, 5) == (20, 30)
        assert transform.invert(20, 30) == (5, 5)
        assert transform.to_svg() == "translate(10,20) scale(2)"


class TestListeners:

    def test_notified_after_every_operation(self):
        viewport = ViewportController()
        seen = []
        viewport.subscribe(lambda t: seen.append(t.scale))

        viewport.zoom_in()
        viewport.zoom_out()
        viewport.pan(1, 1)
        viewport.reset()

        assert seen == pytest.approx([1.04, 0.728, 0.728, 0.8])

    def test_notified_when_clamped(self):
        viewport = ViewportController(ZoomConfig(initial_scale=3))
        seen = []
        viewport.subscribe(lambda t: seen.append(round(t.scale * 100)))

        viewport.zoom_in()

        assert seen == [300]

    def test_unsubscribe(self):
        viewport = ViewportController()
        seen = []
        unsubscribe = viewport.subscribe(seen.append)

        viewport.zoom_in()
        unsubscribe()
        unsubscribe()
        viewport.zoom_in()

        assert len(seen) == 1


class TestConfig:

    def test_initial_scale_clamped(self):
        viewport = ViewportController(ZoomConfig(initial_scale=10))

        assert viewport.scale == 3

    @pytest.mark.parametrize("kwargs", [
        {"min_scale": 0},
        {"min_scale": 4, "max_scale": 3},
        {"zoom_in_factor": 1},
        {"zoom_out_factor": 1.2},
    ])
    def test_invalid_config(self, kwargs):
        with pytest.raises(ValueError):
            ZoomConfig(**kwargs)
