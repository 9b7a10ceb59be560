"""Pan/zoom state for a rendered scene."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

Listener = Callable[["ViewportTransform"], None]


@dataclass
class ZoomConfig:
    """Zoom limits and step factors."""

    min_scale: float = 0.5
    max_scale: float = 3
    initial_scale: float = 0.8
    zoom_in_factor: float = 1.3
    zoom_out_factor: float = 0.7
    wheel_sensitivity: float = 0.002  # Per wheel delta unit, base-2 exponent

    def __post_init__(self) -> None:
        if self.min_scale <= 0 or self.min_scale > self.max_scale:
            raise ValueError(
                f"Invalid scale extent [{self.min_scale}, {self.max_scale}]"
            )
        if self.zoom_in_factor <= 1:
            raise ValueError("zoom_in_factor must be greater than 1")
        if not 0 < self.zoom_out_factor < 1:
            raise ValueError("zoom_out_factor must be between 0 and 1")

    def clamp(self, scale: float) -> float:
        return max(self.min_scale, min(self.max_scale, scale))


@dataclass(frozen=True)
class ViewportTransform:
    """Uniform scale followed by a translation, in screen units."""

    scale: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Map a scene point to screen coordinates."""
        return x * self.scale + self.translate_x, y * self.scale + self.translate_y

    def invert(self, x: float, y: float) -> tuple[float, float]:
        """Map a screen point back to scene coordinates."""
        return (x - self.translate_x) / self.scale, (y - self.translate_y) / self.scale

    def to_svg(self) -> str:
        return (
            f"translate({self.translate_x:g},{self.translate_y:g}) "
            f"scale({self.scale:g})"
        )


class ViewportController:
    """Owns the viewport transform and notifies listeners of changes.

    Every operation clamps the scale to the configured extent and then calls
    each listener with the resulting transform. Rendering is left to the
    listeners.
    """

    def __init__(
        self,
        config: ZoomConfig | None = None,
        viewport_size: tuple[float, float] | None = None,
    ):
        self.config = config or ZoomConfig()
        self.viewport_size = viewport_size
        self._transform = ViewportTransform(scale=self.config.clamp(self.config.initial_scale))
        self._listeners: list[Listener] = []

    @property
    def transform(self) -> ViewportTransform:
        return self._transform

    @property
    def scale(self) -> float:
        return self._transform.scale

    @property
    def zoom_percent(self) -> int:
        """Current scale as a rounded percentage, e.g. 80 for 0.8."""
        return math.floor(self._transform.scale * 100 + 0.5)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def zoom_in(self) -> ViewportTransform:
        return self.scale_by(self.config.zoom_in_factor)

    def zoom_out(self) -> ViewportTransform:
        return self.scale_by(self.config.zoom_out_factor)

    def reset(self) -> ViewportTransform:
        """Back to the initial scale with no translation."""
        return self._set(ViewportTransform(scale=self.config.clamp(self.config.initial_scale)))

    def scale_by(
        self, factor: float, center: tuple[float, float] | None = None
    ) -> ViewportTransform:
        """Multiply the scale by ``factor`` keeping ``center`` fixed on screen.

        ``center`` defaults to the middle of the viewport when its size is
        known, otherwise to the screen origin.
        """
        if center is None:
            center = self._default_center()

        current = self._transform
        scale = self.config.clamp(current.scale * factor)
        ratio = scale / current.scale
        cx, cy = center

        return self._set(
            ViewportTransform(
                scale=scale,
                translate_x=cx - (cx - current.translate_x) * ratio,
                translate_y=cy - (cy - current.translate_y) * ratio,
            )
        )

    def pan(self, dx: float, dy: float) -> ViewportTransform:
        """Translate by a screen-space drag delta."""
        current = self._transform
        return self._set(
            ViewportTransform(
                scale=current.scale,
                translate_x=current.translate_x + dx,
                translate_y=current.translate_y + dy,
            )
        )

    def wheel(
        self, delta_y: float, center: tuple[float, float] | None = None
    ) -> ViewportTransform:
        """Zoom from a wheel event; negative deltas zoom in."""
        # Past log2(max/min) the result clamps anyway
        limit = math.log2(self.config.max_scale / self.config.min_scale)
        exponent = max(-limit, min(limit, -delta_y * self.config.wheel_sensitivity))
        factor = 2 ** exponent
        return self.scale_by(factor, center)

    def _default_center(self) -> tuple[float, float]:
        if self.viewport_size is None:
            return 0.0, 0.0
        width, height = self.viewport_size
        return width / 2, height / 2

    def _set(self, transform: ViewportTransform) -> ViewportTransform:
        self._transform = transform
        for listener in list(self._listeners):
            listener(transform)
        return transform
