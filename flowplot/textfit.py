"""Fit multi-line text into a fixed box by searching font sizes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

# (candidate_line, font_size) -> rendered width
MeasureFn = Callable[[str, float], float]


@dataclass
class FitConfig:
    """Font size search parameters."""

    max_font_size: float = 16
    min_font_size: float = 10
    step: float = 1
    line_height_factor: float = 1.2

    def __post_init__(self) -> None:
        if self.min_font_size <= 0:
            raise ValueError("min_font_size must be positive")
        if self.step <= 0:
            raise ValueError("step must be positive")
        if self.min_font_size > self.max_font_size:
            raise ValueError(
                f"min_font_size ({self.min_font_size}) is larger than "
                f"max_font_size ({self.max_font_size})"
            )


@dataclass(frozen=True)
class FittedText:
    """Result of a fit: chosen font size and wrapped lines."""

    font_size: float
    lines: list[str] = field(default_factory=list)
    line_height: float = 0

    @property
    def block_height(self) -> float:
        return len(self.lines) * self.line_height


def estimate_text_width(
    text: str, font_size: float, char_width_ratio: float = 0.55
) -> float:
    """Estimate width of text based on character count.

    ``char_width_ratio`` is the average glyph width in ems for a semibold
    sans-serif face.
    """
    return len(text) * font_size * char_width_ratio


def wrap_words(
    text: str,
    max_width: float,
    font_size: float,
    measure: MeasureFn,
) -> list[str]:
    """Greedily wrap words so each line measures at most ``max_width``.

    A word that is wider than ``max_width`` on its own gets a line to itself.
    """
    lines: list[str] = []
    current = ""

    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and measure(candidate, font_size) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate

    if current:
        lines.append(current)

    return lines


def fit_text(
    text: str,
    max_width: float,
    max_height: float,
    measure: MeasureFn = estimate_text_width,
    config: FitConfig | None = None,
) -> FittedText:
    """Find the largest font size whose wrapping fits the box.

    Sizes are tried from ``config.max_font_size`` downward in ``config.step``
    decrements. When even ``config.min_font_size`` does not fit, the wrapping
    at that size is returned and allowed to overflow.
    """
    if config is None:
        config = FitConfig()

    font_size = config.max_font_size
    while True:
        lines = wrap_words(text, max_width, font_size, measure)
        line_height = font_size * config.line_height_factor
        if len(lines) * line_height <= max_height:
            break

        next_size = font_size - config.step
        if next_size < config.min_font_size:
            break
        font_size = next_size

    return FittedText(font_size=font_size, lines=lines, line_height=line_height)
