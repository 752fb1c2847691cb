"""Projection matrices, colours and timers."""

from __future__ import annotations

from dataclasses import dataclass, field


def make_projection_matrix(
    left: float, right: float, bottom: float, top: float
) -> list[float]:
    """Column-major 4x4 orthographic scale matrix for the given bounds."""
    return [
        2 / (right - left), 0.0, 0.0, 0.0,
        0.0, 2 / (top - bottom), 0.0, 0.0,
        0.0, 0.0, -1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]


@dataclass
class Color:
    """RGBA colour with components in the range 0..1."""

    red: float = 1.0
    green: float = 1.0
    blue: float = 1.0
    alpha: float = 1.0


@dataclass
class Timer:
    """Countdown of a fixed duration, optionally repeating."""

    duration: float
    loop: bool
    time_left: float = field(init=False)

    def __post_init__(self) -> None:
        self.time_left = self.duration