from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

import numpy as np


@dataclass(frozen=True, slots=True)
class Color:
    """RGB radiance. Components may exceed 1.0 while accumulating; clamp before output."""

    r: float
    g: float
    b: float

    @staticmethod
    def black() -> "Color":
        return Color(0.0, 0.0, 0.0)

    @staticmethod
    def from_rgb8(r: int, g: int, b: int) -> "Color":
        return Color(int(r) / 255.0, int(g) / 255.0, int(b) / 255.0)

    @staticmethod
    def from_array(rgb: np.ndarray) -> "Color":
        r, g, b = (float(channel) for channel in rgb)
        return Color(r, g, b)

    @staticmethod
    def average(colors: Iterable["Color"]) -> "Color":
        """Unweighted mean of the given colors."""
        total_r = total_g = total_b = 0.0
        count = 0
        for color in colors:
            total_r += color.r
            total_g += color.g
            total_b += color.b
            count += 1
        if count == 0:
            raise ValueError("Cannot average an empty set of colors")
        return Color(total_r / count, total_g / count, total_b / count)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other: Union["Color", float]) -> "Color":
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        factor = float(other)
        return Color(self.r * factor, self.g * factor, self.b * factor)

    __rmul__ = __mul__

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self.to_array())))

    def to_array(self) -> np.ndarray:
        return np.array([self.r, self.g, self.b], dtype=float)


def as_color(value: Union[Color, Iterable[float]]) -> Color:
    if isinstance(value, Color):
        return value
    return Color.from_array(np.asarray(value, dtype=float))
