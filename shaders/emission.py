from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from typings.color import Color, as_color
from typings.hit import Hit

if TYPE_CHECKING:
    from scene import Scene


class EmissionShader:
    """Light source: returns its own color and ends the path."""

    def __init__(self, color: Color) -> None:
        self.color: Color = as_color(color)

    def apply(self, scene: Scene, hit: Hit, rng: np.random.Generator, depth: int) -> Color:
        return self.color
