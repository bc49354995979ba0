from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line; direction is expected to be unit length."""

    origin: np.ndarray
    direction: np.ndarray

    def point_at(self, distance: float) -> np.ndarray:
        return self.origin + distance * self.direction
