from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from typings.ray import Ray
from utils.vector_operations import EPSILON


@dataclass(frozen=True, slots=True)
class Hit:
    distance: float
    normal: np.ndarray # outward geometric normal, not flipped toward the ray
    object_id: int
    ray: Ray

    def __post_init__(self) -> None:
        if not np.isfinite(self.distance) or self.distance <= 0.0:
            raise ValueError(f"Invalid hit distance: {self.distance}")
        if not np.all(np.isfinite(self.normal)):
            raise ValueError(f"Non-finite surface normal on object {self.object_id}")
        if float(np.linalg.norm(self.normal)) < EPSILON:
            raise ValueError(f"Zero-length surface normal on object {self.object_id}")

    @property
    def point(self) -> np.ndarray:
        return self.ray.point_at(self.distance)
