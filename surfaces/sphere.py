from __future__ import annotations

from typing import Tuple

import numpy as np

from typings.ray import Ray
from utils.vector_operations import vector_dot


class Sphere:
    def __init__(self, center: np.ndarray, radius: float) -> None:
        self.center: np.ndarray = np.asarray(center, dtype=float)
        self.radius: float = float(radius)
        if not self.radius > 0.0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")

    def intersect(self, ray: Ray) -> Tuple[float, np.ndarray] | None:
        """Returns (distance, outward normal) of the nearest hit in front of the ray.
        A ray starting inside the sphere reports no hit."""
        origin_to_center = ray.origin - self.center
        half_b = vector_dot(ray.direction, origin_to_center)
        quadratic_c = vector_dot(origin_to_center, origin_to_center) - self.radius * self.radius

        discriminant = half_b * half_b - quadratic_c
        if discriminant <= 0.0:
            return None

        sqrt_discriminant = float(np.sqrt(discriminant))
        t_near = -half_b - sqrt_discriminant
        t_far = -half_b + sqrt_discriminant
        # both roots must lie in front of the origin
        if t_near <= 0.0 or t_far <= 0.0:
            return None

        hit_point = ray.point_at(t_near)
        surface_normal = (hit_point - self.center) / self.radius
        return t_near, surface_normal
