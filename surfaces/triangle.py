from __future__ import annotations

from typing import Tuple

import numpy as np

from typings.ray import Ray
from utils.vector_operations import EPSILON, vector_cross, vector_dot


class Triangle:
    """One-sided triangle; the front face is given by the p0, p1, p2 winding."""

    def __init__(self, p0: np.ndarray, p1: np.ndarray, p2: np.ndarray) -> None:
        self.vertices: Tuple[np.ndarray, np.ndarray, np.ndarray] = (
            np.asarray(p0, dtype=float),
            np.asarray(p1, dtype=float),
            np.asarray(p2, dtype=float),
        )
        p0, p1, p2 = self.vertices
        plane_normal = vector_cross(p1 - p0, p2 - p0)
        area_factor = float(np.linalg.norm(plane_normal))
        self.normal: np.ndarray | None = None
        if area_factor > EPSILON:
            self.normal = plane_normal / area_factor
            # inward edge normals for the half-plane tests
            self.edge_normals = (
                vector_cross(p0 - p1, self.normal),
                vector_cross(p1 - p2, self.normal),
                vector_cross(p2 - p0, self.normal),
            )

    @property
    def is_degenerate(self) -> bool:
        return self.normal is None

    def intersect(self, ray: Ray) -> Tuple[float, np.ndarray] | None:
        if self.normal is None:
            return None

        direction_dot_normal = vector_dot(self.normal, ray.direction)
        # back faces and rays parallel to the plane
        if direction_dot_normal >= 0.0:
            return None

        p0, p1, p2 = self.vertices
        hit_distance = vector_dot(self.normal, p0 - ray.origin) / direction_dot_normal
        if hit_distance <= 0.0:
            return None

        hit_point = ray.point_at(hit_distance)
        c1, c2, c3 = self.edge_normals
        if (
            vector_dot(hit_point - p0, c1) >= 0.0
            and vector_dot(hit_point - p1, c2) >= 0.0
            and vector_dot(hit_point - p2, c3) >= 0.0
        ):
            return hit_distance, self.normal
        return None
