from typing import Tuple

import numpy as np

from typings.ray import Ray
from utils.vector_operations import EPSILON, normalize_vector, vector_cross


class Camera:
    def __init__(
        self,
        position: np.ndarray,
        forward: np.ndarray,
        up: np.ndarray,
        angle_x: float,
        angle_y: float,
    ) -> None:
        self.position = np.asarray(position, dtype=float)
        self.forward = normalize_vector(forward)
        self.up = normalize_vector(up)
        self.angle_x = float(angle_x) # horizontal field of view (radians)
        self.angle_y = float(angle_y) # vertical field of view (radians)

        if np.linalg.norm(vector_cross(self.forward, self.up)) < EPSILON:
            raise ValueError("Camera up vector must not be parallel to forward")

        self.right: np.ndarray = normalize_vector(vector_cross(self.forward, self.up)) # horizontal axis

    def pixel_basis(self, width: int, height: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Returns (top_left, pixel_dx, pixel_dy) so that pixel (px, py) covers the ray directions
        top_left + (px + x) * pixel_dx + (py + y) * pixel_dy for x, y in [0, 1).
        The up vector is used as given (not re-orthogonalized against forward)."""
        half_dx = np.tan(self.angle_x / 2.0) * self.right / float(width)
        half_dy = -np.tan(self.angle_y / 2.0) * self.up / float(height)
        top_left = self.forward - float(width) * half_dx - float(height) * half_dy
        return top_left, 2.0 * half_dx, 2.0 * half_dy

    def generate_ray(
        self,
        px: int,
        py: int,
        offset_x: float,
        offset_y: float,
        basis: Tuple[np.ndarray, np.ndarray, np.ndarray],
    ) -> Ray:
        # starts at the camera's position, through the sub-pixel position (offset_x, offset_y) of pixel (px, py)
        top_left, pixel_dx, pixel_dy = basis
        direction = top_left + (px + offset_x) * pixel_dx + (py + offset_y) * pixel_dy
        return Ray(origin=self.position, direction=normalize_vector(direction))
