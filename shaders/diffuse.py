from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from typings.color import Color, as_color
from typings.hit import Hit
from typings.ray import Ray
from utils.vector_operations import (
    EPSILON,
    any_perpendicular,
    grazing_attenuation,
    normalize_vector,
    rotate_about_axis,
    vector_cross,
)

if TYPE_CHECKING:
    from scene import Scene


def scatter_direction(incoming: np.ndarray, normal: np.ndarray, rng: np.random.Generator) -> np.ndarray:
    """
    Picks a bounce direction in the hemisphere around the unit normal.
    Pitch and yaw are drawn uniformly in angle, so this is NOT cosine-weighted
    hemisphere sampling: directions near the normal are over-represented.
    """
    pitch = rng.uniform(0.0, 0.5 * np.pi)
    yaw = rng.uniform(0.0, 2.0 * np.pi)

    tilt_axis = vector_cross(incoming, normal)
    if np.linalg.norm(tilt_axis) < EPSILON:
        # head-on hit, any axis in the tangent plane will do
        tilt_axis = any_perpendicular(normal)
    else:
        tilt_axis = normalize_vector(tilt_axis)

    tilted = rotate_about_axis(normal, tilt_axis, pitch)
    return normalize_vector(rotate_about_axis(tilted, normal, yaw))


class DiffuseShader:
    def __init__(self, color: Color) -> None:
        self.color: Color = as_color(color)

    def apply(self, scene: Scene, hit: Hit, rng: np.random.Generator, depth: int) -> Color:
        incoming = hit.ray.direction
        unit_normal = normalize_vector(hit.normal)
        bounce_ray = Ray(origin=hit.point, direction=scatter_direction(incoming, unit_normal, rng))
        bounced_color = scene.render_ray(bounce_ray, hit.object_id, rng, depth - 1)
        attenuation = grazing_attenuation(incoming, unit_normal)
        return bounced_color * self.color * attenuation
