from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from typings.color import Color, as_color
from typings.hit import Hit
from typings.ray import Ray
from utils.vector_operations import grazing_attenuation, normalize_vector, reflect_vector

if TYPE_CHECKING:
    from scene import Scene


class MirrorShader:
    def __init__(self, color: Color) -> None:
        self.color: Color = as_color(color)

    def apply(self, scene: Scene, hit: Hit, rng: np.random.Generator, depth: int) -> Color:
        incoming = hit.ray.direction
        reflected_ray = Ray(origin=hit.point, direction=reflect_vector(incoming, hit.normal))
        reflected_color = scene.render_ray(reflected_ray, hit.object_id, rng, depth - 1)
        attenuation = grazing_attenuation(incoming, normalize_vector(hit.normal))
        return reflected_color * self.color * attenuation
