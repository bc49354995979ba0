from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple, Union

import numpy as np

from camera import Camera
from shaders.diffuse import DiffuseShader
from shaders.emission import EmissionShader
from shaders.mirror import MirrorShader
from shaders.skybox import ImageSkybox, StaticSkybox
from surfaces.sphere import Sphere
from surfaces.triangle import Triangle
from typings.color import Color
from typings.hit import Hit
from typings.ray import Ray

Surface = Union[Sphere, Triangle]
ObjectShader = Union[DiffuseShader, MirrorShader, EmissionShader]
Background = Union[StaticSkybox, ImageSkybox]


@dataclass(frozen=True)
class SceneObject:
    id: int
    geometry: Surface
    shader: ObjectShader


class Scene:
    """
    Object set, camera and background of a render.
    Built once up front and only read while rendering, so it can be shared by worker processes.
    """

    def __init__(self, camera: Camera, background: Background, objects: Iterable[SceneObject] = ()) -> None:
        self.camera: Camera = camera
        self.background: Background = background
        self.objects: Dict[int, SceneObject] = {}
        for scene_object in objects:
            self._insert(scene_object)

    def _insert(self, scene_object: SceneObject) -> None:
        if scene_object.id in self.objects:
            raise ValueError(f"Duplicate object id: {scene_object.id}")
        self.objects[scene_object.id] = scene_object

    def add(self, geometry: Surface, shader: ObjectShader, object_id: int | None = None) -> int:
        """Adds an object and returns its id (the next free id when none is given)."""
        if object_id is None:
            object_id = max(self.objects, default=0) + 1
        self._insert(SceneObject(int(object_id), geometry, shader))
        return int(object_id)

    def closest_intersection(self, ray: Ray, ignore_id: int | None = None) -> Tuple[SceneObject, Hit] | None:
        """Brute-force scan for the nearest hit, skipping the object the ray just left."""
        best: Tuple[SceneObject, float, np.ndarray] | None = None
        for object_id, scene_object in self.objects.items():
            if object_id == ignore_id:
                continue
            intersection = scene_object.geometry.intersect(ray)
            if intersection is None:
                continue
            distance, normal = intersection
            if best is None or distance < best[1]:
                best = (scene_object, distance, normal)

        if best is None:
            return None
        scene_object, distance, normal = best
        return scene_object, Hit(distance=distance, normal=normal, object_id=scene_object.id, ray=ray)

    def render_ray(self, ray: Ray, ignore_id: int | None, rng: np.random.Generator, depth: int) -> Color:
        """
        Radiance arriving along the ray.
        depth is the number of bounces left; an exhausted path contributes nothing.
        """
        if depth <= 0:
            return Color.black()

        closest = self.closest_intersection(ray, ignore_id)
        if closest is None:
            return self.background.sample(ray.direction)

        scene_object, hit = closest
        return scene_object.shader.apply(self, hit, rng, depth)
