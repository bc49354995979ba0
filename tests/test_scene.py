import numpy as np
import pytest

from scene import Scene, SceneObject
from shaders.emission import EmissionShader
from shaders.skybox import ImageSkybox
from surfaces.sphere import Sphere
from typings.color import Color
from typings.ray import Ray

from conftest import BACKGROUND

RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)


@pytest.fixture
def two_spheres(camera) -> Scene:
    scene = Scene(camera, ImageSkybox(np.full((2, 4, 3), 64, dtype=np.uint8)))
    scene.add(Sphere(np.array([0.0, 0.0, 0.0]), 1.0), EmissionShader(RED), object_id=3)
    scene.add(Sphere(np.array([3.0, 0.0, 0.0]), 1.0), EmissionShader(GREEN), object_id=5)
    return scene


def x_ray() -> Ray:
    return Ray(origin=np.array([-5.0, 0.0, 0.0]), direction=np.array([1.0, 0.0, 0.0]))


def test_closest_intersection_picks_nearest(two_spheres):
    scene_object, hit = two_spheres.closest_intersection(x_ray())
    assert scene_object.id == 3
    assert hit.object_id == 3
    assert hit.distance == pytest.approx(4.0)
    np.testing.assert_allclose(hit.point, [-1.0, 0.0, 0.0])


def test_closest_intersection_skips_ignored_object(two_spheres):
    scene_object, hit = two_spheres.closest_intersection(x_ray(), ignore_id=3)
    assert scene_object.id == 5
    assert hit.distance == pytest.approx(7.0)


def test_closest_intersection_miss(two_spheres):
    ray = Ray(origin=np.array([-5.0, 0.0, 0.0]), direction=np.array([0.0, 1.0, 0.0]))
    assert two_spheres.closest_intersection(ray) is None


def test_render_ray_dispatches_to_hit_shader(two_spheres, rng):
    assert two_spheres.render_ray(x_ray(), None, rng, 8) == RED


def test_escaping_ray_returns_background_sample(two_spheres, rng):
    direction = np.array([0.0, 0.6, 0.8])
    ray = Ray(origin=np.array([-5.0, 0.0, 0.0]), direction=direction)
    assert two_spheres.render_ray(ray, None, rng, 8) == two_spheres.background.sample(direction)


def test_escaping_ray_returns_static_background_exactly(emissive_sphere_scene, rng):
    ray = Ray(origin=np.array([-5.0, 0.0, 0.0]), direction=np.array([-1.0, 0.0, 0.0]))
    assert emissive_sphere_scene.render_ray(ray, None, rng, 8) == BACKGROUND


def test_exhausted_depth_contributes_nothing(two_spheres, rng):
    assert two_spheres.render_ray(x_ray(), None, rng, 0) == Color.black()


def test_add_assigns_next_free_id(camera):
    scene = Scene(camera, ImageSkybox(np.zeros((1, 1, 3), dtype=np.uint8)))
    first = scene.add(Sphere(np.zeros(3), 1.0), EmissionShader(RED))
    second = scene.add(Sphere(np.ones(3), 1.0), EmissionShader(RED))
    assert (first, second) == (1, 2)
    assert set(scene.objects) == {1, 2}


def test_duplicate_ids_are_rejected(two_spheres, camera):
    with pytest.raises(ValueError):
        two_spheres.add(Sphere(np.zeros(3), 1.0), EmissionShader(RED), object_id=5)

    duplicate = SceneObject(1, Sphere(np.zeros(3), 1.0), EmissionShader(RED))
    with pytest.raises(ValueError):
        Scene(camera, two_spheres.background, [duplicate, duplicate])
