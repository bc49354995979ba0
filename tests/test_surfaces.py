import numpy as np
import pytest

from surfaces.sphere import Sphere
from surfaces.triangle import Triangle
from typings.ray import Ray


def make_ray(origin, direction) -> Ray:
    direction = np.asarray(direction, dtype=float)
    return Ray(origin=np.asarray(origin, dtype=float), direction=direction / np.linalg.norm(direction))


# --- Sphere ---

def test_sphere_hit_from_outside_along_inward_normal():
    sphere = Sphere(np.zeros(3), 1.0)
    hit = sphere.intersect(make_ray([-5.0, 0.0, 0.0], [1.0, 0.0, 0.0]))
    assert hit is not None
    distance, normal = hit
    assert distance == pytest.approx(4.0)
    np.testing.assert_allclose(normal, [-1.0, 0.0, 0.0], atol=1e-12)


def test_sphere_off_center_distance_and_unit_normal():
    sphere = Sphere(np.array([1.0, 2.0, 3.0]), 2.0)
    origin = np.array([1.0, 2.0, -7.0])
    distance, normal = sphere.intersect(make_ray(origin, [0.0, 0.0, 1.0]))
    assert distance == pytest.approx(8.0)
    assert np.linalg.norm(normal) == pytest.approx(1.0)


def test_sphere_behind_ray_is_not_hit():
    sphere = Sphere(np.zeros(3), 1.0)
    assert sphere.intersect(make_ray([5.0, 0.0, 0.0], [1.0, 0.0, 0.0])) is None


def test_sphere_from_inside_is_not_hit():
    sphere = Sphere(np.zeros(3), 1.0)
    assert sphere.intersect(make_ray([0.0, 0.0, 0.0], [0.0, 1.0, 0.0])) is None


def test_sphere_miss_and_tangent():
    sphere = Sphere(np.zeros(3), 1.0)
    assert sphere.intersect(make_ray([-5.0, 2.0, 0.0], [1.0, 0.0, 0.0])) is None
    # discriminant exactly zero counts as a miss
    assert sphere.intersect(make_ray([-5.0, 1.0, 0.0], [1.0, 0.0, 0.0])) is None


@pytest.mark.parametrize("radius", [0.0, -1.0])
def test_sphere_rejects_non_positive_radius(radius):
    with pytest.raises(ValueError):
        Sphere(np.zeros(3), radius)


# --- Triangle ---

@pytest.fixture
def wall() -> Triangle:
    """Triangle in the plane x=2 whose front face looks down -x."""
    return Triangle(
        np.array([2.0, 0.0, 0.0]),
        np.array([2.0, 0.0, 1.0]),
        np.array([2.0, 1.0, 0.0]),
    )


def test_triangle_normal_follows_winding(wall):
    np.testing.assert_allclose(wall.normal, [-1.0, 0.0, 0.0])


def test_triangle_hit_at_centroid(wall):
    centroid = np.mean(wall.vertices, axis=0)
    origin = centroid - np.array([3.0, 0.0, 0.0])
    distance, normal = wall.intersect(make_ray(origin, [1.0, 0.0, 0.0]))
    assert distance == pytest.approx(3.0)
    np.testing.assert_allclose(normal, [-1.0, 0.0, 0.0])


def test_triangle_oblique_hit_distance(wall):
    centroid = np.mean(wall.vertices, axis=0)
    direction = np.array([1.0, 0.0, 1.0]) / np.sqrt(2.0)
    origin = centroid - 3.0 * direction
    distance, _ = wall.intersect(Ray(origin=origin, direction=direction))
    assert distance == pytest.approx(3.0)


def test_triangle_back_face_is_not_hit(wall):
    centroid = np.mean(wall.vertices, axis=0)
    assert wall.intersect(make_ray(centroid + [3.0, 0.0, 0.0], [-1.0, 0.0, 0.0])) is None


def test_triangle_parallel_ray_is_not_hit(wall):
    assert wall.intersect(make_ray([-1.0, 0.3, 0.3], [0.0, 1.0, 0.0])) is None


def test_triangle_outside_edges_is_not_hit(wall):
    assert wall.intersect(make_ray([-1.0, 2.0, 2.0], [1.0, 0.0, 0.0])) is None
    assert wall.intersect(make_ray([-1.0, -0.1, 0.3], [1.0, 0.0, 0.0])) is None


def test_triangle_behind_ray_is_not_hit(wall):
    assert wall.intersect(make_ray([3.0, 0.3, 0.3], [1.0, 0.0, 0.0])) is None


def test_degenerate_triangle_never_hits():
    sliver = Triangle(np.zeros(3), np.array([1.0, 1.0, 1.0]), np.array([2.0, 2.0, 2.0]))
    assert sliver.is_degenerate
    assert sliver.intersect(make_ray([-1.0, 0.0, 5.0], [0.0, 0.0, -1.0])) is None
