import os
import sys

import numpy as np
import pytest

# Add the repository root to the path so the flat modules import without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from camera import Camera
from scene import Scene
from shaders.emission import EmissionShader
from shaders.skybox import StaticSkybox
from surfaces.sphere import Sphere
from typings.color import Color

BACKGROUND = Color(0.25, 0.5, 0.75)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def camera() -> Camera:
    return Camera(
        position=np.array([-5.0, 0.0, 0.0]),
        forward=np.array([1.0, 0.0, 0.0]),
        up=np.array([0.0, 1.0, 0.0]),
        angle_x=np.pi / 3.0,
        angle_y=np.pi / 3.0,
    )


@pytest.fixture
def emissive_sphere_scene(camera: Camera) -> Scene:
    """A single white light sphere at the origin seen from x=-5."""
    scene = Scene(camera, StaticSkybox(BACKGROUND))
    scene.add(Sphere(np.zeros(3), 1.0), EmissionShader(Color(1.0, 1.0, 1.0)), object_id=1)
    return scene
