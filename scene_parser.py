import os
from typing import List, Tuple, Union

import numpy as np

from camera import Camera
from scene import Scene, Surface
from scene_settings import SceneSettings
from shaders.diffuse import DiffuseShader
from shaders.emission import EmissionShader
from shaders.mirror import MirrorShader
from shaders.skybox import ImageSkybox, StaticSkybox
from surfaces.sphere import Sphere
from surfaces.triangle import Triangle

Material = Union[DiffuseShader, MirrorShader, EmissionShader]

MATERIAL_KINDS = {
    "diffuse": DiffuseShader,
    "mirror": MirrorShader,
    "emission": EmissionShader,
}


def _expect_params(obj_type: str, params: List[float], count: int) -> None:
    if len(params) != count:
        raise ValueError("'{}' expects {} values, got {}".format(obj_type, count, len(params)))


def parse_scene_file(file_path: str) -> Tuple[Scene, SceneSettings]:
    """
    Reads a plain-text scene description. One item per line, '#' starts a comment:
        cam px py pz  fx fy fz  ux uy uz  angle_x_deg angle_y_deg
        set r g b samples max_depth
        sky panorama.png
        mtl diffuse|mirror|emission r g b
        sph cx cy cz radius material_index
        tri x0 y0 z0  x1 y1 z1  x2 y2 z2 material_index
    Material indices are 1-based in file order; object ids follow surface order starting at 1.
    """
    camera: Camera | None = None
    scene_settings: SceneSettings | None = None
    skybox_path: str | None = None
    materials: List[Material] = []
    surfaces: List[Tuple[Surface, int]] = []
    base_dir = os.path.dirname(os.path.abspath(file_path))

    with open(file_path, 'r') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.split()
            obj_type = parts[0]
            if obj_type == "sky":
                if len(parts) != 2:
                    raise ValueError("'sky' expects a single image path")
                skybox_path = os.path.join(base_dir, parts[1])
                continue
            if obj_type == "mtl":
                if len(parts) < 2 or parts[1] not in MATERIAL_KINDS:
                    raise ValueError("unknown material kind in line: {}".format(line))
                params = [float(p) for p in parts[2:]]
                _expect_params("mtl", params, 3)
                materials.append(MATERIAL_KINDS[parts[1]](np.asarray(params, dtype=float)))
                continue

            params = [float(p) for p in parts[1:]]
            if obj_type == "cam":
                if camera is not None:
                    raise ValueError("Scene file defines more than one camera")
                _expect_params("cam", params, 11)
                camera = Camera(
                    np.asarray(params[:3], dtype=float),
                    np.asarray(params[3:6], dtype=float),
                    np.asarray(params[6:9], dtype=float),
                    np.radians(params[9]),
                    np.radians(params[10]),
                )
            elif obj_type == "set":
                _expect_params("set", params, 5)
                scene_settings = SceneSettings(np.asarray(params[:3], dtype=float), params[3], params[4])
            elif obj_type == "sph":
                _expect_params("sph", params, 5)
                sphere = Sphere(np.asarray(params[:3], dtype=float), params[3])
                surfaces.append((sphere, int(params[4])))
            elif obj_type == "tri":
                _expect_params("tri", params, 10)
                triangle = Triangle(
                    np.asarray(params[0:3], dtype=float),
                    np.asarray(params[3:6], dtype=float),
                    np.asarray(params[6:9], dtype=float),
                )
                surfaces.append((triangle, int(params[9])))
            else:
                raise ValueError("Unknown object type: {}".format(obj_type))

    if camera is None:
        raise ValueError("Scene file is missing a camera ('cam' line)")
    if scene_settings is None:
        raise ValueError("Scene file is missing scene settings ('set' line)")
    scene_settings.skybox_path = skybox_path

    if skybox_path is not None:
        background = ImageSkybox.from_file(skybox_path)
    else:
        background = StaticSkybox(scene_settings.background_color)

    scene = Scene(camera, background)
    for object_id, (surface, mat_idx) in enumerate(surfaces, start=1):
        if not (1 <= mat_idx <= len(materials)):
            raise ValueError("Surface {} references unknown material {}".format(object_id, mat_idx))
        scene.add(surface, materials[mat_idx - 1], object_id)
    return scene, scene_settings
