from __future__ import annotations

from typing import Tuple

import numpy as np
from PIL import Image

from typings.color import Color, as_color
from utils.vector_operations import normalize_vector


def equirect_coordinates(direction: np.ndarray) -> Tuple[float, float]:
    """Maps a unit direction to panorama coordinates: yaw in [0, 1), pitch in [0, 1].
    yaw turns around +y starting at +z, pitch goes from +y (0) down to -y (1)."""
    x, y, z = (float(component) for component in direction)
    yaw = np.arctan2(x, z) / (2.0 * np.pi)
    if yaw < 0.0:
        yaw += 1.0
    # a tiny negative angle rounds up to exactly 1.0 above
    if yaw >= 1.0:
        yaw -= 1.0
    horizontal_length = np.hypot(x, z)
    pitch = np.arctan2(horizontal_length, y) / np.pi
    return float(yaw), float(pitch)


def equirect_direction(yaw: float, pitch: float) -> np.ndarray:
    """Inverse of equirect_coordinates."""
    polar = pitch * np.pi
    azimuth = yaw * 2.0 * np.pi
    return np.array(
        [np.sin(polar) * np.sin(azimuth), np.cos(polar), np.sin(polar) * np.cos(azimuth)],
        dtype=float,
    )


class StaticSkybox:
    """Constant background radiance."""

    def __init__(self, color: Color) -> None:
        self.color: Color = as_color(color)

    def sample(self, direction: np.ndarray) -> Color:
        return self.color


class ImageSkybox:
    """Equirectangular panorama background with nearest-pixel lookup."""

    def __init__(self, pixels: np.ndarray) -> None:
        pixel_array = np.asarray(pixels)
        if pixel_array.ndim != 3 or pixel_array.shape[2] != 3 or pixel_array.shape[0] == 0 or pixel_array.shape[1] == 0:
            raise ValueError(f"Panorama must be a non-empty HxWx3 array, got shape {pixel_array.shape}")
        self.pixels: np.ndarray = pixel_array.astype(np.uint8)
        self.height: int = int(pixel_array.shape[0])
        self.width: int = int(pixel_array.shape[1])

    @classmethod
    def from_file(cls, path: str) -> "ImageSkybox":
        with Image.open(path) as image:
            return cls(np.asarray(image.convert("RGB")))

    def sample(self, direction: np.ndarray) -> Color:
        yaw, pitch = equirect_coordinates(normalize_vector(direction))
        column = min(max(int(yaw * self.width), 0), self.width - 1)
        row = min(max(int(pitch * self.height), 0), self.height - 1)
        r, g, b = self.pixels[row, column]
        return Color.from_rgb8(r, g, b)
