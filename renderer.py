import logging
from concurrent import futures
from typing import List, Sequence, Tuple

import numpy as np
from PIL import Image

from scene import Scene
from scene_settings import DEFAULT_MAX_DEPTH, DEFAULT_SAMPLES_PER_PIXEL
from typings.color import Color
from utils.vector_operations import clamp_color01, color_to_uint8

logger = logging.getLogger(__name__)

ROWS_PER_TASK: int = 4


def save_image(image_array: np.ndarray, output_path: str) -> None:
    image = Image.fromarray(color_to_uint8(image_array))
    image.save(output_path)


def render_pixel(
    scene: Scene,
    basis: Tuple[np.ndarray, np.ndarray, np.ndarray],
    px: int,
    py: int,
    num_samples: int,
    max_depth: int,
    rng: np.random.Generator,
) -> Color:
    """Mean radiance of num_samples jittered primary rays through pixel (px, py)."""
    offsets = rng.random((num_samples, 2))
    samples: List[Color] = []
    for offset_x, offset_y in offsets:
        ray = scene.camera.generate_ray(px, py, float(offset_x), float(offset_y), basis)
        samples.append(scene.render_ray(ray, None, rng, max_depth))
    return Color.average(samples)


def render_rows(
    scene: Scene,
    width: int,
    height: int,
    row_start: int,
    row_end: int,
    num_samples: int,
    max_depth: int,
    row_seeds: Sequence[np.random.SeedSequence],
) -> Tuple[int, np.ndarray]:
    """Renders rows [row_start, row_end). Each row draws from its own generator.
    Top-level so it can be shipped to worker processes."""
    basis = scene.camera.pixel_basis(width, height)
    rows = np.zeros((row_end - row_start, width, 3), dtype=float)
    for offset, py in enumerate(range(row_start, row_end)):
        rng = np.random.default_rng(row_seeds[offset])
        for px in range(width):
            color = render_pixel(scene, basis, px, py, num_samples, max_depth, rng)
            if not color.is_finite():
                raise ValueError(f"Non-finite radiance at pixel ({px}, {py})")
            rows[offset, px, :] = color.to_array()
    return row_start, rows


class Renderer:
    def __init__(
        self,
        output_file: str,
        resolution_x: int,
        resolution_y: int,
        num_samples: int = DEFAULT_SAMPLES_PER_PIXEL,
        max_depth: int = DEFAULT_MAX_DEPTH,
        workers: int = 1,
        seed: int | None = None,
    ) -> None:
        self.output_file = output_file
        self.resolution_x = int(resolution_x)
        self.resolution_y = int(resolution_y)
        self.num_samples = int(num_samples)
        self.max_depth = int(max_depth)
        self.workers = int(workers)
        self.seed = seed
        if self.resolution_x < 1 or self.resolution_y < 1:
            raise ValueError("Image resolution must be at least 1x1")
        if self.num_samples < 1:
            raise ValueError("num_samples must be at least 1")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")

    def render_image(self, scene: Scene) -> np.ndarray:
        """Render the scene into a clamped (height, width, 3) float buffer, rows top to bottom."""
        width, height = self.resolution_x, self.resolution_y
        logger.info(
            "Rendering %dx%d, %d samples per pixel, max depth %d, %d worker(s)",
            width, height, self.num_samples, self.max_depth, self.workers,
        )

        # one independent stream per row keeps the image identical for any worker count
        row_seeds = np.random.SeedSequence(self.seed).spawn(height)
        bands = [(start, min(start + ROWS_PER_TASK, height)) for start in range(0, height, ROWS_PER_TASK)]

        image = np.zeros((height, width, 3), dtype=float)
        if self.workers <= 1:
            for row_start, row_end in bands:
                _, rows = render_rows(
                    scene, width, height, row_start, row_end,
                    self.num_samples, self.max_depth, row_seeds[row_start:row_end],
                )
                image[row_start:row_end] = rows
            return clamp_color01(image)

        with futures.ProcessPoolExecutor(max_workers=self.workers) as executor:
            tasks = [
                executor.submit(
                    render_rows,
                    scene, width, height, row_start, row_end,
                    self.num_samples, self.max_depth, row_seeds[row_start:row_end],
                )
                for row_start, row_end in bands
            ]
            logger.debug("Submitted %d row bands to %d workers", len(tasks), self.workers)
            for task in futures.as_completed(tasks):
                row_start, rows = task.result()
                image[row_start:row_start + rows.shape[0]] = rows

        return clamp_color01(image)

    def render(self, scene: Scene) -> np.ndarray:
        """Render the whole image, then write it to output_file. Write errors propagate."""
        image = self.render_image(scene)
        save_image(image, self.output_file)
        return image
