import numpy as np

DEFAULT_SAMPLES_PER_PIXEL: int = 16
DEFAULT_MAX_DEPTH: int = 8


class SceneSettings:
    def __init__(
        self,
        background_color: np.ndarray,
        samples_per_pixel: float = DEFAULT_SAMPLES_PER_PIXEL,
        max_depth: float = DEFAULT_MAX_DEPTH,
        skybox_path: str | None = None,
    ) -> None:
        self.background_color: np.ndarray = np.asarray(background_color, dtype=float)
        self.samples_per_pixel: int = int(samples_per_pixel)
        self.max_depth: int = int(max_depth)
        self.skybox_path: str | None = skybox_path
        if self.samples_per_pixel < 1:
            raise ValueError("samples_per_pixel must be at least 1")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
