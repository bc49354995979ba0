from __future__ import annotations

import numpy as np

EPSILON: float = 1e-9 # small epsilon value for floating point comparisons (degenerate vectors and triangles)

# Grazing-angle brightening: ag = BASE + STRENGTH * (1 - cos(theta)) ** EXPONENT
GRAZING_BASE: float = 0.7
GRAZING_STRENGTH: float = 0.3
GRAZING_EXPONENT: float = 5.0


def normalize_vector(v: np.ndarray) -> np.ndarray:
    vector_array = np.asarray(v, dtype=float)
    magnitude = np.linalg.norm(vector_array)
    if not np.isfinite(magnitude) or magnitude < EPSILON:
        raise ValueError("Cannot normalize near-zero or non-finite vector")
    return vector_array / magnitude


def vector_dot(a: np.ndarray, b: np.ndarray) -> float:
    vector_a = np.asarray(a, dtype=float)
    vector_b = np.asarray(b, dtype=float)
    return float(np.dot(vector_a, vector_b))


def vector_cross(a: np.ndarray, b: np.ndarray) -> np.ndarray: #cross product of two vectors (3D)
    vector_a = np.asarray(a, dtype=float)
    vector_b = np.asarray(b, dtype=float)
    return np.cross(vector_a, vector_b)


def reflect_vector(I: np.ndarray, N: np.ndarray) -> np.ndarray:
    """Calculates the unit reflection vector R given the incident vector I and surface normal N.
       N does not need to be unit length. Assumes I points toward the surface"""
    vector_I = np.asarray(I, dtype=float)
    vector_N = np.asarray(N, dtype=float)
    projection = vector_dot(vector_I, vector_N) / vector_dot(vector_N, vector_N) * vector_N
    return normalize_vector(vector_I - 2.0 * projection)


def any_perpendicular(v: np.ndarray) -> np.ndarray:
    """Returns some unit vector perpendicular to v."""
    # Find a vector not parallel to v
    if abs(v[0]) < 0.9:
        helper = np.array([1.0, 0.0, 0.0])
    else:
        helper = np.array([0.0, 1.0, 0.0])
    return normalize_vector(vector_cross(v, helper))


def rotate_about_axis(v: np.ndarray, axis: np.ndarray, angle: float) -> np.ndarray:
    """Rodrigues rotation of v by angle (radians) around the unit axis."""
    vector_v = np.asarray(v, dtype=float)
    unit_axis = np.asarray(axis, dtype=float)
    cos_angle = np.cos(angle)
    sin_angle = np.sin(angle)
    return (
        vector_v * cos_angle
        + vector_cross(unit_axis, vector_v) * sin_angle
        + unit_axis * vector_dot(unit_axis, vector_v) * (1.0 - cos_angle)
    )


def grazing_attenuation(direction: np.ndarray, normal: np.ndarray) -> float:
    """Empirical brightening near glancing angles (Schlick-like, not a physical Fresnel term).
    cos(theta) is taken between the incoming direction and the inward facing normal."""
    cos_theta = vector_dot(direction, -np.asarray(normal, dtype=float))
    return GRAZING_BASE + GRAZING_STRENGTH * (1.0 - cos_theta) ** GRAZING_EXPONENT


def clamp_color01(color_rgb: np.ndarray) -> np.ndarray:
    """Clamps an RGB color array to the range [0.0, 1.0]."""
    color_array = np.asarray(color_rgb, dtype=float)
    return np.clip(color_array, 0.0, 1.0)


def color_to_uint8(color_rgb: np.ndarray) -> np.ndarray:
    """Converts a floating-point RGB color array (clamped to [0, 1]) to 8-bit integer [0, 255]."""
    clamped_color = clamp_color01(color_rgb)
    return (clamped_color * 255.0 + 0.5).astype(np.uint8) # 0.5 before conversion ensures correct rounding
