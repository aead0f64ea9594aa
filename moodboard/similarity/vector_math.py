"""
Vector math used by similarity scoring.

All functions accept any numeric sequence and work on numpy float arrays
internally.
"""
from typing import Sequence

import numpy as np


class DimensionMismatch(ValueError):
    """Raised when two vectors that must line up have different lengths."""


def _as_array(vector: Sequence[float]) -> np.ndarray:
    return np.asarray(vector, dtype=float)


def _check_lengths(*vectors: np.ndarray) -> None:
    lengths = {len(v) for v in vectors}
    if len(lengths) > 1:
        raise DimensionMismatch(
            f"Vectors must have the same length, got {sorted(lengths)}"
        )


def dot_product(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    a, b = _as_array(vec_a), _as_array(vec_b)
    _check_lengths(a, b)
    return float(np.dot(a, b))


def magnitude(vector: Sequence[float]) -> float:
    """Euclidean norm."""
    return float(np.linalg.norm(_as_array(vector)))


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """Cosine of the angle between two vectors.

    Returns 0.0 when either vector has zero magnitude, so an empty tag
    overlap never produces NaN.
    """
    dot = dot_product(vec_a, vec_b)
    mag_a = magnitude(vec_a)
    mag_b = magnitude(vec_b)
    if mag_a == 0 or mag_b == 0:
        return 0.0
    # Clamp away float drift just outside [-1, 1]
    return max(-1.0, min(1.0, dot / (mag_a * mag_b)))


def normalize_vector(vector: Sequence[float]) -> np.ndarray:
    """Unit vector in the same direction; a zero vector comes back unchanged."""
    arr = _as_array(vector)
    mag = float(np.linalg.norm(arr))
    if mag == 0:
        return arr
    return arr / mag


def euclidean_distance(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    a, b = _as_array(vec_a), _as_array(vec_b)
    _check_lengths(a, b)
    return float(np.linalg.norm(a - b))


def weighted_cosine_similarity(
    vec_a: Sequence[float],
    vec_b: Sequence[float],
    weights: Sequence[float],
) -> float:
    """Cosine similarity after scaling each dimension by its weight."""
    a, b, w = _as_array(vec_a), _as_array(vec_b), _as_array(weights)
    _check_lengths(a, b, w)
    return cosine_similarity(a * w, b * w)
