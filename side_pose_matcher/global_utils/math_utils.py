import math
from typing import Tuple

import numpy as np


def heading_unit_vector(theta: float) -> Tuple[float, float]:
    """Unit vector (cos θ, sin θ) pointing along a heading. Non-finite headings give non-finite components."""
    return math.cos(theta), math.sin(theta)


def squared_distances(points: np.ndarray, query) -> np.ndarray:
    """Squared Euclidean distance from every row of an (n, 2) array to a single (x, y) point.

    Args:
        points (np.ndarray): Array of shape (n, 2).
        query: Anything indexable as (x, y), e.g. a Vector2D, tuple or array.

    Returns:
        np.ndarray: Shape (n,) array of dx² + dy², in the same order as ``points``.
    """
    diffs = points - np.asarray((query[0], query[1]), dtype=float)  # (n, 2)
    return np.einsum("ij,ij->i", diffs, diffs)
