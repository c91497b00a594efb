import math

import numpy as np


class Vector2D:
    """Immutable planar vector. Positions are in metres."""

    __slots__ = ("_x", "_y")

    def __init__(self, *coords):
        # Handle (1, 2), ((1, 2)), [1, 2], np.array([1, 2])
        if len(coords) == 1:
            c = coords[0]
            if isinstance(c, (tuple, list, np.ndarray, Vector2D)):
                self._x = float(c[0])
                self._y = float(c[1])
            else:
                raise TypeError(f"Invalid single argument type for Vector2D: {type(c)}")
        elif len(coords) == 2:
            self._x = float(coords[0])
            self._y = float(coords[1])
        else:
            raise TypeError(f"Vector2D requires 2 coordinates, got {len(coords)}")

    def __iter__(self):
        yield self._x
        yield self._y

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self._x
        elif index == 1:
            return self._y
        raise IndexError("Vector2D index out of range")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return math.isclose(self.x, other.x) and math.isclose(self.y, other.y)

    def __array__(self, dtype=None, copy=True):
        return np.array([self.x, self.y], dtype=dtype)

    def squared_distance_to(self, other) -> float:
        """Squared planar distance to another vector or (x, y) pair. Enough for ranking, no sqrt."""
        dx = other[0] - self._x
        dy = other[1] - self._y
        return dx * dx + dy * dy

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def __repr__(self):
        return f"Vector2D(x={self.x}, y={self.y})"
