import math
from dataclasses import dataclass

from side_pose_matcher.entities.data.vector import Vector2D

# position data: meters
# heading: radians, not normalised


@dataclass(frozen=True)
class Pose:
    """A field location: planar position plus the heading a robot should face there."""

    x: float
    y: float
    heading: float = 0.0

    @classmethod
    def from_degrees(cls, x: float, y: float, heading_deg: float) -> "Pose":
        return cls(float(x), float(y), math.radians(heading_deg))

    @property
    def position(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    def is_close(self, other: "Pose", abs_tol: float = 1e-9) -> bool:
        """Component-wise comparison within a tolerance; exact equality is the dataclass ``==``."""
        return (
            math.isclose(self.x, other.x, abs_tol=abs_tol)
            and math.isclose(self.y, other.y, abs_tol=abs_tol)
            and math.isclose(self.heading, other.heading, abs_tol=abs_tol)
        )

    def __repr__(self):
        return f"Pose(x={self.x}, y={self.y}, heading={self.heading})"
