from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union, overload

import numpy as np

from side_pose_matcher.entities.data.pose import Pose


class PoseTable(Sequence[Pose]):
    """Ordered, read-only collection of known field poses for one alliance.

    Entries keep their insertion order, which decides ties when matching. The (n, 2) array of
    positions is built once at construction and marked non-writeable, so a table can be shared
    between threads without locking.
    """

    __slots__ = ("_name", "_poses", "_positions")

    def __init__(self, poses: Iterable[Pose], name: Optional[str] = None):
        poses = tuple(poses)
        for pose in poses:
            if not isinstance(pose, Pose):
                raise TypeError(f"PoseTable entries must be Pose, got {type(pose).__name__}")

        self._name = name
        self._poses: Tuple[Pose, ...] = poses
        self._positions = self._build_positions(poses)

    @classmethod
    def from_degrees(
        cls, entries: Iterable[Tuple[float, float, float]], name: Optional[str] = None
    ) -> "PoseTable":
        """Build a table from (x, y, heading in degrees) triples, the way tables are calibrated on the field."""
        return cls((Pose.from_degrees(x, y, heading_deg) for x, y, heading_deg in entries), name=name)

    @staticmethod
    def _build_positions(poses: Tuple[Pose, ...]) -> np.ndarray:
        if poses:
            positions = np.array([(pose.x, pose.y) for pose in poses], dtype=float)
        else:
            positions = np.empty((0, 2), dtype=float)
        positions.setflags(write=False)
        return positions

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def positions(self) -> np.ndarray:
        """Read-only (n, 2) array of entry positions in table order."""
        return self._positions

    @property
    def poses(self) -> Tuple[Pose, ...]:
        return self._poses

    def is_empty(self) -> bool:
        return not self._poses

    @overload
    def __getitem__(self, index: int) -> Pose: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Pose, ...]: ...

    def __getitem__(self, index: Union[int, slice]):
        return self._poses[index]

    def __len__(self) -> int:
        return len(self._poses)

    def __iter__(self) -> Iterator[Pose]:
        return iter(self._poses)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PoseTable):
            return NotImplemented
        return self._poses == other._poses

    def __hash__(self) -> int:
        return hash(self._poses)

    def __repr__(self):
        label = f"{self._name!r}, " if self._name else ""
        return f"PoseTable({label}{len(self._poses)} poses)"
