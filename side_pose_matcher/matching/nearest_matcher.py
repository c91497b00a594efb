import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from side_pose_matcher.entities.data.pose import Pose
from side_pose_matcher.entities.game.pose_table import PoseTable
from side_pose_matcher.global_utils.math_utils import squared_distances
from side_pose_matcher.matching.errors import EmptyTableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """Winning table entry for a query position.

    Attributes:
        pose (Pose): The matched table entry.
        index (int): Position of the entry in its table.
        squared_distance (float): dx² + dy² between the query position and the entry.
    """

    pose: Pose
    index: int
    squared_distance: float

    @property
    def distance(self) -> float:
        return math.sqrt(self.squared_distance)


def find_closest(position, table: Sequence[Pose]) -> MatchResult:
    """Find the table entry whose position is closest to ``position``.

    Only positions are compared, headings are ignored. When several entries share the minimum
    distance the earliest one in the table wins (np.nanargmin returns the first occurrence).
    Entries at a NaN distance are skipped unless every distance is NaN, in which case the first entry is
    returned.

    Args:
        position: Query position, a Vector2D or any (x, y) pair.
        table: PoseTable, or any sequence of Pose.

    Raises:
        EmptyTableError: If ``table`` has no entries.
    """
    if not isinstance(table, PoseTable):
        table = PoseTable(table)
    if table.is_empty():
        raise EmptyTableError(table.name)

    distances = squared_distances(table.positions, position)
    if np.isnan(distances).all():
        # nothing compares smaller, keep the first entry
        index = 0
    else:
        # NaN entries never win, as in a strict less-than scan
        index = int(np.nanargmin(distances))
    logger.debug("Closest pose to (%s, %s) is %s[%d]", position[0], position[1], table.name or "table", index)
    return MatchResult(pose=table[index], index=index, squared_distance=float(distances[index]))


def closest_pose(position, table: Sequence[Pose]) -> Pose:
    return find_closest(position, table).pose
