from side_pose_matcher.config.enums import Alliance
from side_pose_matcher.config.profiles.profile_loader import (
    PoseTableProfile,
    get_default_profile,
    load_profile,
)
from side_pose_matcher.entities.data.pose import Pose
from side_pose_matcher.entities.game.pose_table import PoseTable
from side_pose_matcher.matching import (
    EmptyTableError,
    MatchResult,
    SidePoseMatcher,
    find_closest,
    match_and_offset,
    offset_pose,
)

__all__ = [
    "Alliance",
    "Pose",
    "PoseTable",
    "PoseTableProfile",
    "load_profile",
    "get_default_profile",
    "EmptyTableError",
    "MatchResult",
    "find_closest",
    "offset_pose",
    "match_and_offset",
    "SidePoseMatcher",
]
