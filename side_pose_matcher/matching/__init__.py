from side_pose_matcher.matching.alliance_selector import select_table
from side_pose_matcher.matching.errors import EmptyTableError
from side_pose_matcher.matching.nearest_matcher import MatchResult, closest_pose, find_closest
from side_pose_matcher.matching.pipeline import SidePoseMatcher, match_and_offset
from side_pose_matcher.matching.pose_offsetter import backed_up_pose, offset_pose

__all__ = [
    "select_table",
    "EmptyTableError",
    "MatchResult",
    "find_closest",
    "closest_pose",
    "offset_pose",
    "backed_up_pose",
    "match_and_offset",
    "SidePoseMatcher",
]
