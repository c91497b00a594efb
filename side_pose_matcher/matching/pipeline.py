from typing import Callable, Optional, Union

from side_pose_matcher.config.enums import Alliance
from side_pose_matcher.config.profiles.profile_loader import (
    PoseTableProfile,
    get_default_profile,
    load_profile,
)
from side_pose_matcher.entities.data.pose import Pose
from side_pose_matcher.entities.game.pose_table import PoseTable
from side_pose_matcher.matching.alliance_selector import select_table
from side_pose_matcher.matching.nearest_matcher import MatchResult, find_closest
from side_pose_matcher.matching.pose_offsetter import offset_pose

AllianceLike = Union[Alliance, str, None]


def match_and_offset(
    current_pose: Pose,
    alliance: AllianceLike,
    offset_distance: Optional[float] = None,
    *,
    profile: Optional[PoseTableProfile] = None,
) -> Pose:
    """Nearest known pose for the alliance, optionally shifted along its heading.

    Args:
        current_pose (Pose): Where the robot is now.
        alliance: Alliance, its string value, or None when not yet reported.
        offset_distance (float, optional): Signed shift along the matched heading in metres. None returns the
            matched pose as is.
        profile (PoseTableProfile, optional): Tables to search. Defaults to the built-in profile.

    Raises:
        EmptyTableError: If the selected table has no entries.
    """
    if profile is None:
        profile = get_default_profile()

    table = select_table(
        Alliance.from_value(alliance), profile.blue_table, profile.red_table, profile.unknown_alliance_fallback
    )
    nearest = find_closest(current_pose.position, table).pose
    if offset_distance is None:
        return nearest
    return offset_pose(nearest, offset_distance)


class SidePoseMatcher:
    """Finds the closest scoring pose on our alliance's side and the approach waypoint behind it.

    Holds no state between calls besides the (read-only) profile, so one instance can be queried from
    every iteration of a control loop.

    Args:
        profile (PoseTableProfile | str, optional): Loaded profile, or a built-in name / path to load.
            Defaults to the built-in profile.
        alliance_provider (Callable[[], Alliance | str | None], optional): Queried when a call does not pass an
            alliance, typically wired to whatever reports the match alliance. Without one the alliance is
            treated as UNKNOWN.
    """

    def __init__(
        self,
        profile: Union[PoseTableProfile, str, None] = None,
        alliance_provider: Optional[Callable[[], AllianceLike]] = None,
    ):
        if profile is None:
            profile = get_default_profile()
        elif not isinstance(profile, PoseTableProfile):
            profile = load_profile(profile)

        self.profile = profile
        self.alliance_provider = alliance_provider

    def _resolve_alliance(self, alliance: AllianceLike) -> Alliance:
        if alliance is None and self.alliance_provider is not None:
            alliance = self.alliance_provider()
        return Alliance.from_value(alliance)

    def table_for(self, alliance: AllianceLike = None) -> PoseTable:
        return select_table(
            self._resolve_alliance(alliance),
            self.profile.blue_table,
            self.profile.red_table,
            self.profile.unknown_alliance_fallback,
        )

    def match(self, current_pose: Pose, alliance: AllianceLike = None) -> MatchResult:
        return find_closest(current_pose.position, self.table_for(alliance))

    def closest_pose(self, current_pose: Pose, alliance: AllianceLike = None) -> Pose:
        return self.match(current_pose, alliance).pose

    def backed_up_pose(
        self,
        current_pose: Pose,
        alliance: AllianceLike = None,
        offset_distance: Optional[float] = None,
    ) -> Pose:
        """Closest pose shifted by ``offset_distance`` (the profile's backup offset when not given)."""
        if offset_distance is None:
            offset_distance = self.profile.backup_offset
        return offset_pose(self.closest_pose(current_pose, alliance), offset_distance)
