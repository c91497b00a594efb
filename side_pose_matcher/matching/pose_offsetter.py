from side_pose_matcher.entities.data.pose import Pose
from side_pose_matcher.global_utils.math_utils import heading_unit_vector


def offset_pose(pose: Pose, distance: float) -> Pose:
    """Shift a pose along its own heading. Negative ``distance`` moves it behind the pose.

    The heading is kept as is. NaN or infinite inputs are not checked and come out non-finite.
    """
    dx, dy = heading_unit_vector(pose.heading)
    return Pose(pose.x + distance * dx, pose.y + distance * dy, pose.heading)


def backed_up_pose(pose: Pose, distance: float) -> Pose:
    """Approach waypoint ``|distance|`` metres behind ``pose``, whatever the sign of ``distance``."""
    return offset_pose(pose, -abs(distance))
