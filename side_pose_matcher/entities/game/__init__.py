from side_pose_matcher.entities.game.pose_table import PoseTable

__all__ = ["PoseTable"]
