import logging
from typing import TypeVar

from side_pose_matcher.config.enums import Alliance

logger = logging.getLogger(__name__)

T = TypeVar("T")


def select_table(alliance: Alliance, blue_table: T, red_table: T, unknown_fallback: Alliance = Alliance.BLUE) -> T:
    """Pick the pose table for an alliance.

    Args:
        alliance (Alliance): Reported alliance. UNKNOWN is valid before match control connects.
        blue_table: Table used for the blue alliance.
        red_table: Table used for the red alliance.
        unknown_fallback (Alliance, optional): Alliance whose table is used while the alliance is UNKNOWN.
            Defaults to BLUE.

    Returns:
        The table for ``alliance``. UNKNOWN never raises, it resolves through ``unknown_fallback``.
    """
    if alliance is Alliance.BLUE:
        return blue_table
    if alliance is Alliance.RED:
        return red_table

    if unknown_fallback is Alliance.RED:
        logger.debug("Alliance not reported yet, using red table")
        return red_table
    # Note: a robot that is truly red will target the blue side until the alliance is known.
    logger.debug("Alliance not reported yet, using blue table")
    return blue_table
