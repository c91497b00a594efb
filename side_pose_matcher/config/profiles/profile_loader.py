"""Profile loader: parses YAML pose-table profiles into typed dataclasses."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml

from side_pose_matcher.config.enums import Alliance
from side_pose_matcher.config.settings import (
    DEFAULT_BACKUP_OFFSET,
    DEFAULT_PROFILE_NAME,
    DEFAULT_UNKNOWN_ALLIANCE_FALLBACK,
    PROFILES_DIR,
)
from side_pose_matcher.entities.data.pose import Pose
from side_pose_matcher.entities.game.pose_table import PoseTable

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Profile dataclass
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PoseTableProfile:
    """One calibration of the per-alliance pose tables and the approach offset that goes with it.

    Attributes:
        profile_name (str): Name the profile was loaded under.
        blue_table (PoseTable): Poses used when playing for the blue alliance.
        red_table (PoseTable): Poses used when playing for the red alliance.
        backup_offset (float): Signed offset along the matched heading in metres. Negative is behind the pose.
        unknown_alliance_fallback (Alliance): Table to use before the alliance is reported. BLUE or RED.
        revision (int, optional): Calibration revision, informational only.
    """

    profile_name: str
    blue_table: PoseTable
    red_table: PoseTable
    backup_offset: float = DEFAULT_BACKUP_OFFSET
    unknown_alliance_fallback: Alliance = Alliance.BLUE
    revision: Optional[int] = None

    def __post_init__(self):
        if self.unknown_alliance_fallback not in (Alliance.BLUE, Alliance.RED):
            raise ValueError(
                f"unknown_alliance_fallback must be blue or red, got {self.unknown_alliance_fallback.value!r}"
            )


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


def load_profile(name_or_path: str | Path) -> PoseTableProfile:
    """Load a PoseTableProfile from a built-in name or an absolute/relative path.

    Built-in names: "reefscape".
    """
    p = Path(name_or_path)
    if not p.is_absolute():
        # Try built-in profiles directory
        candidate = PROFILES_DIR / f"{name_or_path}.yaml"
        if candidate.exists():
            p = candidate
        elif not p.exists():
            raise FileNotFoundError(f"Profile '{name_or_path}' not found as a built-in name or file path.")
    elif not p.exists():
        raise FileNotFoundError(f"Profile file '{p}' does not exist.")

    with open(p, "r") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict):
        raise ValueError(f"Profile '{p}' must contain a mapping at the top level.")

    profile = parse_profile(data, default_name=p.stem)
    logger.info(
        "Loaded pose table profile '%s' (blue: %d poses, red: %d poses, backup offset %.2f m)",
        profile.profile_name,
        len(profile.blue_table),
        len(profile.red_table),
        profile.backup_offset,
    )
    return profile


@lru_cache(maxsize=1)
def get_default_profile() -> PoseTableProfile:
    """The built-in default profile, loaded once per process and shared read-only."""
    return load_profile(DEFAULT_PROFILE_NAME)


def parse_profile(data: dict, default_name: str = "unknown") -> PoseTableProfile:
    tables_d = data.get("tables", {}) or {}
    if not isinstance(tables_d, dict):
        raise ValueError("'tables' must map alliance names to lists of poses.")

    unexpected = set(tables_d) - {Alliance.BLUE.value, Alliance.RED.value}
    if unexpected:
        raise ValueError(f"Unexpected table names {sorted(unexpected)}; only 'blue' and 'red' are allowed.")

    blue_table = _parse_table(tables_d.get(Alliance.BLUE.value), Alliance.BLUE.value)
    red_table = _parse_table(tables_d.get(Alliance.RED.value), Alliance.RED.value)

    fallback = Alliance.from_value(data.get("unknown_alliance_fallback", DEFAULT_UNKNOWN_ALLIANCE_FALLBACK))

    revision = data.get("revision")
    return PoseTableProfile(
        profile_name=data.get("profile_name", default_name),
        blue_table=blue_table,
        red_table=red_table,
        backup_offset=_as_float(data.get("backup_offset", DEFAULT_BACKUP_OFFSET), "backup_offset"),
        unknown_alliance_fallback=fallback,
        revision=int(revision) if revision is not None else None,
    )


def _parse_table(entries: Optional[list], name: str) -> PoseTable:
    if entries is None:
        entries = []
    if not isinstance(entries, list):
        raise ValueError(f"Table '{name}' must be a list of poses.")

    if not entries:
        # Matching against this table will raise EmptyTableError.
        logger.warning("Pose table '%s' is empty", name)

    return PoseTable((_parse_pose(entry, name, i) for i, entry in enumerate(entries)), name=name)


def _parse_pose(entry: dict, table_name: str, index: int) -> Pose:
    where = f"{table_name}[{index}]"
    if not isinstance(entry, dict):
        raise ValueError(f"Pose {where} must be a mapping with x, y and heading_deg or heading.")
    if "x" not in entry or "y" not in entry:
        raise ValueError(f"Pose {where} is missing 'x' or 'y'.")
    if "heading_deg" in entry and "heading" in entry:
        raise ValueError(f"Pose {where} sets both 'heading_deg' and 'heading'.")

    x = _as_float(entry["x"], f"{where}.x")
    y = _as_float(entry["y"], f"{where}.y")
    if "heading_deg" in entry:
        heading = math.radians(_as_float(entry["heading_deg"], f"{where}.heading_deg"))
    else:
        heading = _as_float(entry.get("heading", 0.0), f"{where}.heading")
    return Pose(x, y, heading)


def _as_float(value, field_name: str) -> float:
    # bool is an int subclass, yaml turns yes/no into one
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{field_name}' must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"'{field_name}' must be finite, got {value!r}")
    return float(value)
