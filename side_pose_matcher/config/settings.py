from pathlib import Path

PROFILES_DIR = Path(__file__).parent / "profiles"
DEFAULT_PROFILE_NAME = "reefscape"

### Approach offsets ###
# Signed distance along the matched pose's heading, negative is behind it (m)
DEFAULT_BACKUP_OFFSET = -0.7
FAR_BACKUP_OFFSET = -2.0

### Alliance ###
DEFAULT_UNKNOWN_ALLIANCE_FALLBACK = "blue"  # used until match control reports a side
