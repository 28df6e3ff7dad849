"""Utility functions for durations and playlist links."""

import re
from typing import Optional

_ISO_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def parse_iso_duration(iso: Optional[str]) -> int:
    """Convert a YouTube ``contentDetails.duration`` value to seconds.

    Args:
        iso: Duration such as ``PT1H2M3S``. Every component is optional.

    Returns:
        Duration in seconds, 0 for missing or malformed values
    """
    if not iso:
        return 0

    match = _ISO_DURATION_RE.search(iso)
    if not match:
        return 0

    hours, minutes, seconds = (int(part or 0) for part in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def to_minutes(seconds: float) -> float:
    """Seconds to real-valued minutes."""
    return seconds / 60


def playlist_url(playlist_id: str) -> str:
    """Build the public URL for a playlist."""
    return f"https://www.youtube.com/playlist?list={playlist_id}"
