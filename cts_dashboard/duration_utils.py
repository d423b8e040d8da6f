"""Duration display helpers."""

from __future__ import annotations

from typing import Optional

INVALID_DURATION = "Invalid data"


def format_hms(seconds: float) -> str:
    """Format seconds as H:MM:SS.ms, rounding down to whole milliseconds."""
    ms = round(seconds * 1_000_000) // 1000
    hours, ms = divmod(ms, 3_600_000)
    mins, ms = divmod(ms, 60_000)
    secs, ms = divmod(ms, 1000)
    if hours > 0:
        return f"{hours}:{mins:02}:{secs:02}.{ms}"
    if mins > 0:
        return f"0:{mins}:{secs:02}.{ms}"
    return f"0:0:{secs}.{ms}"


def display_duration(seconds: Optional[float]) -> str:
    return INVALID_DURATION if seconds is None else format_hms(seconds)
