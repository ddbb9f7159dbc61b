"""
Utility functions for the indoor hockey scoreboard overlay.

This module contains common time formatting helpers used by the models
and the web API.
"""
import time


def fmt_mmss(seconds: int) -> str:
    """
    Format seconds as MM:SS string.

    Args:
        seconds: Number of seconds to format

    Returns:
        Formatted time string in MM:SS format

    Example:
        >>> fmt_mmss(90)
        '01:30'
        >>> fmt_mmss(3661)
        '61:01'
    """
    m = seconds // 60
    s = seconds % 60
    return f"{m:02d}:{s:02d}"


def fmt_countdown(seconds: int) -> str:
    """
    Format a penalty countdown as M:SS (no leading zero on minutes).

    Example:
        >>> fmt_countdown(125)
        '2:05'
    """
    seconds = max(0, seconds)
    return f"{seconds // 60}:{seconds % 60:02d}"


def now_ts() -> float:
    """
    Get current timestamp in epoch seconds.

    Returns:
        Current time as floating point epoch seconds
    """
    return time.time()
