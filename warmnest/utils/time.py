"""
Clock display and progress helpers for countdown timers.
"""


def format_clock(seconds: float) -> str:
    """
    Format a number of seconds as MM:SS.

    Args:
        seconds: Seconds to format; negative values display as 00:00

    Returns:
        Zero-padded minutes and seconds, e.g. "04:05". Minutes are not
        wrapped into hours.
    """
    total = max(0, int(seconds))
    minutes, remaining = divmod(total, 60)
    return f"{minutes:02d}:{remaining:02d}"


def progress_percent(total_seconds: float, remaining_seconds: float) -> float:
    """
    Percentage of a countdown that has elapsed.

    Args:
        total_seconds: Full countdown length
        remaining_seconds: Time still on the clock

    Returns:
        Value in [0, 100]; 0.0 when total_seconds is not positive
    """
    if total_seconds <= 0:
        return 0.0
    elapsed = total_seconds - remaining_seconds
    return min(100.0, max(0.0, elapsed / total_seconds * 100))
