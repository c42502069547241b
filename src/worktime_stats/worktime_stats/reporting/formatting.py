from __future__ import annotations

from datetime import timedelta

from ..stats.model import DurationStats


def format_duration(value: timedelta) -> str:
    """Render a duration as HH:MM:SS; hours are not wrapped at 24."""
    seconds = int(value.total_seconds())
    sign = "-" if seconds < 0 else ""
    hours, rest = divmod(abs(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}"


def format_stats(employee_id: str, stats: DurationStats) -> str:
    return "\n".join(
        [
            f"Statistics for employee {employee_id}:",
            f"  Worked time:  {format_duration(stats.total)}",
            f"  Night time:   {format_duration(stats.night)}",
            f"  Holiday time: {format_duration(stats.holiday)}",
        ]
    )
