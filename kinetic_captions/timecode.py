"""ASS timestamps: seconds <-> ``H:MM:SS.cc``.

ASS has centisecond resolution. Conversions round to the nearest
centisecond (half up) before splitting into fields; truncating instead
drifts by up to a centisecond per cue, which becomes visible over a
multi-minute track.
"""

import math
import re

_ASS_TIME_RE = re.compile(r"^(\d+):(\d{2}):(\d{2})\.(\d{2})$")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def seconds_to_ass_time(seconds: float) -> str:
    """Convert seconds to ``H:MM:SS.cc``. Negative input clamps to zero."""
    total_cs = max(0, _round_half_up(seconds * 100))
    hours = total_cs // 360000
    minutes = (total_cs % 360000) // 6000
    secs = (total_cs % 6000) // 100
    centis = total_cs % 100
    return "{}:{:02d}:{:02d}.{:02d}".format(hours, minutes, secs, centis)


def ms_to_ass_time(ms: float) -> str:
    """Convert milliseconds to ``H:MM:SS.cc``."""
    return seconds_to_ass_time(ms / 1000)


def ass_time_to_seconds(timestamp: str) -> float:
    """Parse ``H:MM:SS.cc`` back to seconds.

    Raises:
        ValueError: If the string is not an ASS timestamp.
    """
    match = _ASS_TIME_RE.match(timestamp.strip())
    if match is None:
        raise ValueError("Not an ASS timestamp: {!r}".format(timestamp))
    hours, minutes, secs, centis = (int(g) for g in match.groups())
    return (hours * 360000 + minutes * 6000 + secs * 100 + centis) / 100
