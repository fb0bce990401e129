import math
import re


_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else 0


def format_time(seconds: float) -> str:
    minutes = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    return f"{minutes}:{secs:02d}"


def parse_time_input(text: str) -> int:
    """Parse "M:SS" or a plain number of seconds.

    Unreadable parts count as zero, so "1:xx" is 60 and "abc" is 0.
    """
    parts = text.split(":")
    if len(parts) == 2:
        return _leading_int(parts[0]) * 60 + _leading_int(parts[1])
    return _leading_int(text)
