import re


def collapse(s: str) -> str:
    """
    Collapse runs of whitespace into one space and trim both ends.
    """
    return re.sub(r'\s+', ' ', s).strip()


def format_duration(duration_ms) -> str:
    """
    Milliseconds to "<m>m<s>s", e.g. 185000 -> "3m5s", 252000 -> "4m12s".

    Seconds are not zero-padded ("3m5s", not "3m05s"). The
    display contract is pinned by those two examples even though a
    two-digit-seconds rendering was also described for the same label.
    Anything that is not a finite number (None, strings, inf, nan) is 0m0s.
    """
    try:
        total_s = max(0, int(duration_ms)) // 1000
    except (TypeError, ValueError, OverflowError):
        total_s = 0
    minutes, seconds = divmod(total_s, 60)
    return f"{minutes}m{seconds}s"


def escape_applescript(s: str) -> str:
    """Escape backslashes first, then quotes, for an AppleScript string literal."""
    return s.replace('\\', '\\\\').replace('"', '\\"')
