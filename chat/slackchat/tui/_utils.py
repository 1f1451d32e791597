"""Shared helpers: author-color palette, timestamp formatting."""
from __future__ import annotations

import time
import zlib

# ---------------------------------------------------------------------------
# Per-author color palette
# ---------------------------------------------------------------------------

_AUTHOR_COLORS = [
    "cyan", "yellow", "magenta", "bright_cyan",
    "bright_yellow", "bright_magenta", "orange1", "hot_pink",
    "chartreuse3", "cornflower_blue", "salmon1", "sky_blue2",
]


def _author_color(user_id: str) -> str:
    """Return a Rich color name for *user_id*, stable across runs."""
    return _AUTHOR_COLORS[zlib.crc32(user_id.encode("utf-8")) % len(_AUTHOR_COLORS)]


# ---------------------------------------------------------------------------
# Slack timestamps
# ---------------------------------------------------------------------------

def _fmt_ts(ts: str) -> str:
    """``"1712345678.000200"`` -> local ``HH:MM``; blank for unparseable input."""
    try:
        return time.strftime("%H:%M", time.localtime(float(ts)))
    except (TypeError, ValueError, OverflowError, OSError):
        return ""
