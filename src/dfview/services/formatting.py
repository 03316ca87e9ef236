from __future__ import annotations

from dfview.models.disk import BarSegments

KB = 1024
MB = 1024 * KB
GB = 1024 * MB
TB = 1024 * GB

_UNITS: tuple[tuple[int, str], ...] = ((TB, "TB"), (GB, "GB"), (MB, "MB"), (KB, "KB"))

BAR_WIDTH = 30
USED_CHAR = "█"
AVAILABLE_CHAR = "░"


def format_size(n: int) -> str:
    """Human readable size: ``"1.50 GB"``, or ``"512 B"`` below one KB."""
    for threshold, unit in _UNITS:
        if n >= threshold:
            return f"{n / threshold:.2f} {unit}"
    return f"{n} B"


def usage_bar(percent: int, width: int = BAR_WIDTH) -> BarSegments:
    # Not clamped: 150% gives more used cells than the width and a
    # negative remainder.
    used = (percent * width) // 100
    return BarSegments(used_cells=used, available_cells=width - used)


def render_bar(segments: BarSegments) -> tuple[str, str]:
    return USED_CHAR * segments.used_cells, AVAILABLE_CHAR * segments.available_cells
