from __future__ import annotations

from typing import Mapping

from loguru import logger
from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.theme import Theme

ROLES: tuple[str, ...] = (
    "filesystem",
    "size",
    "used",
    "available",
    "percent",
    "mount",
    "warning",
    "error",
)

DEFAULT_PALETTE: dict[str, str] = {
    "filesystem": "#89B4FA",
    "size": "#94E2D5",
    "used": "#F38BA8",
    "available": "#A6E3A1",
    "percent": "#FAB387",
    "mount": "#A6E3A1",
    "warning": "bold #FAB387",
    "error": "bold #F38BA8",
}


def style_name(role: str) -> str:
    return f"disk.{role}"


def build_theme(overrides: Mapping[str, str] | None = None) -> Theme:
    palette = dict(DEFAULT_PALETTE)
    for role, value in (overrides or {}).items():
        if role not in palette:
            logger.warning(f"Unknown theme role {role!r}")
            continue
        try:
            Style.parse(value)
        except StyleSyntaxError as e:
            logger.warning(f"Invalid style for {role!r}: {e}")
            continue
        palette[role] = value
    return Theme({style_name(role): value for role, value in palette.items()})
