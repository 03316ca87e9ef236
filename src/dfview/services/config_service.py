from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger


@dataclass(frozen=True)
class AppConfig:
    wait_for_key: bool = False
    devices_only: bool = False
    strict: bool = False
    warn_percent: int = 85
    theme_path: Path | None = None
    color: bool = True
    verbose: bool = False


class ConfigService:
    """Loads palette overrides from a JSON file given on the command line.

    Nothing is read unless a path was supplied.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path

    def load(self) -> dict[str, Any]:
        p = self.path
        if p is None:
            return {}
        if not p.exists():
            logger.warning(f"Theme file not found: {p}")
            return {}
        try:
            with open(p, "r", encoding="utf-8") as f:
                obj = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring theme file {p}: {e}")
            return {}
        if not isinstance(obj, dict):
            logger.warning(f"Ignoring theme file {p}: expected a JSON object")
            return {}
        return obj

    def load_palette(self, roles: tuple[str, ...]) -> dict[str, str]:
        cfg = self.load()
        palette: dict[str, str] = {}
        for key, value in cfg.items():
            if key not in roles or not isinstance(value, str):
                logger.warning(f"Ignoring theme entry {key!r}")
                continue
            palette[key] = value
        return palette
