from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Callable, Sequence

from loguru import logger
from rich.console import Console

from dfview.collectors.df_collector import DfCollector, QueryFn, query_disk_usage
from dfview.logging.configure_logging import configure_logger
from dfview.services.config_service import AppConfig, ConfigService
from dfview.tui.keys import wait_for_key
from dfview.tui.report_view import render_error, render_report
from dfview.tui.session import Event, Session, State
from dfview.tui.theme import ROLES, build_theme
from dfview.tui.workers import Worker, WorkerJob

PROG = "dfview"
LOADING_MESSAGE = "Loading disk information..."


def _version() -> str:
    try:
        return version(PROG)
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG, description="Show disk usage of mounted filesystems."
    )
    parser.add_argument("--wait", action="store_true", help="wait for a key press before exiting")
    parser.add_argument(
        "--devices-only", action="store_true", help="only show filesystems backed by a device path"
    )
    parser.add_argument(
        "--strict", action="store_true", help="drop rows with unparseable numbers instead of zeroing them"
    )
    parser.add_argument(
        "--warn-percent", type=int, default=85, metavar="N", help="usage warning threshold (default: 85)"
    )
    parser.add_argument("--theme", type=Path, metavar="PATH", help="JSON file overriding the colour palette")
    parser.add_argument("--no-color", action="store_true", help="disable colour output")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    return parser


def parse_config(argv: Sequence[str] | None = None) -> AppConfig:
    ns = build_parser().parse_args(argv)
    return AppConfig(
        wait_for_key=ns.wait,
        devices_only=ns.devices_only,
        strict=ns.strict,
        warn_percent=ns.warn_percent,
        theme_path=ns.theme,
        color=not ns.no_color,
        verbose=ns.verbose,
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    query: QueryFn = query_disk_usage,
    console: Console | None = None,
    read_key: Callable[[], str | None] = wait_for_key,
) -> int:
    cfg = parse_config(argv)
    configure_logger("DEBUG" if cfg.verbose else "WARNING")

    palette = ConfigService(cfg.theme_path).load_palette(ROLES)
    theme = build_theme(palette)
    if console is None:
        console = Console(theme=theme, no_color=not cfg.color)
    else:
        console.push_theme(theme)

    collector = DfCollector(query=query, warn_percent=cfg.warn_percent, strict=cfg.strict)
    session = Session()

    with console.status(LOADING_MESSAGE):
        event, payload = Worker(WorkerJob(fn=collector.collect)).run()
    session.dispatch(event, payload)

    if session.state is State.DISPLAYING:
        console.print(render_report(session.payload, devices_only=cfg.devices_only), end="")
    else:
        logger.debug(f"Disk query failed: {session.payload}")
        console.print(render_error(session.payload), end="")

    failed = session.state is State.ERROR
    if cfg.wait_for_key and read_key() is not None:
        session.dispatch(Event.KEY_PRESS)
    session.finish()
    return 1 if failed else 0


def run() -> None:
    try:
        code = main()
    except KeyboardInterrupt:
        code = 130
    raise SystemExit(code)
