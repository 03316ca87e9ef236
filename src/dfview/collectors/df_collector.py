from __future__ import annotations

import subprocess
from typing import Callable, Sequence

from loguru import logger

from dfview.collectors.df_parser import parse_df_output
from dfview.exceptions import QueryError
from dfview.models.disk import DiskReport, UsageWarning

DF_COMMAND: tuple[str, ...] = ("df", "-k")

QueryFn = Callable[[], str]


def query_disk_usage(command: Sequence[str] = DF_COMMAND) -> str:
    """Run the disk usage command and return its stdout.

    Blocks until the command exits; there is no timeout.
    """
    cmd = tuple(command)
    logger.debug(f"Running {' '.join(cmd)!r}")
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except FileNotFoundError as e:
        raise QueryError(cmd, "command not found") from e
    except OSError as e:
        raise QueryError(cmd, str(e)) from e

    if proc.returncode != 0:
        reason = (proc.stderr or "").strip() or f"exit status {proc.returncode}"
        raise QueryError(cmd, reason)
    return proc.stdout


class DfCollector:
    def __init__(
        self,
        query: QueryFn = query_disk_usage,
        warn_percent: int = 85,
        strict: bool = False,
    ) -> None:
        self.query = query
        self.warn_percent = int(warn_percent)
        self.strict = bool(strict)

    def collect(self) -> DiskReport:
        warnings: list[UsageWarning] = []

        records = parse_df_output(self.query(), strict=self.strict)
        logger.debug(f"Parsed {len(records)} filesystem(s)")

        for r in records:
            if r.use_percent >= self.warn_percent:
                warnings.append(
                    UsageWarning(
                        record=r,
                        message=f"Disk usage high: {r.mount_point} {r.use_percent}% (>= {self.warn_percent}%)",
                    )
                )

        return DiskReport(records=records, warnings=tuple(warnings))
