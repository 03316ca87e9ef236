from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from loguru import logger

from dfview.tui.session import Event


@dataclass(frozen=True)
class WorkerJob:
    fn: Callable[[], Any]


class Worker:
    def __init__(self, job: WorkerJob) -> None:
        self.job = job

    def run(self) -> tuple[Event, Any]:
        try:
            res = self.job.fn()
        except Exception as e:  # noqa: BLE001
            logger.debug(f"Worker job failed: {e!r}")
            return Event.ERROR_READY, str(e)
        return Event.DATA_READY, res
