from __future__ import annotations


class DfviewError(Exception):
    pass


class QueryError(DfviewError):
    """The disk usage command could not be run or exited with an error."""

    def __init__(self, command: tuple[str, ...], reason: str) -> None:
        super().__init__(f"{' '.join(command)}: {reason}")
