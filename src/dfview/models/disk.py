from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DiskRecord:
    """One row of ``df -k`` output, with capacities converted to bytes.

    ``size_bytes`` is not necessarily ``used_bytes + available_bytes``:
    filesystems may reserve blocks that count towards neither.
    """

    filesystem: str
    size_bytes: int
    used_bytes: int
    available_bytes: int
    use_percent: int
    mount_point: str

    @property
    def is_block_device(self) -> bool:
        return self.filesystem.startswith("/")


@dataclass(frozen=True)
class UsageWarning:
    record: DiskRecord
    message: str


@dataclass(frozen=True)
class DiskReport:
    records: tuple[DiskRecord, ...]
    warnings: tuple[UsageWarning, ...] = ()

    def devices_only(self) -> DiskReport:
        """Keep block-device records and the warnings raised for them."""
        records = tuple(r for r in self.records if r.is_block_device)
        warnings = tuple(w for w in self.warnings if w.record.is_block_device)
        return DiskReport(records=records, warnings=warnings)


@dataclass(frozen=True)
class BarSegments:
    used_cells: int
    available_cells: int
