"""Parser for the tabular output of ``df -k``.

Expected columns, whitespace separated::

    Filesystem 1K-blocks Used Available Use% Mounted on

The first line is always treated as the header. Only rows whose first
column looks like a device path or a known memory-backed filesystem are
kept; everything else is dropped without error.
"""

from __future__ import annotations

import re

from loguru import logger

from dfview.models.disk import DiskRecord

BLOCK_SIZE = 1024
MIN_FIELDS = 6
FILESYSTEM_PREFIXES = ("/", "tmpfs", "devtmpfs")

_WHITESPACE_RE = re.compile(r"\s+")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")


def parse_df_output(text: str, *, strict: bool = False) -> tuple[DiskRecord, ...]:
    """Turn raw ``df -k`` output into records, preserving source order.

    Unparseable numeric fields become ``0`` unless ``strict`` is set, in
    which case the whole row is dropped.
    """
    records: list[DiskRecord] = []
    for lineno, raw in enumerate(text.split("\n")[1:], start=2):
        line = raw.strip()
        if not line:
            continue
        if not line.startswith(FILESYSTEM_PREFIXES):
            logger.debug(f"Skipping line {lineno}: unrecognised filesystem {line!r}")
            continue

        fields = split_df_line(line)
        if len(fields) < MIN_FIELDS:
            logger.debug(f"Skipping line {lineno}: {len(fields)} fields < {MIN_FIELDS}")
            continue

        record = _build_record(fields, strict=strict)
        if record is None:
            logger.debug(f"Skipping line {lineno}: non-numeric capacity in {line!r}")
            continue
        records.append(record)

    return tuple(records)


def split_df_line(line: str) -> list[str]:
    return _WHITESPACE_RE.split(line.strip())


def parse_int(token: str) -> int | None:
    if not _INTEGER_RE.match(token):
        return None
    return int(token)


def _build_record(fields: list[str], *, strict: bool) -> DiskRecord | None:
    filesystem, size, used, avail, percent, mount_point = fields[:MIN_FIELDS]
    values = [parse_int(t) for t in (size, used, avail, percent.removesuffix("%"))]
    if strict and None in values:
        return None

    size_kb, used_kb, avail_kb, use_percent = (v or 0 for v in values)
    return DiskRecord(
        filesystem=filesystem,
        size_bytes=size_kb * BLOCK_SIZE,
        used_bytes=used_kb * BLOCK_SIZE,
        available_bytes=avail_kb * BLOCK_SIZE,
        use_percent=use_percent,
        mount_point=mount_point,
    )
