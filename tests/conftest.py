from __future__ import annotations

import io

import pytest
from rich.console import Console

from dfview.tui.theme import build_theme

HEADER = "Filesystem     1K-blocks     Used Available Use% Mounted on"

DF_SAMPLE = "\n".join(
    [
        HEADER,
        "/dev/sda1        1048576   524288    524288  50% /",
        "tmpfs             204800        0    204800   0% /run/user/1000",
        "devtmpfs            4096        0      4096   0% /dev",
        "overlay         10485760  1048576   9437184  10% /var/lib/docker/overlay2/abc/merged",
        "/dev/nvme0n1p2 976762584 878000000  98762584  90% /home",
        "",
    ]
)


@pytest.fixture
def df_sample() -> str:
    return DF_SAMPLE


@pytest.fixture
def console() -> Console:
    return Console(
        file=io.StringIO(),
        theme=build_theme(),
        color_system=None,
        width=120,
        force_terminal=False,
    )
