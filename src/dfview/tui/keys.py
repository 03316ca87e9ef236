from __future__ import annotations

import sys
from typing import TextIO


def wait_for_key(stream: TextIO | None = None) -> str | None:
    """Block until one key is pressed and return it.

    Returns ``None`` straight away when ``stream`` is not a terminal.
    """
    stream = stream or sys.stdin
    if not stream.isatty():
        return None

    if sys.platform == "win32":
        import msvcrt

        return msvcrt.getwch()

    import termios
    import tty

    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        return stream.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
