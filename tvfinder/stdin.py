"""Heuristics about standard input."""

from __future__ import annotations

import os
import stat
import sys
from typing import IO, Any


def is_readable_stdin(stream: IO[Any] | None = None) -> bool:
    """Whether ``stream`` (standard input by default) has data to read.

    True when the stream is not a terminal and is backed by a regular
    file, a pipe or a socket.
    """
    if stream is None:
        stream = sys.stdin
    if stream is None:
        return False
    try:
        if stream.isatty():
            return False
        mode = os.fstat(stream.fileno()).st_mode
    except (AttributeError, OSError, ValueError):
        return False
    return stat.S_ISREG(mode) or stat.S_ISFIFO(mode) or stat.S_ISSOCK(mode)