"""System clipboard access through external tools, with an in-memory fallback."""

from __future__ import annotations

import asyncio
import base64
import logging
import os
import sys
import threading

logger = logging.getLogger(__name__)

if os.name == "nt":
    _GET_COMMANDS: tuple[tuple[str, ...], ...] = (
        ("powershell", "-NoProfile", "-Command", "Get-Clipboard"),
    )
    _SET_COMMANDS: tuple[tuple[str, ...], ...] = (("clip",),)
else:
    _GET_COMMANDS = (
        ("pbpaste",),
        ("termux-clipboard-get",),
        ("wl-paste",),
        ("xclip", "-o", "-selection", "clipboard"),
        ("xsel", "-ob"),
    )
    _SET_COMMANDS = (
        ("pbcopy",),
        ("termux-clipboard-set",),
        ("wl-copy",),
        ("xclip", "-selection", "clipboard"),
        ("xsel", "-ib"),
    )


def _to_bytes(content: str | bytes) -> bytes:
    return content if isinstance(content, bytes) else os.fsencode(content)


def osc52_sequence(content: str | bytes) -> str:
    """The OSC 52 terminal escape sequence that puts ``content`` on the clipboard."""
    encoded = base64.b64encode(_to_bytes(content)).decode("ascii")
    return f"\x1b]52;c;{encoded}\x1b\\"


async def _run(argv: tuple[str, ...], data: bytes | None) -> tuple[int, bytes] | None:
    """Run ``argv``, feeding ``data`` on stdin; None if it could not start."""
    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.PIPE if data is not None else asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE if data is None else asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
    except OSError:
        return None
    try:
        stdout, _ = await process.communicate(data)
    except BaseException:
        if process.returncode is None:
            process.kill()
        raise
    return process.returncode, stdout or b""


class Clipboard:
    """The system clipboard, remembering the last value set as a fallback."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._content = ""

    async def get(self) -> str:
        """Read the clipboard, or the last value set when no tool is available."""
        for argv in _GET_COMMANDS:
            result = await _run(argv, None)
            if result is None:
                continue
            returncode, stdout = result
            if returncode == 0:
                return os.fsdecode(stdout)
        with self._lock:
            return self._content

    async def set(self, content: str | bytes) -> None:
        """Put ``content`` on the clipboard using the first tool that works."""
        data = _to_bytes(content)
        with self._lock:
            self._content = os.fsdecode(data)

        if os.name != "nt":
            try:
                sys.stderr.write(osc52_sequence(data))
                sys.stderr.flush()
            except (OSError, ValueError, AttributeError):
                logger.debug("Could not write the OSC 52 sequence")

        for argv in _SET_COMMANDS:
            result = await _run(argv, data)
            if result is None:
                continue
            if result[0] == 0:
                break


CLIPBOARD = Clipboard()