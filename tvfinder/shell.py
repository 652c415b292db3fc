"""Shell detection and shell-specific helpers."""

from __future__ import annotations

import logging
import os
from enum import Enum

logger = logging.getLogger(__name__)

SHELL_ENV_VAR = "SHELL"


class UnsupportedShellError(ValueError):
    """Raised when a shell is unknown or not supported for an operation."""


class Shell(Enum):
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    POWERSHELL = "powershell"
    CMD = "cmd"
    NU = "nu"

    @classmethod
    def default(cls) -> Shell:
        """The platform's default shell."""
        return cls.POWERSHELL if os.name == "nt" else cls.BASH

    @classmethod
    def from_name(cls, value: str) -> Shell:
        """Detect a shell from a name or path such as ``/usr/bin/zsh``."""
        for shell in (cls.BASH, cls.ZSH, cls.FISH, cls.POWERSHELL, cls.CMD):
            if shell.value in value:
                return shell
        raise UnsupportedShellError(f"Unsupported shell: {value}")

    @classmethod
    def from_env(cls) -> Shell:
        """Detect the shell from ``$SHELL``, or the default when unset."""
        value = os.environ.get(SHELL_ENV_VAR)
        if value is None:
            logger.debug("Environment variable %s not set", SHELL_ENV_VAR)
            return cls.default()
        return cls.from_name(value)

    def executable(self) -> str:
        """Name of the shell's executable."""
        return self.value

    def __str__(self) -> str:
        return self.value


def ctrl_keybinding(shell: Shell, character: str) -> str:
    """The shell's notation for Ctrl+``character``."""
    if shell is Shell.BASH:
        return rf"\C-{character}"
    if shell is Shell.ZSH:
        return f"^{character}"
    if shell is Shell.FISH:
        return rf"\c{character}"
    if shell is Shell.NU:
        return f"Ctrl-{character}"
    raise UnsupportedShellError(f"This shell is not yet supported: {shell!r}")