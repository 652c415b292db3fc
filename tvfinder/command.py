"""Building commands that run through the user's shell."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass, field

from tvfinder.shell import Shell, UnsupportedShellError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShellCommand:
    """A command line plus extra environment variables, ready to start."""

    argv: list[str]
    envs: dict[str, str] = field(default_factory=dict)

    def environment(self) -> dict[str, str]:
        """The inherited environment with the extra variables applied."""
        return {**os.environ, **self.envs}

    def run(self, **kwargs) -> subprocess.CompletedProcess:
        """Run the command to completion; keyword arguments go to ``subprocess.run``."""
        kwargs.setdefault("env", self.environment())
        return subprocess.run(self.argv, **kwargs)

    def popen(self, **kwargs) -> subprocess.Popen:
        """Start the command; keyword arguments go to ``subprocess.Popen``."""
        kwargs.setdefault("env", self.environment())
        return subprocess.Popen(self.argv, **kwargs)


def shell_command(
    command: str, interactive: bool, envs: Mapping[str, str]
) -> ShellCommand:
    """Wrap ``command`` so that it runs through the shell named by ``$SHELL``."""
    try:
        shell = Shell.from_env()
    except UnsupportedShellError:
        shell = Shell.default()

    if shell is Shell.POWERSHELL:
        flag = "-Command"
    elif shell is Shell.CMD:
        flag = "/C"
    else:
        flag = "-c"

    argv = [shell.executable(), flag]
    if interactive:
        if os.name == "posix":
            argv.append("-i")
        else:
            logger.warning("Interactive mode is not supported on Windows.")
    argv.append(command)
    return ShellCommand(argv=argv, envs=dict(envs))