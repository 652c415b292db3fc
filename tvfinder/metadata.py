"""Application-wide metadata."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AppMetadata:
    """Global application metadata such as version and current directory."""

    version: str
    current_directory: str

    @classmethod
    def from_environment(cls, version: str) -> AppMetadata:
        """Build metadata for ``version`` using the process's working directory."""
        return cls(version=version, current_directory=os.getcwd())