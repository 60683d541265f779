"""
Port for key/value environment access.
"""

from __future__ import annotations

from typing import Protocol


class EnvironmentPort(Protocol):
    """Port for environment variable access."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get an environment variable."""
        ...
