"""
Environment adapters.

Each adapter satisfies EnvironmentPort. as_accessor() turns any of them into
the "" for absent accessor that populate() expects.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from envrecord.core.populate import Accessor
from envrecord.ports.environment import EnvironmentPort


class OsEnvironmentAdapter:
    """Adapter for OS environment variables."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get an environment variable."""
        return os.environ.get(key, default)


class MappingEnvironmentAdapter:
    """Adapter over an in-memory mapping. The mapping is not copied."""

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = values

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)


class PrefixedEnvironmentAdapter:
    """Namespaces every lookup of a wrapped environment with a fixed prefix."""

    def __init__(self, prefix: str, inner: EnvironmentPort) -> None:
        self._prefix = prefix
        self._inner = inner

    @property
    def prefix(self) -> str:
        return self._prefix

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._inner.get(f"{self._prefix}{key}", default)


def as_accessor(env: EnvironmentPort) -> Accessor:
    """Adapt an environment port to an accessor returning "" when absent."""

    def get(key: str) -> str:
        return env.get(key) or ""

    return get


# Default adapter instance
default_environment = OsEnvironmentAdapter()
