"""
Adapters for environment access.
"""

from .environment import (
    MappingEnvironmentAdapter,
    OsEnvironmentAdapter,
    PrefixedEnvironmentAdapter,
    as_accessor,
    default_environment,
)

__all__ = [
    "MappingEnvironmentAdapter",
    "OsEnvironmentAdapter",
    "PrefixedEnvironmentAdapter",
    "as_accessor",
    "default_environment",
]
