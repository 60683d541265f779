"""
Protocol interfaces for external dependencies.
"""

from .environment import EnvironmentPort

__all__ = ["EnvironmentPort"]
