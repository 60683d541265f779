"""
Populate component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Error codes
INVALID_DESTINATION = "INVALID_DESTINATION"
INVALID_FIELD_KIND = "INVALID_FIELD_KIND"
CONVERSION_FAILED = "CONVERSION_FAILED"
MISSING_REQUIRED = "MISSING_REQUIRED"


@dataclass(frozen=True)
class PopulateInput:
    """Input for populating a record."""

    dest: Any
    prefix: str = ""


@dataclass(frozen=True)
class PopulateError:
    """Error details."""

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class PopulateOutput:
    """Result of a populate operation."""

    errors: tuple[PopulateError, ...]
    success: bool

    @property
    def missing_keys(self) -> list[str]:
        """Keys reported as missing required fields."""
        return [e.field for e in self.errors if e.code == MISSING_REQUIRED and e.field]

    @classmethod
    def ok(cls) -> PopulateOutput:
        """Create a success result."""
        return cls(errors=(), success=True)

    @classmethod
    def failed(cls, errors: tuple[PopulateError, ...]) -> PopulateOutput:
        """Create a failure result."""
        return cls(errors=errors, success=False)
