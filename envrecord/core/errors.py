"""
Error taxonomy for record population.

Kind and conversion errors abort a populate pass at the field where they
occur. Missing required fields are collected over the whole pass and raised
once at the end.
"""

from __future__ import annotations


class EnvRecordError(Exception):
    """Base class for all population errors."""


class InvalidDestinationKindError(EnvRecordError, TypeError):
    """Raised when the destination is not a dataclass or pydantic model instance."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"invalid kind for config: {kind}")


class InvalidFieldKindError(EnvRecordError, TypeError):
    """Raised when a field with a value has an unsupported declared type."""

    def __init__(self, field_name: str, type_name: str) -> None:
        self.field_name = field_name
        self.type_name = type_name
        super().__init__(f"invalid kind for config field {field_name}: {type_name}")


class ConversionError(EnvRecordError, ValueError):
    """Raised by the scalar parsers when a raw string cannot be converted."""

    def __init__(self, func: str, value: str, reason: str) -> None:
        self.func = func
        self.value = value
        self.reason = reason
        super().__init__(f"{func}: parsing {value!r}: {reason}")


class IntParseError(ConversionError):
    """Raised when a raw string is not a base-10 signed 64-bit integer."""


class BoolParseError(ConversionError):
    """Raised when a raw string is not a recognized boolean literal."""


class MissingRequiredFieldsError(EnvRecordError):
    """Raised after a full pass when required fields had no value."""

    def __init__(self, keys: list[str]) -> None:
        self.keys = list(keys)
        super().__init__(f"missing config fields: {', '.join(self.keys)}")
