"""
envrecord - typed configuration records populated from the environment.

Declare a dataclass (or pydantic model) and populate it from the process
environment, a mapping, or any function of the signature (str) -> str:

    @dataclass
    class ServerConfig:
        port: int = setting(0, required=True)
        bind: str = setting("", default="0.0.0.0")
        hosts: list[str] = setting([])

    config = ServerConfig()
    populate_from_environment(config)

Supported field types are str, int, bool and list[...] of those. List values
are comma-separated.
"""

from envrecord.core import (
    Accessor,
    BoolParseError,
    ConversionError,
    EnvRecordError,
    FieldDescriptor,
    FieldKind,
    IntParseError,
    InvalidDestinationKindError,
    InvalidFieldKindError,
    MissingRequiredFieldsError,
    describe_fields,
    populate,
    populate_from_environment,
    populate_from_environment_with_prefix,
    populate_from_mapping,
    setting,
)

__all__ = [
    "Accessor",
    "populate",
    "populate_from_environment",
    "populate_from_environment_with_prefix",
    "populate_from_mapping",
    "describe_fields",
    "setting",
    "FieldDescriptor",
    "FieldKind",
    "EnvRecordError",
    "InvalidDestinationKindError",
    "InvalidFieldKindError",
    "ConversionError",
    "IntParseError",
    "BoolParseError",
    "MissingRequiredFieldsError",
]

__version__ = "0.1.0"
