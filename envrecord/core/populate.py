"""
Populate a record from a string accessor.

The accessor maps an upper-cased field name to its raw string value, with
the empty string meaning "absent". An explicitly empty value therefore
cannot be told apart from a missing one, and an empty default tag is the
same as no default.

Usage:

    @dataclass
    class ServerConfig:
        port: int = setting(0, required=True)
        bind: str = setting("", default="0.0.0.0")

    config = ServerConfig()
    populate_from_environment_with_prefix("MYSERVER_", config)

This reads MYSERVER_PORT and MYSERVER_BIND.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from typing import Any

from .convert import convert_raw
from .errors import InvalidFieldKindError, MissingRequiredFieldsError
from .fields import FieldKind, describe_fields

logger = logging.getLogger(__name__)

Accessor = Callable[[str], str]


def populate(dest: Any, get: Accessor) -> None:
    """
    Populate dest in place from the accessor.

    Fields are visited in declaration order. Inaccessible fields (leading
    underscore) are skipped without calling the accessor. A field with no
    value is collected as missing if required, falls back to its default tag
    if it has one, and is otherwise left untouched.

    Conversion and kind errors abort the pass immediately. Fields assigned
    before the failing one keep their new values.

    Args:
        dest: A dataclass instance or a pydantic model instance.
        get: Accessor returning the raw value for a key, "" when absent.

    Raises:
        InvalidDestinationKindError: dest is not a record instance.
        InvalidFieldKindError: a field with a value has an unsupported type.
        ConversionError: an int or bool value (or list element) failed to parse.
        MissingRequiredFieldsError: required fields had no value; raised only
            when nothing aborted the pass earlier.
    """
    descriptors = describe_fields(dest)
    missing: list[str] = []

    logger.debug("Populating %s (%d fields)", type(dest).__name__, len(descriptors))

    for desc in descriptors:
        if not desc.accessible:
            logger.debug("Skipping inaccessible field %s", desc.name)
            continue

        raw = get(desc.key)

        if not raw:
            if desc.required:
                missing.append(desc.key)
                continue
            if desc.default is None:
                continue
            logger.debug("Using default for %s", desc.key)
            raw = desc.default

        if desc.kind is FieldKind.UNSUPPORTED:
            raise InvalidFieldKindError(desc.name, desc.type_name)

        setattr(dest, desc.name, convert_raw(desc.kind, raw))

    if missing:
        logger.warning("Missing required config fields: %s", ", ".join(missing))
        raise MissingRequiredFieldsError(missing)


def mapping_accessor(mapping: Mapping[str, str], prefix: str = "") -> Accessor:
    """Build an accessor over a mapping; absent keys yield ""."""

    def get(key: str) -> str:
        return mapping.get(f"{prefix}{key}", "")

    return get


def populate_from_mapping(dest: Any, mapping: Mapping[str, str]) -> None:
    """Populate dest from a string mapping."""
    populate(dest, mapping_accessor(mapping))


def populate_from_environment(dest: Any, environ: Mapping[str, str] | None = None) -> None:
    """
    Populate dest from the process environment.

    Args:
        dest: Destination record.
        environ: Environment to read. Defaults to os.environ, read at call time.
    """
    populate(dest, mapping_accessor(os.environ if environ is None else environ))


def populate_from_environment_with_prefix(
    prefix: str,
    dest: Any,
    environ: Mapping[str, str] | None = None,
) -> None:
    """
    Populate dest from the process environment, namespaced by prefix.

    A field named port is read from f"{prefix}PORT".
    """
    populate(dest, mapping_accessor(os.environ if environ is None else environ, prefix))
