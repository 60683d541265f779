"""
Populate component - fill a config record and report the outcome as data.

Wraps envrecord.core.populate for callers that prefer a result object to an
exception, e.g. startup code that collects every configuration problem
before deciding to halt.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from envrecord.adapters.environment import (
    MappingEnvironmentAdapter,
    PrefixedEnvironmentAdapter,
    as_accessor,
    default_environment,
)
from envrecord.core.errors import (
    ConversionError,
    InvalidDestinationKindError,
    InvalidFieldKindError,
    MissingRequiredFieldsError,
)
from envrecord.core.populate import populate
from envrecord.ports.environment import EnvironmentPort

from .models import (
    CONVERSION_FAILED,
    INVALID_DESTINATION,
    INVALID_FIELD_KIND,
    MISSING_REQUIRED,
    PopulateError,
    PopulateInput,
    PopulateOutput,
)

logger = logging.getLogger(__name__)


def _errors_from(exc: Exception) -> tuple[PopulateError, ...]:
    if isinstance(exc, MissingRequiredFieldsError):
        return tuple(
            PopulateError(
                code=MISSING_REQUIRED,
                message=f"Required config field {key} has no value",
                field=key,
            )
            for key in exc.keys
        )
    if isinstance(exc, InvalidFieldKindError):
        return (PopulateError(code=INVALID_FIELD_KIND, message=str(exc), field=exc.field_name),)
    if isinstance(exc, InvalidDestinationKindError):
        return (PopulateError(code=INVALID_DESTINATION, message=str(exc)),)
    return (PopulateError(code=CONVERSION_FAILED, message=str(exc)),)


def run(inp: PopulateInput, *, env: EnvironmentPort) -> PopulateOutput:
    """
    Populate inp.dest from an environment port.

    Args:
        inp: Destination record and optional key prefix.
        env: Environment port to read values from.

    Returns:
        PopulateOutput; on failure, errors hold one entry per missing key or
        a single entry for the aborting error. The destination may be
        partially populated on failure.
    """
    source = PrefixedEnvironmentAdapter(inp.prefix, env) if inp.prefix else env

    try:
        populate(inp.dest, as_accessor(source))
    except (
        ConversionError,
        InvalidDestinationKindError,
        InvalidFieldKindError,
        MissingRequiredFieldsError,
    ) as e:
        errors = _errors_from(e)
        logger.warning(
            "Config population failed for %s: %s",
            type(inp.dest).__name__,
            ", ".join(err.code for err in errors),
        )
        return PopulateOutput.failed(errors)

    return PopulateOutput.ok()


def run_environment(dest: Any, prefix: str = "") -> PopulateOutput:
    """Populate dest from the process environment."""
    return run(PopulateInput(dest=dest, prefix=prefix), env=default_environment)


def run_mapping(dest: Any, values: Mapping[str, str], prefix: str = "") -> PopulateOutput:
    """Populate dest from an in-memory mapping."""
    return run(PopulateInput(dest=dest, prefix=prefix), env=MappingEnvironmentAdapter(values))
