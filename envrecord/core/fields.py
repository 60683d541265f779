"""
Field descriptors for destination records.

A destination record is a dataclass instance or a pydantic model instance.
describe_fields() walks its declared fields in order and reports, for each
one, the lookup key, the conversion kind and the declarative options
("tags") attached to it:

    @dataclass
    class ServerConfig:
        port: int = setting(0, required=True)
        bind: str = setting("", default="0.0.0.0")

    class ServerSettings(BaseModel):
        port: int = Field(0, json_schema_extra={"required": "true"})
        bind: str = Field("", json_schema_extra={"default": "0.0.0.0"})

Only the "required" and "default" tags are recognized. Other metadata keys
are ignored.
"""

from __future__ import annotations

import dataclasses
import functools
import typing
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from .errors import InvalidDestinationKindError

REQUIRED_TAG = "required"
DEFAULT_TAG = "default"


class FieldKind(Enum):
    """Conversion kind of a destination field."""

    STRING = "string"
    INT = "int"
    BOOL = "bool"
    STRING_LIST = "string_list"
    INT_LIST = "int_list"
    BOOL_LIST = "bool_list"
    UNSUPPORTED = "unsupported"


_SCALAR_KINDS: tuple[tuple[type, FieldKind], ...] = (
    (str, FieldKind.STRING),
    (int, FieldKind.INT),
    (bool, FieldKind.BOOL),
)

_LIST_KINDS: tuple[tuple[type, FieldKind], ...] = (
    (str, FieldKind.STRING_LIST),
    (int, FieldKind.INT_LIST),
    (bool, FieldKind.BOOL_LIST),
)


@dataclass(frozen=True)
class FieldDescriptor:
    """Static metadata for one destination field."""

    name: str
    kind: FieldKind
    type_name: str
    accessible: bool
    required: bool = False
    default: str | None = None

    @property
    def key(self) -> str:
        """Lookup key passed to the accessor."""
        return self.name.upper()


def classify(annotation: Any) -> FieldKind:
    """Map a field annotation to its conversion kind."""
    # Identity checks: bool is a subclass of int and must not match INT.
    for scalar, kind in _SCALAR_KINDS:
        if annotation is scalar:
            return kind

    if typing.get_origin(annotation) is list:
        args = typing.get_args(annotation)
        if len(args) == 1:
            for element, kind in _LIST_KINDS:
                if args[0] is element:
                    return kind

    return FieldKind.UNSUPPORTED


def type_name(annotation: Any) -> str:
    """Readable rendering of a field annotation for error messages."""
    if isinstance(annotation, str):
        return annotation
    if typing.get_origin(annotation) is None and isinstance(annotation, type):
        return annotation.__name__
    return str(annotation).replace("typing.", "")


def is_required(tags: Mapping[str, Any]) -> bool:
    """A field is required only when its tag is exactly "true"."""
    return tags.get(REQUIRED_TAG) == "true"


def default_of(tags: Mapping[str, Any]) -> str | None:
    """Default tag value, or None when absent or empty."""
    value = tags.get(DEFAULT_TAG)
    if value is None or value == "":
        return None
    return str(value)


def _describe(name: str, annotation: Any, tags: Mapping[str, Any]) -> FieldDescriptor:
    return FieldDescriptor(
        name=name,
        kind=classify(annotation),
        type_name=type_name(annotation),
        accessible=not name.startswith("_"),
        required=is_required(tags),
        default=default_of(tags),
    )


def _field_hints(cls: type) -> dict[str, Any]:
    """
    Resolve field annotations, one field at a time if the class as a whole
    does not resolve.

    Annotations that still cannot be resolved are left as their source
    string, which classifies as FieldKind.UNSUPPORTED.
    """
    try:
        return typing.get_type_hints(cls)
    except NameError:
        pass

    localns = dict(vars(cls))
    hints: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        holder = type(
            "_FieldHolder",
            (),
            {"__annotations__": {f.name: f.type}, "__module__": cls.__module__},
        )
        try:
            hints[f.name] = typing.get_type_hints(holder, localns=localns)[f.name]
        except NameError:
            hints[f.name] = f.type
    return hints


def _describe_dataclass(dest: Any) -> list[FieldDescriptor]:
    hints = _field_hints(type(dest))
    return [
        _describe(f.name, hints.get(f.name, f.type), f.metadata)
        for f in dataclasses.fields(dest)
    ]


def _describe_model(dest: BaseModel) -> list[FieldDescriptor]:
    cls = type(dest)
    descriptors: list[FieldDescriptor] = []

    for name, info in cls.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        descriptors.append(_describe(name, info.annotation, extra))

    for name in cls.__private_attributes__:
        descriptors.append(
            FieldDescriptor(
                name=name,
                kind=FieldKind.UNSUPPORTED,
                type_name="private",
                accessible=False,
            )
        )

    return descriptors


def destination_kind(dest: Any) -> str:
    """Name of the destination's kind, as reported in errors."""
    # Any class, including a pydantic model class, is reported as "type".
    if isinstance(dest, type):
        return "type"
    return type(dest).__name__


def describe_fields(dest: Any) -> list[FieldDescriptor]:
    """
    Derive the ordered field descriptors of a destination record.

    Descriptors are computed on every call; nothing is cached.

    Args:
        dest: A dataclass instance or a pydantic model instance.

    Returns:
        One FieldDescriptor per declared field, in declaration order.

    Raises:
        InvalidDestinationKindError: If dest is not a record instance.
    """
    if isinstance(dest, BaseModel):
        return _describe_model(dest)
    if dataclasses.is_dataclass(dest) and not isinstance(dest, type):
        return _describe_dataclass(dest)
    raise InvalidDestinationKindError(destination_kind(dest))


def setting(
    zero: Any = dataclasses.MISSING,
    *,
    required: bool = False,
    default: str | None = None,
    **field_kwargs: Any,
) -> Any:
    """
    Declare a dataclass field carrying population tags.

    Args:
        zero: Value the field holds before population. Lists are copied per
            instance.
        required: Tag the field as required.
        default: String used when the accessor has no value for the field.
        **field_kwargs: Passed through to dataclasses.field().

    Returns:
        A dataclasses.Field.
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    if required:
        metadata[REQUIRED_TAG] = "true"
    if default is not None:
        metadata[DEFAULT_TAG] = default

    if isinstance(zero, list):
        field_kwargs["default_factory"] = functools.partial(list, zero)
    elif zero is not dataclasses.MISSING:
        field_kwargs["default"] = zero

    return dataclasses.field(metadata=metadata, **field_kwargs)
