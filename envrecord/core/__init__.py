"""
Core population logic: field descriptors, converters, errors and the
populate pass itself. No I/O beyond the accessor call.
"""

from .convert import (
    CONVERTERS,
    INT_MAX,
    INT_MIN,
    LIST_SEPARATOR,
    convert_raw,
    parse_bool,
    parse_int,
    split_list,
)
from .errors import (
    BoolParseError,
    ConversionError,
    EnvRecordError,
    IntParseError,
    InvalidDestinationKindError,
    InvalidFieldKindError,
    MissingRequiredFieldsError,
)
from .fields import (
    DEFAULT_TAG,
    REQUIRED_TAG,
    FieldDescriptor,
    FieldKind,
    classify,
    describe_fields,
    setting,
)
from .populate import (
    Accessor,
    mapping_accessor,
    populate,
    populate_from_environment,
    populate_from_environment_with_prefix,
    populate_from_mapping,
)

__all__ = [
    # Populate
    "Accessor",
    "populate",
    "populate_from_environment",
    "populate_from_environment_with_prefix",
    "populate_from_mapping",
    "mapping_accessor",
    # Fields
    "FieldDescriptor",
    "FieldKind",
    "classify",
    "describe_fields",
    "setting",
    "REQUIRED_TAG",
    "DEFAULT_TAG",
    # Conversion
    "CONVERTERS",
    "convert_raw",
    "parse_bool",
    "parse_int",
    "split_list",
    "LIST_SEPARATOR",
    "INT_MIN",
    "INT_MAX",
    # Errors
    "EnvRecordError",
    "InvalidDestinationKindError",
    "InvalidFieldKindError",
    "ConversionError",
    "IntParseError",
    "BoolParseError",
    "MissingRequiredFieldsError",
]
