"""
Populate component - fill a config record from an environment port and
return a PopulateOutput instead of raising.
"""

from .component import run, run_environment, run_mapping
from .models import (
    CONVERSION_FAILED,
    INVALID_DESTINATION,
    INVALID_FIELD_KIND,
    MISSING_REQUIRED,
    PopulateError,
    PopulateInput,
    PopulateOutput,
)

__all__ = [
    # Component entry points
    "run",
    "run_environment",
    "run_mapping",
    # Models
    "PopulateInput",
    "PopulateOutput",
    "PopulateError",
    # Error codes
    "CONVERSION_FAILED",
    "INVALID_DESTINATION",
    "INVALID_FIELD_KIND",
    "MISSING_REQUIRED",
]
