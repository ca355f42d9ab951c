"""
Error classification for criterion import.

Recoverable data quality issues are logged and collected per import call;
system failures abort the call and surface to the caller.
"""

from .data_quality import (
    DataQualityError,
    LookupMissError,
    ResponseParseError,
    FieldMismatchError,
)
from .system_failures import (
    SystemFailureError,
    UnsupportedCriterionTypeError,
    DefinitionLoadError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "LookupMissError",
    "ResponseParseError",
    "FieldMismatchError",
    # System Failures
    "SystemFailureError",
    "UnsupportedCriterionTypeError",
    "DefinitionLoadError",
]
