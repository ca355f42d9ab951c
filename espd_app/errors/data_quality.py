"""
Data quality error classifications for criterion import.

These exceptions describe faults that are local to a single requirement or
group of an imported document. They never abort a criterion build: the
offending value is dropped and the walk continues.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    level = "warning"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class LookupMissError(DataQualityError):
    """Requirement or group id not present in the definition registry."""

    def __init__(self, message: str, element_id: Optional[str] = None,
                 element_kind: str = "requirement", **kwargs):
        super().__init__(message, **kwargs)
        self.element_id = element_id
        self.element_kind = element_kind


class ResponseParseError(DataQualityError):
    """Raw response text does not match the declared response type."""

    def __init__(self, message: str, requirement_id: Optional[str] = None,
                 raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.requirement_id = requirement_id
        self.raw_data = raw_data
        self.expected_format = expected_format


class FieldMismatchError(DataQualityError):
    """Definition targets a field the record does not have or cannot hold."""

    level = "error"

    def __init__(self, message: str, field_name: Optional[str] = None,
                 record_type: Optional[str] = None,
                 requirement_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_name = field_name
        self.record_type = record_type
        self.requirement_id = requirement_id
