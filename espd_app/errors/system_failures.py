"""
System failure error classifications for unrecoverable errors.

These exceptions mean the engine cannot interpret its input or its own
configuration at all, so the surrounding operation is aborted.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class UnsupportedCriterionTypeError(SystemFailureError):
    """Criterion type code outside the dispatch table."""

    def __init__(self, message: str, type_code: Optional[str] = None,
                 criterion_name: Optional[str] = None,
                 criterion_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.type_code = type_code
        self.criterion_name = criterion_name
        self.criterion_id = criterion_id


class DefinitionLoadError(SystemFailureError):
    """Definitions file missing, unreadable or structurally invalid."""

    def __init__(self, message: str, source: Optional[str] = None,
                 entry_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
        self.entry_id = entry_id
