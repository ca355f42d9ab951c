"""
Immutable definition models for criterion requirements and requirement groups.

Definitions are loaded once from the criteria catalogue and describe, for each
requirement id, how its raw response is typed and which record field(s) it
populates.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ValueKind(str, Enum):
    """Kind of typed value a response type parses into."""
    BOOLEAN = "boolean"
    TEXT = "text"
    DATE = "date"
    INTEGER = "integer"
    DECIMAL = "decimal"
    AMOUNT = "amount"


class ResponseType(str, Enum):
    """Declared response type of a requirement."""
    INDICATOR = "INDICATOR"
    DESCRIPTION = "DESCRIPTION"
    EVIDENCE_URL = "EVIDENCE_URL"
    CODE = "CODE"
    CODE_COUNTRY = "CODE_COUNTRY"
    DATE = "DATE"
    QUANTITY_INTEGER = "QUANTITY_INTEGER"
    QUANTITY_YEAR = "QUANTITY_YEAR"
    QUANTITY = "QUANTITY"
    PERCENTAGE = "PERCENTAGE"
    AMOUNT = "AMOUNT"

    @property
    def value_kind(self) -> ValueKind:
        """Kind of value this response type parses into."""
        return _VALUE_KINDS[self]


_VALUE_KINDS = {
    ResponseType.INDICATOR: ValueKind.BOOLEAN,
    ResponseType.DESCRIPTION: ValueKind.TEXT,
    ResponseType.EVIDENCE_URL: ValueKind.TEXT,
    ResponseType.CODE: ValueKind.TEXT,
    ResponseType.CODE_COUNTRY: ValueKind.TEXT,
    ResponseType.DATE: ValueKind.DATE,
    ResponseType.QUANTITY_INTEGER: ValueKind.INTEGER,
    ResponseType.QUANTITY_YEAR: ValueKind.INTEGER,
    ResponseType.QUANTITY: ValueKind.DECIMAL,
    ResponseType.PERCENTAGE: ValueKind.DECIMAL,
    ResponseType.AMOUNT: ValueKind.AMOUNT,
}


@dataclass(frozen=True)
class RequirementDefinition:
    """Metadata of one requirement: response type and target record field(s)."""
    id: str
    description: str
    response_type: ResponseType
    fields: tuple[str, ...] = ()     # amount: (value field, currency field)

    @property
    def primary_field(self) -> Optional[str]:
        """First target field, None when the requirement is not mapped."""
        if not self.fields or not self.fields[0].strip():
            return None
        return self.fields[0]

    @property
    def currency_field(self) -> Optional[str]:
        """Currency target for amount requirements."""
        if len(self.fields) < 2 or not self.fields[1].strip():
            return None
        return self.fields[1]


@dataclass(frozen=True)
class GroupDefinition:
    """Metadata of one requirement group."""
    id: str
    unbounded: bool = False
    description: Optional[str] = None
