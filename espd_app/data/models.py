"""
Input tree and typed value models.

The input tree mirrors the requirement group structure of an ESPD response
criterion as produced by the XML binding layer. Typed values are the result of
parsing a raw response against its declared response type.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Optional, Union


@dataclass(frozen=True)
class RequirementNode:
    """One answered requirement; only the first response is consulted."""
    id: str
    responses: tuple[str, ...] = ()

    @property
    def first_response(self) -> Optional[str]:
        return self.responses[0] if self.responses else None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RequirementNode":
        responses = data.get("responses") or []
        if isinstance(responses, str):
            responses = [responses]
        return cls(
            id=str(data.get("id") or ""),
            responses=tuple("" if r is None else str(r) for r in responses),
        )


@dataclass(frozen=True)
class GroupNode:
    """One requirement group occurrence with its nested groups and requirements."""
    id: str
    groups: tuple["GroupNode", ...] = ()
    requirements: tuple[RequirementNode, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GroupNode":
        return cls(
            id=str(data.get("id") or ""),
            groups=tuple(cls.from_dict(g) for g in data.get("requirementGroups") or []),
            requirements=tuple(RequirementNode.from_dict(r) for r in data.get("requirements") or []),
        )


@dataclass(frozen=True)
class CriterionNode:
    """Root of one criterion tree in an imported response document."""
    id: str
    type_code: str
    name: Optional[str] = None
    legislation_reference: Optional[str] = None
    groups: tuple[GroupNode, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CriterionNode":
        """
        Build a criterion tree from its JSON representation.

        Expected format:
        {
            "id": "63adb07d-db1b-4ef0-a14e-a99785cf8cf6",
            "typeCode": "EXCLUSION.OTHER",
            "name": "Purely national exclusion grounds",
            "legislationReference": "57(4)",
            "requirementGroups": [
                {"id": "...", "requirementGroups": [...],
                 "requirements": [{"id": "...", "responses": ["true"]}]}
            ]
        }
        """
        return cls(
            id=str(data.get("id") or ""),
            type_code=str(data.get("typeCode") or ""),
            name=data.get("name"),
            legislation_reference=data.get("legislationReference"),
            groups=tuple(GroupNode.from_dict(g) for g in data.get("requirementGroups") or []),
        )


@dataclass(frozen=True)
class BooleanValue:
    value: bool


@dataclass(frozen=True)
class TextValue:
    value: str


@dataclass(frozen=True)
class DateValue:
    value: date


@dataclass(frozen=True)
class IntegerValue:
    value: int


@dataclass(frozen=True)
class DecimalValue:
    value: Decimal


@dataclass(frozen=True)
class AmountValue:
    """Monetary amount; always written to two fields (amount, currency)."""
    amount: Decimal
    currency: str


TypedValue = Union[BooleanValue, TextValue, DateValue, IntegerValue, DecimalValue, AmountValue]
