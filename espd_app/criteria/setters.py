"""
Typed field setters for criterion record variants.

Requirement definitions name their target fields as strings (nested
sub-record fields use a dotted path, e.g. "self_cleaning.description").
This module resolves those names once, at import time, into setter closures
that check the value type declared on the record dataclass.
"""

import dataclasses
import typing
from collections.abc import Callable
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Optional

from .models import (
    BankruptcyCriterion,
    ConflictInterestCriterion,
    CriminalConvictionsCriterion,
    CriterionRecord,
    EconomicFinancialStandingCriterion,
    LawCriterion,
    MisconductDistortionCriterion,
    OtherCriterion,
    PurelyNationalGrounds,
    QualityAssuranceCriterion,
    SatisfiesAllCriterion,
    SuitabilityCriterion,
    TaxesCriterion,
    TechnicalProfessionalCriterion,
)

Setter = Callable[[Any, Any], None]

# Fields that are never the target of a requirement
_RESERVED_FIELDS = frozenset({"exists", "metadata", "unbounded_groups"})

RECORD_VARIANTS: tuple[type[CriterionRecord], ...] = (
    CriminalConvictionsCriterion,
    TaxesCriterion,
    LawCriterion,
    BankruptcyCriterion,
    MisconductDistortionCriterion,
    ConflictInterestCriterion,
    PurelyNationalGrounds,
    SatisfiesAllCriterion,
    SuitabilityCriterion,
    EconomicFinancialStandingCriterion,
    TechnicalProfessionalCriterion,
    QualityAssuranceCriterion,
    OtherCriterion,
)


def _unwrap_optional(hint: Any) -> Any:
    if typing.get_origin(hint) is typing.Union:
        args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _make_setter(path: tuple[str, ...], expected: type) -> Setter:
    *parents, attribute = path

    def setter(record: Any, value: Any) -> None:
        if value is not None:
            if expected is Decimal and isinstance(value, int) and not isinstance(value, bool):
                value = Decimal(value)
            elif expected is int and isinstance(value, bool):
                raise TypeError(f"Field '{'.'.join(path)}' expects int, got bool")
            elif not isinstance(value, expected):
                raise TypeError(
                    f"Field '{'.'.join(path)}' expects {expected.__name__}, got {type(value).__name__}"
                )

        target = record
        for name in parents:
            target = getattr(target, name)
        setattr(target, attribute, value)

    return setter


def _collect(record_type: type, prefix: tuple[str, ...], setters: dict[str, Setter]) -> None:
    hints = typing.get_type_hints(record_type)
    for record_field in dataclasses.fields(record_type):
        if not prefix and record_field.name in _RESERVED_FIELDS:
            continue

        path = prefix + (record_field.name,)
        expected = _unwrap_optional(hints[record_field.name])

        if dataclasses.is_dataclass(expected):
            _collect(expected, path, setters)
        else:
            setters[".".join(path)] = _make_setter(path, expected)


def build_field_setters(record_type: type) -> MappingProxyType:
    """
    Build the field-name to setter table of one record variant.

    Args:
        record_type: Criterion record dataclass

    Returns:
        Read-only mapping from (dotted) field name to setter closure
    """
    setters: dict[str, Setter] = {}
    _collect(record_type, (), setters)
    return MappingProxyType(setters)


FIELD_SETTERS = MappingProxyType({variant: build_field_setters(variant) for variant in RECORD_VARIANTS})


def find_setter(record: CriterionRecord, field_name: str) -> Optional[Setter]:
    """Setter for a field of a record, None if the variant has no such field."""
    setters = FIELD_SETTERS.get(type(record))
    if setters is None:
        setters = build_field_setters(type(record))
    return setters.get(field_name)
