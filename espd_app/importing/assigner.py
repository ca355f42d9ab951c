"""
Field assignment of typed requirement values onto criterion records.
"""

from typing import Any, Optional, Union

from ..criteria.models import CriterionRecord, DynamicGroupRecord
from ..criteria.setters import find_setter
from ..data.models import AmountValue, TypedValue
from ..definitions.models import RequirementDefinition
from ..errors import FieldMismatchError
from .models import ImportIssues

AssignTarget = Union[CriterionRecord, DynamicGroupRecord]


class FieldAssigner:
    """
    Writes typed values onto the field(s) named by a requirement definition.

    Amounts are split into a value field and a currency field; every other
    value goes to the first target field. Writes into a DynamicGroupRecord
    are keyed by field name; writes onto a fixed record go through the typed
    setter table of its variant.
    """

    def assign(self, target: AssignTarget, definition: RequirementDefinition,
               value: TypedValue, issues: Optional[ImportIssues] = None) -> tuple[str, ...]:
        """
        Write a typed value to its target field(s).

        Args:
            target: Criterion record or dynamic group record
            definition: Definition of the answered requirement
            value: Parsed response value
            issues: Collector for recovered faults of the current import

        Returns:
            Names of the fields actually written
        """
        field_name = definition.primary_field
        if field_name is None:
            return ()

        if isinstance(value, AmountValue):
            writes = [(field_name, value.amount)]
            if definition.currency_field is not None:
                writes.append((definition.currency_field, value.currency))
            else:
                self._mismatch(
                    issues,
                    FieldMismatchError(
                        f"Amount requirement '{definition.description}' has no currency field",
                        field_name=None,
                        record_type=type(target).__name__,
                        requirement_id=definition.id,
                    ),
                )
        else:
            writes = [(field_name, value.value)]

        written = []
        for name, plain_value in writes:
            if self._write(target, definition, name, plain_value, issues):
                written.append(name)
        return tuple(written)

    def _write(self, target: AssignTarget, definition: RequirementDefinition,
               field_name: str, value: Any, issues: Optional[ImportIssues]) -> bool:
        if isinstance(target, DynamicGroupRecord):
            target.put(field_name, value)
            return True

        setter = find_setter(target, field_name)
        if setter is None:
            self._mismatch(
                issues,
                FieldMismatchError(
                    f"Could not set value '{value}' on field '{field_name}' of requirement "
                    f"'{definition.description}' with id '{definition.id}'",
                    field_name=field_name,
                    record_type=type(target).__name__,
                    requirement_id=definition.id,
                ),
            )
            return False

        try:
            setter(target, value)
        except TypeError as e:
            self._mismatch(
                issues,
                FieldMismatchError(
                    f"Could not set value '{value}' on field '{field_name}' of requirement "
                    f"'{definition.description}' with id '{definition.id}': {e}",
                    field_name=field_name,
                    record_type=type(target).__name__,
                    requirement_id=definition.id,
                ),
            )
            return False
        return True

    @staticmethod
    def _mismatch(issues: Optional[ImportIssues], error: FieldMismatchError) -> None:
        if issues is None:
            issues = ImportIssues()
        issues.record(error)
