"""
Tree walker: transcribes a criterion's requirement tree onto its record.

The walk is a pre-order depth-first traversal. Each entry into a group node
whose definition is unbounded opens a fresh DynamicGroupRecord; requirements
found below it (up to the next nested unbounded group) are written into that
occurrence instead of the fixed fields of the record.
"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import ParserParams
from ..criteria.models import CriterionRecord, DynamicGroupRecord, has_unbounded_groups
from ..data.models import AmountValue, GroupNode, RequirementNode, TypedValue
from ..data.parsers import ParseError, parse_response
from ..definitions.models import RequirementDefinition
from ..definitions.registry import DefinitionRegistry
from ..errors import FieldMismatchError, LookupMissError, ResponseParseError
from ..logging.config import get_import_logger
from .assigner import FieldAssigner
from .models import ImportIssues

logger = get_import_logger(__name__)


class _WalkState:
    """Mutable bookkeeping of one walk; never shared between walks."""

    def __init__(self, record: CriterionRecord, issues: ImportIssues) -> None:
        self.record = record
        self.issues = issues
        # (id(target), field name) pairs written through a canonical requirement id
        self.canonical_writes: set[tuple[int, str]] = set()


class TreeWalker:
    """
    Walks requirement group trees against a definition registry.

    The walker holds no per-call state, so one instance can serve any number
    of concurrent imports.
    """

    def __init__(self, registry: DefinitionRegistry, assigner: Optional[FieldAssigner] = None,
                 parser_params: Optional[ParserParams] = None) -> None:
        self.registry = registry
        self.assigner = assigner or FieldAssigner()
        self.parser_params = parser_params or ParserParams()

    def apply(self, record: CriterionRecord, root_groups: Sequence[GroupNode],
              issues: Optional[ImportIssues] = None) -> CriterionRecord:
        """
        Populate a record from the requirement groups of a criterion.

        Args:
            record: Record to populate; modified in place
            root_groups: Top-level requirement groups of the criterion
            issues: Collector for recovered faults of the current import

        Returns:
            The populated record
        """
        state = _WalkState(record, issues if issues is not None else ImportIssues())
        self._walk_groups(root_groups or (), None, state)
        return record

    def _walk_groups(self, groups: Sequence[GroupNode], context: Optional[DynamicGroupRecord],
                     state: _WalkState) -> None:
        for group in groups:
            current = context
            definition = self.registry.find_group_by_id(group.id)

            if definition is None:
                # Requirements below an unresolved group belong to the record itself
                current = None
                if group.id:
                    state.issues.record(
                        LookupMissError(
                            f"Requirement group with id '{group.id}' could not be found",
                            element_id=group.id,
                            element_kind="group",
                        )
                    )
            elif definition.unbounded:
                if has_unbounded_groups(state.record):
                    current = DynamicGroupRecord()
                    state.record.unbounded_groups.append(current)
                else:
                    state.issues.record(
                        FieldMismatchError(
                            f"Unbounded group '{definition.id}' cannot be stored on "
                            f"{type(state.record).__name__}",
                            field_name="unbounded_groups",
                            record_type=type(state.record).__name__,
                        )
                    )

            self._walk_groups(group.groups, current, state)
            self._walk_requirements(group.requirements, current, state)

    def _walk_requirements(self, requirements: Sequence[RequirementNode],
                           context: Optional[DynamicGroupRecord], state: _WalkState) -> None:
        for node in requirements:
            if node.first_response is None:
                logger.debug("Requirement without response skipped", requirement_id=node.id)
                continue

            definition = self.registry.find_requirement_by_id(node.id)
            if definition is None:
                state.issues.record(
                    LookupMissError(
                        f"Requirement with id '{node.id}' could not be found or does not have a response",
                        element_id=node.id,
                    )
                )
                continue

            value = self._parse(definition, node, state.issues)
            if value is None:
                continue

            target = context if context is not None else state.record
            self._assign(target, definition, node, value, state)

    def _assign(self, target, definition: RequirementDefinition, node: RequirementNode,
                value: TypedValue, state: _WalkState) -> None:
        legacy = self.registry.is_legacy_requirement_id(node.id)
        if legacy:
            taken = [
                name for name in _target_fields(definition, value)
                if (id(target), name) in state.canonical_writes
            ]
            if taken:
                logger.debug(
                    "Legacy requirement ignored, field already set by canonical id",
                    requirement_id=node.id,
                    canonical_id=definition.id,
                    fields=taken,
                )
                return

        written = self.assigner.assign(target, definition, value, state.issues)
        if not legacy:
            state.canonical_writes.update((id(target), name) for name in written)

    def _parse(self, definition: RequirementDefinition, node: RequirementNode,
               issues: ImportIssues) -> Optional[TypedValue]:
        if len(node.responses) > 1:
            logger.debug(
                "Multiple responses, only the first is used",
                requirement_id=node.id,
                response_count=len(node.responses),
            )
        try:
            return parse_response(definition.response_type, node.first_response, self.parser_params)
        except ParseError as e:
            issues.record(
                ResponseParseError(
                    f"Could not parse response of requirement '{definition.description}': {e}",
                    requirement_id=node.id,
                    raw_data=node.first_response,
                    expected_format=e.expected_format,
                )
            )
            return None

    def find_requirement(self, requirement_id: str,
                         root_groups: Sequence[GroupNode]) -> Optional[RequirementNode]:
        """
        Depth-first search for the first answered requirement node with an id.

        A group's own requirements are searched before its subgroups.
        """
        for group in root_groups or ():
            for node in group.requirements:
                if node.id == requirement_id and node.first_response is not None:
                    return node
            found = self.find_requirement(requirement_id, group.groups)
            if found is not None:
                return found
        return None

    def read_answer(self, definition: RequirementDefinition, root_groups: Sequence[GroupNode],
                    issues: Optional[ImportIssues] = None) -> Optional[TypedValue]:
        """
        Read the typed answer of one requirement anywhere in the tree.

        The canonical id is searched first, then its legacy ids in alias table
        order. Blank or unparseable answers fall through to the next id.

        Args:
            definition: Definition of the requirement to read
            root_groups: Top-level requirement groups of the criterion
            issues: Collector for recovered faults of the current import;
                without one, faults are dropped unlogged

        Returns:
            The parsed value, or None if no id yields one
        """
        if issues is None:
            issues = ImportIssues(emit=False)

        for requirement_id in (definition.id,) + self.registry.legacy_ids_for(definition.id):
            node = self.find_requirement(requirement_id, root_groups)
            if node is None:
                continue
            value = self._parse(definition, node, issues)
            if value is not None:
                return value

        logger.debug("No answer found", requirement_id=definition.id)
        return None

    def read_requirement(self, requirement_id: str, root_groups: Sequence[GroupNode],
                         issues: Optional[ImportIssues] = None) -> Optional[TypedValue]:
        """
        Read the typed answer of exactly one requirement id, legacy ids included.

        Unlike read_answer, no alias of the id is searched.
        """
        if issues is None:
            issues = ImportIssues(emit=False)

        definition = self.registry.find_requirement_by_id(requirement_id)
        node = self.find_requirement(requirement_id, root_groups)
        if definition is None or node is None:
            return None
        return self._parse(definition, node, issues)


def _target_fields(definition: RequirementDefinition, value: TypedValue) -> tuple[str, ...]:
    if definition.primary_field is None:
        return ()
    if isinstance(value, AmountValue) and definition.currency_field is not None:
        return (definition.primary_field, definition.currency_field)
    return (definition.primary_field,)
