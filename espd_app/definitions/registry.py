"""
Definition registry: immutable lookup of requirement and group definitions.

Documents produced before the 2016.12 schema revision used several parallel
requirement groups per criterion, each with its own requirement ids. The
registry rewrites those legacy ids to the canonical ids of the single
unbounded group used since then, so callers never need to know which schema
revision produced a document.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Optional

from .models import GroupDefinition, RequirementDefinition


class DefinitionRegistry:
    """
    Read-only lookup from requirement and group ids to their definitions.

    Built once at startup; never mutated afterwards, so it can be shared by
    concurrent imports without locking.
    """

    def __init__(
        self,
        requirements: Iterable[RequirementDefinition] = (),
        groups: Iterable[GroupDefinition] = (),
        requirement_aliases: Optional[Mapping[str, str]] = None,
        group_aliases: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._requirements = MappingProxyType({req.id: req for req in requirements})
        self._groups = MappingProxyType({group.id: group for group in groups})
        self._requirement_aliases = MappingProxyType(dict(requirement_aliases or {}))
        self._group_aliases = MappingProxyType(dict(group_aliases or {}))

        legacy: dict[str, tuple[str, ...]] = {}
        for legacy_id, canonical_id in self._requirement_aliases.items():
            legacy[canonical_id] = legacy.get(canonical_id, ()) + (legacy_id,)
        self._legacy_requirement_ids = MappingProxyType(legacy)

    @property
    def requirements(self) -> Mapping[str, RequirementDefinition]:
        return self._requirements

    @property
    def groups(self) -> Mapping[str, GroupDefinition]:
        return self._groups

    @property
    def requirement_aliases(self) -> Mapping[str, str]:
        return self._requirement_aliases

    @property
    def group_aliases(self) -> Mapping[str, str]:
        return self._group_aliases

    def resolve_requirement_id(self, requirement_id: str) -> str:
        """Rewrite a legacy requirement id to its canonical id."""
        return self._requirement_aliases.get(requirement_id, requirement_id)

    def resolve_group_id(self, group_id: str) -> str:
        """Rewrite a legacy group id to its canonical id."""
        return self._group_aliases.get(group_id, group_id)

    def is_legacy_requirement_id(self, requirement_id: str) -> bool:
        return requirement_id in self._requirement_aliases

    def legacy_ids_for(self, requirement_id: str) -> tuple[str, ...]:
        """Legacy ids that resolve to the given canonical requirement id."""
        return self._legacy_requirement_ids.get(requirement_id, ())

    def find_requirement_by_id(self, requirement_id: Optional[str]) -> Optional[RequirementDefinition]:
        """
        Find a requirement definition, resolving legacy ids transparently.

        Args:
            requirement_id: Canonical or legacy requirement id

        Returns:
            The definition, or None if the id is unknown
        """
        if not requirement_id:
            return None
        return self._requirements.get(self.resolve_requirement_id(requirement_id))

    def find_group_by_id(self, group_id: Optional[str]) -> Optional[GroupDefinition]:
        """
        Find a group definition, resolving legacy ids transparently.

        Args:
            group_id: Canonical or legacy group id

        Returns:
            The definition, or None if the id is unknown
        """
        if not group_id:
            return None
        return self._groups.get(self.resolve_group_id(group_id))

    def __len__(self) -> int:
        return len(self._requirements) + len(self._groups)

    def __repr__(self) -> str:
        return (
            f"DefinitionRegistry(requirements={len(self._requirements)}, "
            f"groups={len(self._groups)}, aliases={len(self._requirement_aliases) + len(self._group_aliases)})"
        )
