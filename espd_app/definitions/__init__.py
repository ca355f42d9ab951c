"""
Criteria definitions module.

Immutable requirement and group metadata, the versioned registry with legacy
id aliasing, and the catalogue loader.
"""

from .loader import load_registry, registry_from_mapping
from .models import GroupDefinition, RequirementDefinition, ResponseType, ValueKind
from .registry import DefinitionRegistry

__all__ = [
    "DefinitionRegistry",
    "GroupDefinition",
    "RequirementDefinition",
    "ResponseType",
    "ValueKind",
    "load_registry",
    "registry_from_mapping",
]
