"""
Definitions catalogue loading.

Builds a DefinitionRegistry from a YAML or JSON catalogue file:

    version: "2016.12"
    groups:
      - id: <uuid>
        unbounded: true
    requirements:
      - id: <uuid>
        description: Amount
        response_type: AMOUNT
        fields: [amount, currency]
    aliases:
      requirements: {<legacy uuid>: <canonical uuid>}
      groups: {<legacy uuid>: <canonical uuid>}
"""

from pathlib import Path
from typing import Any, Optional

import orjson
import yaml

from ..errors import DefinitionLoadError
from ..logging.config import get_logger
from .models import GroupDefinition, RequirementDefinition, ResponseType, ValueKind
from .registry import DefinitionRegistry

logger = get_logger(__name__)


def load_registry(path: Path) -> DefinitionRegistry:
    """
    Load a definitions catalogue file into a registry.

    Args:
        path: Path to a .yaml, .yml or .json catalogue

    Returns:
        Immutable DefinitionRegistry

    Raises:
        DefinitionLoadError: If the file cannot be read or is malformed
    """
    path = Path(path)
    source = str(path)

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DefinitionLoadError(f"Cannot read definitions file: {e}", source=source)

    try:
        if path.suffix.lower() == ".json":
            data = orjson.loads(raw)
        elif path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(raw)
        else:
            raise DefinitionLoadError(f"Unsupported definitions format '{path.suffix}'", source=source)
    except (orjson.JSONDecodeError, yaml.YAMLError) as e:
        raise DefinitionLoadError(f"Invalid definitions file: {e}", source=source)

    registry = registry_from_mapping(data, source=source)
    logger.info(
        "Definitions loaded",
        source=source,
        version=(data or {}).get("version"),
        requirements=len(registry.requirements),
        groups=len(registry.groups),
        aliases=len(registry.requirement_aliases) + len(registry.group_aliases),
    )
    return registry


def registry_from_mapping(data: Any, source: Optional[str] = None) -> DefinitionRegistry:
    """
    Build a registry from an already parsed catalogue mapping.

    Raises:
        DefinitionLoadError: If the catalogue is structurally invalid
    """
    if not isinstance(data, dict):
        raise DefinitionLoadError("Definitions catalogue must be a mapping", source=source)

    requirements = [_parse_requirement(entry, source) for entry in data.get("requirements") or []]
    groups = [_parse_group(entry, source) for entry in data.get("groups") or []]

    _check_unique([req.id for req in requirements], "requirement", source)
    _check_unique([group.id for group in groups], "group", source)

    aliases = data.get("aliases") or {}
    if not isinstance(aliases, dict):
        raise DefinitionLoadError("'aliases' must be a mapping", source=source)

    requirement_aliases = _parse_aliases(
        aliases.get("requirements"), {req.id for req in requirements}, "requirement", source
    )
    group_aliases = _parse_aliases(
        aliases.get("groups"), {group.id for group in groups}, "group", source
    )

    return DefinitionRegistry(
        requirements=requirements,
        groups=groups,
        requirement_aliases=requirement_aliases,
        group_aliases=group_aliases,
    )


def _parse_requirement(entry: Any, source: Optional[str]) -> RequirementDefinition:
    if not isinstance(entry, dict) or not entry.get("id"):
        raise DefinitionLoadError("Requirement entry must be a mapping with an 'id'", source=source)

    requirement_id = str(entry["id"])
    try:
        response_type = ResponseType(entry.get("response_type"))
    except ValueError:
        raise DefinitionLoadError(
            f"Unknown response type '{entry.get('response_type')}'",
            source=source, entry_id=requirement_id,
        )

    fields = entry.get("fields") or []
    if isinstance(fields, str):
        fields = [fields]
    fields = tuple(str(f) if f is not None else "" for f in fields)

    mapped = [f for f in fields if f.strip()]
    if response_type.value_kind is ValueKind.AMOUNT:
        if mapped and len(fields) != 2:
            raise DefinitionLoadError(
                "Amount requirements must target a value field and a currency field",
                source=source, entry_id=requirement_id,
            )
    elif len(fields) > 1:
        raise DefinitionLoadError(
            f"{response_type.value} requirements target at most one field",
            source=source, entry_id=requirement_id,
        )

    return RequirementDefinition(
        id=requirement_id,
        description=str(entry.get("description") or ""),
        response_type=response_type,
        fields=fields,
    )


def _parse_group(entry: Any, source: Optional[str]) -> GroupDefinition:
    if not isinstance(entry, dict) or not entry.get("id"):
        raise DefinitionLoadError("Group entry must be a mapping with an 'id'", source=source)

    unbounded = entry.get("unbounded", False)
    if not isinstance(unbounded, bool):
        raise DefinitionLoadError(
            "'unbounded' must be a boolean", source=source, entry_id=str(entry["id"])
        )

    return GroupDefinition(
        id=str(entry["id"]),
        unbounded=unbounded,
        description=entry.get("description"),
    )


def _parse_aliases(raw: Any, canonical_ids: set[str], kind: str,
                   source: Optional[str]) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise DefinitionLoadError(f"{kind} aliases must be a mapping", source=source)

    aliases = {}
    for legacy_id, canonical_id in raw.items():
        legacy_id, canonical_id = str(legacy_id), str(canonical_id)
        if canonical_id not in canonical_ids:
            raise DefinitionLoadError(
                f"Legacy {kind} id '{legacy_id}' points at unknown id '{canonical_id}'",
                source=source, entry_id=legacy_id,
            )
        if legacy_id in canonical_ids:
            raise DefinitionLoadError(
                f"Legacy {kind} id '{legacy_id}' shadows a current {kind} id",
                source=source, entry_id=legacy_id,
            )
        aliases[legacy_id] = canonical_id
    return aliases


def _check_unique(ids: list[str], kind: str, source: Optional[str]) -> None:
    seen = set()
    for entry_id in ids:
        if entry_id in seen:
            raise DefinitionLoadError(f"Duplicate {kind} id '{entry_id}'", source=source, entry_id=entry_id)
        seen.add(entry_id)
