#!/usr/bin/env python3
"""Definitions catalogue validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from espd_app.config.loader import ConfigLoader
from espd_app.criteria.setters import FIELD_SETTERS
from espd_app.definitions.loader import load_registry
from espd_app.errors import DefinitionLoadError


def main():
    """Main validation function."""
    if len(sys.argv) > 1:
        path = Path(sys.argv[1])
    else:
        loader = ConfigLoader.create()
        path = loader.definitions_path(loader.merge_config())

    print(f"🔍 Validating definitions catalogue {path}...")

    try:
        registry = load_registry(path)
    except DefinitionLoadError as e:
        print(f"❌ {e}")
        if e.context:
            for key, value in e.context.items():
                print(f"  • {key}: {value}")
        sys.exit(1)

    print(f"✅ Loaded {registry!r}")

    # Fields no record variant declares can only be filled inside unbounded groups
    record_fields = set()
    for setters in FIELD_SETTERS.values():
        record_fields.update(setters)

    unmapped = []
    dynamic_only = []
    for definition in registry.requirements.values():
        if definition.primary_field is None:
            unmapped.append(definition)
            continue
        for name in definition.fields:
            if name not in record_fields:
                dynamic_only.append((definition, name))

    if unmapped:
        print(f"\n📋 {len(unmapped)} requirement(s) not mapped onto any field:")
        for definition in unmapped:
            print(f"  • {definition.id}: {definition.description}")

    if dynamic_only:
        print(f"\n📋 {len(dynamic_only)} field(s) only valid inside unbounded groups:")
        for definition, name in dynamic_only:
            print(f"  • {name} ({definition.id}: {definition.description})")

    unbounded = [group for group in registry.groups.values() if group.unbounded]
    print(f"\n📊 {len(unbounded)} unbounded group(s), "
          f"{len(registry.requirement_aliases)} legacy requirement id(s), "
          f"{len(registry.group_aliases)} legacy group id(s)")

    print("\n🎉 Definitions catalogue is valid!")


if __name__ == "__main__":
    main()
