#!/usr/bin/env python3
"""
Basic Usage Example - ESPD Criterion Import Engine

This script demonstrates the basic usage of the criterion import engine with
a small response document. It shows how to:
- Initialize the engine
- Import answered and unanswered criteria
- Read fixed fields and dynamic group records
- Inspect recovered faults

Run: python examples/basic_usage.py
"""

from pathlib import Path
from typing import Any, Dict, List

import orjson

from espd_app.criteria.export import records_to_json
from espd_app.engine import EspdImportEngine
from espd_app.logging import configure_logging


def load_sample_document() -> List[Dict[str, Any]]:
    """Load the sample response document next to this script."""
    path = Path(__file__).parent / "sample_criteria.json"
    return orjson.loads(path.read_bytes())["criteria"]


def main():
    """Run the basic usage demonstration."""
    configure_logging(level="WARNING")

    print("🚀 ESPD Criterion Import - Basic Usage")
    print("=" * 50)

    engine = EspdImportEngine()
    print(f"📚 Definitions: {engine.registry!r}")

    results = engine.import_criteria(load_sample_document())

    for result in results:
        record = result.record
        metadata = record.metadata
        status = "answered" if record.exists else "not answered"
        print(f"\n📋 {metadata.name} [{metadata.type_code}] - {status}")

        if record.exists and hasattr(record, "answer"):
            print(f"   Answer: {record.answer}")

        for index, group in enumerate(getattr(record, "unbounded_groups", []), start=1):
            values = ", ".join(f"{key}={value}" for key, value in group.items())
            print(f"   Occurrence {index}: {values}")

        for issue in result.issues:
            print(f"   ⚠️  {type(issue).__name__}: {issue}")

    print("\n📄 JSON output:")
    print(records_to_json([result.record for result in results]).decode())


if __name__ == "__main__":
    main()
