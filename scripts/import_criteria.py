#!/usr/bin/env python3
"""Import the criteria of a response document and print the records as JSON."""

import sys
from pathlib import Path

import orjson

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from espd_app.criteria.export import records_to_json
from espd_app.engine import EspdImportEngine
from espd_app.errors import DefinitionLoadError, UnsupportedCriterionTypeError
from espd_app.logging import configure_logging


def main():
    """Main import function."""
    if len(sys.argv) != 2:
        print("Usage: import_criteria.py <criteria.json>", file=sys.stderr)
        sys.exit(2)

    document = orjson.loads(Path(sys.argv[1]).read_bytes())
    criteria = document.get("criteria", []) if isinstance(document, dict) else document

    try:
        engine = EspdImportEngine()
    except (ValueError, DefinitionLoadError) as e:
        print(f"❌ Cannot start import engine: {e}", file=sys.stderr)
        sys.exit(1)

    logging_config = engine.config["logging"]
    configure_logging(level=logging_config["level"], format_json=logging_config["format_json"])

    try:
        results = engine.import_criteria(criteria)
    except UnsupportedCriterionTypeError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    sys.stdout.buffer.write(records_to_json([result.record for result in results]))
    sys.stdout.buffer.write(b"\n")

    issue_count = sum(len(result.issues) for result in results)
    if issue_count:
        print(f"⚠️  {issue_count} recovered fault(s), see log", file=sys.stderr)


if __name__ == "__main__":
    main()
