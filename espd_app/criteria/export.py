"""
Plain-data rendering of criterion records.
"""

import dataclasses
from decimal import Decimal
from typing import Any

import orjson

from .models import CriterionRecord


def record_to_dict(record: CriterionRecord) -> dict[str, Any]:
    """
    Convert a criterion record to a plain dictionary.

    The record variant is kept under the "type" key. Dates and decimals are
    left as Python values; use records_to_json for text output.
    """
    data = {"type": type(record).__name__}
    data.update(dataclasses.asdict(record))
    return data


def _default(obj: Any) -> Any:
    if isinstance(obj, Decimal):
        return str(obj)
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def records_to_json(records: list[CriterionRecord], indent: bool = True) -> bytes:
    """Serialize criterion records to JSON; decimals are written as strings."""
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps([record_to_dict(record) for record in records], default=_default, option=option)
