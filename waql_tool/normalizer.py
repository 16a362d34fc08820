"""
Result Normalizer

Turns the ``return`` array of a WAQL response into a Table. The service
returns whatever properties the query asked for, and objects in one result
need not share keys, so columns are discovered rather than assumed:

    [{"a": 1, "b": "x"}, {"b": "y", "c": true}]

    columns: a, b, c
    rows:    {"a": "1", "b": "x", "c": ""}
             {"a": "",  "b": "y", "c": "true"}

Column order is first-seen order. Output depends only on the input.
"""

import json
from typing import Any, Dict, List, Optional

from .models import Table

RETURN_KEY = "return"


def stringify(value: Any) -> str:
    """
    Render a JSON value as table text.

    Strings pass through, numbers use their JSON text, booleans become
    ``true``/``false``, null becomes ``null`` and objects or arrays become
    compact JSON.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def discover_columns(items: List[Any]) -> List[str]:
    """Collect object keys across items in first-seen order."""
    columns = []
    seen = set()
    for item in items:
        if not isinstance(item, dict):
            continue
        for key in item:
            if key not in seen:
                seen.add(key)
                columns.append(key)
    return columns


def build_row(item: Dict[str, Any], columns: List[str]) -> Dict[str, str]:
    return {
        column: stringify(item[column]) if column in item else ""
        for column in columns
    }


def normalize(result: Dict[str, Any]) -> Optional[Table]:
    """
    Normalize a WAQL response into a Table.

    Args:
        result: Response object from the query service

    Returns:
        Table, or None when there is no non-empty ``return`` array
        (e.g. count-style responses). Array elements that are not objects
        are skipped.
    """
    if not isinstance(result, dict):
        return None

    items = result.get(RETURN_KEY)
    if not isinstance(items, list) or not items:
        return None

    columns = discover_columns(items)
    rows = [build_row(item, columns) for item in items if isinstance(item, dict)]

    return Table(columns=columns, rows=rows)
