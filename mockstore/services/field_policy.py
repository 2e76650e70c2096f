from __future__ import annotations

from typing import Any, Iterable, List, Mapping


def is_missing(value: Any) -> bool:
    """Absent/None/"" all count as not provided (JSON has no undefined)."""
    return value is None or value == ""


def find_undocumented_fields(body: Mapping[str, Any], allowed_fields: Iterable[str]) -> List[str]:
    allowed = set(allowed_fields)
    return [k for k in body.keys() if k not in allowed]


def find_missing_fields(body: Mapping[str, Any], required_fields: Iterable[str]) -> List[str]:
    return [f for f in required_fields if is_missing(body.get(f))]
