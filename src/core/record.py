# core/record.py
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional


def get_in(record: Any, path: Sequence[str | int]) -> Optional[Any]:
    """
    Walk `path` into a decoded JSON record.

    Returns the record itself for an empty path and None as soon as a step
    cannot be taken (missing key, wrong container type, index out of range).
    Never raises, so partial catalog records can flow through the pipeline.
    """
    current = record
    for key in path:
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(key)
        elif isinstance(key, int) and isinstance(current, Sequence) and not isinstance(current, str):
            try:
                current = current[key]
            except IndexError:
                return None
        else:
            return None
    return current


def get_str(record: Any, path: Sequence[str | int]) -> str:
    # absent / non-string -> ""
    value = get_in(record, path)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
