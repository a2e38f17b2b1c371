"""Lenient coercion of untrusted JSON values"""

import math
import re
from collections.abc import Mapping
from typing import Any, List, Tuple

_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_TRUE_STRINGS = {"true", "yes", "y", "on", "1"}


def is_sequence(value: Any) -> bool:
    """JSON array check (strings and mappings are not sequences here)"""
    return isinstance(value, (list, tuple))


def parse_real(value: Any) -> float:
    """
    Parse a real number, falling back to 0.

    Strings are read by their leading numeric prefix, so "12.5ha" -> 12.5
    and "abc" -> 0. Booleans, non-finite values and integers
    beyond float range count as failures.
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        match = _NUMBER_PREFIX.match(value)
        if not match:
            return 0.0
        try:
            number = float(match.group(0))
        except ValueError:
            return 0.0
    else:
        return 0.0

    return number if math.isfinite(number) else 0.0


def parse_flag(value: Any) -> bool:
    """Presence flag: anything not recognisably "yes" is absent"""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, float):
        return math.isfinite(value) and value != 0
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return False


def parse_crops(value: Any) -> Tuple[str, ...]:
    """Distinct, non-blank crop identifiers (case-insensitive, first spelling kept)"""
    if not is_sequence(value):
        return ()

    seen = set()
    crops: List[str] = []
    for item in value:
        if item is None:
            continue
        name = str(item).strip()
        key = name.casefold()
        if not name or key in seen:
            continue
        seen.add(key)
        crops.append(name)
    return tuple(crops)


def parse_loan_status(item: Any) -> str:
    """Status of one previous-loan entry; entries without one get an empty status"""
    if isinstance(item, Mapping):
        status = item.get("status")
        if isinstance(status, str):
            return status
    return ""
