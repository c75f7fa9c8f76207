"""
Evaluation of a single cron field into the integers it matches.

Supported forms, combinable with commas:
- Wildcard: *
- Single values: 5
- Ranges: 1-5
- Steps: */15, 10-30/5, 10/5 (open-ended up to the field maximum)
"""

import re
from typing import List, Optional, Set, Tuple

from colored_logger import get_colored_logger

from .errors import InvalidRange, InvalidStep, ValueOutOfBounds

logger = get_colored_logger(__name__)

WILDCARD = "*"

_INTEGER = re.compile(r"[0-9]+")


def _parse_int(text: str) -> Optional[int]:
    """Return the integer for a run of ASCII digits, or None."""
    if _INTEGER.fullmatch(text) is None:
        return None
    return int(text)


def parse_field(field: str, min_val: int, max_val: int) -> List[int]:
    """
    Expand a cron field into a sorted list of distinct integers.

    Args:
        field: The field text (e.g. "*/15", "1-5", "1,3,5")
        min_val: Smallest value allowed for this field
        max_val: Largest value allowed for this field

    Returns:
        Ascending list of matched values, without duplicates

    Raises:
        InvalidStep: If a step divisor is not a positive integer
        InvalidRange: If a range or step base is malformed or out of bounds
        ValueOutOfBounds: If a single value is malformed or out of bounds
    """
    if field == WILDCARD:
        return list(range(min_val, max_val + 1))

    values: Set[int] = set()

    for part in field.split(","):
        # Step first: "1-5/2" is a step over a range, never a plain range
        if "/" in part:
            _add_step(part, min_val, max_val, values)
        elif "-" in part:
            _add_range(part, min_val, max_val, values)
        else:
            _add_single(part, min_val, max_val, values)

    result = sorted(values)
    logger.debug("Field %r expanded to %d value(s)", field, len(result))
    return result


def _bounds(
    text: str, start: Optional[int], end: Optional[int], min_val: int, max_val: int
) -> Tuple[int, int]:
    if start is None or end is None or start < min_val or end > max_val or start > end:
        raise InvalidRange(text)
    return start, end


def _add_step(expr: str, min_val: int, max_val: int, values: Set[int]) -> None:
    base, step_str = expr.split("/", 1)

    step = _parse_int(step_str)
    if step is None or step <= 0:
        raise InvalidStep(step_str)

    if base == WILDCARD:
        start, end = min_val, max_val
    elif "-" in base:
        start_str, end_str = base.split("-", 1)
        start, end = _parse_int(start_str), _parse_int(end_str)
    else:
        start, end = _parse_int(base), max_val

    start, end = _bounds(base, start, end, min_val, max_val)
    values.update(range(start, end + 1, step))


def _add_range(expr: str, min_val: int, max_val: int, values: Set[int]) -> None:
    start_str, end_str = expr.split("-", 1)
    start, end = _bounds(
        expr, _parse_int(start_str), _parse_int(end_str), min_val, max_val
    )
    values.update(range(start, end + 1))


def _add_single(expr: str, min_val: int, max_val: int, values: Set[int]) -> None:
    value = _parse_int(expr)
    if value is None or not min_val <= value <= max_val:
        raise ValueOutOfBounds(expr)
    values.add(value)
