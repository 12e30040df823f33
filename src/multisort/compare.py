"""
Ascending comparison of arbitrary values.

``compare_values`` is total: every pair of inputs, however mismatched, yields
-1, 0 or 1 and nothing is raised. The rules, by pair of ``ValueKind``:

    NULL    / NULL       equal
    NULL    / anything   after (``NullPlacement.LAST``) or before (``FIRST``)
    NUMBER  / NUMBER     numeric
    BOOLEAN / BOOLEAN    False < True
    BOOLEAN / NUMBER     numeric, with False == 0 and True == 1
    TIMESTAMP pairs      by offset from the Unix epoch
    TEXT    / TEXT       code point order
    anything else        ``str(a)`` against ``str(b)``; equal if ``str`` fails
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from multisort.exceptions import SortConfigurationError
from multisort.values import ValueKind, classify, epoch_offset

logger = logging.getLogger(__name__)


class NullPlacement(str, Enum):
    LAST = "last"
    FIRST = "first"

    @classmethod
    def coerce(cls, value: "NullPlacement | str") -> "NullPlacement":
        """Accept a member or its string value, rejecting anything else."""
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(repr(member.value) for member in cls)
            raise SortConfigurationError(
                f"Unknown null placement {value!r}; expected one of {allowed}"
            ) from None


_NUMERIC = (ValueKind.NUMBER, ValueKind.BOOLEAN)


def _sign(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def _compare_as_text(a: Any, b: Any) -> int:
    try:
        left, right = str(a), str(b)
    except Exception:
        logger.debug(
            "No string form for %s / %s; treating as equal",
            type(a).__name__,
            type(b).__name__,
        )
        return 0
    return _sign(left, right)


def _as_number(value: Any, kind: ValueKind) -> Any:
    return int(value) if kind is ValueKind.BOOLEAN else value


def _compare_numbers(a: Any, b: Any) -> int:
    try:
        return _sign(a, b)
    except (TypeError, ArithmeticError):
        # Real subclasses with no ordering against each other
        return _compare_as_text(a, b)


def _compare_timestamps(a: Any, b: Any) -> int:
    try:
        return _sign(epoch_offset(a), epoch_offset(b))
    except (TypeError, ValueError, OverflowError):
        # datetime64 outside the range pandas can represent
        return _compare_as_text(a, b)


def compare_values(
    a: Any,
    b: Any,
    nulls: NullPlacement | str = NullPlacement.LAST,
) -> int:
    """Compare two values for ascending order.

    Args:
        a: Left value
        b: Right value
        nulls: Where null values (None, NaN, NA, NaT) sort relative to
            everything else. Nulls are always equal to each other.

    Returns:
        -1 if a sorts before b, 1 if after, 0 if they tie

    Raises:
        SortConfigurationError: If ``nulls`` is not a known placement

    Example:
        >>> compare_values(2, 10)
        -1
        >>> compare_values(None, 10)
        1
        >>> compare_values(None, 10, nulls="first")
        -1
    """
    placement = NullPlacement.coerce(nulls)
    null_sign = 1 if placement is NullPlacement.LAST else -1

    match (classify(a), classify(b)):
        case (ValueKind.NULL, ValueKind.NULL):
            return 0
        case (ValueKind.NULL, _):
            return null_sign
        case (_, ValueKind.NULL):
            return -null_sign
        case (left, right) if left in _NUMERIC and right in _NUMERIC:
            return _compare_numbers(_as_number(a, left), _as_number(b, right))
        case (ValueKind.TIMESTAMP, ValueKind.TIMESTAMP):
            return _compare_timestamps(a, b)
        case (ValueKind.TEXT, ValueKind.TEXT):
            return _sign(a, b)
        case _:
            return _compare_as_text(a, b)
