"""
Classification of arbitrary Python values for ordering.

Every value handed to the comparator is first mapped to one member of the
closed ``ValueKind`` set. The comparator then dispatches on the pair of kinds,
which keeps the ordering rules explicit instead of relying on whatever ``<``
happens to do for a given pair of types.
"""

from __future__ import annotations

import numbers
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

import numpy as np
import pandas as pd


class ValueKind(str, Enum):
    NUMBER = "number"
    TEXT = "text"
    TIMESTAMP = "timestamp"
    BOOLEAN = "boolean"
    NULL = "null"
    OTHER = "other"


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def is_null(value: Any) -> bool:
    """Return True for None and for scalar missing markers.

    Covers ``None``, float and Decimal NaN, ``pandas.NA``, ``pandas.NaT`` and
    ``numpy.datetime64("NaT")``. Containers are never null, even when empty.
    """
    if value is None:
        return True
    if isinstance(value, Decimal):
        return value.is_nan()
    return bool(pd.api.types.is_scalar(value) and pd.isna(value))


def classify(value: Any) -> ValueKind:
    """Map a value to its ``ValueKind``.

    The checks run in a fixed order: null markers win over everything (NaN is
    a float but sorts as missing), and booleans are tested before numbers
    because ``bool`` is a subclass of ``int``.
    """
    if is_null(value):
        return ValueKind.NULL
    if isinstance(value, (bool, np.bool_)):
        return ValueKind.BOOLEAN
    if isinstance(value, (numbers.Real, Decimal)):
        return ValueKind.NUMBER
    if isinstance(value, (datetime, date, np.datetime64)):
        return ValueKind.TIMESTAMP
    if isinstance(value, str):
        return ValueKind.TEXT
    return ValueKind.OTHER


def epoch_offset(value: datetime | date | np.datetime64) -> timedelta:
    """Return the signed distance of a timestamp from the Unix epoch.

    Naive datetimes are read as UTC and a plain ``date`` stands for its UTC
    midnight, so every TIMESTAMP value lands on a single timeline. The result
    is a ``timedelta`` (or ``pandas.Timedelta`` for nanosecond values), which
    compares exactly where float seconds would round.
    """
    if isinstance(value, np.datetime64):
        value = pd.Timestamp(value)
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.utcoffset() is None:
        value = value.replace(tzinfo=timezone.utc)
    return value - _EPOCH
