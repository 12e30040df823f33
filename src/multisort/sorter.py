"""Multi-criteria sorting of records.

Records are ordered ascending by the first criterion, later criteria only
breaking ties left by earlier ones. Records that tie on every criterion keep
their input order: ``sort_by`` tags each record with its original position and
uses it as the final tie-break, so stability does not depend on the
underlying sort.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Iterable, List, Optional, Sequence

from multisort.compare import NullPlacement, compare_values
from multisort.criteria import Criterion, CriterionLike, resolve_criteria

logger = logging.getLogger(__name__)


@functools.total_ordering
class RecordKey:
    """Comparison key wrapping one record.

    Criterion values are computed lazily and cached, so an accessor runs at
    most once per record and is never run for criteria past the first one
    that separates two records.
    """

    __slots__ = ("record", "index", "_criteria", "_nulls", "_values")

    def __init__(
        self,
        record: Any,
        criteria: Sequence[Criterion],
        nulls: NullPlacement = NullPlacement.LAST,
        index: Optional[int] = None,
    ):
        self.record = record
        self.index = index
        self._criteria = criteria
        self._nulls = nulls
        self._values: List[Any] = []

    def value(self, position: int) -> Any:
        values = self._values
        while len(values) <= position:
            values.append(self._criteria[len(values)].value_of(self.record))
        return values[position]

    def compare(self, other: "RecordKey") -> int:
        for position in range(len(self._criteria)):
            result = compare_values(self.value(position), other.value(position), self._nulls)
            if result:
                return result
        if self.index is None or other.index is None:
            return 0
        return (self.index > other.index) - (self.index < other.index)

    def __lt__(self, other: "RecordKey") -> bool:
        return self.compare(other) < 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordKey):
            return NotImplemented
        return self.compare(other) == 0

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RecordKey({self.record!r}, index={self.index})"


def sort_key(
    criteria: CriterionLike | Iterable[CriterionLike],
    *,
    nulls: NullPlacement | str = NullPlacement.LAST,
) -> Callable[[Any], RecordKey]:
    """Build a ``key=`` function implementing the multi-criteria order.

    Usage:
        rows.sort(key=sort_key(["user", "age"]))
        youngest = min(rows, key=sort_key(["age"]))
    """
    resolved = resolve_criteria(criteria)
    placement = NullPlacement.coerce(nulls)

    def key(record: Any) -> RecordKey:
        return RecordKey(record, resolved, placement)

    return key


def compare_records(
    a: Any,
    b: Any,
    criteria: CriterionLike | Iterable[CriterionLike],
    *,
    nulls: NullPlacement | str = NullPlacement.LAST,
) -> int:
    """Compare two records criterion by criterion.

    Returns:
        The first non-zero ``compare_values`` result, or 0 if every
        criterion ties
    """
    key = sort_key(criteria, nulls=nulls)
    return key(a).compare(key(b))


def sort_by(
    items: Iterable[Any],
    criteria: CriterionLike | Iterable[CriterionLike],
    *,
    nulls: NullPlacement | str = NullPlacement.LAST,
) -> List[Any]:
    """Return a new list of ``items`` sorted by ``criteria``.

    Args:
        items: Records to sort. Never modified.
        criteria: Field names and/or one-argument accessors, highest
            precedence first. May be empty.
        nulls: Placement of None / NaN / NA / NaT values ("last" or "first")

    Returns:
        A new list holding the same records in ascending order

    Raises:
        InvalidCriterionError: If a criterion is neither a field name nor callable
        SortConfigurationError: If ``nulls`` is not a known placement

    Any exception raised by an accessor propagates unchanged and no partial
    result is produced.

    Example:
        >>> users = [
        ...     {"user": "foo", "age": 24},
        ...     {"user": "bar", "age": 7},
        ...     {"user": "foo ", "age": 8},
        ...     {"user": "bar ", "age": 29},
        ... ]
        >>> [(u["user"], u["age"]) for u in sort_by(users, ["user", "age"])]
        [('bar', 7), ('bar ', 29), ('foo', 24), ('foo ', 8)]
    """
    resolved = resolve_criteria(criteria)
    placement = NullPlacement.coerce(nulls)
    records = list(items)

    if not resolved or len(records) < 2:
        return records

    logger.debug("Sorting %d records by %s", len(records), resolved)
    keys = [
        RecordKey(record, resolved, placement, index=position)
        for position, record in enumerate(records)
    ]
    keys.sort()
    return [key.record for key in keys]
