"""
Sort criteria.

A criterion is either a field name or a one-argument accessor. Both are
normalised once, up front, into a tagged variant with a common ``value_of``
method, so the sorter never inspects criterion types while comparing.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, List, Union

import pandas as pd

from multisort.exceptions import InvalidCriterionError


def read_field(record: Any, field: Hashable) -> Any:
    """Read a named field from a record, returning None when it is missing.

    Lookup depends on the record's shape:
        - Mappings and pandas Series: ``record.get(field)``
        - String fields on any other object: ``getattr(record, field)``
        - Integer fields on lists and tuples: positional index

    Example:
        >>> read_field({"age": 7}, "age")
        7
        >>> read_field({"age": 7}, "name") is None
        True
    """
    if isinstance(record, (Mapping, pd.Series)):
        return record.get(field)
    if isinstance(field, str):
        return getattr(record, field, None)
    if (
        isinstance(field, int)
        and not isinstance(field, bool)
        and isinstance(record, Sequence)
        and not isinstance(record, (str, bytes, bytearray))
    ):
        try:
            return record[field]
        except IndexError:
            return None
    return None


@dataclass(frozen=True)
class FieldCriterion:
    """Sort by the value stored under a field name."""

    field: Hashable

    def value_of(self, record: Any) -> Any:
        return read_field(record, self.field)

    def __repr__(self) -> str:
        return f"FieldCriterion({self.field!r})"


@dataclass(frozen=True)
class FunctionCriterion:
    """Sort by the value an accessor returns for each record.

    Errors raised by the accessor propagate to the caller unchanged.
    """

    func: Callable[[Any], Any]

    def value_of(self, record: Any) -> Any:
        return self.func(record)

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", None) or repr(self.func)
        return f"FunctionCriterion({name})"


Criterion = Union[FieldCriterion, FunctionCriterion]
CriterionLike = Union[Criterion, Callable[[Any], Any], Hashable]


def resolve_criterion(criterion: CriterionLike) -> Criterion:
    """Turn a field name or accessor into a ``Criterion``.

    Raises:
        InvalidCriterionError: If the criterion is neither callable nor hashable
    """
    if isinstance(criterion, (FieldCriterion, FunctionCriterion)):
        return criterion
    if callable(criterion):
        return FunctionCriterion(criterion)
    try:
        hash(criterion)
    except TypeError:
        raise InvalidCriterionError(
            f"Criterion must be a field name or a callable, got "
            f"{type(criterion).__name__}: {criterion!r}"
        ) from None
    return FieldCriterion(criterion)


def resolve_criteria(criteria: CriterionLike | Iterable[CriterionLike]) -> List[Criterion]:
    """Resolve an ordered collection of criteria, keeping their order.

    A lone string or callable is accepted as a single criterion rather than
    being iterated.
    """
    if isinstance(criteria, (str, bytes, FieldCriterion, FunctionCriterion)) or callable(criteria):
        return [resolve_criterion(criteria)]
    return [resolve_criterion(criterion) for criterion in criteria]
