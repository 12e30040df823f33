"""Row ordering for pandas DataFrames.

``sort_frame`` applies the same comparator as ``sort_by`` to the rows of a
DataFrame. Unlike ``DataFrame.sort_values`` it accepts accessor functions
alongside column names and orders mixed-type object columns without raising.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List

import pandas as pd

from multisort.compare import NullPlacement
from multisort.criteria import (
    Criterion,
    CriterionLike,
    FieldCriterion,
    FunctionCriterion,
    resolve_criteria,
)
from multisort.sorter import sort_by

logger = logging.getLogger(__name__)


def _column_reader(frame: pd.DataFrame, column: Any) -> Callable[[int], Any]:
    if column not in frame.columns:
        return lambda position: None
    values = frame[column].tolist()
    return values.__getitem__


def _row_reader(frame: pd.DataFrame, func: Callable[[pd.Series], Any]) -> Callable[[int], Any]:
    def read(position: int) -> Any:
        return func(frame.iloc[position])

    return read


def _positional(frame: pd.DataFrame, criterion: Criterion) -> FunctionCriterion:
    if isinstance(criterion, FieldCriterion):
        return FunctionCriterion(_column_reader(frame, criterion.field))
    return FunctionCriterion(_row_reader(frame, criterion.func))


def sort_frame(
    frame: pd.DataFrame,
    criteria: CriterionLike | Iterable[CriterionLike],
    *,
    nulls: NullPlacement | str = NullPlacement.LAST,
) -> pd.DataFrame:
    """Return a copy of ``frame`` with its rows sorted by ``criteria``.

    Args:
        frame: DataFrame to sort. Never modified.
        criteria: Column names and/or functions taking a row (``pd.Series``)
        nulls: Placement of missing values ("last" or "first")

    Returns:
        New DataFrame with the rows reordered. Index labels travel with their
        rows; call ``reset_index(drop=True)`` for a fresh RangeIndex.

    Raises:
        TypeError: If ``frame`` is not a pandas DataFrame

    Example:
        >>> df = pd.DataFrame({"dept": ["hr", "eng", "eng"], "age": [50, 45, 30]})
        >>> sort_frame(df, ["dept", "age"])["age"].tolist()
        [30, 45, 50]
    """
    if not isinstance(frame, pd.DataFrame):
        raise TypeError(f"Expected pandas DataFrame, got {type(frame).__name__}")

    adapted = [_positional(frame, criterion) for criterion in resolve_criteria(criteria)]
    logger.debug("Sorting frame of shape %s by %d criteria", frame.shape, len(adapted))
    order: List[int] = sort_by(range(len(frame)), adapted, nulls=nulls)
    return frame.iloc[order].copy()
