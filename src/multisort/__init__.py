"""
multisort - Multi-key sorting of records by field names and accessor functions.

Records are sorted ascending by the first criterion, with each later criterion
breaking ties left by the ones before it. Values of any type can be compared:
nulls sort last, numbers and timestamps compare numerically, strings by code
point, and anything else by its string form.

Usage:
    >>> import multisort
    >>> users = [{'user': 'foo', 'age': 24}, {'user': 'bar', 'age': 7}]
    >>> multisort.sort_by(users, ['user', lambda u: u['age']])
    [{'user': 'bar', 'age': 7}, {'user': 'foo', 'age': 24}]

Key components:
- sort_by: stable multi-criteria sort returning a new list
- compare_values: total ascending comparison of two arbitrary values
- sort_key / compare_records: the same order for sorted(), min() and max()
- sort_frame: the same order applied to the rows of a pandas DataFrame
"""

from .compare import NullPlacement, compare_values
from .criteria import (
    Criterion,
    FieldCriterion,
    FunctionCriterion,
    read_field,
    resolve_criteria,
    resolve_criterion,
)
from .exceptions import *
from .frame import sort_frame
from .sorter import RecordKey, compare_records, sort_by, sort_key
from .values import ValueKind, classify

# Version
__version__ = "0.1.0"

__all__ = [
    'sort_by',
    'sort_key',
    'compare_records',
    'compare_values',
    'sort_frame',
    'NullPlacement',
    'ValueKind',
    'classify',
    'Criterion',
    'FieldCriterion',
    'FunctionCriterion',
    'read_field',
    'resolve_criterion',
    'resolve_criteria',
    'RecordKey',
    'SortError',
    'InvalidCriterionError',
    'SortConfigurationError',
]
