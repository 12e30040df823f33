"""Tests for field lookup and criterion resolution."""

from __future__ import annotations

from collections import namedtuple
from dataclasses import dataclass
from types import SimpleNamespace

import pandas as pd
import pytest

from multisort import (
    FieldCriterion,
    FunctionCriterion,
    InvalidCriterionError,
    read_field,
    resolve_criteria,
    resolve_criterion,
)

Point = namedtuple("Point", ["x", "y"])


@dataclass
class Item:
    sku: str
    qty: int


# ======================================================================
# 1. read_field
# ======================================================================


class TestReadField:
    def test_dict(self):
        assert read_field({"age": 7}, "age") == 7

    def test_missing_key_is_none(self):
        assert read_field({"age": 7}, "name") is None

    def test_non_string_mapping_keys(self):
        assert read_field({1: "one", (2, 3): "pair"}, 1) == "one"
        assert read_field({(2, 3): "pair"}, (2, 3)) == "pair"

    def test_attributes(self):
        assert read_field(Item("A-1", 3), "qty") == 3
        assert read_field(SimpleNamespace(a=1), "a") == 1

    def test_missing_attribute_is_none(self):
        assert read_field(Item("A-1", 3), "price") is None

    def test_namedtuple_by_name_and_position(self):
        p = Point(1, 2)
        assert read_field(p, "y") == 2
        assert read_field(p, 0) == 1

    def test_sequence_index(self):
        assert read_field(["a", "b"], 1) == "b"
        assert read_field(("a", "b"), -1) == "b"

    def test_index_out_of_range_is_none(self):
        assert read_field(("a", "b"), 5) is None

    def test_bool_is_not_an_index(self):
        assert read_field(["a", "b"], True) is None

    def test_strings_are_not_indexed(self):
        assert read_field("abc", 0) is None

    def test_integer_field_on_plain_object(self):
        assert read_field(Item("A-1", 3), 0) is None

    def test_series(self):
        row = pd.Series({"name": "Alice", "age": 30})
        assert read_field(row, "age") == 30
        assert read_field(row, "salary") is None


# ======================================================================
# 2. Criteria
# ======================================================================


class TestCriteria:
    def test_field_value(self):
        assert FieldCriterion("qty").value_of(Item("A-1", 3)) == 3

    def test_function_value(self):
        assert FunctionCriterion(lambda i: i.qty * 2).value_of(Item("A-1", 3)) == 6

    def test_function_errors_propagate(self):
        criterion = FunctionCriterion(lambda r: r["missing"])
        with pytest.raises(KeyError):
            criterion.value_of({})

    def test_repr(self):
        assert repr(FieldCriterion("age")) == "FieldCriterion('age')"
        assert repr(FunctionCriterion(len)) == "FunctionCriterion(len)"


class TestResolveCriterion:
    def test_callable(self):
        assert resolve_criterion(len) == FunctionCriterion(len)

    def test_class_is_callable(self):
        assert isinstance(resolve_criterion(str), FunctionCriterion)

    def test_field_names(self):
        assert resolve_criterion("age") == FieldCriterion("age")
        assert resolve_criterion(0) == FieldCriterion(0)
        assert resolve_criterion(("a", "b")) == FieldCriterion(("a", "b"))

    def test_resolved_pass_through(self):
        criterion = FieldCriterion("age")
        assert resolve_criterion(criterion) is criterion

    @pytest.mark.parametrize("bad", [["age"], {"age": 1}, ("a", ["b"])])
    def test_unhashable_rejected(self, bad):
        with pytest.raises(InvalidCriterionError):
            resolve_criterion(bad)

    def test_error_is_type_error(self):
        with pytest.raises(TypeError, match="field name or a callable"):
            resolve_criterion({"a"})


class TestResolveCriteria:
    def test_keeps_order(self):
        result = resolve_criteria(["user", len, "age"])
        assert result == [FieldCriterion("user"), FunctionCriterion(len), FieldCriterion("age")]

    def test_single_string(self):
        assert resolve_criteria("user") == [FieldCriterion("user")]

    def test_single_callable(self):
        assert resolve_criteria(len) == [FunctionCriterion(len)]

    def test_empty(self):
        assert resolve_criteria([]) == []

    def test_any_iterable(self):
        assert resolve_criteria(c for c in ("a", "b")) == [FieldCriterion("a"), FieldCriterion("b")]
