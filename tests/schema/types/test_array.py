# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Array descriptor."""

import pytest

from smoothie.errors import TypeMismatchError, ValidationFailure
from smoothie.schema.strategies import CastStrategy, ValidationStrategy
from smoothie.schema.types import ArrayType, NumberType, StringType

STRICT = ValidationStrategy.STRICT
EQUAL = ValidationStrategy.EQUAL


def _numbers(**options: object) -> ArrayType:
    return ArrayType(name="scores", item_type=NumberType(name="scores", options={"max": 10}), options=options)


# ###############
# Cast
# ###############


class TestArrayCast:
    def test_casts_every_item(self) -> None:
        assert _numbers().cast(["1", 2, "3.5"]) == [1, 2, 3.5]

    def test_tuple_becomes_list(self) -> None:
        assert _numbers().cast(("1", "2")) == [1, 2]

    def test_item_failures_follow_strategy(self) -> None:
        assert _numbers().cast(["1", "x"], CastStrategy.KEEP) == [1, "x"]
        assert _numbers().cast(["1", "x"], CastStrategy.DROP) == [1, None]

    def test_item_failure_under_throw(self) -> None:
        with pytest.raises(TypeMismatchError, match="Property 'scores' must be of type 'Number'"):
            _numbers().cast(["1", "x"], CastStrategy.THROW)

    def test_non_array_falls_back(self) -> None:
        assert _numbers().cast("1,2", CastStrategy.KEEP) == "1,2"
        assert _numbers().cast("1,2") is None
        with pytest.raises(TypeMismatchError, match="must be of type 'Array'"):
            _numbers().cast("1,2", CastStrategy.THROW)


# ###############
# Validate
# ###############


class TestArrayValidate:
    def test_validates_each_item_in_order(self) -> None:
        items = [3, 1, 2]
        item_type = NumberType(name="scores", options={"max": 10})
        result = _numbers().validate(items, STRICT)
        assert result == [item_type.validate(i, STRICT) for i in items]
        assert result is not items

    def test_equal_strategy_reaches_items(self) -> None:
        assert _numbers().validate(["1", "2"], EQUAL) == [1, 2]

    def test_strict_strategy_reaches_items(self) -> None:
        with pytest.raises(TypeMismatchError):
            _numbers().validate(["1"], STRICT)

    def test_bool_strategy_is_accepted(self) -> None:
        assert _numbers().validate(["4"], False) == [4]

    def test_non_array_is_a_type_mismatch(self) -> None:
        with pytest.raises(TypeMismatchError, match="Property 'scores' must be of type 'Array'"):
            _numbers().validate("1", EQUAL)

    def test_dict_is_not_an_array(self) -> None:
        with pytest.raises(TypeMismatchError):
            _numbers().validate({"0": 1}, EQUAL)

    def test_single_item_failure_aborts(self) -> None:
        with pytest.raises(ValidationFailure, match="maximum allowed value of '10'"):
            _numbers().validate([1, 11, 2], STRICT)

    def test_validator_sees_whole_array(self) -> None:
        seen: list[object] = []
        _numbers(validator=seen.append).validate([1, 2], STRICT)
        assert seen == [[1, 2]]

    def test_validator_rejecting_array(self) -> None:
        descriptor = _numbers(validator=lambda items: len(items) <= 2)
        with pytest.raises(ValidationFailure, match="Property 'scores' failed validation"):
            descriptor.validate([1, 2, 3], STRICT)

    def test_empty_list_is_valid(self) -> None:
        assert _numbers(required=True).validate([], STRICT) == []

    def test_revalidation_is_a_no_op(self) -> None:
        once = _numbers().validate(["1", "2"], EQUAL)
        assert _numbers().validate(once, STRICT) == once

    def test_nested_arrays(self) -> None:
        matrix = ArrayType(name="m", item_type=ArrayType(name="m", item_type=StringType(name="m")))
        assert matrix.validate([["a"], ["b", "c"]], STRICT) == [["a"], ["b", "c"]]
        with pytest.raises(TypeMismatchError, match="must be of type 'String'"):
            matrix.validate([["a"], [1]], STRICT)


class TestArrayModel:
    def test_item_type_from_mapping(self) -> None:
        descriptor = ArrayType.model_validate({"name": "tags", "item_type": {"kind": "string", "name": "tags"}})
        assert isinstance(descriptor.item_type, StringType)
