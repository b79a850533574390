# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Date descriptor."""

from datetime import date, datetime, timedelta, timezone

import pytest

from smoothie.errors import BuildSchemaError, TypeMismatchError, ValidationFailure
from smoothie.schema.strategies import CastStrategy, ValidationStrategy
from smoothie.schema.types import DateType

UTC = timezone.utc
STRICT = ValidationStrategy.STRICT
EQUAL = ValidationStrategy.EQUAL


def _hired(**options: object) -> DateType:
    return DateType(name="hired", options=options)


# ###############
# Cast
# ###############


class TestDateCast:
    def test_iso_string(self) -> None:
        assert _hired().cast("2020-05-17") == datetime(2020, 5, 17, tzinfo=UTC)

    def test_epoch_milliseconds(self) -> None:
        assert _hired().cast(0) == datetime(1970, 1, 1, tzinfo=UTC)

    def test_datetime_is_a_new_aware_value(self) -> None:
        naive = datetime(2020, 5, 17, 8, 30)
        result = _hired().cast(naive)
        assert result == datetime(2020, 5, 17, 8, 30, tzinfo=UTC)
        assert result.tzinfo is UTC

    @pytest.mark.parametrize("strategy", [CastStrategy.DROP, CastStrategy.DEFAULT_OR_DROP])
    def test_invalid_dropped(self, strategy: CastStrategy) -> None:
        assert _hired().cast("yesterday", strategy) is None

    @pytest.mark.parametrize("strategy", [CastStrategy.KEEP, CastStrategy.DEFAULT_OR_KEEP])
    def test_invalid_kept(self, strategy: CastStrategy) -> None:
        assert _hired().cast("yesterday", strategy) == "yesterday"

    def test_invalid_thrown(self) -> None:
        with pytest.raises(TypeMismatchError, match="Property 'hired' must be of type 'Date'"):
            _hired().cast("yesterday", CastStrategy.THROW)

    def test_instant_outside_utc_range_is_dropped(self) -> None:
        edge = datetime.max.replace(tzinfo=timezone(timedelta(hours=-1)))
        assert _hired().cast(edge, CastStrategy.DROP) is None
        assert _hired().cast(edge, CastStrategy.KEEP) is edge

    def test_strategy_as_string(self) -> None:
        assert _hired().cast("yesterday", "keep") == "yesterday"


# ###############
# Default
# ###############


class TestDateDefault:
    def test_datetime_default_passes_through(self) -> None:
        default = datetime(2020, 1, 1, tzinfo=UTC)
        assert _hired(default=default).build_default() is default

    def test_string_default_is_converted(self) -> None:
        assert _hired(default="2020-01-01").build_default() == datetime(2020, 1, 1, tzinfo=UTC)

    def test_producer_default(self) -> None:
        assert _hired(default=lambda: "2021-02-03").build_default() == datetime(2021, 2, 3, tzinfo=UTC)

    def test_missing_default(self) -> None:
        assert _hired().build_default() is None

    def test_invalid_default(self) -> None:
        with pytest.raises(BuildSchemaError, match="is not a valid date"):
            _hired(default="soon").build_default()


# ###############
# Validate
# ###############


class TestDateValidateType:
    def test_strict_accepts_datetime(self) -> None:
        value = datetime(2020, 1, 1, tzinfo=UTC)
        assert _hired().validate(value, STRICT) == value

    def test_strict_accepts_date(self) -> None:
        assert _hired().validate(date(2020, 1, 1), STRICT) == datetime(2020, 1, 1, tzinfo=UTC)

    @pytest.mark.parametrize("value", ["2020-01-01", 0])
    def test_strict_rejects_convertible_values(self, value: object) -> None:
        with pytest.raises(TypeMismatchError, match="Property 'hired' must be of type 'Date'"):
            _hired().validate(value, STRICT)

    def test_instant_outside_utc_range_is_a_type_mismatch(self) -> None:
        edge = datetime.min.replace(tzinfo=timezone(timedelta(hours=1)))
        with pytest.raises(TypeMismatchError, match="must be of type 'Date'"):
            _hired().validate(edge, STRICT)

    def test_equal_accepts_string(self) -> None:
        assert _hired().validate("2020-01-01T12:00:00Z", EQUAL) == datetime(2020, 1, 1, 12, tzinfo=UTC)

    def test_equal_accepts_epoch_milliseconds(self) -> None:
        assert _hired().validate(1_000, EQUAL) == datetime(1970, 1, 1, 0, 0, 1, tzinfo=UTC)

    @pytest.mark.parametrize("value", ["not a date", True, [2020, 1, 1], {"year": 2020}])
    def test_equal_rejects_other_values(self, value: object) -> None:
        with pytest.raises(TypeMismatchError):
            _hired().validate(value, EQUAL)

    def test_revalidation_is_a_no_op(self) -> None:
        once = _hired(min="2000-01-01").validate("2020-01-01", EQUAL)
        assert _hired(min="2000-01-01").validate(once, STRICT) == once


class TestDateBounds:
    def test_before_min(self) -> None:
        descriptor = _hired(min=datetime(2020, 1, 1))
        with pytest.raises(ValidationFailure, match="cannot allow dates before 2020-01-01T00:00:00.000Z"):
            descriptor.validate(datetime(2019, 1, 1), EQUAL)

    def test_after_max(self) -> None:
        descriptor = _hired(max="2020-12-31")
        with pytest.raises(ValidationFailure, match="Property hired cannot allow dates after 2020-12-31T00:00:00.000Z"):
            descriptor.validate("2021-01-01", EQUAL)

    def test_bounds_are_inclusive(self) -> None:
        edge = datetime(2020, 1, 1, tzinfo=UTC)
        assert _hired(min=edge, max=edge).validate(edge, STRICT) == edge

    def test_custom_messages(self) -> None:
        descriptor = _hired(min={"val": "2020-01-01", "message": "Too early"})
        with pytest.raises(ValidationFailure, match="^Too early$"):
            descriptor.validate("2019-06-01", EQUAL)

    def test_bound_resolver_is_called_per_validation(self) -> None:
        now = {"value": datetime(2020, 1, 1, tzinfo=UTC)}
        descriptor = _hired(max=lambda: now["value"])
        descriptor.validate(datetime(2019, 1, 1, tzinfo=UTC), STRICT)
        now["value"] = datetime(2018, 1, 1, tzinfo=UTC)
        with pytest.raises(ValidationFailure, match="after 2018-01-01"):
            descriptor.validate(datetime(2019, 1, 1, tzinfo=UTC), STRICT)

    def test_resolver_returning_described_bound(self) -> None:
        descriptor = _hired(min=lambda: {"val": "2020-01-01", "message": "Not before 2020"})
        with pytest.raises(ValidationFailure, match="Not before 2020"):
            descriptor.validate("2019-01-01", EQUAL)

    def test_both_bounds_reported_together(self) -> None:
        descriptor = _hired(
            min=lambda: {"val": datetime(2021, 1, 1), "message": "min failed"},
            max=lambda: {"val": datetime(2019, 1, 1), "message": "max failed"},
        )
        with pytest.raises(ValidationFailure) as exc_info:
            descriptor.validate(datetime(2020, 1, 1), STRICT)
        assert exc_info.value.messages == ["min failed", "max failed"]
        assert str(exc_info.value) == "min failed\nmax failed"

    def test_timezones_are_compared_as_instants(self) -> None:
        plus_five = timezone(timedelta(hours=5))
        descriptor = _hired(min=datetime(2020, 1, 1, tzinfo=UTC))
        with pytest.raises(ValidationFailure):
            descriptor.validate(datetime(2020, 1, 1, 4, 59, tzinfo=plus_five), STRICT)

    def test_validator_receives_converted_date(self) -> None:
        seen: list[object] = []
        _hired(validator=seen.append).validate("2020-01-01", EQUAL)
        assert seen == [datetime(2020, 1, 1, tzinfo=UTC)]
