# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Date descriptor: calendar instants with optional inclusive bounds."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Literal

from pydantic import Field as _Field

from smoothie.errors import BuildSchemaError, TypeMismatchError, ValidationFailure
from smoothie.schema.options import Bound, DateOptions, coerce_date_bound, resolve_bound
from smoothie.schema.strategies import DEFAULT_CAST_STRATEGY, CastStrategy, StrategyLike, as_cast_strategy
from smoothie.schema.types.core import CoreType
from smoothie.schema.utils import ValueKind, check_cast_strategy, kind_of, to_date, to_iso_string

# ###############
# Public Interface
# ###############


class DateType(CoreType):
    """A point in time, represented as an aware UTC :class:`datetime`.

    Under the strict strategy only ``datetime``/``date`` instances pass.
    Under the equal strategy ISO 8601 strings and epoch milliseconds are
    converted too. Naive datetimes are read as UTC.
    """

    kind: Literal["date"] = "date"
    type_name: ClassVar[str] = "Date"

    options: DateOptions = _Field(default_factory=DateOptions)

    @property
    def min(self) -> Bound | None:
        return self.options.min

    @property
    def max(self) -> Bound | None:
        return self.options.max

    def build_default(self) -> datetime | None:
        """Return the default, converted to a datetime when it is not one.

        Raises:
            BuildSchemaError: If the default does not describe a valid date.
        """
        result = super().build_default()
        if result is None or isinstance(result, datetime):
            return result
        converted = to_date(result)
        if converted is None:
            raise BuildSchemaError(f"Default value {result!r} for field '{self.name}' is not a valid date")
        return converted

    def cast(self, value: Any, strategy: CastStrategy | str = DEFAULT_CAST_STRATEGY) -> Any:
        converted = to_date(value)
        if converted is not None:
            return converted
        return check_cast_strategy(value, as_cast_strategy(strategy), self)

    def validate(self, value: Any, strategy: StrategyLike = None) -> Any:
        """Validate a date and check the ``min``/``max`` bounds.

        Both bounds are always checked; their messages are reported together.

        Raises:
            RequiredFieldError: If the field is required but empty.
            TypeMismatchError: If *value* is not a date under the strategy.
            ValidationFailure: If the validator or a bound check fails.
        """
        value = super().validate(value, strategy)
        if self.is_empty(value):
            return value
        accepted = (ValueKind.DATE,) if self.is_strict_strategy(strategy) else _EQUAL_KINDS
        date_value = to_date(value) if kind_of(value) in accepted else None
        if date_value is None:
            raise TypeMismatchError(self.name, self.type_name)
        self.check_validator(date_value)
        errors = [message for message in (self._check_min(date_value), self._check_max(date_value)) if message]
        if errors:
            raise ValidationFailure(*errors)
        return date_value

    def _check_min(self, value: datetime) -> str | None:
        bound = resolve_bound(self.min, coerce_date_bound, self.name)
        if bound is None or bound.value <= value:
            return None
        if bound.message is not None:
            return bound.message
        return f"Property {self.name} cannot allow dates before {to_iso_string(bound.value)}"

    def _check_max(self, value: datetime) -> str | None:
        bound = resolve_bound(self.max, coerce_date_bound, self.name)
        if bound is None or bound.value >= value:
            return None
        if bound.message is not None:
            return bound.message
        return f"Property {self.name} cannot allow dates after {to_iso_string(bound.value)}"


# ################
# Implementation
# ################

_EQUAL_KINDS = (ValueKind.DATE, ValueKind.STRING, ValueKind.NUMBER)
