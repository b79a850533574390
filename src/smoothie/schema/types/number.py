# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Number descriptor: numeric values with integer-only and min/max rules."""

from __future__ import annotations

import math
from typing import Any, ClassVar, Literal

from pydantic import Field as _Field

from smoothie.errors import TypeMismatchError, ValidationFailure
from smoothie.schema.options import Bound, NumberOptions, coerce_number_bound, resolve_bound
from smoothie.schema.strategies import DEFAULT_CAST_STRATEGY, CastStrategy, StrategyLike, as_cast_strategy
from smoothie.schema.types.core import CoreType
from smoothie.schema.utils import check_cast_strategy, is_number, string_form, to_number

# ###############
# Public Interface
# ###############


class NumberType(CoreType):
    """A real number (``bool`` is not a number here).

    Under the strict strategy the value must already be a number; under the
    equal strategy numeric strings and bools are coerced first.
    """

    kind: Literal["number"] = "number"
    type_name: ClassVar[str] = "Number"

    options: NumberOptions = _Field(default_factory=NumberOptions)

    @property
    def int_val(self) -> bool:
        return self.options.int_val

    @property
    def min(self) -> Bound | None:
        return self.options.min

    @property
    def max(self) -> Bound | None:
        return self.options.max

    def cast(self, value: Any, strategy: CastStrategy | str = DEFAULT_CAST_STRATEGY) -> Any:
        number = to_number(value)
        if is_number(number) and math.isfinite(number):
            return number
        return check_cast_strategy(value, as_cast_strategy(strategy), self)

    def validate(self, value: Any, strategy: StrategyLike = None) -> Any:
        """Validate a number and check the integer and bound rules.

        The integer, minimum and maximum checks all run; every failing
        message is reported in a single error.

        Raises:
            RequiredFieldError: If the field is required but empty.
            TypeMismatchError: If *value* is not a number under the strategy.
            ValidationFailure: If the validator or any rule check fails.
        """
        value = super().validate(value, strategy)
        if self.is_empty(value):
            return value
        number = value if self.is_strict_strategy(strategy) else to_number(value)
        if not is_number(number):
            raise TypeMismatchError(self.name, self.type_name)

        errors: list[str] = []
        if self.int_val and number % 1 != 0:
            errors.append(f"Property {self.name} only allows Integer values")
        self.check_validator(number)
        errors.extend(message for message in (self._check_min(number), self._check_max(number)) if message)
        if errors:
            raise ValidationFailure(*errors)
        return number

    def _check_min(self, value: Any) -> str | None:
        bound = resolve_bound(self.min, coerce_number_bound, self.name)
        if bound is None or bound.value <= value:
            return None
        if bound.message is not None:
            return bound.message
        return f"Property '{self.name}' is less than the minimum allowed value of '{string_form(bound.value)}'"

    def _check_max(self, value: Any) -> str | None:
        bound = resolve_bound(self.max, coerce_number_bound, self.name)
        if bound is None or bound.value >= value:
            return None
        if bound.message is not None:
            return bound.message
        return f"Property '{self.name}' is more than the maximum allowed value of '{string_form(bound.value)}'"

