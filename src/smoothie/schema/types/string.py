# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""String descriptor: text with transforms, allowed values and length bounds."""

from __future__ import annotations

from typing import Any, ClassVar, Literal

from pydantic import Field as _Field

from smoothie.errors import TypeMismatchError, ValidationFailure
from smoothie.schema.options import StringOptions, coerce_length_bound, resolve_bound
from smoothie.schema.strategies import DEFAULT_CAST_STRATEGY, CastStrategy, StrategyLike, as_cast_strategy
from smoothie.schema.types.core import CoreType
from smoothie.schema.utils import ValueKind, check_cast_strategy, is_date_valid, kind_of, string_form

# ###############
# Public Interface
# ###############


class StringType(CoreType):
    """A text value.

    Numbers, bools and dates convert to their string form under the equal
    strategy and when cast (``"2"`` for ``2.0``, ``"NaN"``, ``"Infinity"``,
    ``"true"``, ISO dates); lists, mappings and other objects never do.
    Transforms apply in the order trim, lowercase, uppercase, before any
    check runs.
    """

    kind: Literal["string"] = "string"
    type_name: ClassVar[str] = "String"

    options: StringOptions = _Field(default_factory=StringOptions)

    def cast(self, value: Any, strategy: CastStrategy | str = DEFAULT_CAST_STRATEGY) -> Any:
        text = _string_form(value)
        if text is not None:
            return text
        return check_cast_strategy(value, as_cast_strategy(strategy), self)

    def validate(self, value: Any, strategy: StrategyLike = None) -> Any:
        """Validate a string, apply transforms, then run the value checks.

        Raises:
            RequiredFieldError: If the field is required but empty.
            TypeMismatchError: If *value* is not a string under the strategy.
            ValidationFailure: If the validator, enum or a length check fails.
        """
        value = super().validate(value, strategy)
        if self.is_empty(value):
            return value
        if self.is_strict_strategy(strategy):
            text = value if isinstance(value, str) else None
        else:
            text = _string_form(value)
        if text is None:
            raise TypeMismatchError(self.name, self.type_name)

        text = self._transform(text)
        self.check_validator(text)
        errors = [
            message
            for message in (self._check_enum(text), self._check_min_length(text), self._check_max_length(text))
            if message
        ]
        if errors:
            raise ValidationFailure(*errors)
        return text

    def _transform(self, text: str) -> str:
        if self.options.trim:
            text = text.strip()
        if self.options.lowercase:
            text = text.lower()
        if self.options.uppercase:
            text = text.upper()
        return text

    def _check_enum(self, text: str) -> str | None:
        enum = self.options.enum
        if enum is None or text in enum.values:
            return None
        if enum.message is not None:
            return enum.message
        return f"Property '{self.name}' value '{text}' is not one of the allowed values"

    def _check_min_length(self, text: str) -> str | None:
        bound = resolve_bound(self.options.min_length, coerce_length_bound, self.name)
        if bound is None or len(text) >= bound.value:
            return None
        if bound.message is not None:
            return bound.message
        return f"Property '{self.name}' is shorter than the minimum allowed length '{bound.value}'"

    def _check_max_length(self, text: str) -> str | None:
        bound = resolve_bound(self.options.max_length, coerce_length_bound, self.name)
        if bound is None or len(text) <= bound.value:
            return None
        if bound.message is not None:
            return bound.message
        return f"Property '{self.name}' is longer than the maximum allowed length '{bound.value}'"


# ################
# Implementation
# ################


def _string_form(value: Any) -> str | None:
    """Return the string form of a scalar value, or None for anything else."""
    kind = kind_of(value)
    if kind is ValueKind.STRING:
        return value
    if kind in (ValueKind.BOOLEAN, ValueKind.NUMBER):
        return string_form(value)
    if kind is ValueKind.DATE and is_date_valid(value):
        return string_form(value)
    return None
