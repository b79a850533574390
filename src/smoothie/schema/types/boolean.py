# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Boolean descriptor."""

from __future__ import annotations

from typing import Any, ClassVar, Literal

from pydantic import Field as _Field

from smoothie.errors import TypeMismatchError
from smoothie.schema.options import TypeOptions
from smoothie.schema.strategies import DEFAULT_CAST_STRATEGY, CastStrategy, StrategyLike, as_cast_strategy
from smoothie.schema.types.core import CoreType
from smoothie.schema.utils import ValueKind, check_cast_strategy, kind_of

# ###############
# Public Interface
# ###############


class BooleanType(CoreType):
    """A ``True``/``False`` value.

    The equal strategy and ``cast`` also accept ``"true"``/``"false"`` (any
    case), ``"1"``/``"0"`` and the numbers 1 and 0.
    """

    kind: Literal["boolean"] = "boolean"
    type_name: ClassVar[str] = "Boolean"

    options: TypeOptions = _Field(default_factory=TypeOptions)

    def cast(self, value: Any, strategy: CastStrategy | str = DEFAULT_CAST_STRATEGY) -> Any:
        flag = _to_bool(value)
        if flag is not None:
            return flag
        return check_cast_strategy(value, as_cast_strategy(strategy), self)

    def validate(self, value: Any, strategy: StrategyLike = None) -> Any:
        value = super().validate(value, strategy)
        if self.is_empty(value):
            return value
        if self.is_strict_strategy(strategy):
            flag = value if isinstance(value, bool) else None
        else:
            flag = _to_bool(value)
        if flag is None:
            raise TypeMismatchError(self.name, self.type_name)
        self.check_validator(flag)
        return flag


# ################
# Implementation
# ################

_TRUE_STRINGS = frozenset({"true", "1"})
_FALSE_STRINGS = frozenset({"false", "0"})


def _to_bool(value: Any) -> bool | None:
    kind = kind_of(value)
    if kind is ValueKind.BOOLEAN:
        return value
    if kind is ValueKind.STRING:
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        return None
    if kind is ValueKind.NUMBER and value in (0, 1):
        return bool(value)
    return None
