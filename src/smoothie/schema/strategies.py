# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Cast and validation strategies understood by every type descriptor."""

from __future__ import annotations

from enum import Enum

# ###############
# Public Interface
# ###############


class CastStrategy(str, Enum):
    """What ``cast`` does with a value that cannot be coerced.

    The string values are the constants used in configuration files.
    """

    KEEP = "keep"
    DROP = "drop"
    THROW = "throw"
    DEFAULT_OR_DROP = "defaultOrDrop"
    DEFAULT_OR_KEEP = "defaultOrKeep"


class ValidationStrategy(str, Enum):
    """How strictly ``validate`` compares a value against the declared type.

    ``STRICT`` requires the native Python type, ``EQUAL`` also accepts values
    that convert to it (e.g. ``"5"`` for a Number).
    """

    STRICT = "strict"
    EQUAL = "equal"


DEFAULT_CAST_STRATEGY = CastStrategy.DEFAULT_OR_DROP
DEFAULT_VALIDATION_STRATEGY = ValidationStrategy.STRICT

StrategyLike = ValidationStrategy | str | bool | None


def as_validation_strategy(strategy: StrategyLike) -> ValidationStrategy:
    """Normalize a strictness indicator into a :class:`ValidationStrategy`.

    Args:
        strategy: An enum member, its string value, or a bool where ``True``
            means strict and ``False`` means equal. ``None`` selects the
            default (strict).

    Raises:
        ValueError: If *strategy* is a string that names no strategy.
    """
    if strategy is None:
        return DEFAULT_VALIDATION_STRATEGY
    if isinstance(strategy, bool):
        return ValidationStrategy.STRICT if strategy else ValidationStrategy.EQUAL
    return ValidationStrategy(strategy)


def as_cast_strategy(strategy: CastStrategy | str | None) -> CastStrategy:
    """Normalize a cast strategy given as enum member, string value or ``None``."""
    if strategy is None:
        return DEFAULT_CAST_STRATEGY
    return CastStrategy(strategy)
