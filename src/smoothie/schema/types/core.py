# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""The contract every type descriptor satisfies, and the behaviour they share.

A descriptor offers two entry points. ``validate`` is the authoritative path:
it raises on bad data and is meant for values about to be persisted. ``cast``
is the tolerant path: it coerces what it can and, depending on the
:class:`~smoothie.schema.strategies.CastStrategy`, keeps or drops the rest
instead of raising.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from smoothie.errors import RequiredFieldError
from smoothie.schema.options import Requirement, TypeOptions, ValidatorSpec, resolve_requirement
from smoothie.schema.strategies import (
    DEFAULT_CAST_STRATEGY,
    CastStrategy,
    StrategyLike,
    ValidationStrategy,
    as_validation_strategy,
)
from smoothie.schema.validator import apply_validator

# ###############
# Public Interface
# ###############


class CoreType(BaseModel):
    """Base class of all type descriptors.

    Descriptors are immutable once built. Options that may be functions
    (``required``, ``default``, bounds) are evaluated again on every call, so
    a descriptor can be shared freely.

    Attributes:
        name: Field name within the parent schema.
        options: The descriptor's option record.
        type_name: Semantic type label used in error messages.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    type_name: ClassVar[str] = "Core"

    name: str
    options: TypeOptions = _Field(default_factory=TypeOptions)

    @property
    def required(self) -> Requirement:
        return self.options.required

    @property
    def default(self) -> Any:
        return self.options.default

    @property
    def validator(self) -> ValidatorSpec | None:
        return self.options.validator

    @property
    def immutable(self) -> bool:
        return self.options.immutable

    @abstractmethod
    def cast(self, value: Any, strategy: CastStrategy | str = DEFAULT_CAST_STRATEGY) -> Any:
        """Coerce *value* to this type, falling back according to *strategy*.

        Returns the coerced value, the original value (``keep`` and
        ``defaultOrKeep``) or None (``drop`` and ``defaultOrDrop``).

        Raises:
            TypeMismatchError: Under the ``throw`` strategy when coercion fails.
        """

    def validate(self, value: Any, strategy: StrategyLike = None) -> Any:
        """Check the required rule and return *value* unchanged.

        Subclasses call this first, then apply their own checks.

        Raises:
            RequiredFieldError: If *value* is empty and the field is required.
        """
        if self.is_empty(value):
            message = self.check_required()
            if message:
                raise RequiredFieldError(message)
        return value

    def build_default(self) -> Any:
        """Return the default value, calling it first if it is a producer."""
        if callable(self.default):
            return self.default()
        return self.default

    def check_required(self) -> str | None:
        """Return the required-failure message if the field is required now."""
        return resolve_requirement(self.required, self.name)

    def check_validator(self, value: Any) -> None:
        apply_validator(value, self.validator, self.name)

    def is_empty(self, value: Any) -> bool:
        """Return True only for None; ``0``, ``""`` and ``[]`` are values."""
        return value is None

    def is_strict_strategy(self, strategy: StrategyLike) -> bool:
        return as_validation_strategy(strategy) is ValidationStrategy.STRICT
