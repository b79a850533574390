# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Application of field validators and the registry of named validators.

Named validators must be registered before any descriptor referring to them
is validated; the registry is only read during validation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from smoothie.errors import UnknownValidatorError, ValidationFailure
from smoothie.schema.options import FunctionValidator, NamedValidator, PatternValidator, ValidatorSpec
from smoothie.schema.utils import string_form

logger = logging.getLogger(__name__)

ValidatorFunction = Callable[[Any], Any]

# ###############
# Public Interface
# ###############


def register_validator(name: str, func: ValidatorFunction) -> None:
    """Register *func* as the validator called *name*, replacing any previous one."""
    _validators[name] = func


def unregister_validator(name: str) -> None:
    """Remove the validator called *name*; missing names are ignored."""
    _validators.pop(name, None)


def get_validator(name: str) -> ValidatorFunction | None:
    """Return the validator registered under *name*, or None."""
    return _validators.get(name)


def registered_validators() -> dict[str, ValidatorFunction]:
    """Return a snapshot of the registry."""
    return dict(_validators)


def clear_validators() -> None:
    """Remove every registered validator."""
    _validators.clear()


def apply_validator(value: Any, spec: ValidatorSpec | None, name: str | None = None) -> None:
    """Run the validator described by *spec* against *value*.

    Args:
        value: The value to check. It is never modified.
        spec: The validator specification, or None for no validation.
        name: Field name, used in diagnostics.

    Raises:
        UnknownValidatorError: If a named validator is not registered.
        ValidationFailure: If a pattern does not match, or a function
            validator returns ``False``.
        Exception: Whatever a function validator raises is propagated.
    """
    if spec is None:
        return
    func = _resolve(spec, name)
    if func(value) is False:
        raise ValidationFailure(f"Property '{name}' failed validation")


# ################
# Implementation
# ################

_validators: dict[str, ValidatorFunction] = {}


def _resolve(spec: ValidatorSpec, name: str | None) -> ValidatorFunction:
    """Turn any validator form into a single callable."""
    if isinstance(spec, NamedValidator):
        func = _validators.get(spec.name)
        if func is None:
            raise UnknownValidatorError(spec.name, name)
        logger.debug("Resolved validator '%s' for field '%s'", spec.name, name)
        return func
    if isinstance(spec, FunctionValidator):
        return spec.func
    if isinstance(spec, PatternValidator):
        return _pattern_adapter(spec, name)
    raise TypeError(f"Unsupported validator specification: {spec!r}")


def _pattern_adapter(spec: PatternValidator, name: str | None) -> ValidatorFunction:
    message = spec.message if spec.message is not None else f"Property '{name}' failed validation"

    def _check(value: Any) -> None:
        if spec.regexp.search(string_form(value)) is None:
            raise ValidationFailure(message)

    return _check
