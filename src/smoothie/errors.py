# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error kinds raised by the Smoothie schema type engine."""

from __future__ import annotations

# ###############
# Public Interface
# ###############


class SmoothieError(Exception):
    """Base class for every error raised by Smoothie."""


class BuildSchemaError(SmoothieError):
    """Raised when a type descriptor or schema definition is malformed."""


class UnknownValidatorError(BuildSchemaError):
    """Raised when a named validator reference is not registered."""

    def __init__(self, validator: str, field: str | None = None) -> None:
        super().__init__(f"Validator '{validator}' for field '{field}' does not exist.")
        self.validator = validator
        self.field = field


class ValidationError(SmoothieError):
    """Base class for errors raised when a value fails validation or casting."""


class RequiredFieldError(ValidationError):
    """Raised when a required field holds an empty value."""


class TypeMismatchError(ValidationError):
    """Raised when a value's shape disagrees with the declared type.

    Attributes:
        field: Name of the offending field.
        type_name: Semantic type label of the descriptor (e.g. ``"Number"``).
    """

    def __init__(self, field: str, type_name: str) -> None:
        super().__init__(f"Property '{field}' must be of type '{type_name}'")
        self.field = field
        self.type_name = type_name


class ValidationFailure(ValidationError):
    """Raised when a validator or a bound check rejects a value.

    Several independent checks may fail at once; their messages are kept in
    order and joined by newlines in the string form of the error.

    Attributes:
        messages: The individual failure messages.
    """

    def __init__(self, *messages: str) -> None:
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


class EngineConfigError(SmoothieError):
    """Raised when an engine configuration file is invalid or cannot be loaded."""
