# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the error hierarchy."""

from smoothie import (
    BuildSchemaError,
    RequiredFieldError,
    SmoothieError,
    TypeMismatchError,
    UnknownValidatorError,
    ValidationError,
    ValidationFailure,
)


def test_validation_kinds_share_a_base() -> None:
    for cls in (RequiredFieldError, TypeMismatchError, ValidationFailure):
        assert issubclass(cls, ValidationError)
        assert issubclass(cls, SmoothieError)


def test_unknown_validator_is_a_schema_error() -> None:
    error = UnknownValidatorError("email", "contact")
    assert isinstance(error, BuildSchemaError)
    assert str(error) == "Validator 'email' for field 'contact' does not exist."
    assert (error.validator, error.field) == ("email", "contact")


def test_type_mismatch_attributes() -> None:
    error = TypeMismatchError("age", "Number")
    assert str(error) == "Property 'age' must be of type 'Number'"
    assert (error.field, error.type_name) == ("age", "Number")


def test_validation_failure_joins_messages() -> None:
    error = ValidationFailure("first", "second")
    assert error.messages == ["first", "second"]
    assert str(error) == "first\nsecond"
