# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Field-level schema types: descriptors, options, strategies and validators."""

from smoothie.schema.factory import (
    array_type,
    boolean_type,
    build_type,
    date_type,
    number_type,
    string_type,
)
from smoothie.schema.options import (
    Bound,
    DateOptions,
    NumberOptions,
    Requirement,
    StringOptions,
    TypeOptions,
    ValidatorSpec,
)
from smoothie.schema.strategies import CastStrategy, ValidationStrategy
from smoothie.schema.types import (
    ArrayType,
    BooleanType,
    CoreType,
    DateType,
    NumberType,
    SchemaType,
    StringType,
)
from smoothie.schema.validator import (
    apply_validator,
    clear_validators,
    get_validator,
    register_validator,
    registered_validators,
    unregister_validator,
)

__all__ = [
    # Descriptors
    "ArrayType",
    "BooleanType",
    "CoreType",
    "DateType",
    "NumberType",
    "SchemaType",
    "StringType",
    # Options
    "Bound",
    "DateOptions",
    "NumberOptions",
    "Requirement",
    "StringOptions",
    "TypeOptions",
    "ValidatorSpec",
    # Strategies
    "CastStrategy",
    "ValidationStrategy",
    # Factories
    "array_type",
    "boolean_type",
    "build_type",
    "date_type",
    "number_type",
    "string_type",
    # Validators
    "apply_validator",
    "clear_validators",
    "get_validator",
    "register_validator",
    "registered_validators",
    "unregister_validator",
]
