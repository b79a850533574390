# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Smoothie: a field-level schema type engine for document data."""

from smoothie.config import EngineConfig, load_engine_config, parse_engine_config
from smoothie.errors import (
    BuildSchemaError,
    EngineConfigError,
    RequiredFieldError,
    SmoothieError,
    TypeMismatchError,
    UnknownValidatorError,
    ValidationError,
    ValidationFailure,
)

__all__ = [
    "BuildSchemaError",
    "EngineConfig",
    "EngineConfigError",
    "RequiredFieldError",
    "SmoothieError",
    "TypeMismatchError",
    "UnknownValidatorError",
    "ValidationError",
    "ValidationFailure",
    "load_engine_config",
    "parse_engine_config",
]
