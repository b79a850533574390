# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Engine configuration: the default cast and validation strategies.

Configuration files are YAML mappings::

    cast-strategy: defaultOrKeep
    validation-strategy: equal

Both keys are optional.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from smoothie.errors import EngineConfigError
from smoothie.schema.strategies import (
    DEFAULT_CAST_STRATEGY,
    DEFAULT_VALIDATION_STRATEGY,
    CastStrategy,
    ValidationStrategy,
)
from smoothie.schema.types import CoreType

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class EngineConfig:
    """Strategies applied when a caller does not choose one explicitly.

    Attributes:
        cast_strategy: Fallback behaviour of ``cast`` on uncoercible values.
        validation_strategy: Strictness of ``validate``.
    """

    cast_strategy: CastStrategy = DEFAULT_CAST_STRATEGY
    validation_strategy: ValidationStrategy = DEFAULT_VALIDATION_STRATEGY

    def cast(self, descriptor: CoreType, value: Any) -> Any:
        """Cast *value* with *descriptor* under the configured cast strategy."""
        return descriptor.cast(value, self.cast_strategy)

    def validate(self, descriptor: CoreType, value: Any) -> Any:
        """Validate *value* with *descriptor* under the configured validation strategy."""
        return descriptor.validate(value, self.validation_strategy)


def load_engine_config(path: Path) -> EngineConfig:
    """Load and parse an engine configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        An EngineConfig instance populated from the file.

    Raises:
        EngineConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise EngineConfigError(f"Engine config file not found: {path}") from None
    except OSError as exc:
        raise EngineConfigError(f"Cannot read engine config file: {exc}") from exc

    logger.debug("Loading engine config from %s", path)
    return parse_engine_config(text, source_label=str(path))


def parse_engine_config(text: str, source_label: str = "<string>") -> EngineConfig:
    """Parse engine config YAML text into an EngineConfig.

    An empty document yields the defaults.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        EngineConfigError: If the YAML is invalid or holds unknown keys or values.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise EngineConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return EngineConfig()
    if not isinstance(data, dict):
        raise EngineConfigError(f"{source_label}: engine config must be a YAML mapping")

    unknown = sorted(str(key) for key in set(data) - _KNOWN_KEYS)
    if unknown:
        raise EngineConfigError(f"{source_label}: unknown keys {', '.join(unknown)}")

    return EngineConfig(
        cast_strategy=_parse_enum(data, "cast-strategy", CastStrategy, DEFAULT_CAST_STRATEGY, source_label),
        validation_strategy=_parse_enum(
            data, "validation-strategy", ValidationStrategy, DEFAULT_VALIDATION_STRATEGY, source_label
        ),
    )


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"cast-strategy", "validation-strategy"})


def _parse_enum(mapping: dict[str, Any], key: str, enum_cls: Any, default: Any, source_label: str) -> Any:
    """Read an optional strategy value, raising EngineConfigError if it names no member."""
    if key not in mapping:
        return default
    value = mapping[key]
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise EngineConfigError(f"{source_label}: '{key}' must be one of {allowed}, got {value!r}") from None
