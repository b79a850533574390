# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Construction helpers for type descriptors.

The ``*_type`` factories take options as keyword arguments. ``build_type``
turns the plain definitions found in schema declarations into descriptors:

* a type name, e.g. ``"Number"`` (or a Python builtin such as ``int``),
* a one-element list, e.g. ``["String"]`` for an array of strings,
* a mapping with a ``type`` key plus options, e.g.
  ``{"type": "Number", "min": 0, "intVal": True}``,
* an existing descriptor, which is copied under the new field name.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from smoothie.errors import BuildSchemaError
from smoothie.schema.types import ArrayType, BooleanType, CoreType, DateType, NumberType, StringType

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def array_type(name: str, item_type: Any, **options: Any) -> ArrayType:
    """Create an :class:`ArrayType`; *item_type* may be a descriptor or a definition."""
    if not isinstance(item_type, CoreType):
        item_type = build_type(name, item_type)
    return _construct(ArrayType, name, options, item_type=item_type)


def date_type(name: str, **options: Any) -> DateType:
    """Create a :class:`DateType` with the given options."""
    return _construct(DateType, name, options)


def number_type(name: str, **options: Any) -> NumberType:
    """Create a :class:`NumberType` with the given options."""
    return _construct(NumberType, name, options)


def string_type(name: str, **options: Any) -> StringType:
    """Create a :class:`StringType` with the given options."""
    return _construct(StringType, name, options)


def boolean_type(name: str, **options: Any) -> BooleanType:
    """Create a :class:`BooleanType` with the given options."""
    return _construct(BooleanType, name, options)


def build_type(name: str, definition: Any) -> CoreType:
    """Build a descriptor for field *name* from a plain definition.

    Args:
        name: Field name given to the descriptor (and to array item types).
        definition: A type name, builtin type, one-element list, mapping
            with a ``type`` key, or descriptor.

    Returns:
        The concrete descriptor.

    Raises:
        BuildSchemaError: If the definition cannot be understood or its
            options are invalid.
    """
    logger.debug("Building type for field '%s' from %r", name, definition)
    if isinstance(definition, CoreType):
        return definition.model_copy(update={"name": name})
    if isinstance(definition, (list, tuple)):
        return array_type(name, _single_item(name, definition))
    if isinstance(definition, Mapping):
        options = dict(definition)
        if "type" not in options:
            raise BuildSchemaError(f"Definition of field '{name}' is missing the 'type' key")
        type_def = options.pop("type")
        if isinstance(type_def, (list, tuple)):
            return array_type(name, _single_item(name, type_def), **options)
        return _construct(_lookup(name, type_def), name, options)
    return _construct(_lookup(name, definition), name, {})


# ################
# Implementation
# ################

_SCALAR_TYPES: dict[Any, type[CoreType]] = {
    "Date": DateType,
    "Number": NumberType,
    "String": StringType,
    "Boolean": BooleanType,
    datetime: DateType,
    date: DateType,
    int: NumberType,
    float: NumberType,
    str: StringType,
    bool: BooleanType,
}


def _lookup(name: str, type_def: Any) -> type[CoreType]:
    """Return the descriptor class named by *type_def*."""
    if type_def in ("Array", list):
        raise BuildSchemaError(f"Array field '{name}' needs an item type, e.g. ['String']")
    try:
        return _SCALAR_TYPES[type_def]
    except (KeyError, TypeError):
        raise BuildSchemaError(f"Unsupported type {type_def!r} for field '{name}'") from None


def _single_item(name: str, definition: list[Any] | tuple[Any, ...]) -> Any:
    if len(definition) != 1:
        raise BuildSchemaError(f"Array field '{name}' must declare exactly one item type")
    return definition[0]


def _construct(cls: type[CoreType], name: str, options: dict[str, Any], **fields: Any) -> Any:
    """Instantiate *cls*, reporting invalid options as BuildSchemaError."""
    try:
        return cls(name=name, options=options, **fields)
    except PydanticValidationError as exc:
        raise BuildSchemaError(f"Invalid options for {cls.type_name} field '{name}': {exc}") from exc
