# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Option records carried by the type descriptors.

The ``required``, ``min``/``max`` and ``validator`` options each accept
several shapes (a literal, a ``{val, message}`` mapping, a zero-argument
function, a validator name...). At construction the raw shape is normalized
into one member of a ``kind``-discriminated union; the value behind a
resolver is only produced when a validation call asks for it, on every call.
"""

from __future__ import annotations

import math
import numbers
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Annotated, Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, TypeAdapter, field_validator
from pydantic import Field as _Field
from pydantic import ValidationError as PydanticValidationError

from smoothie.errors import BuildSchemaError
from smoothie.schema.utils import to_date

# ###############
# Public Interface
# ###############


class OptionModel(BaseModel):
    """Common configuration of every option record: frozen and closed."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


# Requirement ----------------------------------------------------------------


class RequiredFlag(OptionModel):
    """A plain boolean requirement."""

    kind: Literal["flag"] = "flag"
    flag: bool


class RequiredMessage(OptionModel):
    """A requirement carrying its own failure message."""

    kind: Literal["message"] = "message"
    flag: bool = _Field(validation_alias=AliasChoices("flag", "val"))
    message: str | None = None


class RequiredResolver(OptionModel):
    """A requirement computed on each validation call.

    The resolver returns a bool or a ``{flag, message}`` mapping.
    """

    kind: Literal["resolver"] = "resolver"
    resolver: Callable[[], Any]


Requirement = Annotated[
    RequiredFlag | RequiredMessage | RequiredResolver,
    _Field(discriminator="kind"),
]


# Bound ----------------------------------------------------------------------


class LiteralBound(OptionModel):
    """A bare bound value (number or date)."""

    kind: Literal["literal"] = "literal"
    val: Any


class DescribedBound(OptionModel):
    """A bound paired with a custom failure message.

    A missing ``val`` imposes no constraint.
    """

    kind: Literal["described"] = "described"
    val: Any = None
    message: str | None = None


class ResolverBound(OptionModel):
    """A bound computed on each validation call.

    The resolver returns a bare bound value or a ``{val, message}`` mapping.
    """

    kind: Literal["resolver"] = "resolver"
    resolver: Callable[[], Any]


Bound = Annotated[
    LiteralBound | DescribedBound | ResolverBound,
    _Field(discriminator="kind"),
]


@dataclass(frozen=True)
class ResolvedBound:
    """A bound after resolution, ready to compare against.

    Attributes:
        value: The bound value, converted for the owning type.
        message: Custom failure message, or None to use the generated one.
    """

    value: Any
    message: str | None = None


# Validator ------------------------------------------------------------------


class NamedValidator(OptionModel):
    """Reference to a validator registered under a name."""

    kind: Literal["named"] = "named"
    name: str


class FunctionValidator(OptionModel):
    """An inline validator function.

    The function raises to reject the value; returning ``False`` also rejects
    it.
    """

    kind: Literal["function"] = "function"
    func: Callable[[Any], Any]


class PatternValidator(OptionModel):
    """A regular expression the string form of the value must match."""

    kind: Literal["pattern"] = "pattern"
    regexp: re.Pattern = _Field(validation_alias=AliasChoices("regexp", "pattern"))
    message: str | None = None


ValidatorSpec = Annotated[
    NamedValidator | FunctionValidator | PatternValidator,
    _Field(discriminator="kind"),
]


# Option records -------------------------------------------------------------


class TypeOptions(OptionModel):
    """Options shared by every type descriptor.

    Attributes:
        required: Whether an empty value is rejected.
        default: A literal default or a zero-argument producer.
        validator: Optional custom validator.
        immutable: Write protection flag consumed by the document layer.
    """

    required: Requirement = RequiredFlag(flag=False)
    default: Any = None
    validator: ValidatorSpec | None = None
    immutable: bool = False

    @field_validator("required", mode="before")
    @classmethod
    def _normalize_required(cls, value: Any) -> Any:
        return requirement_shape(value)

    @field_validator("validator", mode="before")
    @classmethod
    def _normalize_validator(cls, value: Any) -> Any:
        return validator_shape(value)


class NumberOptions(TypeOptions):
    """Options of a Number descriptor."""

    int_val: bool = _Field(default=False, alias="intVal")
    min: Bound | None = None
    max: Bound | None = None

    @field_validator("min", "max", mode="before")
    @classmethod
    def _normalize_bound(cls, value: Any) -> Any:
        return bound_shape(value)

    @field_validator("min", "max")
    @classmethod
    def _convert_bound(cls, value: Any) -> Any:
        return convert_bound(value, coerce_number_bound)


class DateOptions(TypeOptions):
    """Options of a Date descriptor.

    Literal bounds may be given as datetimes, dates, ISO 8601 strings or
    epoch milliseconds; they are stored as aware UTC datetimes.
    """

    min: Bound | None = None
    max: Bound | None = None

    @field_validator("min", "max", mode="before")
    @classmethod
    def _normalize_bound(cls, value: Any) -> Any:
        return bound_shape(value)

    @field_validator("min", "max")
    @classmethod
    def _convert_bound(cls, value: Any) -> Any:
        return convert_bound(value, coerce_date_bound)


class EnumOption(OptionModel):
    """Allowed values of a String descriptor, with an optional custom message."""

    values: list[str]
    message: str | None = None


class StringOptions(TypeOptions):
    """Options of a String descriptor."""

    enum: EnumOption | None = None
    min_length: Bound | None = _Field(default=None, alias="minLength")
    max_length: Bound | None = _Field(default=None, alias="maxLength")
    trim: bool = False
    lowercase: bool = False
    uppercase: bool = False

    @field_validator("enum", mode="before")
    @classmethod
    def _normalize_enum(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return {"values": list(value)}
        return value

    @field_validator("min_length", "max_length", mode="before")
    @classmethod
    def _normalize_bound(cls, value: Any) -> Any:
        return bound_shape(value)

    @field_validator("min_length", "max_length")
    @classmethod
    def _convert_bound(cls, value: Any) -> Any:
        return convert_bound(value, coerce_length_bound)


# Normalization and resolution -----------------------------------------------


def requirement_shape(value: Any) -> Any:
    """Map a raw ``required`` option onto a member of :data:`Requirement`."""
    if value is None:
        return {"kind": "flag", "flag": False}
    if isinstance(value, bool):
        return {"kind": "flag", "flag": value}
    if isinstance(value, Mapping) and "kind" not in value:
        return {"kind": "message", **value}
    if callable(value) and not isinstance(value, BaseModel):
        return {"kind": "resolver", "resolver": value}
    return value


def bound_shape(value: Any) -> Any:
    """Map a raw ``min``/``max`` option onto a member of :data:`Bound`."""
    if value is None or isinstance(value, BaseModel):
        return value
    if isinstance(value, Mapping):
        if "kind" in value:
            return value
        return {"kind": "described", **value}
    if callable(value):
        return {"kind": "resolver", "resolver": value}
    return {"kind": "literal", "val": value}


def validator_shape(value: Any) -> Any:
    """Map a raw ``validator`` option onto a member of :data:`ValidatorSpec`."""
    if value is None or isinstance(value, BaseModel):
        return value
    if isinstance(value, str):
        return {"kind": "named", "name": value}
    if isinstance(value, re.Pattern):
        return {"kind": "pattern", "regexp": value}
    if isinstance(value, Mapping):
        if "kind" in value:
            return value
        return {"kind": "pattern", **value}
    if callable(value):
        return {"kind": "function", "func": value}
    return value


def coerce_number_bound(value: Any) -> Any:
    """Check that a bound value is a real number."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or math.isnan(value):
        raise ValueError(f"bound must be a number, got {value!r}")
    return value


def coerce_date_bound(value: Any) -> Any:
    """Convert a bound value to an aware UTC datetime."""
    converted = to_date(value)
    if converted is None:
        raise ValueError(f"bound must be a valid date, got {value!r}")
    return converted


def coerce_length_bound(value: Any) -> Any:
    """Check that a length bound is a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"length bound must be a non-negative integer, got {value!r}")
    return value


def convert_bound(bound: Any, convert: Callable[[Any], Any]) -> Any:
    """Apply *convert* to the value of a literal or described bound.

    Resolver bounds are left alone; their values are converted when resolved.
    """
    if isinstance(bound, (LiteralBound, DescribedBound)) and bound.val is not None:
        return bound.model_copy(update={"val": convert(bound.val)})
    return bound


def resolve_requirement(requirement: Requirement, field: str) -> str | None:
    """Resolve a requirement to its failure message.

    Args:
        requirement: The normalized requirement.
        field: Field name used in the default message.

    Returns:
        The message to raise when the field is empty, or None if the field
        is not required.

    Raises:
        BuildSchemaError: If a resolver returns something that is not a
            requirement.
    """
    if isinstance(requirement, RequiredResolver):
        produced = requirement.resolver()
        try:
            requirement = _REQUIREMENT_ADAPTER.validate_python(requirement_shape(produced))
        except PydanticValidationError as exc:
            raise BuildSchemaError(f"Invalid requirement for field '{field}': {exc}") from exc
        if isinstance(requirement, RequiredResolver):
            raise BuildSchemaError(f"Requirement resolver for field '{field}' returned another resolver")
    if not requirement.flag:
        return None
    message = requirement.message if isinstance(requirement, RequiredMessage) else None
    return message if message is not None else f"Property '{field}' is required"


def resolve_bound(
    bound: Bound | None,
    convert: Callable[[Any], Any],
    field: str,
) -> ResolvedBound | None:
    """Resolve a bound to a comparable value and optional custom message.

    Args:
        bound: The normalized bound, or None.
        convert: Type-specific conversion applied to values produced by a
            resolver (literal values were converted at construction).
        field: Field name used in error messages.

    Returns:
        The resolved bound, or None if no constraint applies.

    Raises:
        BuildSchemaError: If a resolver produces an invalid bound.
    """
    if bound is None:
        return None
    if isinstance(bound, ResolverBound):
        produced = bound.resolver()
        try:
            bound = _BOUND_ADAPTER.validate_python(bound_shape(produced))
            if isinstance(bound, ResolverBound):
                raise BuildSchemaError(f"Bound resolver for field '{field}' returned another resolver")
            bound = convert_bound(bound, convert)
        except (PydanticValidationError, ValueError) as exc:
            raise BuildSchemaError(f"Invalid bound for field '{field}': {exc}") from exc
    if bound is None or bound.val is None:
        return None
    message = bound.message if isinstance(bound, DescribedBound) else None
    return ResolvedBound(value=bound.val, message=message)


# ################
# Implementation
# ################

_REQUIREMENT_ADAPTER: TypeAdapter[Any] = TypeAdapter(Requirement)
_BOUND_ADAPTER: TypeAdapter[Any] = TypeAdapter(Bound | None)
