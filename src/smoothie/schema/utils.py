# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value predicates and coercion helpers shared by the type descriptors.

Runtime kinds are decided structurally with ``isinstance`` against a closed
set of :class:`ValueKind` tags. Dates are always handled as timezone-aware
UTC datetimes; naive inputs are taken to be UTC already.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Sequence
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any

from smoothie.errors import TypeMismatchError
from smoothie.schema.strategies import CastStrategy

if TYPE_CHECKING:
    from smoothie.schema.types.core import CoreType

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ValueKind(Enum):
    """Closed set of runtime value kinds the engine distinguishes."""

    ARRAY = "Array"
    DATE = "Date"
    NUMBER = "Number"
    STRING = "String"
    BOOLEAN = "Boolean"
    OBJECT = "Object"
    NULL = "Null"


def kind_of(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` of *value*.

    ``bool`` is reported as BOOLEAN even though it subclasses ``int``.
    ``datetime.date`` counts as DATE. Lists and tuples are arrays; anything
    not otherwise matched (mappings, arbitrary objects) is OBJECT.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (numbers.Real, Decimal)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (datetime, date)):
        return ValueKind.DATE
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    return ValueKind.OBJECT


def is_kind(value: Any, kind: ValueKind) -> bool:
    """Return True if *value* is of the given kind."""
    return kind_of(value) is kind


def is_number(value: Any) -> bool:
    """Return True if *value* is a real number other than NaN (bools excluded)."""
    if not is_kind(value, ValueKind.NUMBER):
        return False
    if isinstance(value, Decimal):
        return not value.is_nan()
    return not math.isnan(value)


def to_number(value: Any) -> int | float | numbers.Real:
    """Coerce *value* to a number, returning NaN when that is impossible.

    Numbers pass through (``Decimal`` becomes ``float``), bools become 0 or 1,
    and strings are parsed after stripping whitespace. A blank string
    coerces to 0. Integer strings stay ``int`` so that ``"5"`` gives ``5``.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, Decimal):
        # Signaling NaN refuses float conversion.
        return math.nan if value.is_nan() else float(value)
    if isinstance(value, numbers.Real):
        return value
    if isinstance(value, str):
        return _parse_number(value)
    return math.nan


def to_date(value: Any) -> datetime | None:
    """Convert *value* to an aware UTC datetime, or return None if invalid.

    Accepts datetimes, dates (midnight UTC), ISO 8601 strings and numbers
    interpreted as milliseconds since the Unix epoch.
    """
    if isinstance(value, datetime):
        try:
            return _as_utc(value)
        except OverflowError:
            return None
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, str):
        try:
            return _as_utc(datetime.fromisoformat(value.strip()))
        except (OverflowError, ValueError):
            return None
    if is_number(value):
        try:
            return _EPOCH + timedelta(milliseconds=float(value))
        except (OverflowError, ValueError):
            return None
    return None


def is_date_valid(value: Any) -> bool:
    """Return True if *value* converts to a valid date."""
    return to_date(value) is not None


def to_iso_string(value: datetime) -> str:
    """Format a datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    dt = _as_utc(value)
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}.{dt.microsecond // 1000:03d}Z"
    )


def string_form(value: Any) -> str:
    """Render *value* as text the way documents store it.

    Bools are ``true``/``false``, ``None`` is ``null``, integral floats drop
    their ``.0``, non-finite numbers are ``NaN``/``Infinity``/``-Infinity``
    and dates are ISO strings. Everything else uses ``str``.
    """
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return "null"
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.DATE:
        converted = to_date(value)
        return to_iso_string(converted) if converted is not None else str(value)
    if kind is ValueKind.NUMBER:
        return _number_form(value)
    return str(value)


def check_cast_strategy(value: Any, strategy: CastStrategy, descriptor: CoreType) -> Any:
    """Apply the cast fallback for a value that *descriptor* could not coerce.

    Args:
        value: The original, uncoercible value.
        strategy: The active cast strategy.
        descriptor: The type descriptor performing the cast.

    Returns:
        *value* for ``keep`` and ``defaultOrKeep``, ``None`` for ``drop`` and
        ``defaultOrDrop``.

    Raises:
        TypeMismatchError: Under the ``throw`` strategy.
    """
    logger.debug(
        "Cannot cast %r for '%s' to %s, applying strategy '%s'",
        value,
        descriptor.name,
        descriptor.type_name,
        strategy.value,
    )
    if strategy in (CastStrategy.KEEP, CastStrategy.DEFAULT_OR_KEEP):
        return value
    if strategy is CastStrategy.THROW:
        raise TypeMismatchError(descriptor.name, descriptor.type_name)
    return None


def ensure_array_items_type(items: Sequence[Any], item_type: CoreType, strategy: CastStrategy) -> list[Any]:
    """Cast every element of *items* with *item_type*, preserving order and length."""
    return [item_type.cast(item, strategy) for item in items]


# ################
# Implementation
# ################

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_PREFIXED_INTEGERS = ("0x", "0o", "0b")

# Integral floats below this magnitude print without exponent or fraction.
_PLAIN_INTEGER_LIMIT = 1e21


def _as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _number_form(value: Any) -> str:
    if not is_number(value):
        return "NaN"
    if isinstance(value, float):
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
            return str(int(value))
    return str(value)


def _parse_number(text: str) -> int | float:
    """Parse a numeric string the lenient way; NaN when it is not numeric."""
    text = text.strip()
    if not text:
        return 0
    # Python literals allow digit separators, user input does not.
    if "_" in text:
        return math.nan
    try:
        if text[:2].lower() in _PREFIXED_INTEGERS:
            return int(text, 0)
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan
