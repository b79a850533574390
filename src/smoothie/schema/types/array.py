# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Array descriptor: homogeneous sequences validated against an item type."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Literal

from pydantic import Field as _Field

from smoothie.errors import TypeMismatchError
from smoothie.schema.options import TypeOptions
from smoothie.schema.strategies import DEFAULT_CAST_STRATEGY, CastStrategy, StrategyLike, as_cast_strategy
from smoothie.schema.types.core import CoreType
from smoothie.schema.utils import ValueKind, check_cast_strategy, ensure_array_items_type, is_kind

if TYPE_CHECKING:
    from smoothie.schema.types import SchemaType

# ###############
# Public Interface
# ###############


class ArrayType(CoreType):
    """A list whose elements all conform to ``item_type``.

    Lists and tuples are accepted as input; results are always new lists.
    The field validator sees the whole list, not single elements.
    """

    kind: Literal["array"] = "array"
    type_name: ClassVar[str] = "Array"

    item_type: SchemaType
    options: TypeOptions = _Field(default_factory=TypeOptions)

    def cast(self, value: Any, strategy: CastStrategy | str = DEFAULT_CAST_STRATEGY) -> Any:
        strategy = as_cast_strategy(strategy)
        if is_kind(value, ValueKind.ARRAY):
            return ensure_array_items_type(value, self.item_type, strategy)
        return check_cast_strategy(value, strategy, self)

    def validate(self, value: Any, strategy: StrategyLike = None) -> Any:
        """Validate the list and every element, returning a new list.

        Raises:
            RequiredFieldError: If the list is required but empty.
            TypeMismatchError: If *value* is not a list or tuple.
            ValidationError: The first failure of the field validator or of
                any element; no partial result is returned.
        """
        value = super().validate(value, strategy)
        if self.is_empty(value):
            return value
        if not is_kind(value, ValueKind.ARRAY):
            raise TypeMismatchError(self.name, self.type_name)
        self.check_validator(value)
        return [self.item_type.validate(item, strategy) for item in value]
