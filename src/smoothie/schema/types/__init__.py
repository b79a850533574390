# Copyright 2026 Smoothie Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptors and the closed union of all of them."""

from typing import Annotated

from pydantic import Field as _Field

from smoothie.schema.types.array import ArrayType
from smoothie.schema.types.boolean import BooleanType
from smoothie.schema.types.core import CoreType
from smoothie.schema.types.date import DateType
from smoothie.schema.types.number import NumberType
from smoothie.schema.types.string import StringType

# Any concrete descriptor. The `kind` discriminator keeps the set closed and
# lets plain mappings deserialize to the right class.
SchemaType = Annotated[
    ArrayType | BooleanType | DateType | NumberType | StringType,
    _Field(discriminator="kind"),
]

# Resolve the recursive item type of arrays.
ArrayType.model_rebuild()

__all__ = [
    "ArrayType",
    "BooleanType",
    "CoreType",
    "DateType",
    "NumberType",
    "SchemaType",
    "StringType",
]
