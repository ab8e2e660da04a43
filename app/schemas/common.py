"""
Shared pydantic building blocks for request and response schemas.
"""

from decimal import Decimal
from typing import Annotated, Union
from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def format_decimal(value: Decimal) -> str:
    """Render a Decimal as plain text without exponent or trailing zeros."""
    return format(value.normalize(), "f")


# Range of a PostgreSQL INTEGER column
INT_MIN, INT_MAX = -2**31, 2**31 - 1

# Decimal that serializes to JSON text, e.g. "0.3"
DecimalStr = Annotated[Decimal, PlainSerializer(format_decimal, return_type=str)]


class CamelModel(BaseModel):
    """Base schema exposing camelCase JSON keys over snake_case attributes."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Base schema for request bodies; unknown keys are rejected."""
    model_config = ConfigDict(extra="forbid")


class DeletedResponse(BaseModel):
    """Schema for delete responses"""
    deleted: Union[int, str]
