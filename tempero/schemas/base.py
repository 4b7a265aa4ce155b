from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, PlainSerializer
from pydantic.alias_generators import to_camel

from tempero.common.money import format_money

# Money leaves the API as fixed two-digit text, e.g. "100.00"
Money = Annotated[Decimal, PlainSerializer(format_money, return_type=str, when_used="json")]

MONEY_DIGITS = 10


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
        str_strip_whitespace = True


def blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value
