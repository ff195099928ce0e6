"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python.

    Incoming strings are trimmed before any length or pattern check runs.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


def blank_to_none(value: Any) -> Any:
    """Treat empty form values as missing."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str
