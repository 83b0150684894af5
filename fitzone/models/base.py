"""Shared schema building blocks.

The public JSON contract is camelCase (``firstName``, ``membershipType``);
Python code stays snake_case. ``CamelModel`` bridges the two.
"""

from datetime import UTC, datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def format_utc(value: datetime) -> str:
    """Format datetime as ISO 8601 string in UTC.

    Converts datetime to UTC timezone and formats with Z suffix
    (e.g. 2026-01-19T12:34:56Z).
    """
    if value.tzinfo is not None:
        utc_value = value.astimezone(UTC)
    else:
        # Naive datetime (SQLite drops tzinfo) - stored values are UTC
        utc_value = value.replace(tzinfo=UTC)

    return utc_value.replace(microsecond=0).isoformat().replace("+00:00", "Z")


UTCDateTime = Annotated[datetime, PlainSerializer(format_utc, return_type=str)]


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python.

    Accepts either spelling on input and reads ORM objects directly.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    """Generic message-only response."""

    message: str
