"""Column patterns shared by the table models."""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import text
from sqlmodel import Field


def utc_now() -> datetime:
    """Current UTC time, truncated to whole seconds."""
    return datetime.now(UTC).replace(microsecond=0)


def _timestamp(**column_kwargs: Any) -> Any:
    column_kwargs.setdefault("server_default", text("CURRENT_TIMESTAMP"))
    return Field(default_factory=utc_now, sa_column_kwargs=column_kwargs)


class TimestampMixin:
    """Adds ``created_at`` and an ``updated_at`` that refreshes on every UPDATE.

    List it before SQLModel in the bases:
        class Program(TimestampMixin, SQLModel, table=True): ...
    """

    created_at: datetime = _timestamp()
    updated_at: datetime = _timestamp(onupdate=utc_now)
