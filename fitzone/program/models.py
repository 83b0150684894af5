"""Program domain models.

SQLModel table definition for catalog programs. Nested details
(instructor, schedule, benefits, equipment) are stored as JSON.
"""

from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from fitzone.core.mixins import TimestampMixin


class Program(TimestampMixin, SQLModel, table=True):
    """Catalog entry. The id is assigned externally (e.g. "hiit-bootcamp")."""

    __tablename__: str = "programs"

    id: str = Field(primary_key=True, max_length=100)
    title: str = Field(max_length=255)
    description: str | None = None
    duration: str | None = Field(default=None, max_length=50)
    level: str | None = Field(default=None, max_length=50)
    price: float | None = Field(default=None, ge=0)
    instructor: dict[str, Any] | None = Field(default=None, sa_column=Column(JSON))
    schedule: list[dict[str, Any]] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    benefits: list[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    equipment: list[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
