"""User domain models.

SQLModel table definitions for members and the programs they have unlocked.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import EmailStr
from sqlalchemy import JSON, Column
from sqlmodel import Field, Relationship, SQLModel

from fitzone.core.mixins import TimestampMixin, utc_now


class MembershipType(str, Enum):
    """Membership tier stored on the user (last write wins, not historized)."""

    basic = "basic"
    premium = "premium"
    elite = "elite"


class User(TimestampMixin, SQLModel, table=True):
    """Member account.

    Note: password_hash is internal-only and must never appear in a
    response schema.
    """

    __tablename__: str = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    email: EmailStr = Field(index=True, unique=True, max_length=255)
    password_hash: str = Field(max_length=255)
    phone: str | None = Field(default=None, max_length=20)
    membership_type: MembershipType = Field(
        default=MembershipType.basic, max_length=20
    )
    is_active: bool = Field(default=True)
    join_date: datetime = Field(default_factory=utc_now)
    profile: dict[str, Any] | None = Field(default=None, sa_column=Column(JSON))

    purchases: list["ProgramPurchase"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={
            "lazy": "selectin",
            "cascade": "all, delete-orphan",
            "order_by": "ProgramPurchase.purchased_at",
        },
    )

    @property
    def purchased_programs(self) -> list[str]:
        return [purchase.program_id for purchase in self.purchases]


class ProgramPurchase(SQLModel, table=True):
    """One unlocked program for one user.

    The composite primary key makes the purchased set unique per user, so a
    repeated purchase is rejected by the store instead of duplicated.
    """

    __tablename__: str = "program_purchases"

    user_id: uuid.UUID = Field(
        foreign_key="users.id", primary_key=True, ondelete="CASCADE"
    )
    program_id: str = Field(primary_key=True, max_length=100)
    purchased_at: datetime = Field(default_factory=utc_now)

    user: User | None = Relationship(back_populates="purchases")
