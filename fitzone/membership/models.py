"""Membership domain models."""

import uuid
from datetime import datetime, timedelta
from enum import Enum

from sqlmodel import Field, SQLModel

from fitzone.core.mixins import TimestampMixin, utc_now
from fitzone.user.models import MembershipType

# Fixed billing window for every plan.
MEMBERSHIP_PERIOD = timedelta(days=30)


class PaymentStatus(str, Enum):
    """Stored payment state. Nothing in the API moves it past pending."""

    pending = "pending"
    paid = "paid"
    failed = "failed"


class Membership(TimestampMixin, SQLModel, table=True):
    __tablename__: str = "memberships"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", index=True, ondelete="CASCADE")
    plan_type: MembershipType = Field(max_length=20)
    start_date: datetime = Field(default_factory=utc_now)
    end_date: datetime
    is_active: bool = Field(default=True)
    payment_status: PaymentStatus = Field(default=PaymentStatus.pending, max_length=20)
    amount: float = Field(ge=0)
