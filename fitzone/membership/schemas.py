"""Membership domain schemas."""

import uuid

from pydantic import Field

from fitzone.membership.models import PaymentStatus
from fitzone.models.base import CamelModel, UTCDateTime
from fitzone.user.models import MembershipType


class MembershipCreate(CamelModel):
    plan_type: MembershipType
    amount: float = Field(ge=0)


class MembershipRead(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID
    plan_type: MembershipType
    start_date: UTCDateTime
    end_date: UTCDateTime
    is_active: bool
    payment_status: PaymentStatus
    amount: float
    created_at: UTCDateTime


class MembershipCreated(CamelModel):
    message: str
    membership: MembershipRead
