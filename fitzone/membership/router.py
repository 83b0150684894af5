"""Membership domain router."""

import logging

from fastapi import APIRouter, status

from fitzone.auth.dependencies import CurrentUserDep
from fitzone.core.constants import CommonResponses, Routes
from fitzone.core.deps import SessionDep
from fitzone.core.mixins import utc_now
from fitzone.membership.models import MEMBERSHIP_PERIOD, Membership, PaymentStatus
from fitzone.membership.schemas import (
    MembershipCreate,
    MembershipCreated,
    MembershipRead,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=Routes.MEMBERSHIPS.prefix,
    tags=[Routes.MEMBERSHIPS.tag],
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
        **CommonResponses.NOT_FOUND,
        **CommonResponses.UNPROCESSABLE,
    },
)


@router.post(
    "", response_model=MembershipCreated, status_code=status.HTTP_201_CREATED
)
async def create_membership(
    membership_data: MembershipCreate, user: CurrentUserDep, session: SessionDep
):
    """Start a 30-day membership for the current user.

    The user's tier is overwritten with the new plan in the same commit.
    Payment is recorded as pending and is not processed.
    """
    start = utc_now()
    membership = Membership(
        user_id=user.id,
        plan_type=membership_data.plan_type,
        amount=membership_data.amount,
        start_date=start,
        end_date=start + MEMBERSHIP_PERIOD,
        payment_status=PaymentStatus.pending,
    )
    user.membership_type = membership_data.plan_type

    session.add(membership)
    session.add(user)
    session.commit()
    session.refresh(membership)

    logger.info(
        "Membership created: %s",
        membership.plan_type.value,
        extra={"user_id": str(user.id)},
    )

    return MembershipCreated(
        message="Membership created successfully",
        membership=MembershipRead.model_validate(membership),
    )
