"""Contact domain router."""

import logging

from fastapi import APIRouter, status

from fitzone.contact.models import Inquiry, InquiryStatus
from fitzone.contact.schemas import InquiryCreate, InquiryCreated
from fitzone.core.constants import CommonResponses, Routes
from fitzone.core.deps import SessionDep

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=Routes.CONTACT.prefix,
    tags=[Routes.CONTACT.tag],
    responses={**CommonResponses.UNPROCESSABLE},
)


@router.post("", response_model=InquiryCreated, status_code=status.HTTP_201_CREATED)
async def submit_inquiry(inquiry_data: InquiryCreate, session: SessionDep):
    """Store a contact-form message for administrators to triage.

    Every submission creates a new inquiry; there is no deduplication.
    """
    inquiry = Inquiry(**inquiry_data.model_dump(), status=InquiryStatus.new)
    session.add(inquiry)
    session.commit()
    session.refresh(inquiry)

    logger.info("Inquiry submitted: %s", inquiry.type.value)

    return InquiryCreated(
        message="Inquiry submitted successfully", inquiry_id=inquiry.id
    )
