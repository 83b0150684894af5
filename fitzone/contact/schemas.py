"""Contact domain schemas."""

import uuid

from pydantic import EmailStr, Field

from fitzone.contact.models import InquiryType
from fitzone.models.base import CamelModel


class InquiryCreate(CamelModel):
    """Contact form submission."""

    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=20)
    message: str = Field(min_length=1)
    type: InquiryType = InquiryType.general


class InquiryCreated(CamelModel):
    message: str
    inquiry_id: uuid.UUID
