"""Contact domain models.

SQLModel table definition for contact-form inquiries awaiting triage.
"""

import uuid
from enum import Enum

from sqlmodel import Field, SQLModel

from fitzone.core.mixins import TimestampMixin


class InquiryType(str, Enum):
    general = "general"
    membership = "membership"
    program = "program"
    support = "support"


class InquiryStatus(str, Enum):
    """Triage state, changed only by administrators."""

    new = "new"
    in_progress = "in-progress"
    resolved = "resolved"


class Inquiry(TimestampMixin, SQLModel, table=True):
    __tablename__: str = "inquiries"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(max_length=255, index=True)
    phone: str | None = Field(default=None, max_length=20)
    message: str
    type: InquiryType = Field(default=InquiryType.general, max_length=20)
    status: InquiryStatus = Field(default=InquiryStatus.new, max_length=20)
