"""User domain schemas.

Request and response schemas for user operations.

Security notes:
- password_hash is internal-only, never exposed in responses
- UserProfileUpdate is an allow-list; any other submitted key (password,
  email, membershipType, isActive, ...) is dropped during parsing
"""

import uuid

from pydantic import EmailStr, Field, field_validator

from fitzone.models.base import CamelModel, UTCDateTime
from fitzone.user.models import MembershipType


class UserProfile(CamelModel):
    """Optional fitness profile attached to a user."""

    age: int | None = Field(default=None, ge=0, le=120)
    height: float | None = Field(default=None, gt=0)
    weight: float | None = Field(default=None, gt=0)
    fitness_goals: list[str] = Field(default_factory=list)
    medical_conditions: list[str] = Field(default_factory=list)


class UserSummary(CamelModel):
    """User fields returned alongside a token on register/login."""

    id: uuid.UUID
    first_name: str
    last_name: str
    email: EmailStr
    membership_type: MembershipType
    purchased_programs: list[str] = Field(default_factory=list)


class UserRead(UserSummary):
    """Full user record minus the password hash."""

    phone: str | None
    is_active: bool
    join_date: UTCDateTime
    profile: UserProfile | None
    created_at: UTCDateTime
    updated_at: UTCDateTime


class UserProfileUpdate(CamelModel):
    """Fields a user may change on their own profile.

    Constraints mirror registration. Names may be omitted but not nulled.
    """

    first_name: str | None = Field(default=None, min_length=1, max_length=50)
    last_name: str | None = Field(default=None, min_length=1, max_length=50)
    phone: str | None = Field(default=None, max_length=20)
    profile: UserProfile | None = None

    @field_validator("first_name", "last_name")
    @classmethod
    def reject_null_name(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("must not be null")
        return value


class ProfileUpdateResponse(CamelModel):
    message: str
    user: UserRead


class PurchasedProgramsResponse(CamelModel):
    purchased_programs: list[str]
