"""Auth domain schemas.

Request and response schemas for authentication operations.
"""

from pydantic import EmailStr, Field

from fitzone.models.base import CamelModel
from fitzone.user.schemas import UserSummary


class AuthRegister(CamelModel):
    """Request schema for user registration."""

    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    phone: str | None = Field(default=None, max_length=20)


class AuthLoginRequest(CamelModel):
    """Request schema for email/password login.

    The email is only a lookup key and is not format-checked here; an
    address that could never have registered is simply unknown.
    """

    email: str = Field(min_length=1, max_length=255)
    password: str


class AuthResponse(CamelModel):
    """Response schema for register and login."""

    message: str
    token: str
    user: UserSummary
