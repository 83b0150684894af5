"""Auth domain router.

Registration and login. Both return a fresh bearer token plus a user
summary; the client stores the token and sends it on protected routes.
"""

import logging

from fastapi import APIRouter, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from starlette.concurrency import run_in_threadpool

from fitzone.auth.dependencies import TokenServiceDep
from fitzone.auth.exceptions import InvalidCredentialsError
from fitzone.auth.passwords import hash_password, verify_password
from fitzone.auth.schemas import AuthLoginRequest, AuthRegister, AuthResponse
from fitzone.core.constants import CommonResponses, Routes
from fitzone.core.deps import SessionDep, SettingsDep
from fitzone.user.exceptions import EmailExistsError, UserInactiveError
from fitzone.user.models import MembershipType, User
from fitzone.user.schemas import UserSummary

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=Routes.AUTH.prefix,
    tags=[Routes.AUTH.tag],
    responses={**CommonResponses.BAD_REQUEST, **CommonResponses.UNPROCESSABLE},
)


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    register_data: AuthRegister,
    session: SessionDep,
    settings: SettingsDep,
    token_service: TokenServiceDep,
):
    """Register a new user and sign them in.

    Email format is validated by Pydantic's EmailStr before this code runs.
    Only the bcrypt hash of the password is stored.
    """
    email_exists = session.exec(
        select(User).where(User.email == register_data.email)
    ).first()

    if email_exists:
        raise EmailExistsError()

    password_hash = await run_in_threadpool(
        hash_password, register_data.password, settings.bcrypt_rounds
    )

    user = User(
        first_name=register_data.first_name,
        last_name=register_data.last_name,
        email=register_data.email,
        password_hash=password_hash,
        phone=register_data.phone,
        membership_type=MembershipType.basic,
    )
    try:
        session.add(user)
        session.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration for the same email.
        session.rollback()
        raise EmailExistsError() from e
    session.refresh(user)

    logger.info("User registered", extra={"user_id": str(user.id)})

    return AuthResponse(
        message="User registered successfully",
        token=token_service.issue(user.id, user.email),
        user=UserSummary.model_validate(user),
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={**CommonResponses.FORBIDDEN},
)
async def login(
    payload: AuthLoginRequest,
    session: SessionDep,
    token_service: TokenServiceDep,
):
    """Login with email/password and return a new token.

    Unknown email and wrong password produce the same error so the
    response does not reveal which accounts exist.
    """
    user = session.exec(select(User).where(User.email == payload.email)).first()

    if user is None:
        logger.info("Login failed: unknown email")
        raise InvalidCredentialsError()

    password_ok = await run_in_threadpool(
        verify_password, payload.password, user.password_hash
    )
    if not password_ok:
        logger.info("Login failed: bad password", extra={"user_id": str(user.id)})
        raise InvalidCredentialsError()

    if not user.is_active:
        raise UserInactiveError()

    return AuthResponse(
        message="Login successful",
        token=token_service.issue(user.id, user.email),
        user=UserSummary.model_validate(user),
    )
