"""Request dependencies that identify the calling member.

The bearer token is optional at the HTTP layer so that a missing header
surfaces as our own 401 ``missing_token`` instead of FastAPI's default.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from fitzone.auth.service import TokenClaims, TokenService, get_token_service
from fitzone.db.engine import get_session
from fitzone.user.exceptions import UserInactiveError, UserNotFoundError
from fitzone.user.models import User

security = HTTPBearer(auto_error=False)

TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]


def get_token_claims(
    token_service: TokenServiceDep,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(security)
    ] = None,
) -> TokenClaims:
    """Verify the bearer token from the Authorization header.

    Raises:
        MissingTokenError: If no bearer token was sent
        InvalidTokenError: If the token is invalid or expired
    """
    token = credentials.credentials if credentials is not None else None
    return token_service.verify(token)


TokenClaimsDep = Annotated[TokenClaims, Depends(get_token_claims)]


def get_current_user(
    claims: TokenClaimsDep,
    session: Annotated[Session, Depends(get_session)],
) -> User:
    """Resolve the verified identity to its local User.

    Raises:
        UserNotFoundError: If the user no longer exists
        UserInactiveError: If the user has been deactivated
    """
    user = session.get(User, claims.user_id)

    if user is None:
        raise UserNotFoundError()

    if not user.is_active:
        raise UserInactiveError()

    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]


def require_auth(_claims: TokenClaimsDep) -> None:
    """Router-level guard: reject the request unless a valid token is present.

    Routes that also need the member record take ``CurrentUserDep``; the
    claims are resolved once per request either way.
    """
