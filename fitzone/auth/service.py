"""Token issuing and verification.

Session tokens are HS256 JWTs carrying the user id and email. They are
stateless: nothing is stored server-side, so a token stays valid until it
expires or the client throws it away.
"""

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache

import jwt

from fitzone.auth.exceptions import InvalidTokenError, MissingTokenError
from fitzone.core.settings import get_settings

TOKEN_TTL = timedelta(days=7)


@dataclass(frozen=True)
class TokenClaims:
    """Identity decoded from a verified token."""

    user_id: uuid.UUID
    email: str


class TokenService:
    """Issues and verifies signed session tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = TOKEN_TTL,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    def issue(self, user_id: uuid.UUID, email: str) -> str:
        """Return a token for the identity, valid for the configured TTL."""
        now = datetime.now(UTC)
        payload = {
            "userId": str(user_id),
            "email": email,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str | None) -> TokenClaims:
        """Verify signature and expiry and return the embedded identity.

        Raises:
            MissingTokenError: If no token was supplied
            InvalidTokenError: If the token is malformed, tampered with or expired
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
            return TokenClaims(
                user_id=uuid.UUID(payload["userId"]),
                email=payload["email"],
            )
        except jwt.InvalidTokenError as e:
            # ExpiredSignatureError is a subclass; both map to the same error.
            raise InvalidTokenError() from e
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            # Signed but malformed identity claims, e.g. a numeric userId.
            raise InvalidTokenError() from e


@lru_cache
def get_token_service() -> TokenService:
    """Get the token service configured from settings."""
    settings = get_settings()
    return TokenService(secret=settings.jwt_secret, algorithm=settings.jwt_algorithm)
