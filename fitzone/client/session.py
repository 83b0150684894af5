"""Client-side session state.

SessionState is the explicit, serializable record of who is signed in.
SessionStore owns it and defines the persistence boundaries: load once at
startup, persist after every mutation, clear on logout. Only ``user`` and
``isAuthenticated`` are ever written to storage.

A restored session is trusted as-is; the token is not re-checked with the
server until the next protected call.
"""

import logging

from pydantic import Field, ValidationError

from fitzone.client.api import AUTH_TOKEN_KEY, FitZoneClient
from fitzone.client.storage import LocalStorage
from fitzone.models.base import CamelModel

logger = logging.getLogger(__name__)

SESSION_STORAGE_KEY = "auth-storage"


class SessionUser(CamelModel):
    """User summary as cached on the client."""

    id: str
    first_name: str
    last_name: str
    email: str
    membership_type: str = "basic"
    purchased_programs: list[str] = Field(default_factory=list)
    phone: str | None = None
    join_date: str | None = None


class SessionState(CamelModel):
    user: SessionUser | None = None
    is_authenticated: bool = False


class SessionStore:
    def __init__(self, client: FitZoneClient, storage: LocalStorage):
        self._client = client
        self._storage = storage
        self.state = SessionState()
        self.is_loading = False

    @property
    def user(self) -> SessionUser | None:
        return self.state.user

    @property
    def is_authenticated(self) -> bool:
        return self.state.is_authenticated

    def _set(self, state: SessionState) -> None:
        self.state = state
        self._storage.set_item(
            SESSION_STORAGE_KEY, self.state.model_dump_json(by_alias=True)
        )

    def load(self) -> SessionState:
        """Restore persisted state, then reconcile it with the stored token."""
        raw = self._storage.get_item(SESSION_STORAGE_KEY)
        if raw is not None:
            try:
                self.state = SessionState.model_validate_json(raw)
            except ValidationError:
                logger.warning("Discarding unreadable persisted session")
                self.state = SessionState()

        self.check_auth_status()
        return self.state

    def check_auth_status(self) -> None:
        """Authenticated only when both a token and a cached user are present."""
        token = self._storage.get_item(AUTH_TOKEN_KEY)
        cached_user = self._client.get_current_user()

        user = None
        if token and cached_user:
            try:
                user = SessionUser.model_validate(cached_user)
            except ValidationError:
                logger.warning("Discarding unreadable cached user")

        if user is not None:
            self._set(SessionState(user=user, is_authenticated=True))
        else:
            self._set(SessionState())

    async def login(self, email: str, password: str) -> SessionUser:
        self.is_loading = True
        try:
            response = await self._client.login(email=email, password=password)
        finally:
            self.is_loading = False

        user = SessionUser.model_validate(response["user"])
        self._set(SessionState(user=user, is_authenticated=True))
        return user

    async def register(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        phone: str | None = None,
    ) -> SessionUser:
        self.is_loading = True
        try:
            response = await self._client.register(
                first_name=first_name,
                last_name=last_name,
                email=email,
                password=password,
                phone=phone,
            )
        finally:
            self.is_loading = False

        user = SessionUser.model_validate(response["user"])
        self._set(SessionState(user=user, is_authenticated=True))
        return user

    def logout(self) -> None:
        self._client.logout()
        self._set(SessionState())

    def update_user(self, **fields: object) -> None:
        """Merge fields into the cached user. No-op when signed out."""
        if self.state.user is None:
            return
        merged = SessionUser.model_validate({**self.state.user.model_dump(), **fields})
        self._set(SessionState(user=merged, is_authenticated=self.is_authenticated))
