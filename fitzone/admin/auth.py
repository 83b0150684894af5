import logging
import secrets

from sqladmin.authentication import AuthenticationBackend
from starlette.requests import Request

from fitzone.core.settings import get_settings

logger = logging.getLogger(__name__)

SESSION_KEY = "fitzone_admin"


class AdminAuth(AuthenticationBackend):
    """Guards the admin panel with the single operator account from settings.

    The signed-in state lives in the Starlette session cookie.
    """

    def __init__(self) -> None:
        # SQLAdmin installs SessionMiddleware with this secret.
        super().__init__(secret_key=get_settings().session_secret_key)

    async def login(self, request: Request) -> bool:
        form = await request.form()
        username = str(form.get("username", "")).strip()
        password = str(form.get("password", ""))

        settings = get_settings()
        username_ok = secrets.compare_digest(
            username.encode(), settings.admin_username.encode()
        )
        password_ok = secrets.compare_digest(
            password.encode(), settings.admin_password.encode()
        )
        ok = username_ok and password_ok

        if ok:
            request.session[SESSION_KEY] = username
        else:
            logger.warning("Admin login rejected for %r", username)
        return ok

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        return bool(request.session.get(SESSION_KEY))
