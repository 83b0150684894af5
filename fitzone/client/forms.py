"""Controller behind the sign in / sign up / forgot password form.

Holds the field values, the per-field errors and the submit lifecycle. A
view layer renders ``controller.form``, ``controller.errors``,
``controller.is_submitting`` and ``controller.show_success``; it never
talks to the API directly.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import fields, replace
from enum import Enum

import httpx

from fitzone.client.api import ApiError
from fitzone.client.session import SessionStore, SessionUser
from fitzone.client.validation import AuthFormData, AuthMode, validate_auth_form

logger = logging.getLogger(__name__)

SUBMIT_ERROR_KEY = "submit"
SUCCESS_DELAY_SECONDS = 2.0


class ErrorCategory(str, Enum):
    email_exists = "email_exists"
    invalid_credentials = "invalid_credentials"
    user_not_found = "user_not_found"
    generic = "generic"

    @property
    def message(self) -> str:
        return _CATEGORY_MESSAGES[self]


_CATEGORY_MESSAGES = {
    ErrorCategory.email_exists: (
        "An account with this email already exists. Please sign in instead."
    ),
    ErrorCategory.invalid_credentials: (
        "Invalid email or password. Please check your credentials."
    ),
    ErrorCategory.user_not_found: (
        "No account found with this email. Please sign up first."
    ),
    ErrorCategory.generic: "Something went wrong. Please try again later.",
}

# Fallback for servers that only send a message
_MESSAGE_MARKERS = (
    ("already exists", ErrorCategory.email_exists),
    ("Invalid email or password", ErrorCategory.invalid_credentials),
    ("User not found", ErrorCategory.user_not_found),
)


def classify_error(exc: Exception) -> ErrorCategory:
    """Map a failed submit to one of the user-facing categories."""
    if isinstance(exc, ApiError):
        try:
            return ErrorCategory(exc.error_type)
        except ValueError:
            pass
        for marker, category in _MESSAGE_MARKERS:
            if marker in exc.message:
                return category
    return ErrorCategory.generic


class AuthFormController:
    def __init__(
        self,
        session_store: SessionStore,
        on_close: Callable[[], None] | None = None,
        on_auth_success: Callable[[SessionUser], None] | None = None,
        mode: AuthMode = AuthMode.signin,
        success_delay: float = SUCCESS_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._session = session_store
        self._on_close = on_close
        self._on_auth_success = on_auth_success
        self._success_delay = success_delay
        self._sleep = sleep

        self.mode = mode
        self.form = AuthFormData()
        self.errors: dict[str, str] = {}
        self.is_submitting = False
        self.show_success = False

    def set_field(self, name: str, value: str) -> None:
        """Update one field and clear its error, if any."""
        if name not in {f.name for f in fields(AuthFormData)}:
            raise KeyError(name)
        self.form = replace(self.form, **{name: value})
        self.errors.pop(name, None)

    def switch_mode(self, mode: AuthMode) -> None:
        self.mode = mode
        self.errors = {}
        self.show_success = False

    def reset(self) -> None:
        self.form = AuthFormData()
        self.errors = {}
        self.is_submitting = False
        self.show_success = False

    def close(self) -> None:
        self.reset()
        if self._on_close is not None:
            self._on_close()

    def validate(self) -> bool:
        self.errors = validate_auth_form(self.mode, self.form)
        return not self.errors

    async def submit(self) -> bool:
        """Validate, call the API for the current mode and report the outcome.

        Returns True on success. On failure the reason is left in
        ``errors["submit"]`` and the form keeps its values.
        """
        if self.is_submitting or not self.validate():
            return False

        self.is_submitting = True
        email = self.form.email.strip().lower()
        try:
            if self.mode is AuthMode.signin:
                user = await self._session.login(email, self.form.password)
            elif self.mode is AuthMode.signup:
                user = await self._session.register(
                    first_name=self.form.first_name.strip(),
                    last_name=self.form.last_name.strip(),
                    email=email,
                    password=self.form.password,
                    phone=self.form.phone.strip() or None,
                )
            else:
                # Password reset has no backend; acknowledge locally.
                user = None
        except (ApiError, httpx.HTTPError) as exc:
            category = classify_error(exc)
            logger.info("Auth %s failed: %s", self.mode.value, category.value)
            self.errors = {SUBMIT_ERROR_KEY: category.message}
            return False
        finally:
            self.is_submitting = False

        self.show_success = True
        if user is not None and self._on_auth_success is not None:
            self._on_auth_success(user)

        await self._sleep(self._success_delay)
        self.close()
        return True
