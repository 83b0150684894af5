"""Tests for fitzone/client/forms.py - auth form controller."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from fitzone.client.api import ApiError, FitZoneClient
from fitzone.client.forms import (
    SUBMIT_ERROR_KEY,
    AuthFormController,
    ErrorCategory,
    classify_error,
)
from fitzone.client.session import SessionStore
from fitzone.client.validation import AuthFormData, AuthMode
from fitzone.user.models import User


def _controller(session_store, mode=AuthMode.signin):
    on_close = MagicMock()
    on_auth_success = MagicMock()
    sleep = AsyncMock()
    controller = AuthFormController(
        session_store,
        on_close=on_close,
        on_auth_success=on_auth_success,
        mode=mode,
        sleep=sleep,
    )
    return controller, on_close, on_auth_success, sleep


def _fill(controller: AuthFormController, **values: str) -> None:
    for name, value in values.items():
        controller.set_field(name, value)


# --- classify_error ---


@pytest.mark.parametrize(
    ("error_type", "category"),
    [
        ("email_exists", ErrorCategory.email_exists),
        ("invalid_credentials", ErrorCategory.invalid_credentials),
        ("user_not_found", ErrorCategory.user_not_found),
        ("validation_error", ErrorCategory.generic),
    ],
)
def test_classify_error_by_type(error_type, category):
    assert classify_error(ApiError(400, error_type, "whatever")) is category


@pytest.mark.parametrize(
    ("message", "category"),
    [
        ("User already exists with this email", ErrorCategory.email_exists),
        ("Invalid email or password", ErrorCategory.invalid_credentials),
        ("User not found", ErrorCategory.user_not_found),
        ("Server exploded", ErrorCategory.generic),
    ],
)
def test_classify_error_falls_back_to_message(message, category):
    assert classify_error(ApiError(400, "http_error", message)) is category


def test_classify_network_error_is_generic():
    assert classify_error(httpx.ConnectError("refused")) is ErrorCategory.generic


def test_category_messages():
    assert ErrorCategory.email_exists.message == (
        "An account with this email already exists. Please sign in instead."
    )
    assert ErrorCategory.generic.message == (
        "Something went wrong. Please try again later."
    )


# --- field handling ---


def test_set_field_clears_that_fields_error(session_store: SessionStore):
    controller, *_ = _controller(session_store)
    controller.validate()
    assert "email" in controller.errors
    assert "password" in controller.errors

    controller.set_field("email", "jane@example.com")

    assert "email" not in controller.errors
    assert "password" in controller.errors


def test_set_unknown_field(session_store: SessionStore):
    controller, *_ = _controller(session_store)

    with pytest.raises(KeyError):
        controller.set_field("username", "jane")


def test_switch_mode_clears_errors(session_store: SessionStore):
    controller, *_ = _controller(session_store)
    _fill(controller, email="jane@example.com")
    controller.validate()

    controller.switch_mode(AuthMode.signup)

    assert controller.mode is AuthMode.signup
    assert controller.errors == {}
    assert controller.form.email == "jane@example.com"


def test_close_resets_and_notifies(session_store: SessionStore):
    controller, on_close, *_ = _controller(session_store)
    _fill(controller, email="jane@example.com")

    controller.close()

    assert controller.form == AuthFormData()
    on_close.assert_called_once()


# --- submit ---


@pytest.mark.asyncio
async def test_invalid_signup_makes_no_request(session_store: SessionStore):
    controller, _, on_auth_success, _ = _controller(session_store, AuthMode.signup)
    session_store.register = AsyncMock()
    _fill(
        controller,
        first_name="Jane",
        last_name="Doe",
        email="jane@example.com",
        password="short",
        confirm_password="short",
    )

    assert await controller.submit() is False

    assert controller.errors["password"] == (
        "Password must be at least 8 characters long"
    )
    session_store.register.assert_not_called()
    on_auth_success.assert_not_called()


@pytest.mark.asyncio
async def test_signup_success(
    api_client: FitZoneClient, session_store: SessionStore
):
    controller, on_close, on_auth_success, sleep = _controller(
        session_store, AuthMode.signup
    )
    _fill(
        controller,
        first_name="  Jane ",
        last_name=" Doe",
        email="Jane@Example.COM",
        password="Abcdef1!",
        confirm_password="Abcdef1!",
    )

    async with api_client:
        assert await controller.submit() is True

    user = on_auth_success.call_args[0][0]
    assert user.email == "jane@example.com"
    assert user.first_name == "Jane"
    assert user.last_name == "Doe"
    assert session_store.is_authenticated is True
    sleep.assert_awaited_once_with(2.0)
    on_close.assert_called_once()
    assert controller.form == AuthFormData()
    assert controller.is_submitting is False


@pytest.mark.asyncio
async def test_signup_existing_email(
    api_client: FitZoneClient, session_store: SessionStore, test_user: User
):
    controller, on_close, on_auth_success, _ = _controller(
        session_store, AuthMode.signup
    )
    _fill(
        controller,
        first_name="Test",
        last_name="User",
        email="test@example.com",
        password="Abcdef1!",
        confirm_password="Abcdef1!",
    )

    async with api_client:
        assert await controller.submit() is False

    assert controller.errors == {SUBMIT_ERROR_KEY: ErrorCategory.email_exists.message}
    assert controller.form.email == "test@example.com"
    assert controller.is_submitting is False
    on_auth_success.assert_not_called()
    on_close.assert_not_called()


@pytest.mark.asyncio
async def test_signin_success(
    api_client: FitZoneClient, session_store: SessionStore, test_user: User
):
    controller, _, on_auth_success, _ = _controller(session_store)
    _fill(controller, email="TEST@example.com", password="Str0ng!Pass")

    async with api_client:
        assert await controller.submit() is True

    assert on_auth_success.call_args[0][0].id == str(test_user.id)


@pytest.mark.asyncio
async def test_signin_wrong_password(
    api_client: FitZoneClient, session_store: SessionStore, test_user: User
):
    controller, *_ = _controller(session_store)
    _fill(controller, email="test@example.com", password="Wrong-pass1")

    async with api_client:
        assert await controller.submit() is False

    assert controller.errors[SUBMIT_ERROR_KEY] == (
        "Invalid email or password. Please check your credentials."
    )
    assert session_store.is_authenticated is False


@pytest.mark.asyncio
async def test_signin_network_failure(session_store: SessionStore):
    controller, *_ = _controller(session_store)
    session_store.login = AsyncMock(side_effect=httpx.ConnectError("refused"))
    _fill(controller, email="test@example.com", password="Str0ng!Pass")

    assert await controller.submit() is False

    assert controller.errors[SUBMIT_ERROR_KEY] == ErrorCategory.generic.message


@pytest.mark.asyncio
async def test_unexpected_failure_does_not_lock_the_form(session_store: SessionStore):
    controller, *_ = _controller(session_store)
    session_store.login = AsyncMock(side_effect=RuntimeError("bad user payload"))
    _fill(controller, email="test@example.com", password="Str0ng!Pass")

    with pytest.raises(RuntimeError):
        await controller.submit()

    assert controller.is_submitting is False
    session_store.login = AsyncMock(side_effect=httpx.ConnectError("refused"))
    assert await controller.submit() is False
    session_store.login.assert_awaited_once()


@pytest.mark.asyncio
async def test_forgot_password_needs_no_server(session_store: SessionStore):
    controller, on_close, on_auth_success, sleep = _controller(
        session_store, AuthMode.forgot
    )
    session_store.login = AsyncMock()
    session_store.register = AsyncMock()
    _fill(controller, email="jane@example.com")

    assert await controller.submit() is True

    session_store.login.assert_not_called()
    session_store.register.assert_not_called()
    on_auth_success.assert_not_called()
    sleep.assert_awaited_once()
    on_close.assert_called_once()
