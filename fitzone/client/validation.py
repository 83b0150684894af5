"""Auth form validation rules.

Runs before any request is made. Pure functions so the rules can be
checked without a server. Each field reports at most one message: the
first rule it breaks.
"""

import re
from dataclasses import dataclass
from enum import Enum

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
NAME_PATTERN = re.compile(r"[a-zA-Z\s]+")
PHONE_PATTERN = re.compile(r"[+]?[91]?[0-9\s\-]{10,13}")

PASSWORD_MIN_LENGTH = 8
NAME_MIN_LENGTH = 2
PASSWORD_SYMBOLS = '!@#$%^&*(),.?":{}|<>'


class AuthMode(str, Enum):
    signin = "signin"
    signup = "signup"
    forgot = "forgot"


@dataclass
class AuthFormData:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    phone: str = ""


def validate_email(email: str) -> str | None:
    if not email:
        return "Email is required"
    if not EMAIL_PATTERN.fullmatch(email):
        return "Please enter a valid email address"
    if ".." in email or email.startswith(".") or email.endswith("."):
        return "Email format is invalid"
    if not email[0].isascii() or not email[0].isalnum():
        return "Email must start with a letter or number"
    return None


def validate_password(password: str, mode: AuthMode) -> str | None:
    if mode is AuthMode.forgot:
        return None
    if not password:
        return "Password is required"
    if len(password) < PASSWORD_MIN_LENGTH:
        return "Password must be at least 8 characters long"
    if mode is AuthMode.signup:
        has_lower = any(c.islower() and c.isascii() for c in password)
        has_upper = any(c.isupper() and c.isascii() for c in password)
        has_digit = any(c in "0123456789" for c in password)
        if not (has_lower and has_upper and has_digit):
            return (
                "Password must contain at least one uppercase letter, "
                "one lowercase letter, and one number"
            )
        if not any(c in PASSWORD_SYMBOLS for c in password):
            return "Password must contain at least one special character"
    return None


def validate_name(value: str, label: str) -> str | None:
    value = value.strip()
    if not value:
        return f"{label} is required"
    if len(value) < NAME_MIN_LENGTH:
        return f"{label} must be at least 2 characters"
    if not NAME_PATTERN.fullmatch(value):
        return f"{label} can only contain letters"
    return None


def validate_phone(phone: str) -> str | None:
    """Phone is optional; when present it must look like 10-13 digits."""
    if not phone:
        return None
    if not PHONE_PATTERN.fullmatch(re.sub(r"\s", "", phone)):
        return "Please enter a valid phone number"
    return None


def validate_auth_form(mode: AuthMode, form: AuthFormData) -> dict[str, str]:
    """Validate the form for the given mode.

    Returns:
        Mapping of field name to error message; empty when the form is valid
    """
    checks: dict[str, str | None] = {
        "email": validate_email(form.email),
        "password": validate_password(form.password, mode),
    }

    if mode is AuthMode.signup:
        if not form.confirm_password:
            checks["confirm_password"] = "Please confirm your password"
        elif form.password != form.confirm_password:
            checks["confirm_password"] = "Passwords do not match"

        checks["first_name"] = validate_name(form.first_name, "First name")
        checks["last_name"] = validate_name(form.last_name, "Last name")
        checks["phone"] = validate_phone(form.phone)

    return {field: message for field, message in checks.items() if message}
