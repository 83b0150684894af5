"""Async client for the FitZone HTTP API.

Mirrors the endpoints one method each. The bearer token and the cached
user summary are kept in LocalStorage under fixed keys, so a new process
picks up where the last one left off.
"""

import json
import logging
from typing import Any

import httpx

from fitzone.client.storage import LocalStorage
from fitzone.core.http import create_http_client

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000/api"

AUTH_TOKEN_KEY = "authToken"
USER_KEY = "user"


class ApiError(Exception):
    """Non-2xx response from the API.

    error_type is the server's structured code (``email_exists``,
    ``invalid_credentials``, ...); message is its human-readable text.
    """

    def __init__(self, status_code: int, error_type: str, message: str):
        self.status_code = status_code
        self.error_type = error_type
        self.message = message
        super().__init__(message)


class FitZoneClient:
    """Thin async wrapper over the REST endpoints."""

    def __init__(
        self,
        storage: LocalStorage,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._storage = storage
        self._http = http_client or create_http_client(base_url=base_url)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "FitZoneClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request(
        self, method: str, endpoint: str, payload: dict[str, Any] | None = None
    ) -> Any:
        headers = {}
        token = self._storage.get_item(AUTH_TOKEN_KEY)
        if token:
            headers["Authorization"] = f"Bearer {token}"

        response = await self._http.request(
            method, endpoint, json=payload, headers=headers
        )

        try:
            data = response.json()
        except ValueError:
            data = None

        if response.is_error:
            body = data if isinstance(data, dict) else {}
            error = ApiError(
                status_code=response.status_code,
                error_type=body.get("type", "http_error"),
                message=body.get("message") or "API request failed",
            )
            logger.debug("API error %s %s: %s", method, endpoint, error.message)
            raise error

        return data

    def _store_auth(self, response: dict[str, Any]) -> None:
        if response.get("token"):
            self._storage.set_item(AUTH_TOKEN_KEY, response["token"])
            self._storage.set_item(USER_KEY, json.dumps(response["user"]))

    # Auth

    async def register(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        phone: str | None = None,
    ) -> dict[str, Any]:
        payload = {
            "firstName": first_name,
            "lastName": last_name,
            "email": email,
            "password": password,
        }
        if phone:
            payload["phone"] = phone
        response = await self._request("POST", "/auth/register", payload)
        self._store_auth(response)
        return response

    async def login(self, email: str, password: str) -> dict[str, Any]:
        response = await self._request(
            "POST", "/auth/login", {"email": email, "password": password}
        )
        self._store_auth(response)
        return response

    def logout(self) -> None:
        """Forget the token locally. Tokens are stateless; nothing is sent."""
        self._storage.remove_item(AUTH_TOKEN_KEY)
        self._storage.remove_item(USER_KEY)

    def get_current_user(self) -> dict[str, Any] | None:
        raw = self._storage.get_item(USER_KEY)
        if raw is None:
            return None
        try:
            user = json.loads(raw)
        except json.JSONDecodeError:
            return None
        return user if isinstance(user, dict) else None

    def is_authenticated(self) -> bool:
        return bool(self._storage.get_item(AUTH_TOKEN_KEY))

    # User

    async def get_profile(self) -> dict[str, Any]:
        return await self._request("GET", "/user/profile")

    async def update_profile(self, profile_data: dict[str, Any]) -> dict[str, Any]:
        return await self._request("PUT", "/user/profile", profile_data)

    async def get_purchased_programs(self) -> list[str]:
        response = await self._request("GET", "/user/programs")
        return response["purchasedPrograms"]

    # Programs

    async def list_programs(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/programs")

    async def purchase_program(self, program_id: str) -> dict[str, Any]:
        return await self._request("POST", f"/programs/{program_id}/purchase")

    # Contact

    async def submit_inquiry(
        self,
        name: str,
        email: str,
        message: str,
        phone: str | None = None,
        type: str = "general",
    ) -> dict[str, Any]:
        payload = {"name": name, "email": email, "message": message, "type": type}
        if phone:
            payload["phone"] = phone
        return await self._request("POST", "/contact", payload)

    # Memberships

    async def create_membership(self, plan_type: str, amount: float) -> dict[str, Any]:
        return await self._request(
            "POST", "/memberships", {"planType": plan_type, "amount": amount}
        )

    async def health(self) -> dict[str, Any]:
        return await self._request("GET", "/health")
