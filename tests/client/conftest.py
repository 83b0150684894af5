import httpx
import pytest
from sqlmodel import Session

from fitzone.client.api import FitZoneClient
from fitzone.client.session import SessionStore
from fitzone.client.storage import LocalStorage
from fitzone.core.http import create_http_client
from fitzone.db.engine import get_session
from fitzone.main import app


@pytest.fixture(name="storage")
def storage_fixture(tmp_path):
    """Client storage in a throwaway file."""
    return LocalStorage(tmp_path / "storage.json")


@pytest.fixture(name="api_client")
def api_client_fixture(session: Session, storage: LocalStorage):
    """FitZoneClient wired to the app in-process over ASGI."""

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override

    http_client = create_http_client(
        base_url="http://testserver/api",
        transport=httpx.ASGITransport(app=app),
    )
    yield FitZoneClient(storage, http_client=http_client)

    app.dependency_overrides.clear()


@pytest.fixture(name="session_store")
def session_store_fixture(api_client: FitZoneClient, storage: LocalStorage):
    return SessionStore(api_client, storage)
