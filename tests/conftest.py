import inspect
import os

# Settings are read on first import of the app; make the suite self-contained.
os.environ.setdefault("ENV_NAME", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SESSION_SECRET_KEY", "test-secret-key")
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "admin")

import anyio  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402
from sqlmodel.pool import StaticPool  # noqa: E402

import fitzone.models  # noqa: E402, F401
from fitzone.auth.passwords import hash_password  # noqa: E402
from fitzone.auth.service import get_token_service  # noqa: E402
from fitzone.db.engine import get_session  # noqa: E402
from fitzone.main import app  # noqa: E402
from fitzone.program.models import Program  # noqa: E402
from fitzone.user.models import User  # noqa: E402

TEST_PASSWORD = "Str0ng!Pass"


def pytest_configure(config: pytest.Config) -> None:
    # Tests use @pytest.mark.asyncio, but we intentionally rely on anyio.
    config.addinivalue_line(
        "markers",
        "asyncio: run async tests using anyio (project-local hook)",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run @pytest.mark.asyncio tests with anyio.

    This avoids adding an external pytest-asyncio dependency.
    """
    if pyfuncitem.get_closest_marker("asyncio") is None:
        return None

    test_func = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_func):
        return None

    funcargs = {
        name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
    }

    async def _run_async_test() -> None:
        await test_func(**funcargs)

    anyio.run(_run_async_test)
    return True


@pytest.fixture(name="auth_header")
def auth_header_fixture():
    """Build a bearer header carrying a freshly issued token for a user."""

    def _auth_header(user: User) -> dict[str, str]:
        token = get_token_service().issue(user.id, user.email)
        return {"Authorization": f"Bearer {token}"}

    return _auth_header


@pytest.fixture(name="session")
def session_fixture():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="test_user")
def test_user_fixture(session: Session):
    """Create an active test user in the database."""
    user = User(
        first_name="Test",
        last_name="User",
        email="test@example.com",
        password_hash=hash_password(TEST_PASSWORD, rounds=4),
        phone="9876543210",
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(name="inactive_user")
def inactive_user_fixture(session: Session):
    """Create an inactive test user."""
    user = User(
        first_name="Inactive",
        last_name="User",
        email="inactive@example.com",
        password_hash=hash_password(TEST_PASSWORD, rounds=4),
        is_active=False,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(name="program")
def program_fixture(session: Session):
    """Create a catalog program."""
    program = Program(
        id="hiit-bootcamp",
        title="HIIT Bootcamp",
        description="High-intensity intervals.",
        duration="6 weeks",
        level="Intermediate",
        price=79.0,
        instructor={"name": "Alex Rivera", "experience": "8 years"},
        schedule=[{"day": "Monday", "time": "6:00 AM"}],
        benefits=["Fat loss"],
        equipment=["Kettlebell"],
    )
    session.add(program)
    session.commit()
    session.refresh(program)
    return program


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Create a test client bound to the in-memory session."""

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
