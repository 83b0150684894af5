"""Engine and session factory for the configured store."""

import logging
from collections.abc import Generator

from sqlmodel import Session, SQLModel, create_engine

from fitzone.core.settings import get_settings

logger = logging.getLogger(__name__)


def _build_engine():
    settings = get_settings()
    connect_args: dict[str, object] = {}
    if settings.is_sqlite:
        # Requests are served from a threadpool; SQLite must allow that.
        connect_args["check_same_thread"] = False
    return create_engine(settings.database_url, connect_args=connect_args)


engine = _build_engine()


def get_session() -> Generator[Session, None, None]:
    """One session per request, closed when the response is sent."""
    with Session(engine) as session:
        yield session


def init_db() -> None:
    """Create all registered tables that do not exist yet."""
    # Registers every table model on SQLModel.metadata.
    import fitzone.models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info("Database tables ready")
