"""Shared FastAPI dependency aliases.

    from fitzone.core.deps import SessionDep, SettingsDep

Token and current-user dependencies belong to the auth domain
(``fitzone.auth.dependencies``).
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from fitzone.core.settings import Settings, get_settings
from fitzone.db.engine import get_session

SessionDep = Annotated[Session, Depends(get_session)]

SettingsDep = Annotated[Settings, Depends(get_settings)]
