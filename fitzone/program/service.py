"""Program catalog queries and the purchase (catalog unlock) operation."""

import uuid
from collections.abc import Sequence

from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from fitzone.core.mixins import utc_now
from fitzone.program.models import Program
from fitzone.user.models import ProgramPurchase


def list_programs(session: Session) -> Sequence[Program]:
    return session.exec(select(Program).order_by(Program.title)).all()


def add_purchase(session: Session, user_id: uuid.UUID, program_id: str) -> bool:
    """Add program_id to the user's purchased set.

    This is a single INSERT guarded by the (user_id, program_id) primary key,
    never a read-modify-write, so concurrent purchases cannot lose updates.
    It goes through Core rather than the ORM unit of work: the user's loaded
    purchases may already hold the same identity.

    Returns:
        True if the program was newly added, False if it was already owned
    """
    statement = insert(ProgramPurchase).values(
        user_id=user_id, program_id=program_id, purchased_at=utc_now()
    )
    try:
        session.exec(statement)
        session.commit()
    except IntegrityError:
        session.rollback()
        return False
    return True
