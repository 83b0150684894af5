"""Program domain router.

Public catalog browsing plus the authenticated purchase endpoint.
Purchasing unlocks a program for the user; no payment is taken here.
"""

import logging

from fastapi import APIRouter

from fitzone.auth.dependencies import CurrentUserDep
from fitzone.core.constants import CommonResponses, Routes
from fitzone.core.deps import SessionDep
from fitzone.models.base import MessageResponse
from fitzone.program import service
from fitzone.program.exceptions import ProgramNotFoundError
from fitzone.program.models import Program
from fitzone.program.schemas import ProgramRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix=Routes.PROGRAMS.prefix, tags=[Routes.PROGRAMS.tag])


@router.get("", response_model=list[ProgramRead])
async def list_programs(session: SessionDep):
    """List every program in the catalog."""
    return [ProgramRead.model_validate(p) for p in service.list_programs(session)]


@router.get(
    "/{program_id}",
    response_model=ProgramRead,
    responses={**CommonResponses.NOT_FOUND},
)
async def get_program(program_id: str, session: SessionDep):
    """Get a single program by its identifier."""
    program = session.get(Program, program_id)
    if program is None:
        raise ProgramNotFoundError()
    return ProgramRead.model_validate(program)


@router.post(
    "/{program_id}/purchase",
    response_model=MessageResponse,
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
        **CommonResponses.NOT_FOUND,
    },
)
async def purchase_program(program_id: str, user: CurrentUserDep, session: SessionDep):
    """Unlock a program for the current user.

    Idempotent: buying a program the user already owns succeeds without
    adding a second entry.
    """
    added = service.add_purchase(session, user.id, program_id)
    logger.info(
        "Program purchase %s",
        "recorded" if added else "already owned",
        extra={"user_id": str(user.id), "program_id": program_id},
    )
    return MessageResponse(message="Program purchased successfully")
