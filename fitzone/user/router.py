"""User domain router.

Routes for the authenticated user's own profile and unlocked programs.
"""

from fastapi import APIRouter, Depends

from fitzone.auth.dependencies import CurrentUserDep, require_auth
from fitzone.core.constants import CommonResponses, Routes
from fitzone.core.deps import SessionDep
from fitzone.user.schemas import (
    ProfileUpdateResponse,
    PurchasedProgramsResponse,
    UserProfileUpdate,
    UserRead,
)

router = APIRouter(
    prefix=Routes.USER.prefix,
    tags=[Routes.USER.tag],
    dependencies=[Depends(require_auth)],
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
        **CommonResponses.NOT_FOUND,
    },
)


@router.get("/profile", response_model=UserRead)
async def get_profile(user: CurrentUserDep):
    """Get the current user's full record (without the password hash)."""
    return UserRead.model_validate(user)


@router.put("/profile", response_model=ProfileUpdateResponse)
async def update_profile(
    user: CurrentUserDep, user_update: UserProfileUpdate, session: SessionDep
):
    """Update the current user's profile.

    Only firstName, lastName, phone and profile can change here. Anything
    else in the body, a password included, is ignored.
    """
    update_data = user_update.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(user, key, value)
    session.add(user)
    session.commit()
    session.refresh(user)
    return ProfileUpdateResponse(
        message="Profile updated successfully",
        user=UserRead.model_validate(user),
    )


@router.get("/programs", response_model=PurchasedProgramsResponse)
async def get_purchased_programs(user: CurrentUserDep):
    """List the identifiers of programs the current user has unlocked."""
    return PurchasedProgramsResponse(purchased_programs=user.purchased_programs)
