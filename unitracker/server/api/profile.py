"""
Profile Endpoints.
"""

from fastapi import APIRouter, HTTPException, status

from unitracker.core.models.io import ProfileUpdate, UserRead
from unitracker.server.services.deps import CurrentUserDep, ReposDep

router = APIRouter(tags=["profile"])


@router.put(
    "",
    response_model=UserRead,
    summary="Update Profile",
    description="Edit name, major, hobbies and profile image. Other account fields cannot be changed here.",
    responses={404: {"description": "User not found"}},
)
@router.patch(
    "",
    response_model=UserRead,
    summary="Update Profile",
    description="Edit name, major, hobbies and profile image. Other account fields cannot be changed here.",
    responses={404: {"description": "User not found"}},
)
async def update_profile(profile_in: ProfileUpdate, user: CurrentUserDep, repos: ReposDep) -> UserRead:
    updated = await repos.users.update_profile(user.id, profile_in.changes())
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserRead.model_validate(updated)
