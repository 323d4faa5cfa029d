"""
Authentication Endpoints.

Authentication is stubbed: login and logout only send the browser back to
the app, and the current user is always the configured demo account.
"""

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from unitracker.core.models.io import UserRead
from unitracker.server.services.deps import CurrentUserDep

router = APIRouter(tags=["auth"])


@router.get("/login", summary="Log In", response_class=RedirectResponse, status_code=307)
async def login() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=307)


@router.get("/logout", summary="Log Out", response_class=RedirectResponse, status_code=307)
async def logout() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=307)


@router.get(
    "/auth/user",
    response_model=UserRead,
    summary="Get Current User",
    description="The acting user, created on first request.",
)
async def read_current_user(user: CurrentUserDep) -> UserRead:
    return UserRead.model_validate(user)
