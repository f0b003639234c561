"""Current user routes.

The caller is identified by the identity provider's session token, sent
either as ``Authorization: Bearer <token>`` or in the session cookie.
"""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import Field, field_validator

from devproof.adapter.clerk import IdentityProviderError
from devproof.application.usecase.auth import GetAuthStatusUseCase
from devproof.application.usecase.auth.get_auth_status import AuthStatusResponse
from devproof.application.usecase.base import CamelModel
from devproof.application.usecase.user import (
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
)
from devproof.application.usecase.user.get_user_profile import GetUserProfileResponse
from devproof.application.usecase.user.update_user_profile import (
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
)
from devproof.config import AuthSettings
from devproof.domain.error import NotFoundError, UnauthorizedError
from devproof.domain.service import SessionService
from devproof.domain.value import AuthContext, ExperienceLevel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user", tags=["users"], route_class=DishkaRoute)


class UpdateUserProfileAPIRequest(CamelModel):
    """API request for updating the current user's profile."""

    current_role: str | None = Field(None, max_length=255)
    experience: ExperienceLevel | None = None
    dream_companies: str | None = Field(None, max_length=1000)
    career_goals: str | None = Field(None, max_length=2000)

    @field_validator("experience")
    @classmethod
    def experience_not_cleared(
        cls, value: ExperienceLevel | None
    ) -> ExperienceLevel | None:
        if value is None:
            raise ValueError("experience cannot be cleared")
        return value


def extract_session_token(request: Request, cookie_name: str) -> str | None:
    """Read the session token from the Authorization header or cookie.

    Args:
        request: Incoming request
        cookie_name: Name of the session cookie

    Returns:
        Session token, or None if the request carries none
    """
    authorization = request.headers.get("authorization")
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()

    return request.cookies.get(cookie_name) or None


def build_auth_context(
    request: Request, session_service: SessionService, auth_settings: AuthSettings
) -> AuthContext:
    """Build the explicit auth context handed to the use cases."""
    token = extract_session_token(request, auth_settings.session_cookie_name)
    return session_service.build_auth_context(token)


def _provider_unavailable(error: IdentityProviderError) -> HTTPException:
    logger.error(f"Identity provider unavailable: {error}")
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail="Identity provider unavailable",
    )


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    request: Request,
    get_auth_status_use_case: FromDishka[GetAuthStatusUseCase],
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
) -> AuthStatusResponse:
    """Report whether the caller is logged in.

    Never fails for logged-out callers. The user is provisioned on the first
    authenticated call.

    Example:
        GET /api/user/me
        Authorization: Bearer <session token>

        Response:
        {
            "authenticated": true,
            "user": {"id": "user_2abc", "name": "Ann Lee", ...}
        }
    """
    context = build_auth_context(request, session_service, auth_settings)

    try:
        return await get_auth_status_use_case.execute(context)
    except IdentityProviderError as e:
        raise _provider_unavailable(e)


@router.get("/profile", response_model=GetUserProfileResponse)
async def get_profile(
    request: Request,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
) -> GetUserProfileResponse:
    """Get the current user's dashboard profile.

    Returns profile fields, skills and the most recent submissions.

    Raises:
        HTTPException: 401 if not authenticated, 502 if the identity
            provider cannot be reached

    Example:
        GET /api/user/profile
        Cookie: __session=...

        Response:
        {
            "user": {
                "id": "user_2abc",
                "name": "Ann Lee",
                "email": "a@b.com",
                "avatar": "https://img.clerk.com/...",
                "currentRole": "Backend Engineer",
                "experience": "MID",
                "dreamCompanies": "Stripe",
                "careerGoals": "Staff engineer",
                "reputation": 120,
                "skills": [{"skillName": "Python", "currentLevel": 6, ...}],
                "submissions": [{"status": "COMPLETED", "finalScore": 88, ...}]
            }
        }
    """
    context = build_auth_context(request, session_service, auth_settings)

    try:
        return await get_user_profile_use_case.execute(context)
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except IdentityProviderError as e:
        raise _provider_unavailable(e)


@router.patch("/profile", response_model=UpdateUserProfileResponse)
async def update_profile(
    request: Request,
    body: UpdateUserProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
) -> UpdateUserProfileResponse:
    """Update the current user's career profile.

    Only ``currentRole``, ``experience``, ``dreamCompanies`` and
    ``careerGoals`` can be changed. Omitted fields keep their value; an
    explicit null clears ``currentRole`` and empties the free-text fields.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the user disappeared,
            502 if the identity provider cannot be reached
    """
    context = build_auth_context(request, session_service, auth_settings)

    try:
        return await update_user_profile_use_case.execute(
            UpdateUserProfileRequest(
                context=context, **body.model_dump(exclude_unset=True)
            )
        )
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except IdentityProviderError as e:
        raise _provider_unavailable(e)
