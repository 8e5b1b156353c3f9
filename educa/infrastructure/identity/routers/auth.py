import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.security import OAuth2PasswordRequestForm

from educa.application.identity.dtos import AccessToken
from educa.application.identity.use_cases.access_guard_use_case import AccessGuardUseCase
from educa.application.identity.use_cases.learner_authentication_use_case import (
    LearnerAuthenticationUseCase,
)
from educa.core import container
from educa.infrastructure.common.di import inject_use_case
from educa.infrastructure.common.rate_limit import limiter
from educa.infrastructure.common.schemas import SuccessResponse
from educa.infrastructure.identity.schemas import LearnerLoginResponse, LearnerResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/admin/login")
@limiter.limit("5/minute")  # type: ignore[misc]
def admin_login(
    request: Request,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    guard: AccessGuardUseCase = Depends(inject_use_case(container.access_guard_use_case)),
) -> AccessToken:
    """
    Exchange administrator credentials for a signed access token.

    Wrong credentials raise InvalidCredentialsError, rendered as 401.
    """
    return guard.issue_admin_token(form_data.username, form_data.password)


@router.post("/login")
@limiter.limit("5/minute")  # type: ignore[misc]
def learner_login(
    request: Request,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    use_case: LearnerAuthenticationUseCase = Depends(
        inject_use_case(container.learner_authentication_use_case)
    ),
) -> LearnerLoginResponse:
    # OAuth2PasswordRequestForm uses 'username' field, but we use it for email
    learner, token = use_case.authenticate_learner(form_data.username, form_data.password)
    return LearnerLoginResponse(
        access_token=token.access_token,
        token_type=token.token_type,
        expires_in=token.expires_in,
        learner=LearnerResponse.from_entity(learner),
    )


@router.post("/logout")
def logout() -> SuccessResponse:
    """
    Log out.

    Tokens are stateless: the server keeps no session to invalidate, so the
    client simply discards its token. It stays valid until it expires.
    """
    return SuccessResponse(success=True, message="Logged out successfully")
