"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from educa.application.identity.dtos import AdminPrincipal
from educa.application.identity.use_cases.access_guard_use_case import AccessGuardUseCase
from educa.application.identity.use_cases.learner_authentication_use_case import (
    LearnerAuthenticationUseCase,
)
from educa.core import container
from educa.domain.common.exceptions import AuthenticationError
from educa.domain.identity.entities.learner import Learner
from educa.infrastructure.common.di import inject_use_case

# auto_error is off so a missing token reaches the guard and is rejected there
admin_oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/v1/auth/admin/login", scheme_name="AdminAuth", auto_error=False
)
learner_oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/v1/auth/login", scheme_name="LearnerAuth", auto_error=False
)


def require_admin(
    token: Annotated[str | None, Depends(admin_oauth2_scheme)],
    guard: AccessGuardUseCase = Depends(inject_use_case(container.access_guard_use_case)),
) -> AdminPrincipal:
    """
    Require a valid administrator token.

    Runs before the route body, so a rejected token never reaches the
    operation it guards.

    Raises:
        AuthenticationError: If the token is missing or fails verification
    """
    return guard.verify(token)


def get_current_learner(
    token: Annotated[str | None, Depends(learner_oauth2_scheme)],
    use_case: LearnerAuthenticationUseCase = Depends(
        inject_use_case(container.learner_authentication_use_case)
    ),
) -> Learner:
    """
    Get the learner identified by the bearer token.

    Raises:
        AuthenticationError: If the token is missing, invalid or its learner is gone
    """
    if not token:
        raise AuthenticationError("Not authenticated")
    return use_case.get_learner_from_token(token)


AdminRequired = Annotated[AdminPrincipal, Depends(require_admin)]
CurrentLearner = Annotated[Learner, Depends(get_current_learner)]
