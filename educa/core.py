from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from educa.application.catalog.use_cases.catalog_use_case import CatalogUseCase
from educa.application.documents.use_cases.document_use_case import DocumentUseCase
from educa.application.enrollment.use_cases.enrollment_use_case import EnrollmentUseCase
from educa.application.identity.use_cases.access_guard_use_case import AccessGuardUseCase
from educa.application.identity.use_cases.learner_authentication_use_case import (
    LearnerAuthenticationUseCase,
)
from educa.application.identity.use_cases.learner_directory_use_case import (
    LearnerDirectoryUseCase,
)
from educa.application.identity.use_cases.learner_registration_use_case import (
    LearnerRegistrationUseCase,
)
from educa.config import get_settings
from educa.domain.documents.services.document_renderer import DocumentRenderer
from educa.infrastructure.catalog.repositories.course_repository import CourseRepository
from educa.infrastructure.identity.repositories.administrator_repository import (
    AdministratorRepository,
)
from educa.infrastructure.identity.repositories.learner_repository import LearnerRepository
from educa.infrastructure.identity.services.password_service import PasswordService
from educa.infrastructure.identity.services.token_service import JWTTokenService


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)

    # Repositories
    learner_repository = providers.Factory(LearnerRepository, db=db)
    administrator_repository = providers.Factory(AdministratorRepository, db=db)
    course_repository = providers.Factory(CourseRepository, db=db)

    # Identity services, configured from settings rather than module globals
    password_service = providers.Singleton(
        PasswordService, pepper=settings.provided.PASSWORD_PEPPER
    )
    token_service = providers.Singleton(
        JWTTokenService,
        secret_key=settings.provided.SECRET_KEY,
        expire_minutes=settings.provided.ACCESS_TOKEN_EXPIRE_MINUTES,
    )

    # Domain services (pure domain logic, no db)
    document_renderer = providers.Factory(DocumentRenderer)

    # Identity use cases
    learner_registration_use_case = providers.Factory(
        LearnerRegistrationUseCase,
        learner_repository=learner_repository,
        password_service=password_service,
    )
    learner_directory_use_case = providers.Factory(
        LearnerDirectoryUseCase,
        learner_repository=learner_repository,
    )
    learner_authentication_use_case = providers.Factory(
        LearnerAuthenticationUseCase,
        learner_repository=learner_repository,
        password_service=password_service,
        token_service=token_service,
    )
    access_guard_use_case = providers.Factory(
        AccessGuardUseCase,
        administrator_repository=administrator_repository,
        password_service=password_service,
        token_service=token_service,
    )

    # Catalog use cases
    catalog_use_case = providers.Factory(
        CatalogUseCase,
        course_repository=course_repository,
    )

    # Enrollment use cases
    enrollment_use_case = providers.Factory(
        EnrollmentUseCase,
        learner_repository=learner_repository,
        course_repository=course_repository,
    )

    # Document use cases
    document_use_case = providers.Factory(
        DocumentUseCase,
        learner_repository=learner_repository,
        course_repository=course_repository,
        document_renderer=document_renderer,
        currency=settings.provided.INVOICE_CURRENCY,
    )


# Initialize container
container = Container()
