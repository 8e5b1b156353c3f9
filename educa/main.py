"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import APIRouter, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette import status

from educa.config import Settings, configure_logging, get_settings
from educa.core import container
from educa.database import create_schema, dispose_engine, get_session_factory, initialize_database
from educa.domain.common.exceptions import (
    AuthenticationError,
    BusinessRuleViolationError,
    DomainError,
    DuplicateError,
    EntityNotFoundError,
    ValidationError,
)
from educa.domain.identity.exceptions import RegistrationDisabledError
from educa.exceptions import EducaError
from educa.infrastructure.catalog.routers import courses
from educa.infrastructure.common.di import provide_with_session
from educa.infrastructure.common.rate_limit import limiter
from educa.infrastructure.common.schemas import ErrorResponse
from educa.infrastructure.documents.routers import documents
from educa.infrastructure.enrollment.routers import enrollments
from educa.infrastructure.identity.routers import auth, learners

logger = structlog.get_logger(__name__)
settings = get_settings()

# Most specific first: the first matching class decides the status code
DOMAIN_ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (RegistrationDisabledError, status.HTTP_403_FORBIDDEN),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateError, status.HTTP_409_CONFLICT),
    (BusinessRuleViolationError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]


def status_for_domain_error(exc: DomainError) -> int:
    """Map a domain exception to its HTTP status code."""
    for error_type, status_code in DOMAIN_ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def provision_administrator(app_settings: Settings) -> None:
    """Create the configured administrator account if it does not exist yet."""
    if not app_settings.ADMIN_PASSWORD:
        logger.warning("administrator_not_provisioned", reason="ADMIN_PASSWORD is empty")
        return

    session_factory = get_session_factory(app_settings)
    with session_factory() as db:
        guard = provide_with_session(container.access_guard_use_case, db)
        guard.ensure_administrator(app_settings.ADMIN_USERNAME, app_settings.ADMIN_PASSWORD)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)
    initialize_database(settings)
    create_schema()
    provision_administrator(settings)
    logger.info("application_started", environment=settings.ENVIRONMENT)
    yield
    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.info("domain_error", path=request.url.path, error_type=type(exc).__name__)
    status_code = status_for_domain_error(exc)
    unauthorized = status_code == status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"} if unauthorized else None
    body = ErrorResponse(detail=exc.message, details=jsonable_encoder(exc.details) or None)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


@app.exception_handler(EducaError)
async def educa_error_handler(request: Request, exc: EducaError) -> JSONResponse:
    logger.error("request_failed", path=request.url.path, error=exc.message)
    body = ErrorResponse(detail=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))


api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(learners.router)
api_router.include_router(enrollments.router)
api_router.include_router(documents.router)
api_router.include_router(courses.router)


@api_router.get("/")
async def api_root() -> dict[str, str]:
    return {
        "message": "Educa LMS API v1",
        "version": settings.VERSION,
        "docs": f"{settings.API_V1_PREFIX}/docs",
    }


app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": "Welcome to Educa LMS API"}


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
