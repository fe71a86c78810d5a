"""This file contains the main application entry point."""

import uuid
from contextlib import asynccontextmanager
from datetime import (
    UTC,
    datetime,
)
from typing import Optional

from fastapi import (
    FastAPI,
    Request,
    status,
)
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException

from translation_hub.api.v1.api import api_router
from translation_hub.constants.auth import AUTH_SCHEME_BEARER
from translation_hub.constants.http import SECURITY_HEADERS
from translation_hub.core.config import (
    Environment,
    Settings,
    get_settings,
)
from translation_hub.core.limiter import limiter
from translation_hub.core.logging import logger
from translation_hub.domain.exceptions import (
    AuthenticationError,
    BackendUnavailableError,
    DomainError,
    TranslationProviderError,
    UserAlreadyExistsError,
    UserNotFoundError,
    ValidationError,
)
from translation_hub.domain.repositories import StorageBackendInterface
from translation_hub.infrastructure.container import build_container
from translation_hub.services.translation_provider import TranslationProviderInterface
from translation_hub.shared.middleware import RequestLoggingMiddleware
from translation_hub.shared.response_models import (
    ErrorResponse,
    StatusResponse,
)

# Checked in order; the first matching class decides the status code.
DOMAIN_ERROR_STATUS = (
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (UserAlreadyExistsError, status.HTTP_409_CONFLICT),
    (UserNotFoundError, status.HTTP_404_NOT_FOUND),
    (BackendUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (TranslationProviderError, status.HTTP_502_BAD_GATEWAY),
)

BACKEND_UNAVAILABLE_MESSAGE = "The service is temporarily unavailable. Please try again later."
INTERNAL_ERROR_MESSAGE = "An internal server error occurred. Please try again later."


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    settings: Settings = app.state.settings
    settings.validate_security()

    app.state.start_time = datetime.now(UTC)
    app.state.container = build_container(
        settings,
        backend=app.state.backend_override,
        provider=app.state.provider_override,
    )

    logger.info(
        "application_startup",
        project_name=settings.PROJECT_NAME,
        version=settings.VERSION,
        environment=settings.APP_ENV.value,
        api_prefix=settings.API_V1_STR,
        storage_backend=app.state.container.backend.name,
        translation_provider=app.state.container.provider.name,
    )

    if not await app.state.container.backend.health_check():
        logger.error("storage_backend_unavailable_at_startup", backend=app.state.container.backend.name)

    yield

    await app.state.container.close()
    logger.info("application_shutdown")


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    error_id: str,
    details: Optional[dict] = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    body = ErrorResponse(
        error=error,
        message=message,
        error_id=error_id,
        path=request.url.path,
        details=details,
    )
    response = JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, exclude_none=True),
        headers=headers,
    )

    # Add security headers
    for header, value in SECURITY_HEADERS.items():
        response.headers[header] = value

    return response


async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map domain exceptions onto HTTP error responses.

    Args:
        request: The request that caused the error
        exc: The domain exception

    Returns:
        JSONResponse: A formatted error response
    """
    error_id = str(uuid.uuid4())
    status_code = next(
        (code for error_type, code in DOMAIN_ERROR_STATUS if isinstance(exc, error_type)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )

    log = logger.error if status_code >= 500 else logger.warning
    log(
        "domain_error",
        error_id=error_id,
        error_type=type(exc).__name__,
        error_code=exc.error_code,
        message=exc.message,
        status_code=status_code,
        path=request.url.path,
        method=request.method,
    )

    message = exc.message
    details = None
    headers = None

    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": AUTH_SCHEME_BEARER}
        if exc.reason:
            details = {"reason": exc.reason}
    elif isinstance(exc, ValidationError) and exc.field:
        details = {"field": exc.field}
    elif isinstance(exc, BackendUnavailableError):
        message = BACKEND_UNAVAILABLE_MESSAGE
    elif status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        message = INTERNAL_ERROR_MESSAGE

    return _error_response(
        request,
        status_code,
        exc.error_code or type(exc).__name__,
        message,
        error_id,
        details=details,
        headers=headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle validation errors from request data.

    Args:
        request: The request that caused the validation error
        exc: The validation error

    Returns:
        JSONResponse: A formatted error response
    """
    error_id = str(uuid.uuid4())

    formatted_errors = []
    for error in exc.errors():
        loc = " -> ".join(str(loc_part) for loc_part in error["loc"] if loc_part != "body")
        formatted_errors.append(
            {
                "field": loc,
                "message": error["msg"],
                "type": error.get("type", "validation_error"),
            }
        )

    logger.warning(
        "validation_error",
        error_id=error_id,
        path=request.url.path,
        method=request.method,
        fields=[error["field"] for error in formatted_errors],
    )

    return _error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Request validation failed",
        error_id,
        details={"errors": formatted_errors},
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions raised by the framework."""
    error_id = str(uuid.uuid4())

    logger.warning(
        "http_exception",
        error_id=error_id,
        status_code=exc.status_code,
        detail=str(exc.detail),
        path=request.url.path,
        method=request.method,
    )

    return _error_response(
        request,
        exc.status_code,
        "HTTPException",
        str(exc.detail),
        error_id,
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.

    Internal details are only exposed outside production.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "unexpected_error",
        error_id=error_id,
        error_type=type(exc).__name__,
        message=str(exc),
        path=request.url.path,
        method=request.method,
        exc_info=exc,
    )

    if request.app.state.settings.APP_ENV == Environment.PRODUCTION:
        message = INTERNAL_ERROR_MESSAGE
    else:
        message = f"Internal server error: {exc}"

    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "InternalServerError",
        message,
        error_id,
    )


def create_app(
    settings: Optional[Settings] = None,
    backend: Optional[StorageBackendInterface] = None,
    provider: Optional[TranslationProviderInterface] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Application settings, read from the environment if omitted
        backend: Storage backend to use instead of the configured one
        provider: Translation provider to use instead of the configured one

    Returns:
        FastAPI: The configured application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.backend_override = backend
    app.state.provider_override = provider

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS_LIST,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # Set up rate limiter exception handler
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_exception_handler(DomainError, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(api_router, prefix=settings.API_V1_STR)

    @app.get("/")
    async def root():
        """Root endpoint returning basic API information."""
        return {
            "name": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "environment": settings.APP_ENV.value,
            "docs_url": "/docs",
        }

    @app.get("/health", response_model=StatusResponse)
    async def health_check(request: Request) -> JSONResponse:
        """Report API and storage backend health.

        Returns:
            JSONResponse: 200 when the backend is reachable, 503 otherwise
        """
        db_healthy = await request.app.state.container.backend.health_check()

        body = StatusResponse(
            status="healthy" if db_healthy else "degraded",
            version=settings.VERSION,
            environment=settings.APP_ENV.value,
            components={
                "api": "healthy",
                "database": "healthy" if db_healthy else "unhealthy",
            },
        )
        if not db_healthy:
            logger.warning("health_check_degraded")

        return JSONResponse(
            status_code=status.HTTP_200_OK if db_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
            content=jsonable_encoder(body),
        )

    return app


app = create_app()


# Add direct execution support for development
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "translation_hub.main:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
        log_level="info",
    )
