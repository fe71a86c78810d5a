"""Authentication endpoints for the API.

This module provides endpoints for user registration, login and logout,
and the ``get_current_session`` dependency that gates every per-user
endpoint.
"""

from typing import (
    Annotated,
    Optional,
)

from fastapi import (
    APIRouter,
    Depends,
    Request,
    status,
)
from fastapi.security import (
    HTTPAuthorizationCredentials,
    HTTPBearer,
)

from translation_hub.core.config import get_settings
from translation_hub.core.dependencies import (
    AuthServiceDep,
    SessionServiceDep,
)
from translation_hub.core.limiter import limiter
from translation_hub.core.logging import logger
from translation_hub.domain.entities import AuthenticatedSession
from translation_hub.domain.exceptions import (
    InvalidSessionError,
    NoTokenError,
)
from translation_hub.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    SessionInfoResponse,
    UserSummary,
)
from translation_hub.shared.response_models import SuccessResponse

router = APIRouter()
security = HTTPBearer(auto_error=False)
settings = get_settings()


async def get_current_session(
    request: Request,
    sessions: SessionServiceDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthenticatedSession:
    """Resolve the bearer token to a live session.

    Args:
        request: The incoming request; ``request.state.user_id`` is set on success
        sessions: Session service
        credentials: Bearer credentials, None when the header is missing or
            not a Bearer scheme

    Returns:
        AuthenticatedSession: Identity of the caller

    Raises:
        NoTokenError: If no bearer token was presented
        InvalidSessionError: If the token does not name a live session
    """
    token = credentials.credentials.strip() if credentials else ""
    if not token:
        raise NoTokenError()

    session = await sessions.validate_session(token)
    if session is None:
        raise InvalidSessionError()

    request.state.user_id = session.user_id
    return AuthenticatedSession(
        user_id=session.user_id,
        signed_session_id=session.signed_session_id,
        expires_at=session.expires_at,
    )


CurrentSession = Annotated[AuthenticatedSession, Depends(get_current_session)]


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.RATE_LIMIT_ENDPOINTS["register"][0])
async def register_user(request: Request, user_data: RegisterRequest, auth: AuthServiceDep):
    """Register a new user.

    Args:
        request: The FastAPI request object for rate limiting
        user_data: Email and password

    Returns:
        RegisterResponse: The created user
    """
    user = await auth.register(user_data.email, user_data.password.get_secret_value())
    return RegisterResponse(user=UserSummary.from_entity(user))


@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.RATE_LIMIT_ENDPOINTS["login"][0])
async def login(request: Request, credentials: LoginRequest, auth: AuthServiceDep):
    """Log a user in and issue a session.

    Args:
        request: The FastAPI request object for rate limiting
        credentials: Email and password

    Returns:
        LoginResponse: The user and the signed session id

    Raises:
        InvalidCredentialsError: If the email or password is wrong
    """
    result = await auth.login(credentials.email, credentials.password.get_secret_value())
    return LoginResponse(
        user=UserSummary.from_entity(result.user),
        signed_session_id=result.session.signed_session_id,
        expires_at=result.session.expires_at,
    )


@router.post("/logout", response_model=SuccessResponse)
async def logout(session: CurrentSession, auth: AuthServiceDep):
    """Revoke the session that authenticated this request."""
    await auth.logout(session.signed_session_id)
    logger.info("user_logged_out", user_id=session.user_id)
    return SuccessResponse(message="Logged out successfully")


@router.get("/session", response_model=SessionInfoResponse)
async def current_session(session: CurrentSession):
    """Describe the session that authenticated this request."""
    return SessionInfoResponse(user_id=session.user_id, expires_at=session.expires_at)
