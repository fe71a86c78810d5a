"""Request and response schemas for the authentication endpoints."""

from datetime import datetime

from pydantic import (
    BaseModel,
    Field,
    SecretStr,
)

from translation_hub.constants.auth import TOKEN_TYPE_BEARER
from translation_hub.domain.entities import UserEntity


class Credentials(BaseModel):
    """Email and password pair.

    Only the shape is checked here; the email and password rules run in
    the user service so they produce the same errors for every caller.
    """

    email: str = Field(..., description="User email", examples=["user@example.com"])
    password: SecretStr = Field(..., description="User password")


class RegisterRequest(Credentials):
    """Registration request."""


class LoginRequest(Credentials):
    """Login request."""


class UserSummary(BaseModel):
    """Public user fields."""

    id: str
    email: str
    default_from_lang: str = ""
    default_to_lang: str = ""

    @classmethod
    def from_entity(cls, user: UserEntity) -> "UserSummary":
        return cls(**user.to_summary())


class RegisterResponse(BaseModel):
    """Response for a successful registration."""

    success: bool = True
    message: str = "User registered successfully"
    user: UserSummary


class LoginResponse(BaseModel):
    """Response for a successful login.

    ``signed_session_id`` is the bearer credential for every authenticated
    request until ``expires_at``.
    """

    success: bool = True
    user: UserSummary
    signed_session_id: str = Field(..., description="Bearer credential")
    token_type: str = Field(default=TOKEN_TYPE_BEARER, description="The type of token")
    expires_at: datetime = Field(..., description="Session expiry (UTC)")


class SessionInfoResponse(BaseModel):
    """The session attached to the current request."""

    user_id: str
    expires_at: datetime
