"""Authentication flow: register, login and logout."""

from dataclasses import dataclass

from translation_hub.core.logging import logger
from translation_hub.domain.entities import (
    IssuedSession,
    UserEntity,
)
from translation_hub.domain.services.session_service import SessionService
from translation_hub.domain.services.user_service import UserDomainService


@dataclass(frozen=True)
class LoginResult:
    """A successful login: the user and the session minted for them."""

    user: UserEntity
    session: IssuedSession


class AuthService:
    """Coordinates the user directory and the session issuer."""

    def __init__(self, users: UserDomainService, sessions: SessionService):
        self.users = users
        self.sessions = sessions

    async def register(self, email: str, password: str) -> UserEntity:
        return await self.users.register_user(email, password)

    async def login(self, email: str, password: str) -> LoginResult:
        """Verify credentials, then issue a session.

        No session record is created unless the password verifies.

        Raises:
            InvalidCredentialsError: If the credentials do not match
        """
        user = await self.users.authenticate(email, password)
        session = await self.sessions.issue_session(user.id)
        logger.info("user_logged_in", user_id=user.id)
        return LoginResult(user=user, session=session)

    async def logout(self, signed_session_id: str) -> None:
        """Revoke a session; idempotent."""
        await self.sessions.revoke_session(signed_session_id)
