"""Session issuance, validation and revocation.

A session is a random UUID kept on the server plus its HMAC-SHA256
signature under the server secret. Only the signature is given to the
client as the bearer credential. A session is valid iff a record with the
presented signature exists, the stored raw id still signs to that value
under the current secret, and the current time is before ``expires_at``.
"""

import hashlib
import hmac
import uuid
from datetime import (
    UTC,
    datetime,
    timedelta,
)
from typing import (
    Callable,
    Optional,
)

from translation_hub.core.logging import logger
from translation_hub.domain.entities import (
    IssuedSession,
    SessionEntity,
)
from translation_hub.domain.repositories import StorageBackendInterface
from translation_hub.utils.validation import is_well_formed_signed_session_id


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def _token_part(token: str) -> str:
    return f"{token[:8]}..." if token else ""


class SessionService:
    """Issues, validates and revokes signed sessions."""

    def __init__(
        self,
        backend: StorageBackendInterface,
        secret: str,
        ttl_seconds: int,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the session service.

        Args:
            backend: Storage backend holding session records
            secret: Server-held signing secret, never sent to clients
            ttl_seconds: Session lifetime in seconds
            clock: Source of the current time, injectable for tests

        Raises:
            ValueError: If the secret is empty or the TTL is not positive
        """
        if not secret:
            raise ValueError("Session signing secret must be configured")
        if ttl_seconds <= 0:
            raise ValueError("Session TTL must be positive")

        self.backend = backend
        self._secret = secret.encode("utf-8")
        self.ttl = timedelta(seconds=ttl_seconds)
        self.clock = clock

    def sign(self, session_id: str) -> str:
        """Derive the signed session id for a raw session id.

        Args:
            session_id: Raw session identifier

        Returns:
            str: Lowercase hex HMAC-SHA256 digest
        """
        return hmac.new(self._secret, session_id.encode("utf-8"), hashlib.sha256).hexdigest()

    async def issue_session(self, user_id: str) -> IssuedSession:
        """Create and persist a new session for a user.

        The record is stored before the signed id is returned.

        Args:
            user_id: Owner of the session

        Returns:
            IssuedSession: Raw id, signed id and expiry
        """
        session_id = str(uuid.uuid4())
        signed_session_id = self.sign(session_id)
        now = self.clock()
        expires_at = now + self.ttl

        await self.backend.create_session(
            SessionEntity(
                session_id=session_id,
                signed_session_id=signed_session_id,
                user_id=user_id,
                expires_at=expires_at,
                created_at=now,
            )
        )

        logger.info(
            "session_issued",
            user_id=user_id,
            expires_at=expires_at.isoformat(),
            token_part=_token_part(signed_session_id),
        )

        return IssuedSession(
            session_id=session_id,
            signed_session_id=signed_session_id,
            expires_at=expires_at,
        )

    async def validate_session(self, signed_session_id: str) -> Optional[SessionEntity]:
        """Validate a signed session id.

        Every failure, including a storage error, yields None so callers
        cannot tell an unknown token from an expired one.

        Args:
            signed_session_id: Bearer credential presented by the client

        Returns:
            SessionEntity if the session is live, None otherwise
        """
        if not is_well_formed_signed_session_id(signed_session_id):
            logger.warning("session_token_malformed")
            return None

        try:
            session = await self.backend.get_session_by_signed_id(signed_session_id)
        except Exception as e:
            logger.error(
                "session_validation_failed",
                error=str(e),
                token_part=_token_part(signed_session_id),
            )
            return None

        if session is None:
            logger.warning("session_not_found", token_part=_token_part(signed_session_id))
            return None

        if not hmac.compare_digest(self.sign(session.session_id), signed_session_id):
            logger.warning("session_signature_mismatch", token_part=_token_part(signed_session_id))
            return None

        if session.is_expired(self.clock()):
            logger.info("session_expired", user_id=session.user_id, token_part=_token_part(signed_session_id))
            try:
                await self.backend.delete_session(signed_session_id)
            except Exception as e:
                logger.warning("expired_session_cleanup_failed", error=str(e))
            return None

        return session

    async def revoke_session(self, signed_session_id: str) -> None:
        """Delete a session record.

        Revoking an unknown, malformed or already expired session is a no-op.

        Args:
            signed_session_id: Signed session identifier to revoke
        """
        if not is_well_formed_signed_session_id(signed_session_id):
            return

        removed = await self.backend.delete_session(signed_session_id)
        logger.info("session_revoked", removed=removed, token_part=_token_part(signed_session_id))
