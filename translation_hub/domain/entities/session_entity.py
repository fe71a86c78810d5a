"""Session domain entity for Translation Hub."""

from dataclasses import (
    dataclass,
    field,
)
from datetime import (
    UTC,
    datetime,
)


@dataclass
class SessionEntity:
    """Server-side session record.

    ``session_id`` is the raw random identifier and stays on the server;
    only ``signed_session_id`` is handed to the client.
    """

    session_id: str
    signed_session_id: str
    user_id: str
    expires_at: datetime
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_expired(self, now: datetime) -> bool:
        """Whether the session is expired at ``now`` (expiry is exclusive)."""
        return now >= self.expires_at


@dataclass(frozen=True)
class IssuedSession:
    """Result of a successful session issuance."""

    session_id: str
    signed_session_id: str
    expires_at: datetime


@dataclass(frozen=True)
class AuthenticatedSession:
    """Identity attached to a request that passed the session gate."""

    user_id: str
    signed_session_id: str
    expires_at: datetime
