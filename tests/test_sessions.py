"""Tests for session issuance, validation and revocation.

Every test runs against both storage backends.
"""

import hashlib
import hmac
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from conftest import (
    TEST_SESSION_SECRET,
    FakeClock,
)
from translation_hub.domain.entities import UserEntity
from translation_hub.domain.services import SessionService
from translation_hub.infrastructure.memory import MemoryStorageBackend


async def _create_user(backend, email: str = "owner@example.com") -> UserEntity:
    return await backend.create_user(UserEntity(email=email, password_hash="$2b$04$placeholder"))


class TestIssueSession:
    """Test suite for session issuance."""

    async def test_issue_returns_signed_id(self, backend, session_service: SessionService, clock: FakeClock):
        user = await _create_user(backend)

        issued = await session_service.issue_session(user.id)

        expected = hmac.new(
            TEST_SESSION_SECRET.encode(), issued.session_id.encode(), hashlib.sha256
        ).hexdigest()
        assert issued.signed_session_id == expected
        assert len(issued.signed_session_id) == 64
        assert issued.signed_session_id != issued.session_id
        assert issued.expires_at == clock.now + timedelta(seconds=3600)

    async def test_session_is_persisted_before_return(self, backend, session_service: SessionService):
        user = await _create_user(backend)

        issued = await session_service.issue_session(user.id)

        stored = await backend.get_session_by_signed_id(issued.signed_session_id)
        assert stored is not None
        assert stored.user_id == user.id
        assert stored.session_id == issued.session_id
        assert stored.expires_at == issued.expires_at

    async def test_sessions_are_unique(self, backend, session_service: SessionService):
        user = await _create_user(backend)

        first = await session_service.issue_session(user.id)
        second = await session_service.issue_session(user.id)

        assert first.session_id != second.session_id
        assert first.signed_session_id != second.signed_session_id


class TestValidateSession:
    """Test suite for session validation."""

    async def test_fresh_session_is_valid(self, backend, session_service: SessionService):
        user = await _create_user(backend)
        issued = await session_service.issue_session(user.id)

        session = await session_service.validate_session(issued.signed_session_id)

        assert session is not None
        assert session.user_id == user.id

    async def test_expiry_boundary(self, backend, session_service: SessionService, clock: FakeClock):
        user = await _create_user(backend)
        issued = await session_service.issue_session(user.id)

        clock.advance(seconds=3600, microseconds=-1)
        assert await session_service.validate_session(issued.signed_session_id) is not None

        clock.advance(microseconds=1)
        assert await session_service.validate_session(issued.signed_session_id) is None

    async def test_expired_session_is_deleted_on_validation(
        self, backend, session_service: SessionService, clock: FakeClock
    ):
        user = await _create_user(backend)
        issued = await session_service.issue_session(user.id)

        clock.advance(seconds=3600)

        assert await session_service.validate_session(issued.signed_session_id) is None
        assert await backend.get_session_by_signed_id(issued.signed_session_id) is None

    async def test_memory_backend_prunes_expired_sessions_on_issue(self, clock: FakeClock):
        backend = MemoryStorageBackend()
        sessions = SessionService(backend, secret=TEST_SESSION_SECRET, ttl_seconds=3600, clock=clock)
        user = await _create_user(backend)
        stale = await sessions.issue_session(user.id)

        clock.advance(hours=2)
        fresh = await sessions.issue_session(user.id)

        assert await backend.get_session_by_signed_id(stale.signed_session_id) is None
        assert await backend.get_session_by_signed_id(fresh.signed_session_id) is not None

    async def test_never_issued_token_is_rejected(self, session_service: SessionService):
        forged = hmac.new(b"some-other-secret", b"made-up", hashlib.sha256).hexdigest()
        assert await session_service.validate_session(forged) is None

    @pytest.mark.parametrize("token", ["", "abc", "Z" * 64, "A" * 64, "0" * 63, "0" * 65])
    async def test_malformed_token_is_rejected(self, session_service: SessionService, token: str):
        assert await session_service.validate_session(token) is None

    async def test_secret_rotation_invalidates_sessions(self, backend, session_service: SessionService, clock):
        user = await _create_user(backend)
        issued = await session_service.issue_session(user.id)

        rotated = SessionService(backend, secret="a-completely-different-secret-value", ttl_seconds=3600, clock=clock)

        assert await rotated.validate_session(issued.signed_session_id) is None

    async def test_backend_failure_fails_closed(self, backend, session_service: SessionService):
        user = await _create_user(backend)
        issued = await session_service.issue_session(user.id)
        backend.get_session_by_signed_id = AsyncMock(side_effect=RuntimeError("connection reset"))

        assert await session_service.validate_session(issued.signed_session_id) is None


class TestRevokeSession:
    """Test suite for logout."""

    async def test_revoked_session_is_invalid(self, backend, session_service: SessionService):
        user = await _create_user(backend)
        issued = await session_service.issue_session(user.id)

        await session_service.revoke_session(issued.signed_session_id)

        assert await session_service.validate_session(issued.signed_session_id) is None
        assert await backend.get_session_by_signed_id(issued.signed_session_id) is None

    async def test_revoke_is_idempotent(self, backend, session_service: SessionService):
        user = await _create_user(backend)
        issued = await session_service.issue_session(user.id)

        await session_service.revoke_session(issued.signed_session_id)
        await session_service.revoke_session(issued.signed_session_id)
        await session_service.revoke_session("not-a-token")

        assert await session_service.validate_session(issued.signed_session_id) is None

    async def test_revoking_one_session_keeps_others(self, backend, session_service: SessionService):
        user = await _create_user(backend)
        first = await session_service.issue_session(user.id)
        second = await session_service.issue_session(user.id)

        await session_service.revoke_session(first.signed_session_id)

        assert await session_service.validate_session(second.signed_session_id) is not None


class TestSessionServiceConfiguration:
    """Test suite for constructor checks."""

    def test_empty_secret_is_rejected(self):
        with pytest.raises(ValueError):
            SessionService(MemoryStorageBackend(), secret="", ttl_seconds=3600)

    def test_non_positive_ttl_is_rejected(self):
        with pytest.raises(ValueError):
            SessionService(MemoryStorageBackend(), secret=TEST_SESSION_SECRET, ttl_seconds=0)
