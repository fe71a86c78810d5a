"""Password hashing and verification.

bcrypt with a fixed work factor and a fresh random salt per hash. Hashing
and verification run in a worker thread so they suspend the calling task
instead of blocking the event loop.
"""

import asyncio
from typing import Optional

import bcrypt

from translation_hub.constants.auth import (
    BCRYPT_MAX_PASSWORD_BYTES,
    BCRYPT_ROUNDS_DEFAULT,
)
from translation_hub.constants.validation import VALIDATION_MESSAGES
from translation_hub.domain.exceptions import (
    MalformedPasswordHashError,
    WeakPasswordError,
)


class CredentialService:
    """Hashes and verifies user passwords."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS_DEFAULT):
        """Initialize the credential service.

        Args:
            rounds: bcrypt work factor (log2 of the iteration count)
        """
        self.rounds = rounds
        self._dummy_hash: Optional[bytes] = None

    def _hash_sync(self, plaintext: str) -> str:
        password_bytes = plaintext.encode("utf-8")
        if len(password_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
            raise WeakPasswordError(VALIDATION_MESSAGES["password_too_long"])
        return bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=self.rounds)).decode("ascii")

    def _verify_sync(self, plaintext: str, password_hash: str) -> bool:
        try:
            hash_bytes = password_hash.encode("ascii")
        except (AttributeError, UnicodeEncodeError):
            raise MalformedPasswordHashError()

        password_bytes = plaintext.encode("utf-8")
        # Registration never accepts an overlong password, so it cannot match;
        # the truncated check still costs a full verification.
        overlong = len(password_bytes) > BCRYPT_MAX_PASSWORD_BYTES

        try:
            matched = bcrypt.checkpw(password_bytes[:BCRYPT_MAX_PASSWORD_BYTES], hash_bytes)
        except ValueError:
            raise MalformedPasswordHashError()
        return matched and not overlong

    async def hash_password(self, plaintext: str) -> str:
        """Produce a salted bcrypt hash.

        Args:
            plaintext: The password to hash

        Returns:
            str: The bcrypt hash; different on every call for the same input
        """
        return await asyncio.to_thread(self._hash_sync, plaintext)

    async def verify_password(self, plaintext: str, password_hash: str) -> bool:
        """Check a password against a stored hash.

        Args:
            plaintext: The candidate password
            password_hash: The stored bcrypt hash

        Returns:
            bool: True on match, False on any mismatch

        Raises:
            MalformedPasswordHashError: If the stored hash is not a bcrypt hash
        """
        return await asyncio.to_thread(self._verify_sync, plaintext, password_hash)

    async def verify_against_dummy(self, plaintext: str) -> None:
        """Spend one verification's worth of work without a real hash.

        Used when the login email is unknown, so that both failure modes
        take the same time.
        """
        if self._dummy_hash is None:
            self._dummy_hash = await asyncio.to_thread(
                bcrypt.hashpw, b"translation-hub-dummy", bcrypt.gensalt(rounds=self.rounds)
            )
        await asyncio.to_thread(self._verify_sync, plaintext, self._dummy_hash.decode("ascii"))
