"""User domain entity for Translation Hub.

This module contains the pure domain model for User,
independent of any storage backend.
"""

import uuid
from dataclasses import (
    dataclass,
    field,
)
from datetime import (
    UTC,
    datetime,
)


@dataclass(frozen=True)
class LanguagePreferences:
    """A user's default source and target languages."""

    default_from_lang: str = ""
    default_to_lang: str = ""

    def to_dict(self) -> dict:
        return {
            "default_from_lang": self.default_from_lang,
            "default_to_lang": self.default_to_lang,
        }


@dataclass
class UserEntity:
    """Pure domain entity for User.

    ``password_hash`` is always a bcrypt hash; the plaintext password never
    reaches this object.
    """

    email: str
    password_hash: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    default_from_lang: str = ""
    default_to_lang: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def preferences(self) -> LanguagePreferences:
        """The user's language preferences."""
        return LanguagePreferences(
            default_from_lang=self.default_from_lang or "",
            default_to_lang=self.default_to_lang or "",
        )

    def to_summary(self) -> dict:
        """Public fields only, safe to return to the client."""
        return {
            "id": self.id,
            "email": self.email,
            **self.preferences.to_dict(),
        }
