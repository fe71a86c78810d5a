"""Translation record domain entity for Translation Hub."""

import uuid
from dataclasses import (
    dataclass,
    field,
)
from datetime import (
    UTC,
    datetime,
)
from enum import Enum


class TranslationKind(str, Enum):
    """How the original text was obtained."""

    TEXT = "text"
    VOICE = "voice"


@dataclass(frozen=True)
class TranslationRecord:
    """An immutable saved translation."""

    user_id: str
    from_lang: str
    to_lang: str
    original_text: str
    translated_text: str
    kind: TranslationKind
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
