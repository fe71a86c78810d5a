"""SQLModel table definitions for the relational storage backend."""

from datetime import datetime
from typing import Optional

from sqlalchemy import (
    Column,
    DateTime,
)
from sqlmodel import (
    Field,
    SQLModel,
)

from translation_hub.constants.database import (
    EMAIL_COLUMN_LENGTH,
    LANGUAGE_CODE_COLUMN_LENGTH,
    PASSWORD_HASH_COLUMN_LENGTH,
    SESSIONS_TABLE,
    SIGNED_SESSION_ID_COLUMN_LENGTH,
    TRANSLATIONS_TABLE,
    USERS_TABLE,
)


def _timestamp_column() -> Column:
    return Column(DateTime(timezone=True), nullable=False)


class UserTable(SQLModel, table=True):
    """Registered users."""

    __tablename__ = USERS_TABLE

    id: str = Field(primary_key=True, max_length=36)
    email: str = Field(max_length=EMAIL_COLUMN_LENGTH, index=True, sa_column_kwargs={"unique": True})
    password_hash: str = Field(max_length=PASSWORD_HASH_COLUMN_LENGTH)
    default_from_lang: str = Field(default="", max_length=LANGUAGE_CODE_COLUMN_LENGTH)
    default_to_lang: str = Field(default="", max_length=LANGUAGE_CODE_COLUMN_LENGTH)
    created_at: datetime = Field(sa_column=_timestamp_column())


class SessionTable(SQLModel, table=True):
    """Server-side session records keyed by signed session id."""

    __tablename__ = SESSIONS_TABLE

    signed_session_id: str = Field(primary_key=True, max_length=SIGNED_SESSION_ID_COLUMN_LENGTH)
    session_id: str = Field(max_length=36)
    user_id: str = Field(foreign_key=f"{USERS_TABLE}.id", index=True)
    expires_at: datetime = Field(sa_column=_timestamp_column())
    created_at: datetime = Field(sa_column=_timestamp_column())


class TranslationTable(SQLModel, table=True):
    """Append-only translation history for both text and voice input.

    ``seq`` follows insertion order and breaks ties between equal
    ``created_at`` values when listing newest first.
    """

    __tablename__ = TRANSLATIONS_TABLE

    seq: Optional[int] = Field(default=None, primary_key=True)
    id: str = Field(max_length=36, unique=True)
    user_id: str = Field(foreign_key=f"{USERS_TABLE}.id", index=True)
    kind: str = Field(max_length=8, index=True)
    from_lang: str = Field(max_length=LANGUAGE_CODE_COLUMN_LENGTH)
    to_lang: str = Field(max_length=LANGUAGE_CODE_COLUMN_LENGTH)
    original_text: str
    translated_text: str
    created_at: datetime = Field(sa_column=_timestamp_column())
