"""Relational storage backend for Translation Hub.

This module contains the production implementation of the storage backend.
Each operation is one round trip executing a named statement from
``OPERATIONS`` through the shared ``ConnectionManager``.
"""

from datetime import (
    UTC,
    datetime,
)
from typing import (
    Any,
    Dict,
    List,
    Optional,
)

from sqlalchemy.exc import (
    IntegrityError,
    SQLAlchemyError,
)

from translation_hub.core.logging import logger
from translation_hub.domain.entities import (
    LanguagePreferences,
    SessionEntity,
    TranslationKind,
    TranslationRecord,
    UserEntity,
)
from translation_hub.domain.exceptions import (
    BackendUnavailableError,
    DomainError,
    UserAlreadyExistsError,
)
from translation_hub.domain.repositories import StorageBackendInterface
from translation_hub.infrastructure.database.connection import ConnectionManager
from translation_hub.infrastructure.database.operations import OPERATIONS


def _to_utc(value: datetime) -> datetime:
    """Normalize a datetime to aware UTC; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class SQLStorageBackend(StorageBackendInterface):
    """SQLAlchemy implementation of the storage backend."""

    name = "sql"

    def __init__(self, manager: ConnectionManager):
        """Initialize the backend with a connection manager.

        Args:
            manager: Connection manager owning the database pool
        """
        self.manager = manager

    async def _execute(
        self,
        operation: str,
        params: Dict[str, Any],
        write: bool = False,
        on_conflict: Optional[DomainError] = None,
    ):
        """Execute a named statement.

        Args:
            operation: Key into OPERATIONS
            params: Bound parameter values
            write: Run inside a committing transaction
            on_conflict: Raised instead of BackendUnavailableError on an
                integrity violation

        Returns:
            A list of row dicts for queries, the affected row count otherwise

        Raises:
            BackendUnavailableError: If the database cannot be reached or
                the statement fails
        """
        statement = OPERATIONS[operation]

        def _call(connection):
            result = connection.execute(statement, params)
            if result.returns_rows:
                return [dict(row._mapping) for row in result]
            return result.rowcount

        try:
            return await self.manager.run(_call, write=write)
        except IntegrityError as e:
            if on_conflict is not None:
                raise on_conflict from e
            logger.error("backend_operation_failed", operation=operation, error=str(e))
            raise BackendUnavailableError(operation=operation) from e
        except SQLAlchemyError as e:
            logger.error("backend_operation_failed", operation=operation, error=str(e))
            raise BackendUnavailableError(operation=operation) from e

    async def health_check(self) -> bool:
        return await self.manager.health_check()

    async def close(self) -> None:
        await self.manager.dispose()

    # Users
    async def create_user(self, user: UserEntity) -> UserEntity:
        await self._execute(
            "register_user",
            {
                "p_id": user.id,
                "p_email": user.email,
                "p_password_hash": user.password_hash,
                "p_default_from_lang": user.default_from_lang,
                "p_default_to_lang": user.default_to_lang,
                "p_created_at": _to_utc(user.created_at),
            },
            write=True,
            on_conflict=UserAlreadyExistsError(user.email),
        )
        return user

    async def get_user_by_email(self, email: str) -> Optional[UserEntity]:
        rows = await self._execute("get_user_by_email", {"p_email": email})
        return self._row_to_user(rows[0]) if rows else None

    async def get_user_by_id(self, user_id: str) -> Optional[UserEntity]:
        rows = await self._execute("get_user_by_id", {"p_user_id": user_id})
        return self._row_to_user(rows[0]) if rows else None

    # Sessions
    async def create_session(self, session: SessionEntity) -> SessionEntity:
        await self._execute(
            "create_session",
            {
                "p_signed_session_id": session.signed_session_id,
                "p_session_id": session.session_id,
                "p_user_id": session.user_id,
                "p_expires_at": _to_utc(session.expires_at),
                "p_created_at": _to_utc(session.created_at),
            },
            write=True,
        )
        return session

    async def get_session_by_signed_id(self, signed_session_id: str) -> Optional[SessionEntity]:
        rows = await self._execute("validate_session", {"p_signed_session_id": signed_session_id})
        if not rows:
            return None

        row = rows[0]
        return SessionEntity(
            session_id=row["session_id"],
            signed_session_id=row["signed_session_id"],
            user_id=row["user_id"],
            expires_at=_to_utc(row["expires_at"]),
            created_at=_to_utc(row["created_at"]),
        )

    async def delete_session(self, signed_session_id: str) -> bool:
        deleted = await self._execute(
            "delete_session", {"p_signed_session_id": signed_session_id}, write=True
        )
        return deleted > 0

    # Translations
    async def save_translation(self, record: TranslationRecord) -> TranslationRecord:
        await self._execute(
            "save_translation",
            {
                "p_id": record.id,
                "p_user_id": record.user_id,
                "p_kind": record.kind.value,
                "p_from_lang": record.from_lang,
                "p_to_lang": record.to_lang,
                "p_original_text": record.original_text,
                "p_translated_text": record.translated_text,
                "p_created_at": _to_utc(record.created_at),
            },
            write=True,
        )
        return record

    async def list_translations(self, user_id: str, kind: TranslationKind) -> List[TranslationRecord]:
        rows = await self._execute(
            "list_translations", {"p_user_id": user_id, "p_kind": TranslationKind(kind).value}
        )
        return [
            TranslationRecord(
                id=row["id"],
                user_id=row["user_id"],
                from_lang=row["from_lang"],
                to_lang=row["to_lang"],
                original_text=row["original_text"],
                translated_text=row["translated_text"],
                kind=TranslationKind(row["kind"]),
                created_at=_to_utc(row["created_at"]),
            )
            for row in rows
        ]

    # Preferences
    async def get_preferences(self, user_id: str) -> Optional[LanguagePreferences]:
        rows = await self._execute("get_preferences", {"p_user_id": user_id})
        if not rows:
            return None
        return LanguagePreferences(
            default_from_lang=rows[0]["default_from_lang"] or "",
            default_to_lang=rows[0]["default_to_lang"] or "",
        )

    async def update_preferences(self, user_id: str, from_lang: str, to_lang: str) -> bool:
        updated = await self._execute(
            "update_preferences",
            {"p_user_id": user_id, "p_from_lang": from_lang, "p_to_lang": to_lang},
            write=True,
        )
        if updated > 0:
            return True

        # Some drivers report changed rather than matched rows.
        return bool(await self._execute("user_exists", {"p_user_id": user_id}))

    @staticmethod
    def _row_to_user(row: Dict[str, Any]) -> UserEntity:
        return UserEntity(
            id=row["id"],
            email=row["email"],
            password_hash=row["password_hash"],
            default_from_lang=row["default_from_lang"] or "",
            default_to_lang=row["default_to_lang"] or "",
            created_at=_to_utc(row["created_at"]),
        )
