"""Named, parameterized statements for the relational backend.

Every backend operation executes exactly one statement from ``OPERATIONS``
with bound parameters. Bind parameter names carry a ``p_`` prefix so they
never collide with column names in ``UPDATE ... SET`` clauses.
"""

from sqlalchemy import (
    bindparam,
    delete,
    insert,
    select,
    update,
)

from translation_hub.infrastructure.database.models import (
    SessionTable,
    TranslationTable,
    UserTable,
)

users = UserTable.__table__
sessions = SessionTable.__table__
translations = TranslationTable.__table__


OPERATIONS = {
    # Users
    "register_user": insert(users).values(
        id=bindparam("p_id"),
        email=bindparam("p_email"),
        password_hash=bindparam("p_password_hash"),
        default_from_lang=bindparam("p_default_from_lang"),
        default_to_lang=bindparam("p_default_to_lang"),
        created_at=bindparam("p_created_at"),
    ),
    "get_user_by_email": select(users).where(users.c.email == bindparam("p_email")),
    "get_user_by_id": select(users).where(users.c.id == bindparam("p_user_id")),
    "get_preferences": select(users.c.default_from_lang, users.c.default_to_lang).where(
        users.c.id == bindparam("p_user_id")
    ),
    "update_preferences": update(users)
    .where(users.c.id == bindparam("p_user_id"))
    .values(
        default_from_lang=bindparam("p_from_lang"),
        default_to_lang=bindparam("p_to_lang"),
    ),
    "user_exists": select(users.c.id).where(users.c.id == bindparam("p_user_id")),
    # Sessions
    "create_session": insert(sessions).values(
        signed_session_id=bindparam("p_signed_session_id"),
        session_id=bindparam("p_session_id"),
        user_id=bindparam("p_user_id"),
        expires_at=bindparam("p_expires_at"),
        created_at=bindparam("p_created_at"),
    ),
    "validate_session": select(sessions).where(
        sessions.c.signed_session_id == bindparam("p_signed_session_id")
    ),
    "delete_session": delete(sessions).where(
        sessions.c.signed_session_id == bindparam("p_signed_session_id")
    ),
    # Translations
    "save_translation": insert(translations).values(
        id=bindparam("p_id"),
        user_id=bindparam("p_user_id"),
        kind=bindparam("p_kind"),
        from_lang=bindparam("p_from_lang"),
        to_lang=bindparam("p_to_lang"),
        original_text=bindparam("p_original_text"),
        translated_text=bindparam("p_translated_text"),
        created_at=bindparam("p_created_at"),
    ),
    "list_translations": select(translations)
    .where(
        translations.c.user_id == bindparam("p_user_id"),
        translations.c.kind == bindparam("p_kind"),
    )
    .order_by(translations.c.created_at.desc(), translations.c.seq.desc()),
}
