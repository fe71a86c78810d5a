"""Database configuration constants."""

# Connection Pool Configuration
DEFAULT_POOL_SIZE = 10
DEFAULT_MAX_OVERFLOW = 10
CONNECTION_TIMEOUT = 30  # seconds
POOL_RECYCLE_TIME = 1800  # 30 minutes in seconds
POOL_PRE_PING = True

# Table Names
USERS_TABLE = "users"
SESSIONS_TABLE = "sessions"
TRANSLATIONS_TABLE = "translations"

# Health Check Configuration
HEALTH_CHECK_QUERY = "SELECT 1"

# Column limits
EMAIL_COLUMN_LENGTH = 254
LANGUAGE_CODE_COLUMN_LENGTH = 16
PASSWORD_HASH_COLUMN_LENGTH = 60
SIGNED_SESSION_ID_COLUMN_LENGTH = 64

# Database URL Templates
DATABASE_URL_TEMPLATES = {
    "postgresql": "postgresql+psycopg2://{user}:{password}@{host}:{port}/{database}",
    "sqlite": "sqlite:///{database}.db",
}
