"""Authentication and session constants."""

# Session signing (HMAC-SHA256)
SIGNED_SESSION_ID_LENGTH = 64  # hex-encoded SHA-256 digest
SESSION_SECRET_MIN_LENGTH = 32
SESSION_EXPIRATION_SECONDS_DEFAULT = 3600

# Password hashing
BCRYPT_ROUNDS_DEFAULT = 10
BCRYPT_MAX_PASSWORD_BYTES = 72

# Bearer token
TOKEN_TYPE_BEARER = "bearer"
AUTH_SCHEME_BEARER = "Bearer"

# Gate rejection reasons
REJECTION_NO_TOKEN = "NoToken"
REJECTION_INVALID_SESSION = "InvalidOrExpiredSession"

# User-facing messages
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
NO_TOKEN_MESSAGE = "Unauthorized: No token provided"
INVALID_SESSION_MESSAGE = "Unauthorized: Invalid or expired session"
