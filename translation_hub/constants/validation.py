"""Validation constants and regex patterns."""

import re

from translation_hub.constants.auth import SIGNED_SESSION_ID_LENGTH

# Email Validation
EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
EMAIL_MAX_LENGTH = 254

# Password Validation
PASSWORD_MIN_LENGTH = 8
PASSWORD_SPECIAL_CHARACTERS = "!@#$%^&*"
PASSWORD_UPPERCASE_REGEX = re.compile(r"[A-Z]")
PASSWORD_SPECIAL_CHAR_REGEX = re.compile(r"[!@#$%^&*]")

# Signed session id: hex HMAC-SHA256 digest
SIGNED_SESSION_ID_REGEX = re.compile(rf"^[0-9a-f]{{{SIGNED_SESSION_ID_LENGTH}}}$")

# Language codes (ISO-639-1 style, optionally with a region suffix)
LANGUAGE_CODE_REGEX = re.compile(r"^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})?$")

# Text Validation
MAX_TEXT_LENGTH = 10000
MAX_AUDIO_BYTES = 10 * 1024 * 1024  # 10MB

# Common Validation Messages
VALIDATION_MESSAGES = {
    "fields_required": "Email and password are required",
    "email_invalid": "Invalid email format",
    "email_too_long": f"Email must be at most {EMAIL_MAX_LENGTH} characters",
    "password_too_short": f"Password must be at least {PASSWORD_MIN_LENGTH} characters long",
    "password_too_long": "Password is too long",
    "password_no_uppercase": "Password must contain at least one uppercase letter",
    "password_no_special": (
        f"Password must contain at least one special character ({PASSWORD_SPECIAL_CHARACTERS})"
    ),
    "language_invalid": "Invalid language code",
    "text_too_long": f"Text must be at most {MAX_TEXT_LENGTH} characters",
}
