"""Input validation utilities.

Everything here runs before any storage backend call, so a rejected input
never produces side effects.
"""

from translation_hub.constants.auth import BCRYPT_MAX_PASSWORD_BYTES
from translation_hub.constants.validation import (
    EMAIL_MAX_LENGTH,
    EMAIL_REGEX,
    LANGUAGE_CODE_REGEX,
    MAX_TEXT_LENGTH,
    PASSWORD_MIN_LENGTH,
    PASSWORD_SPECIAL_CHAR_REGEX,
    PASSWORD_UPPERCASE_REGEX,
    SIGNED_SESSION_ID_REGEX,
    VALIDATION_MESSAGES,
)
from translation_hub.domain.exceptions import (
    InvalidEmailError,
    ValidationError,
    WeakPasswordError,
)

AUTO_DETECT_LANGUAGE = "auto"


def sanitize_string(value: str, max_length: int = MAX_TEXT_LENGTH, field: str = None) -> str:
    """Strip surrounding whitespace and control bytes from a string.

    Args:
        value: The string to sanitize
        max_length: Maximum allowed length after stripping
        field: Field name reported on failure

    Returns:
        str: The sanitized string

    Raises:
        ValidationError: If the value is not a string or is too long
    """
    if not isinstance(value, str):
        raise ValidationError(f"{field or 'value'} must be a string", field)

    value = value.replace("\0", "").replace("\x1a", "").strip()

    if len(value) > max_length:
        raise ValidationError(f"{field or 'value'} must be at most {max_length} characters", field)

    return value


def validate_email(email: str) -> str:
    """Validate an email address.

    The address is trimmed but otherwise kept as submitted; lookups are
    case-sensitive.

    Args:
        email: The email address to validate

    Returns:
        str: The trimmed email address

    Raises:
        InvalidEmailError: If the email format is invalid
    """
    if not isinstance(email, str) or not email.strip():
        raise InvalidEmailError(VALIDATION_MESSAGES["fields_required"])

    email = email.strip()

    if len(email) > EMAIL_MAX_LENGTH:
        raise InvalidEmailError(VALIDATION_MESSAGES["email_too_long"])

    if not EMAIL_REGEX.match(email):
        raise InvalidEmailError(VALIDATION_MESSAGES["email_invalid"])

    return email


def validate_password_strength(password: str) -> str:
    """Validate a password against the registration policy.

    At least 8 characters, one uppercase letter and one of ``!@#$%^&*``.
    The bcrypt input limit caps the encoded length.

    Args:
        password: The password to validate

    Returns:
        str: The unchanged password

    Raises:
        WeakPasswordError: If the password is not strong enough, with the reason
    """
    if not isinstance(password, str) or not password:
        raise WeakPasswordError(VALIDATION_MESSAGES["fields_required"])

    if len(password) < PASSWORD_MIN_LENGTH:
        raise WeakPasswordError(VALIDATION_MESSAGES["password_too_short"])

    if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise WeakPasswordError(VALIDATION_MESSAGES["password_too_long"])

    if not PASSWORD_UPPERCASE_REGEX.search(password):
        raise WeakPasswordError(VALIDATION_MESSAGES["password_no_uppercase"])

    if not PASSWORD_SPECIAL_CHAR_REGEX.search(password):
        raise WeakPasswordError(VALIDATION_MESSAGES["password_no_special"])

    return password


def validate_language_code(code: str, field: str = "language", allow_auto: bool = False) -> str:
    """Validate a language code such as ``en``, ``fr`` or ``zh-CN``.

    Raises:
        ValidationError: If the code is empty or malformed
    """
    if not isinstance(code, str) or not code.strip():
        raise ValidationError(f"{field} is required", field)

    code = code.strip()

    if allow_auto and code == AUTO_DETECT_LANGUAGE:
        return code

    if not LANGUAGE_CODE_REGEX.match(code):
        raise ValidationError(VALIDATION_MESSAGES["language_invalid"], field)

    return code


def is_well_formed_signed_session_id(token: str) -> bool:
    """Whether a bearer token has the shape of a signed session id."""
    return isinstance(token, str) and bool(SIGNED_SESSION_ID_REGEX.match(token))
