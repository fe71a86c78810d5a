"""Domain-specific exceptions for Translation Hub.

This module contains exceptions that represent domain business rule violations
and error conditions within the domain layer. Each carries an ``error_code``
that the API layer maps onto an HTTP status.
"""

from translation_hub.constants.auth import (
    INVALID_CREDENTIALS_MESSAGE,
    INVALID_SESSION_MESSAGE,
    NO_TOKEN_MESSAGE,
    REJECTION_INVALID_SESSION,
    REJECTION_NO_TOKEN,
)


class DomainError(Exception):
    """Base exception for all domain-related errors."""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


# Validation exceptions
class ValidationError(DomainError):
    """Raised when input fails validation before reaching the backend."""

    def __init__(self, message: str, field: str = None, error_code: str = "VALIDATION_ERROR"):
        super().__init__(message, error_code)
        self.field = field


class InvalidEmailError(ValidationError):
    """Raised when an email address is not local@domain.tld shaped."""

    def __init__(self, message: str):
        super().__init__(message, "email", "INVALID_EMAIL")


class WeakPasswordError(ValidationError):
    """Raised when a password does not satisfy the registration policy."""

    def __init__(self, message: str):
        super().__init__(message, "password", "WEAK_PASSWORD")


# Authentication exceptions
class AuthenticationError(DomainError):
    """Base exception for authentication failures."""

    def __init__(self, message: str, error_code: str, reason: str = None):
        super().__init__(message, error_code)
        self.reason = reason


class InvalidCredentialsError(AuthenticationError):
    """Raised when login credentials are invalid.

    The message is the same for an unknown email and a wrong password.
    """

    def __init__(self):
        super().__init__(INVALID_CREDENTIALS_MESSAGE, "INVALID_CREDENTIALS")


class NoTokenError(AuthenticationError):
    """Raised when a request carries no usable bearer token."""

    def __init__(self):
        super().__init__(NO_TOKEN_MESSAGE, "NO_TOKEN", REJECTION_NO_TOKEN)


class InvalidSessionError(AuthenticationError):
    """Raised when a bearer token does not name a live session."""

    def __init__(self):
        super().__init__(INVALID_SESSION_MESSAGE, "INVALID_OR_EXPIRED_SESSION", REJECTION_INVALID_SESSION)


class MalformedPasswordHashError(DomainError):
    """Raised when a stored password hash cannot be parsed."""

    def __init__(self):
        super().__init__("Stored password hash is malformed", "MALFORMED_PASSWORD_HASH")


# User-related exceptions
class UserError(DomainError):
    """Base exception for user-related errors."""
    pass


class UserNotFoundError(UserError):
    """Raised when a user is not found."""

    def __init__(self, user_id: str = None, email: str = None):
        if user_id:
            message = f"User with ID {user_id} not found"
        elif email:
            message = f"User with email {email} not found"
        else:
            message = "User not found"
        super().__init__(message, "USER_NOT_FOUND")
        self.user_id = user_id
        self.email = email


class UserAlreadyExistsError(UserError):
    """Raised when trying to create a user that already exists."""

    def __init__(self, email: str):
        message = f"User with email {email} already exists"
        super().__init__(message, "DUPLICATE_EMAIL")
        self.email = email


# Backend exceptions
class RepositoryError(DomainError):
    """Base exception for storage backend errors."""
    pass


class BackendUnavailableError(RepositoryError):
    """Raised when the storage backend cannot be reached or a query fails."""

    def __init__(self, message: str = "Storage backend unavailable", operation: str = None):
        super().__init__(message, "BACKEND_UNAVAILABLE")
        self.operation = operation


# External provider exceptions
class TranslationProviderError(DomainError):
    """Raised when the translation or speech provider fails."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message, "TRANSLATION_PROVIDER_ERROR")
        self.status_code = status_code
