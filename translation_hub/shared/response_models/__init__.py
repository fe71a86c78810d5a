"""Shared response models."""

from .base import (
    ErrorResponse,
    StatusResponse,
    SuccessResponse,
)

__all__ = [
    "ErrorResponse",
    "StatusResponse",
    "SuccessResponse",
]
