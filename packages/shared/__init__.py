"""Shared utilities package."""

from packages.shared.exceptions import (
    AppException,
    StorageError,
    app_exception_handler,
)

__all__ = [
    "AppException",
    "StorageError",
    "app_exception_handler",
]
