"""
Media storage backends for uploaded files.

Provides the abstract contract and its implementations:
- Local disk storage served under /uploads
- S3/MinIO storage with presigned download URLs
"""

from apps.api.config import BackendType
from packages.shared.storage.base import MediaBackend
from packages.shared.storage.factory import (
    get_media_backend,
    get_media_backend_from_settings,
)
from packages.shared.storage.local import FilesystemBackend
from packages.shared.storage.s3 import S3Backend, S3Endpoint

__all__ = [
    "BackendType",
    "FilesystemBackend",
    "MediaBackend",
    "S3Backend",
    "S3Endpoint",
    "get_media_backend",
    "get_media_backend_from_settings",
]
