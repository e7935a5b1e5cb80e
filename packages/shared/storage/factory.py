"""Factory for creating the media backend selected in the configuration."""

from functools import lru_cache

from apps.api.config import BackendType, Settings, get_settings
from packages.shared.storage.base import MediaBackend
from packages.shared.storage.local import FilesystemBackend


def get_media_backend(settings: Settings | None = None) -> MediaBackend:
    """
    Return the media backend for the application settings.

    Only the selected backend is constructed, so an unused S3 backend never
    holds a client session. Without explicit settings the process-wide
    cached settings are used and the backend is built once.

    Args:
        settings: Application settings (defaults to get_settings())

    Returns:
        Configured MediaBackend instance
    """
    if settings is not None:
        return get_media_backend_from_settings(settings)
    return _get_default_media_backend()


@lru_cache(maxsize=1)
def _get_default_media_backend() -> MediaBackend:
    return get_media_backend_from_settings(get_settings())


def get_media_backend_from_settings(settings: Settings) -> MediaBackend:
    """
    Create the media backend directly from a Settings object.

    Useful for dependency injection in tests.

    Args:
        settings: Application settings

    Returns:
        Configured MediaBackend instance
    """
    if settings.media.backend.use is BackendType.S3:
        from packages.shared.storage.s3 import S3Backend

        return S3Backend(settings.media)
    return FilesystemBackend(settings.media)
