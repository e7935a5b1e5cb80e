"""
Pytest configuration and fixtures.

Provides reusable fixtures for media backend testing:
- override_env: Strip MEDIA__* variables so tests see default settings
- clear_caches: Reset cached settings and backend between tests
- filesystem_settings / s3_settings: Settings selecting each backend
"""

import os
from collections.abc import Generator

import pytest

from apps.api.config import Settings, get_settings
from packages.shared.storage.factory import _get_default_media_backend

# =============================================================================
# Environment Fixture
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def override_env() -> Generator[None, None, None]:
    """
    Remove media settings from the environment for the test session.

    Scope: session (runs once for entire test session)
    Autouse: True (automatically used by all tests)
    """
    original_env = os.environ.copy()

    for key in list(os.environ):
        if key.upper().startswith("MEDIA__"):
            del os.environ[key]

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def clear_caches() -> Generator[None, None, None]:
    """Drop cached settings and backend before and after each test."""
    get_settings.cache_clear()
    _get_default_media_backend.cache_clear()
    yield
    get_settings.cache_clear()
    _get_default_media_backend.cache_clear()


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def upload_dir(tmp_path):
    """Upload directory that does not exist yet."""
    return tmp_path / "uploads"


@pytest.fixture
def filesystem_settings(upload_dir) -> Settings:
    """Settings selecting the filesystem backend."""
    return Settings(
        _env_file=None,
        media={
            "backend": {
                "use": "filesystem",
                "filesystem": {"upload_path": str(upload_dir)},
            }
        }
    )


@pytest.fixture
def s3_settings() -> Settings:
    """Settings selecting the S3 backend on a local MinIO endpoint."""
    return Settings(
        _env_file=None,
        media={
            "backend": {
                "use": "s3",
                "s3": {
                    "end_point": "http://localhost:9000",
                    "access_key_id": "minioadmin",
                    "secret_access_key": "minioadmin",
                    "bucket": "media",
                    "region": "us-east-1",
                    "path_style": True,
                },
            }
        }
    )
