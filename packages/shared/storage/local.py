"""Local disk media storage backend."""

import logging
from pathlib import Path

import aiofiles
import aiofiles.os

from apps.api.config import BackendType, MediaSettings
from packages.shared.exceptions import StorageError
from packages.shared.storage.base import MediaBackend

logger = logging.getLogger(__name__)


class FilesystemBackend(MediaBackend):
    """
    Stores uploads as plain files in a single flat directory.

    Layout: <upload_path>/<uuid>, no sharding and no extension. Files are
    served by the web layer under /uploads/<uuid>.
    """

    def __init__(self, config: MediaSettings):
        self.upload_directory = Path(config.backend.filesystem.upload_path)

    @property
    def backend_type(self) -> BackendType:
        return BackendType.FILESYSTEM

    def _get_file_path(self, uuid: str) -> Path:
        return self.upload_directory / uuid

    async def save_file(self, uuid: str, buffer: bytes) -> None:
        file_path = self._get_file_path(uuid)
        logger.debug(f"Writing uploaded file to '{file_path}'")
        await self.ensure_directory()
        try:
            async with aiofiles.open(file_path, "wb") as f:
                await f.write(buffer)
        except (OSError, ValueError) as e:
            logger.exception(f"Writing '{file_path}' failed: {e}")
            raise StorageError(f"Could not save file '{file_path}'") from e

    async def delete_file(self, uuid: str) -> None:
        file_path = self._get_file_path(uuid)
        try:
            await aiofiles.os.remove(file_path)
        except (OSError, ValueError) as e:
            logger.exception(f"Removing '{file_path}' failed: {e}")
            raise StorageError(f"Could not delete file '{file_path}'") from e

    async def get_file_url(self, uuid: str) -> str:
        return f"/uploads/{uuid}"

    async def ensure_directory(self) -> None:
        """
        Create the upload directory if it is missing.

        A directory created concurrently by another request counts as
        success. Any other failure aborts the save.

        Raises:
            StorageError: If the directory could not be created
        """
        logger.debug(f"Ensuring presence of directory at {self.upload_directory}")
        if await aiofiles.os.path.isdir(self.upload_directory):
            return

        logger.debug(
            f"The directory '{self.upload_directory}' does not exist. "
            "Trying to create the directory"
        )
        try:
            await aiofiles.os.makedirs(self.upload_directory, exist_ok=True)
        except OSError as e:
            logger.exception(f"Creating '{self.upload_directory}' failed: {e}")
            raise StorageError(f"Could not create '{self.upload_directory}'") from e
