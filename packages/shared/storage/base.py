"""Abstract base class for media storage backends."""

from abc import ABC, abstractmethod

from apps.api.config import BackendType


class MediaBackend(ABC):
    """
    Abstract base for media storage backends.

    Every uploaded file is addressed by an opaque identifier chosen by the
    caller. Backends store the full content under that identifier and
    resolve it to a URL the browser can fetch.
    """

    @property
    @abstractmethod
    def backend_type(self) -> BackendType:
        """Return the type of this backend, persisted next to each file."""
        pass

    @abstractmethod
    async def save_file(self, uuid: str, buffer: bytes) -> None:
        """
        Store a file, replacing any existing file with the same identifier.

        Args:
            uuid: Identifier of the file
            buffer: Full file content

        Raises:
            StorageError: If the file could not be stored
        """
        pass

    @abstractmethod
    async def delete_file(self, uuid: str) -> None:
        """
        Delete a stored file.

        Args:
            uuid: Identifier of the file

        Raises:
            StorageError: If the store reports a failure
        """
        pass

    @abstractmethod
    async def get_file_url(self, uuid: str) -> str:
        """
        Resolve the URL under which the file can be downloaded.

        Args:
            uuid: Identifier of the file

        Returns:
            URL string; not guaranteed to be stable across calls

        Raises:
            StorageError: If the URL could not be generated
        """
        pass
