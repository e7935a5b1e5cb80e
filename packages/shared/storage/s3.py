"""S3-compatible media storage backend."""

import logging
from dataclasses import dataclass
from urllib.parse import urlparse

import aioboto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError

from apps.api.config import BackendType, MediaSettings
from packages.shared.exceptions import StorageError
from packages.shared.storage.base import MediaBackend

logger = logging.getLogger(__name__)

S3_ERRORS = (BotoCoreError, ClientError, OSError, ValueError)


@dataclass(frozen=True)
class S3Endpoint:
    """Connection parts of an S3 endpoint URL."""

    host: str
    port: int | None
    secure: bool

    @classmethod
    def from_url(cls, url: str) -> "S3Endpoint":
        """
        Split an endpoint URL into host, port and TLS flag.

        The port is kept only when it is given explicitly and is numeric,
        otherwise the client falls back to the default port of the scheme.
        """
        parsed = urlparse(url)
        try:
            port = parsed.port
        except ValueError:
            port = None
        return cls(
            host=parsed.hostname or "",
            port=port,
            secure=parsed.scheme == "https",
        )

    @property
    def url(self) -> str:
        scheme = "https" if self.secure else "http"
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self.port is None:
            return f"{scheme}://{host}"
        return f"{scheme}://{host}:{self.port}"


class S3Backend(MediaBackend):
    """
    S3/MinIO storage backend.

    Objects live in a flat bucket namespace with the file identifier as key.
    URLs are presigned GET URLs with the client's default expiry, generated
    anew on every call.

    When another backend is selected in the settings, the instance stays
    inactive: no session is created and every operation raises StorageError.
    """

    def __init__(self, config: MediaSettings):
        self.active = config.backend.use is BackendType.S3
        self._session: aioboto3.Session | None = None
        if not self.active:
            return

        s3_config = config.backend.s3
        self.bucket = s3_config.bucket
        self.region = s3_config.region
        self.path_style = s3_config.path_style
        self.endpoint = S3Endpoint.from_url(s3_config.end_point)
        self._session = aioboto3.Session(
            aws_access_key_id=s3_config.access_key_id,
            aws_secret_access_key=s3_config.secret_access_key,
            region_name=s3_config.region,
        )

    @property
    def backend_type(self) -> BackendType:
        return BackendType.S3

    def _get_client_kwargs(self) -> dict:
        """Build kwargs for S3 client."""
        addressing_style = "path" if self.path_style else "virtual"
        return {
            "endpoint_url": self.endpoint.url,
            "region_name": self.region,
            "use_ssl": self.endpoint.secure,
            "config": BotoConfig(
                signature_version="s3v4",
                s3={"addressing_style": addressing_style},
            ),
        }

    def _client(self):
        if self._session is None:
            raise StorageError(
                "S3 backend is not the active media backend and cannot be used"
            )
        return self._session.client("s3", **self._get_client_kwargs())

    async def save_file(self, uuid: str, buffer: bytes) -> None:
        client = self._client()
        try:
            async with client as s3:
                await s3.put_object(Bucket=self.bucket, Key=uuid, Body=buffer)
        except S3_ERRORS as e:
            logger.exception(f"Uploading {uuid} to bucket {self.bucket} failed: {e}")
            raise StorageError(f"Could not save file {uuid} on S3") from e
        logger.info(f"Uploaded file {uuid}")

    async def delete_file(self, uuid: str) -> None:
        # S3 reports success for keys that do not exist.
        client = self._client()
        try:
            async with client as s3:
                await s3.delete_object(Bucket=self.bucket, Key=uuid)
        except S3_ERRORS as e:
            logger.exception(f"Deleting {uuid} from bucket {self.bucket} failed: {e}")
            raise StorageError(f"Could not delete '{uuid}' on S3") from e
        logger.info(f"Deleted uploaded file {uuid}")

    async def get_file_url(self, uuid: str) -> str:
        client = self._client()
        try:
            async with client as s3:
                return await s3.generate_presigned_url(
                    ClientMethod="get_object",
                    Params={"Bucket": self.bucket, "Key": uuid},
                )
        except S3_ERRORS as e:
            logger.exception(f"Presigning {uuid} in bucket {self.bucket} failed: {e}")
            raise StorageError(f"Could not get URL for '{uuid}' on S3") from e
