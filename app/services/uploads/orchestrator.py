import logging
import os
import uuid
from typing import BinaryIO

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from app.core.errors import RemoteStoreError, RemoteStoreTimeoutError, ValidationError
from app.services.uploads.ftp_client import FtpClient, RemoteConnectionError, RemoteTransferError
from app.services.uploads.types import (
    FailureKind,
    FtpConfig,
    UploadFailed,
    UploadOutcome,
    UploadRejected,
    UploadSuccess,
)
from app.services.uploads.validator import image_extension, validate_image

logger = logging.getLogger(__name__)


def unique_file_name(filename: str) -> str:
    return f"{uuid.uuid4()}{image_extension(filename)}"


class ImageUploader:
    """Validates an image, stores it on the FTP server and returns its public URL.

    Failures are returned as outcomes rather than raised. Nothing is retried
    and a failed transfer is not cleaned up remotely; every upload gets a
    fresh uuid4 name.
    """

    def __init__(self, config: FtpConfig, client: FtpClient | None = None) -> None:
        self.config = config
        self.client = client or FtpClient(config)

    def public_url(self, file_name: str) -> str:
        segments = [self.config.host, self.config.public_path.strip("/"), file_name]
        return "https://" + "/".join(segment for segment in segments if segment)

    def remote_path(self, file_name: str) -> str:
        return f"{self.config.upload_path.rstrip('/')}/{file_name}"

    def upload(self, filename: str, stream: BinaryIO, byte_length: int) -> UploadOutcome:
        rejected = validate_image(filename, byte_length)
        if rejected is not None:
            logger.info("image_upload_rejected", extra={"reason": rejected.reason.value, "byte_length": byte_length})
            return rejected

        file_name = unique_file_name(filename)
        remote_path = self.remote_path(file_name)
        logger.info("ftp_upload_started", extra={"file_name": file_name, "host": self.config.host})
        try:
            with self.client.session() as session:
                self.client.transfer(session, stream, remote_path)
        except RemoteConnectionError as exc:
            logger.error("ftp_connection_failed", extra={"file_name": file_name, "error": str(exc)})
            return UploadFailed(FailureKind.CONNECTION, str(exc))
        except RemoteTransferError as exc:
            logger.error("ftp_upload_failed", extra={"file_name": file_name, "status": exc.status})
            return UploadFailed(FailureKind.TRANSFER, str(exc), status=exc.status)
        except TimeoutError as exc:
            logger.error("ftp_upload_timeout", extra={"file_name": file_name, "error": str(exc)})
            return UploadFailed(FailureKind.TIMEOUT, "FTP upload timed out: the server did not respond in time")
        except Exception as exc:  # noqa: BLE001
            logger.exception("ftp_upload_error", extra={"file_name": file_name})
            return UploadFailed(FailureKind.UNKNOWN, f"Error while uploading the file: {exc}")

        url = self.public_url(file_name)
        logger.info("ftp_upload_completed", extra={"file_name": file_name, "byte_length": byte_length})
        return UploadSuccess(file_name=file_name, public_url=url, byte_size=byte_length)

    async def upload_file(self, file: UploadFile) -> UploadOutcome:
        handle = file.file
        handle.seek(0, os.SEEK_END)
        byte_length = handle.tell()
        handle.seek(0)
        try:
            return await run_in_threadpool(self.upload, file.filename or "", handle, byte_length)
        finally:
            await file.close()


def require_success(outcome: UploadOutcome) -> UploadSuccess:
    """Turn a failed or rejected outcome into the matching catalog error."""
    if isinstance(outcome, UploadSuccess):
        return outcome
    if isinstance(outcome, UploadRejected):
        raise ValidationError(outcome.message, detail=outcome.reason.value)
    if outcome.kind is FailureKind.TIMEOUT:
        raise RemoteStoreTimeoutError(outcome.message, detail=outcome.kind.value)
    raise RemoteStoreError(outcome.message, detail=outcome.status or outcome.kind.value)
