from app.services.uploads.ftp_client import FtpClient, RemoteConnectionError, RemoteTransferError
from app.services.uploads.orchestrator import ImageUploader, require_success
from app.services.uploads.types import (
    FailureKind,
    FtpConfig,
    RejectionReason,
    UploadFailed,
    UploadOutcome,
    UploadRejected,
    UploadSuccess,
)
from app.services.uploads.validator import validate_image

__all__ = [
    "FtpClient",
    "FtpConfig",
    "ImageUploader",
    "FailureKind",
    "RejectionReason",
    "RemoteConnectionError",
    "RemoteTransferError",
    "UploadFailed",
    "UploadOutcome",
    "UploadRejected",
    "UploadSuccess",
    "require_success",
    "validate_image",
]
