from dataclasses import dataclass
from enum import Enum

from app.core.config import Settings


class RejectionReason(str, Enum):
    UNSUPPORTED_TYPE = "unsupported_type"
    EMPTY = "empty"
    TOO_LARGE = "too_large"


class FailureKind(str, Enum):
    CONNECTION = "connection"
    TRANSFER = "transfer"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class FtpConfig:
    host: str
    port: int = 21
    username: str = ""
    password: str = ""
    upload_path: str = "/uploads"
    public_path: str = "uploads"
    connect_timeout: float = 60.0
    read_timeout: float = 60.0
    data_connect_timeout: float = 60.0
    data_read_timeout: float = 60.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "FtpConfig":
        return cls(
            host=settings.ftp_host,
            port=settings.ftp_port,
            username=settings.ftp_username,
            password=settings.ftp_password,
            upload_path=settings.ftp_upload_path,
            public_path=settings.ftp_public_path,
            connect_timeout=settings.ftp_connect_timeout,
            read_timeout=settings.ftp_read_timeout,
            data_connect_timeout=settings.ftp_data_connect_timeout,
            data_read_timeout=settings.ftp_data_read_timeout,
        )


@dataclass(frozen=True, slots=True)
class UploadSuccess:
    file_name: str
    public_url: str
    byte_size: int


@dataclass(frozen=True, slots=True)
class UploadRejected:
    reason: RejectionReason
    message: str


@dataclass(frozen=True, slots=True)
class UploadFailed:
    kind: FailureKind
    message: str
    status: str | None = None


UploadOutcome = UploadSuccess | UploadRejected | UploadFailed
