import ftplib
import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import BinaryIO

from app.services.uploads.types import FtpConfig

logger = logging.getLogger(__name__)


class RemoteConnectionError(Exception):
    """The FTP server could not be reached or refused the login."""


class RemoteTransferError(Exception):
    def __init__(self, status: str) -> None:
        self.status = status
        super().__init__(f"FTP transfer failed: {status}")


class TimedFTP(ftplib.FTP):
    """FTP session with a separate read timeout for data connections.

    ftplib opens data connections with ``self.timeout``; the control socket
    keeps whatever timeout it was given after connecting.
    """

    def __init__(self, data_read_timeout: float | None = None) -> None:
        super().__init__()
        self.data_read_timeout = data_read_timeout

    def ntransfercmd(self, cmd, rest=None):
        conn, size = super().ntransfercmd(cmd, rest)
        if self.data_read_timeout is not None:
            conn.settimeout(self.data_read_timeout)
        return conn, size


class FtpClient:
    def __init__(self, config: FtpConfig, ftp_factory: Callable[..., ftplib.FTP] = TimedFTP) -> None:
        self.config = config
        self._ftp_factory = ftp_factory

    @contextmanager
    def session(self) -> Iterator[ftplib.FTP]:
        config = self.config
        ftp = self._ftp_factory(data_read_timeout=config.data_read_timeout)
        try:
            try:
                ftp.connect(config.host, config.port, timeout=config.connect_timeout)
                ftp.sock.settimeout(config.read_timeout)
                ftp.timeout = config.data_connect_timeout
                ftp.login(config.username, config.password)
            except TimeoutError:
                raise
            except ftplib.all_errors as exc:
                raise RemoteConnectionError(f"Could not connect to {config.host}:{config.port}: {exc}") from exc
            logger.info("ftp_connected", extra={"host": config.host, "port": config.port})
            yield ftp
        finally:
            ftp.close()

    def transfer(self, ftp: ftplib.FTP, stream: BinaryIO, remote_path: str) -> str:
        try:
            reply = ftp.storbinary(f"STOR {remote_path}", stream)
        except (ftplib.error_reply, ftplib.error_temp, ftplib.error_perm, ftplib.error_proto) as exc:
            raise RemoteTransferError(str(exc)) from exc
        if not reply.startswith("2"):
            raise RemoteTransferError(reply)
        return reply
