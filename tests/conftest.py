import os
from contextlib import contextmanager
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["AUTO_CREATE_TABLES"] = "true"
os.environ["FTP_HOST"] = "ftp.example.com"
os.environ["FTP_USERNAME"] = "catalog"
os.environ["FTP_PASSWORD"] = "secret"
os.environ["FTP_UPLOAD_PATH"] = "/www/uploads"
os.environ["FTP_PUBLIC_PATH"] = "static/uploads"

import app.models
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.main import create_app
from app.routers.deps import get_uploader
from app.services.uploads import FtpConfig, ImageUploader


class FakeFtpClient:
    """Stands in for FtpClient and records every session and transfer."""

    def __init__(self) -> None:
        self.sessions_opened = 0
        self.sessions_closed = 0
        self.transfers: list[tuple[str, bytes]] = []
        self.connect_error: Exception | None = None
        self.transfer_error: Exception | None = None

    @contextmanager
    def session(self):
        self.sessions_opened += 1
        try:
            if self.connect_error is not None:
                raise self.connect_error
            yield self
        finally:
            self.sessions_closed += 1

    def transfer(self, session, stream, remote_path: str) -> str:
        if self.transfer_error is not None:
            raise self.transfer_error
        self.transfers.append((remote_path, stream.read()))
        return "226 Transfer complete"


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
    path = Path("test.db")
    if path.exists():
        path.unlink()


@pytest.fixture()
def fake_ftp() -> FakeFtpClient:
    return FakeFtpClient()


@pytest.fixture()
def ftp_config() -> FtpConfig:
    return FtpConfig(host="ftp.example.com", upload_path="/www/uploads", public_path="static/uploads")


@pytest.fixture()
def uploader(ftp_config, fake_ftp) -> ImageUploader:
    return ImageUploader(ftp_config, client=fake_ftp)


@pytest.fixture()
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client(uploader):
    app = create_app()
    app.dependency_overrides[get_uploader] = lambda: uploader
    with TestClient(app) as test_client:
        yield test_client
