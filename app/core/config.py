from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    app_name: str = "Catalog API"
    environment: Literal["dev", "test", "prod"] = "dev"
    debug: bool = False

    database_url: str = "sqlite:///./catalog.db"
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"])
    auto_create_tables: bool = True

    ftp_host: str = "localhost"
    ftp_port: int = 21
    ftp_username: str = ""
    ftp_password: str = ""
    ftp_upload_path: str = "/uploads"
    ftp_public_path: str = "uploads"
    ftp_connect_timeout: float = 60.0
    ftp_read_timeout: float = 60.0
    ftp_data_connect_timeout: float = 60.0
    ftp_data_read_timeout: float = 60.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
