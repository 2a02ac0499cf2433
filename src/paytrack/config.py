"""Runtime settings, read from the environment and ``.env``."""
from __future__ import annotations
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATA_DIR: str = "data"
    DATABASE_URL: str | None = None

    DEFAULT_HOURLY_RATE: float = 100.0
    DEFAULT_OT_RATE: float = 150.0

    CURRENCY_SYMBOL: str = "฿"
    API_URL: str = "http://127.0.0.1:8000"
    LOG_LEVEL: str = "INFO"
    EXPORT_SCALE: int = 2

    @property
    def data_dir(self) -> Path:
        return Path(self.DATA_DIR)

    @property
    def db_path(self) -> Path:
        return self.data_dir / "paytrack.db"

    @property
    def database_url(self) -> str:
        return self.DATABASE_URL or f"sqlite:///{self.db_path.as_posix()}"


settings = Settings()
