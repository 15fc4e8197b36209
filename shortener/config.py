"""Настройки сервиса сокращения ссылок."""

from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки из переменных окружения и файла `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # База данных: MONGO_URI имеет приоритет над DATABASE_URL.
    database_url: str = Field(
        default="sqlite:///./data/links.db",
        validation_alias=AliasChoices("mongo_uri", "database_url"),
        description="Строка подключения SQLAlchemy",
    )

    app_title: str = Field(default="URL Shortener")
    app_description: str = Field(default="Сервис для сокращения ссылок")
    app_version: str = Field(default="1.0.0")

    cors_origins: List[str] = Field(
        default=["*"],
        description="Источники, разрешенные для CORS",
    )

    host: str = Field(default="0.0.0.0", description="Адрес для запуска сервера")
    port: int = Field(default=8000, description="Порт сервера")

    log_level: str = Field(default="INFO", description="Уровень логирования")
    log_file: Optional[str] = Field(
        default=None,
        description="Файл для логов (по умолчанию только stdout)",
    )
    log_json: bool = Field(default=False, description="Логи в формате JSON")


def load_settings() -> Settings:
    """Загружает настройки из окружения."""
    return Settings()
