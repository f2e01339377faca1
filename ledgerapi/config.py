import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file="ledgerapi/.env",
        env_file_encoding="utf-8",
        extra="allow",
    )
    # Application
    APP_NAME: str = "Ledger Summary API"
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./ledger.sqlite"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    # Upstream transaction API
    TRANSACTION_API_BASE_URL: str = "http://localhost:3001"
    TRANSACTION_API_TIMEOUT_SECONDS: float = 10.0
    TRANSACTION_API_MAX_PAGES: int = 100  # 페이지네이션 상한
    # 업스트림 장애 시 샘플 데이터로 대체 (개발 환경용)
    TRANSACTION_SOURCE_FALLBACK_ENABLED: bool = True

    # Sync
    SYNC_INTERVAL_SECONDS: int = 60
    SYNC_INITIAL_LOOKBACK_HOURS: int = 24
    SYNC_SCHEDULER_ENABLED: bool = True


class DevelopmentSettings(Settings):
    DEBUG: bool = True


class ProductionSettings(Settings):
    DEBUG: bool = False
    TRANSACTION_SOURCE_FALLBACK_ENABLED: bool = False


ENVIRONMENTS: dict[str, type[Settings]] = {
    "development": DevelopmentSettings,
    "production": ProductionSettings,
}


@lru_cache
def get_settings() -> Settings:
    """Return settings instance based on ENVIRONMENT variable."""

    env = os.getenv("ENVIRONMENT", "development").lower()
    settings_cls = ENVIRONMENTS.get(env, Settings)
    return settings_cls()


settings = get_settings()
