"""Application settings loaded from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wallet_splits.engine.ledger_builder import OverpaymentPolicy


class Settings(BaseSettings):
    """Runtime settings for API, CLI and the settlement engine."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    database_url: str = Field(
        default="sqlite+pysqlite:///./wallet_splits.db",
        alias="DATABASE_URL",
    )
    overpayment_policy: OverpaymentPolicy = Field(
        default=OverpaymentPolicy.REJECT,
        alias="OVERPAYMENT_POLICY",
    )
    share_sum_tolerance_minor: int = Field(
        default=1,
        alias="SHARE_SUM_TOLERANCE_MINOR",
        ge=0,
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance for the current process."""

    return Settings()
