"""
BOL Worker Configuration Management
"""
from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List
from functools import lru_cache


class ServiceSettings(BaseSettings):
    """P4 Warehouse (source system) settings loaded from environment variables."""

    base_url: str = Field(default="", alias="P4W_BASE_URL")
    api_key: str = Field(default="", alias="P4W_API_KEY")
    timeout_seconds: float = Field(default=30.0, gt=0, alias="P4W_TIMEOUT_SECONDS")

    # Polling
    max_records_per_check: int = Field(default=100, ge=1, alias="P4W_MAX_RECORDS_PER_CHECK")
    check_interval_seconds: float = Field(default=30, gt=0, alias="P4W_CHECK_INTERVAL_SECONDS")
    record_delay_ms: int = Field(default=100, ge=0, alias="P4W_RECORD_DELAY_MS")

    # Eligibility filter
    carrier_name: str = Field(default="R&L CARRIERS", alias="P4W_CARRIER_NAME")
    pick_ticket_states: List[str] = Field(
        default=["ReadyToPick", "Waved"],
        min_length=1,
        alias="P4W_PICK_TICKET_STATES"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
        frozen = True

    @property
    def record_delay_seconds(self) -> float:
        return self.record_delay_ms / 1000


class CarrierSettings(BaseSettings):
    """R&L Carriers booking API settings."""

    base_url: str = Field(default="", alias="RL_BASE_URL")
    api_key: str = Field(default="", alias="RL_API_KEY")
    endpoint: str = Field(default="/BillOfLading", alias="RL_ENDPOINT")
    timeout_seconds: float = Field(default=30.0, gt=0, alias="RL_TIMEOUT_SECONDS")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
        frozen = True


class AppSettings(BaseSettings):
    """Process-level settings."""

    app_name: str = Field(default="RandL-BOL-Integration", alias="APP_NAME")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
        frozen = True


@lru_cache()
def get_service_settings() -> ServiceSettings:
    """Get cached source system settings."""
    return ServiceSettings()


@lru_cache()
def get_carrier_settings() -> CarrierSettings:
    """Get cached carrier settings."""
    return CarrierSettings()


@lru_cache()
def get_app_settings() -> AppSettings:
    """Get cached process settings."""
    return AppSettings()
