# hoptrace/config/settings.py

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    app_name: str = "hoptrace"
    version: str = "0.1.0"

    # --- Identity (usually injected by the orchestrator's downward API) ---
    node_name: str = ""
    pod_name: str = ""

    # --- Listener ---
    port: int = Field(8080, ge=0, le=65535)
    ip_mode: str = ""

    # --- Downstream ---
    call_service: str = ""
    downstream_timeout_seconds: float = Field(5.0, gt=0)
    trace_deadline_seconds: float = Field(6.0, gt=0)

    # --- Observability ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @property
    def has_downstream(self) -> bool:
        return bool(self.call_service.strip())


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
