"""Configuration surface for the Softline gateway client."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GatewayConfig(BaseSettings):
    """Gateway connection settings.

    Read from ``SOFTLINE_*`` environment variables or a ``.env`` file.
    Instances are frozen, so one config can be shared by concurrent callers.
    """

    # Base URI of the gateway, e.g. https://pay.softline.example
    uri: str
    login: str
    password: SecretStr

    # Seconds; 0 disables the limit
    idle_conn_timeout_sec: int = 90
    request_timeout_sec: int = 30

    model_config = SettingsConfigDict(
        env_prefix="SOFTLINE_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    @field_validator("idle_conn_timeout_sec", "request_timeout_sec")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v < 0:
            raise ValueError("timeout must not be negative")
        return v

    @property
    def request_timeout(self) -> float | None:
        return float(self.request_timeout_sec) if self.request_timeout_sec else None

    @property
    def idle_conn_timeout(self) -> float | None:
        return float(self.idle_conn_timeout_sec) if self.idle_conn_timeout_sec else None


@lru_cache
def load_config(env_file: str | None = None) -> GatewayConfig:
    """Load GatewayConfig once per process."""
    env_path = Path(env_file) if env_file else None
    if env_path is None:
        return GatewayConfig()
    return GatewayConfig(_env_file=env_path)
