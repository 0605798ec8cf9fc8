import os
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from binance_agent.core.interfaces import IDialer
from binance_agent.models import SocketConnectionOptions
from binance_agent.services.binance_feed import BINANCE_URL
from binance_agent.services.dialer import WebSocketDialer


def get_env_file() -> str:
    """Determine which .env file to load based on APP_ENV."""
    app_env = os.getenv("APP_ENV", "").lower()
    if app_env == "local":
        return ".env.local"
    elif app_env == "prod":
        return ".env.prod"
    return ".env"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=get_env_file(), extra="ignore")

    # Trading pair, e.g. "btcusdt"
    symbol: str = "btcusdt"

    binance_url: str = BINANCE_URL
    stream_scheme: str = "wss"

    max_retries: int = Field(default=5, ge=0)
    back_off_seconds: float = Field(default=5.0, ge=0)
    handshake_timeout_seconds: float = Field(default=10.0, gt=0)

    log_level: str = "INFO"
    json_logs: bool = True

    @field_validator("symbol")
    @classmethod
    def _lower_symbol(cls, value: str) -> str:
        return value.strip().lower()

    def socket_options(self, dialer: Optional[IDialer] = None) -> SocketConnectionOptions:
        return SocketConnectionOptions(
            max_retries=self.max_retries,
            back_off_seconds=self.back_off_seconds,
            dialer=dialer or WebSocketDialer(handshake_timeout=self.handshake_timeout_seconds),
        )
