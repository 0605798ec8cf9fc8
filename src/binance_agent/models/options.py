from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class SocketConnectionOptions(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    max_retries: int = Field(default=5, ge=0)
    back_off_seconds: float = Field(default=5.0, ge=0)
    # Object with ``async dial(url)``; the transport falls back to WebSocketDialer
    dialer: Optional[Any] = None


DEFAULT_SOCKET_OPTIONS = SocketConnectionOptions()
