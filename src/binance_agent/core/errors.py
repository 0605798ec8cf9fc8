class AgentError(Exception):
    """Base class for errors raised by the agent SDK."""


class ConnectionFailed(AgentError):
    """The dial phase exhausted its retry budget."""

    def __init__(self, url: str, attempts: int):
        super().__init__(f"failed to establish a connection to {url} after {attempts} attempt(s)")
        self.url = url
        self.attempts = attempts


class DecodeError(AgentError):
    """A single frame could not be decoded into a typed record."""

    def __init__(self, kind: str, detail: str):
        super().__init__(f"error unmarshalling {kind}: {detail}")
        self.kind = kind
        self.detail = detail


class StrategyError(AgentError):
    """Raised by a strategy when it cannot accept a new order."""


class ChannelClosedError(AgentError):
    """Write attempted on a channel that has already been closed."""


class TransportClosed(AgentError):
    """The transport or feed was shut down before a connection was made."""

    def __init__(self, url: str):
        super().__init__(f"transport for {url} was closed")
        self.url = url
