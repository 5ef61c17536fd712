"""Typed exceptions for the sovereign agent."""

from enum import Enum


class SovereignAgentError(Exception):
    """Base exception for the sovereign agent."""


class GenerationError(SovereignAgentError):
    """Identity generation failed. Not raised by the current generator."""


class StoreError(SovereignAgentError):
    """Key/value store operation failed. Not raised by the in-memory store."""


class ConfigError(SovereignAgentError):
    """Invalid configuration value."""


class TransportErrorKind(str, Enum):
    """Why an outbound request failed."""

    CONNECT = "connect"
    TIMEOUT = "timeout"
    STATUS = "status"
    DECODE = "decode"


class TransportError(SovereignAgentError):
    """Outbound HTTP request failed.

    Attributes:
        kind: Failure category
        status_code: HTTP status for ``status`` failures, otherwise None
        body: Response body for ``status`` failures, otherwise None
    """

    def __init__(
        self,
        message: str,
        kind: TransportErrorKind,
        status_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.body = body


class NotifyError(SovereignAgentError):
    """Agent notification failed.

    Attributes:
        transport_error: The underlying TransportError
    """

    def __init__(self, transport_error: TransportError):
        super().__init__(f"Notification failed: {transport_error}")
        self.transport_error = transport_error

    @property
    def kind(self) -> TransportErrorKind:
        return self.transport_error.kind

    @property
    def status_code(self) -> int | None:
        return self.transport_error.status_code
