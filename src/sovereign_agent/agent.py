"""Agent owning an identity, a private store and a notification channel."""

import logging
from typing import Any

from .client import NotificationClient
from .config import AgentConfig
from .exceptions import NotifyError, TransportError
from .identity import Identity, IdentityGenerator
from .store import KeyValueStore

logger = logging.getLogger(__name__)


class Agent:
    """A locally minted agent with in-memory storage.

    The agent owns exactly one Identity and one KeyValueStore. Store
    operations are synchronous and thread-safe; ``notify`` posts a single
    JSON message to the configured endpoint and never retries.

    Example:
        >>> with Agent() as agent:
        ...     agent.store_data("sample_data", "hello")
        ...     agent.retrieve_data("sample_data")
        'hello'
    """

    def __init__(
        self,
        config: AgentConfig | None = None,
        client: NotificationClient | None = None,
    ):
        """Initialize the agent.

        Args:
            config: Notification settings, defaults to AgentConfig()
            client: Notification client; one is created (and owned) if omitted
        """
        self._config = config if config is not None else AgentConfig()
        self._owns_client = client is None
        self._client = client if client is not None else NotificationClient(
            timeout=self._config.timeout
        )
        self._identity = IdentityGenerator().generate()
        self._store = KeyValueStore()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - close an owned client."""
        self.close()

    def close(self):
        """Close the notification client if this agent created it."""
        if self._owns_client:
            self._client.close()

    @property
    def identity(self) -> Identity:
        return self._identity

    @property
    def did(self) -> str:
        return self._identity.id

    @property
    def config(self) -> AgentConfig:
        return self._config

    # -------------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------------

    def store_data(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, overwriting any previous value."""
        self._store.put(key, value)
        logger.info("Data stored successfully: (%s, %s)", key, value)

    def retrieve_data(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None."""
        return self._store.get(key)

    # -------------------------------------------------------------------------
    # Notification
    # -------------------------------------------------------------------------

    def build_payload(self, message: str) -> dict[str, Any]:
        return {"from": self._identity.id, "message": message}

    def notify(self, message: str) -> str:
        """Send ``message`` to the configured endpoint.

        Args:
            message: Text to deliver

        Returns:
            The remote response body

        Raises:
            NotifyError: The request failed; ``transport_error`` has details
        """
        try:
            body = self._client.send(self._config.endpoint, self.build_payload(message))
        except TransportError as e:
            logger.warning("Failed to notify %s: %s", self._config.endpoint, e)
            raise NotifyError(e) from e
        logger.info("Message sent: %s", message)
        return body

    async def anotify(self, message: str) -> str:
        """Async variant of :meth:`notify` with the same contract."""
        try:
            body = await self._client.asend(
                self._config.endpoint, self.build_payload(message)
            )
        except TransportError as e:
            logger.warning("Failed to notify %s: %s", self._config.endpoint, e)
            raise NotifyError(e) from e
        logger.info("Message sent: %s", message)
        return body
