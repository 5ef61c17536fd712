"""Sovereign Agent - a locally minted agent with storage and HTTP notification.

Example:
    >>> from sovereign_agent import Agent
    >>> agent = Agent()
    >>> agent.store_data("sample_data", "hello")
    >>> print(f"Created {agent.did}")
"""

from .agent import Agent
from .client import NotificationClient
from .config import AgentConfig, load_config_from_env
from .identity import Identity, IdentityGenerator
from .store import KeyValueStore
from .exceptions import (
    SovereignAgentError,
    GenerationError,
    StoreError,
    ConfigError,
    TransportError,
    TransportErrorKind,
    NotifyError,
)

__version__ = "0.1.0"

__all__ = [
    "Agent",
    "AgentConfig",
    "Identity",
    "IdentityGenerator",
    "KeyValueStore",
    "NotificationClient",
    "load_config_from_env",
    "SovereignAgentError",
    "GenerationError",
    "StoreError",
    "ConfigError",
    "TransportError",
    "TransportErrorKind",
    "NotifyError",
]
