"""Agent configuration."""

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://httpbin.org/post"
DEFAULT_TIMEOUT = 10.0


class AgentConfig(BaseModel):
    """Where and how an agent sends notifications.

    The default endpoint is a public echo service, useful for manual
    testing only.
    """

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(default=DEFAULT_ENDPOINT, min_length=1)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)


def load_config_from_env() -> AgentConfig:
    """Build an AgentConfig from ``SOVEREIGN_AGENT_*`` environment variables.

    Raises:
        ConfigError: A variable is set to an invalid value
    """
    endpoint = os.environ.get("SOVEREIGN_AGENT_ENDPOINT", DEFAULT_ENDPOINT)
    timeout = os.environ.get("SOVEREIGN_AGENT_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        config = AgentConfig(endpoint=endpoint, timeout=timeout)
    except ValidationError as e:
        raise ConfigError(f"Invalid agent configuration: {e}") from e
    logger.debug("Loaded config: endpoint=%s timeout=%s", config.endpoint, config.timeout)
    return config
