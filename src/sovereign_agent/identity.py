"""Locally minted agent identities."""

import logging
import secrets

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DID_PREFIX = "did:example:"


class Identity(BaseModel):
    """An agent identifier plus its public-key string.

    Attributes:
        id: ``did:example:`` followed by 128 random bits in hex
        public_key: 256 random bits in hex
    """

    model_config = ConfigDict(frozen=True)

    id: str
    public_key: str

    def describe(self) -> list[str]:
        """Return the human-readable display lines for this identity."""
        return [f"DID: {self.id}", f"Public Key: {self.public_key}"]


class IdentityGenerator:
    """Mints identities from the operating system's CSPRNG."""

    def generate(self) -> Identity:
        """Return a new Identity with a fresh id and public key.

        Returns:
            Identity with a 128-bit random id and a 256-bit random public key
        """
        identity = Identity(
            id=f"{DID_PREFIX}{secrets.token_hex(16)}",
            public_key=secrets.token_hex(32),
        )
        logger.debug("Generated identity %s", identity.id)
        return identity
