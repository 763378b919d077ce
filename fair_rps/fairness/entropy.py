"""Random source used for opponent moves and commitment keys."""

import logging
import secrets
from typing import Protocol

from ..errors import EntropyError

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Capability the fairness layer draws randomness from."""

    def token_bytes(self, num_bytes: int) -> bytes:
        """Return num_bytes of secret-strength random bytes."""
        ...

    def randbelow(self, upper: int) -> int:
        """Return an unbiased integer in [0, upper)."""
        ...


class SystemRandomSource:
    """Random source backed by the operating system CSPRNG."""

    def token_bytes(self, num_bytes: int) -> bytes:
        try:
            return secrets.token_bytes(num_bytes)
        except (OSError, NotImplementedError) as exc:
            logger.error("Secure random source failed: %s", exc)
            raise EntropyError(f"Secure random source unavailable: {exc}") from exc

    def randbelow(self, upper: int) -> int:
        try:
            return secrets.randbelow(upper)
        except (OSError, NotImplementedError) as exc:
            logger.error("Secure random source failed: %s", exc)
            raise EntropyError(f"Secure random source unavailable: {exc}") from exc
