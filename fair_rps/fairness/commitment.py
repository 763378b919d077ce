"""HMAC commit-reveal for the computer's move.

The computer picks its move and publishes HMAC-SHA256(key, move) before
the player chooses. After the round it reveals the key, and anyone can
recompute the HMAC to confirm the move was fixed in advance.
"""

import hashlib
import hmac
import logging
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field

from .entropy import RandomSource, SystemRandomSource

if TYPE_CHECKING:
    from ..engine.moves import MoveSet

logger = logging.getLogger(__name__)

KEY_BYTES = 32  # 256-bit key


class Commitment(BaseModel):
    """A hidden, binding declaration of the computer's move."""

    model_config = ConfigDict(frozen=True)

    # Kept out of repr so the key and move never show up in logs early.
    secret_key: str = Field(repr=False)
    committed_move: str = Field(repr=False)
    digest: str


def generate_key(source: Optional[RandomSource] = None) -> str:
    """Generate a fresh hex-encoded 256-bit key."""
    source = source or SystemRandomSource()
    return source.token_bytes(KEY_BYTES).hex()


def compute_digest(key: str, move: str) -> str:
    """Compute the hex HMAC-SHA256 of a move under a key.

    The key is used as text: the hex string's own bytes are the HMAC key,
    so the displayed key can be pasted into any HMAC tool as-is.
    """
    return hmac.new(key.encode("utf-8"), move.encode("utf-8"), hashlib.sha256).hexdigest()


def commit(moves: "MoveSet", source: Optional[RandomSource] = None) -> Commitment:
    """Pick a move uniformly at random and commit to it.

    Args:
        moves: Moves to pick from.
        source: Randomness to use; defaults to the system CSPRNG.

    Returns:
        A new commitment. Never reuse one across rounds.

    Raises:
        EntropyError: If the random source fails.
    """
    source = source or SystemRandomSource()
    move = moves[source.randbelow(len(moves))]
    key = generate_key(source)
    commitment = Commitment(
        secret_key=key,
        committed_move=move,
        digest=compute_digest(key, move),
    )
    logger.debug("Committed to a move, digest %s", commitment.digest)
    return commitment


def verify_reveal(digest: str, revealed_key: str, move: str) -> bool:
    """Check a published digest against a revealed key and move."""
    return hmac.compare_digest(digest, compute_digest(revealed_key, move))


def verify(commitment: Commitment, revealed_key: str) -> bool:
    """Check that revealed_key opens the commitment.

    Args:
        commitment: The commitment published before the round.
        revealed_key: Key disclosed after the round.

    Returns:
        True if HMAC(revealed_key, committed_move) equals the digest.
    """
    return verify_reveal(commitment.digest, revealed_key, commitment.committed_move)
