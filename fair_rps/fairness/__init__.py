"""Fairness proof - random source and HMAC commit-reveal."""

from .commitment import Commitment, commit, compute_digest, verify, verify_reveal
from .entropy import RandomSource, SystemRandomSource

__all__ = [
    "Commitment",
    "commit",
    "compute_digest",
    "verify",
    "verify_reveal",
    "RandomSource",
    "SystemRandomSource",
]
