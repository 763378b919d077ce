"""Fair N-way rock-paper-scissors with an HMAC-committed computer opponent."""

__version__ = "0.1.0"
