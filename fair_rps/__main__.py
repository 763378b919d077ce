"""Allow ``python -m fair_rps``."""

from .main import run

run()
