"""Entry point of the src package. Allows ``python -m src``."""

from src.api.main import run

run()
