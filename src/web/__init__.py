"""HTTP adapter for park voting."""

from web.app import create_app
from web.logging_setup import configure_logging

__all__ = ["configure_logging", "create_app"]
