"""Structured logging: JSON formatter and setup."""

from spotify_catalog.logging.formatter import JSONLogFormatter
from spotify_catalog.logging.setup import configure_logging

__all__ = ["JSONLogFormatter", "configure_logging"]
