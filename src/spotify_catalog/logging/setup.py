"""Logging configuration for applications embedding the client."""

import logging
import sys

from spotify_catalog.logging.formatter import JSONLogFormatter

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", fmt: str = "json", service: str = "spotify-catalog") -> None:
    """Install a single stdout handler on the root logger.

    *fmt* is ``"json"`` for one JSON object per line, or ``"text"``.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    if fmt == "json":
        handler.setFormatter(JSONLogFormatter(service=service))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)
