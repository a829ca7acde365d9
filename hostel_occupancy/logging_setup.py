"""One-time logging configuration for the API process and the CLI."""

from __future__ import annotations

import logging

from hostel_occupancy.config import LoggingConfig

_configured = False


def configure_logging(config: LoggingConfig) -> None:
    global _configured
    if _configured:
        return
    logging.basicConfig(level=config.level.upper(), format=config.format)
    # SQL echo is controlled separately; keep engine chatter out of INFO logs
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    _configured = True
