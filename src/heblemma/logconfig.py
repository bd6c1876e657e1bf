"""Process-wide logging setup."""

from __future__ import annotations

import logging

_NOISY_LOGGERS = ("stanza", "httpx", "urllib3")


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Silence noisy libraries
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
