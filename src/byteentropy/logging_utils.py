from __future__ import annotations

import logging

from .config import load_settings


def configure_logging(level: str | None = None) -> None:
    """Install a root handler and set the ``byteentropy`` logger level.

    The level comes from ``level``, else ``BYTEENTROPY_LOG_LEVEL``, else INFO.
    """
    chosen = getattr(logging, (level or load_settings().log_level).upper(), logging.INFO)
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s %(message)s")
    logging.getLogger("byteentropy").setLevel(chosen)
