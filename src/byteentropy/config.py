from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_READ_CHUNK_SIZE = 4 * 1024 * 1024


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    read_chunk_size: int = DEFAULT_READ_CHUNK_SIZE


def _positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}.")
    return value


def load_settings() -> Settings:
    log_level = os.getenv("BYTEENTROPY_LOG_LEVEL", "INFO").upper()
    read_chunk_size = _positive_int(
        "BYTEENTROPY_READ_CHUNK_SIZE",
        os.getenv("BYTEENTROPY_READ_CHUNK_SIZE", str(DEFAULT_READ_CHUNK_SIZE)),
    )
    return Settings(log_level=log_level, read_chunk_size=read_chunk_size)
