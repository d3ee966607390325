from __future__ import annotations

import os


def display_path(path: int | str | bytes | os.PathLike) -> str:
    if isinstance(path, int):
        return f"<fd {path}>"
    return os.fsdecode(path)


class EntropyError(Exception):
    """Base class for failures surfaced by byteentropy."""

    prefix = "entropy error"

    def __init__(self, path: int | str | bytes | os.PathLike, cause: OSError):
        self.path = path
        self.cause = cause
        self.errno = cause.errno
        super().__init__(f"{self.prefix}: {display_path(path)}: {cause.strerror or cause}")


class OpenError(EntropyError):
    prefix = "file open error"


class ReadError(EntropyError):
    prefix = "file io error"
