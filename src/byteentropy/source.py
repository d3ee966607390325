from __future__ import annotations

import errno
import logging
import os
from typing import BinaryIO

from .config import Settings, load_settings
from .entropy import shannon_entropy
from .errors import OpenError, ReadError, display_path

LOG = logging.getLogger(__name__)

PathArg = int | str | bytes | os.PathLike


class FileEntropySource:
    """A file whose entropy is computed from its open handle.

    The handle is read from its current position to the end on every call to
    :meth:`compute_entropy` and is never re-seeked implicitly, so a second call
    returns the entropy of an empty tail (0.0). Call :meth:`rewind` first to
    read the whole file again.

    Not safe for concurrent use from several threads.
    """

    def __init__(self, path: PathArg, *, settings: Settings | None = None):
        self.path = path
        self._settings = settings or load_settings()
        try:
            self._file: BinaryIO = open(path, "rb")
        except OSError as exc:
            raise OpenError(path, exc) from exc
        LOG.debug("opened %s", display_path(path))

    def __enter__(self) -> FileEntropySource:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._file.closed

    def close(self) -> None:
        if self._file.closed:
            return
        self._file.close()
        LOG.debug("closed %s", display_path(self.path))

    def _ensure_open(self) -> None:
        if self._file.closed:
            exc = OSError(errno.EBADF, "I/O operation on closed file")
            raise ReadError(self.path, exc) from exc

    def _read_remaining(self) -> bytearray:
        buffer = bytearray()
        chunk_size = self._settings.read_chunk_size
        while True:
            chunk = self._file.read(chunk_size)
            if not chunk:
                break
            buffer += chunk
        return buffer

    def compute_entropy(self) -> float:
        self._ensure_open()
        try:
            data = self._read_remaining()
        except OSError as exc:
            raise ReadError(self.path, exc) from exc
        LOG.debug("read %d bytes from %s", len(data), display_path(self.path))
        return shannon_entropy(data)

    def rewind(self) -> None:
        self._ensure_open()
        try:
            self._file.seek(0)
        except OSError as exc:
            raise ReadError(self.path, exc) from exc
        LOG.debug("rewound %s", display_path(self.path))


def file_entropy(path: PathArg, *, settings: Settings | None = None) -> float:
    with FileEntropySource(path, settings=settings) as source:
        return source.compute_entropy()
