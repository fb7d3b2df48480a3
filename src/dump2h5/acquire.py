"""Zero-copy access to the bytes of a dump file.

The dump is mapped with ``numpy.memmap`` as a private mapping: read-only
(``mode='r'``), or copy-on-write (``mode='c'``) when the caller needs to
byte-swap in place without touching the file on disk.

Usage:
    with acquire(path, writable=False) as raw:
        arr = raw.view(np.dtype('>f8'), (2, 3))
        ...
"""

import logging
from typing import Optional, Tuple

import numpy as np

from dump2h5.errors import DumpIOError

logger = logging.getLogger(__name__)


class RawBuffer:
    """A mapped dump file, valid until ``release()``.

    ``data`` is a flat ``uint8`` memmap over the whole file. ``release()``
    only drops the buffer's own reference; the file is unmapped once the
    last view of it is gone. Views handed out by ``view()``, or kept
    alive by a traceback, delay the unmap until they are collected.
    """

    def __init__(self, path: str, data: np.memmap):
        self.path = path
        self._data: Optional[np.memmap] = data

    @property
    def data(self) -> np.memmap:
        if self._data is None:
            raise DumpIOError(f'{self.path}: buffer already released')
        return self._data

    @property
    def nbytes(self) -> int:
        return self.data.nbytes

    @property
    def released(self) -> bool:
        return self._data is None

    def view(self, dtype, shape: Tuple[int, ...]) -> np.ndarray:
        """Reinterpret the mapped bytes as an array of ``dtype`` and ``shape``."""
        return self.data.view(dtype).reshape(shape)

    def release(self) -> None:
        if self._data is None:
            return
        # unmapped once the last reference goes
        self._data = None
        logger.debug('%s: mapping released', self.path)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False


def acquire(path: str, writable: bool = False) -> RawBuffer:
    """Map the whole of ``path`` into memory without copying it.

    Raises:
        DumpIOError: the file cannot be opened or mapped (an empty file
            cannot be mapped either).
    """
    mode = 'c' if writable else 'r'
    try:
        data = np.memmap(path, dtype=np.uint8, mode=mode)
    except (OSError, ValueError) as e:
        raise DumpIOError(f'{path}: mmap failed: {e}') from e
    logger.debug('%s: mapped %d bytes (mode=%s)', path, data.nbytes, mode)
    return RawBuffer(path, data)
