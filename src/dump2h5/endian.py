"""In-place byte-order conversion of fixed-width elements."""

import logging
import sys

import numpy as np

from dump2h5.config import DUMP_BYTE_ORDER

logger = logging.getLogger(__name__)

_SWAPPABLE_SIZES = (2, 4, 8)


def host_differs_from_dump() -> bool:
    """True when the host byte order is not the big-endian dump order."""
    host = '<' if sys.byteorder == 'little' else '>'
    return host != DUMP_BYTE_ORDER


def swap_in_place(data: np.ndarray, element_size: int) -> None:
    """Reverse the bytes of every whole ``element_size`` element of ``data``.

    ``data`` must be a writable, contiguous ``uint8`` array. A trailing
    partial element is left untouched.

    Raises:
        ValueError: ``element_size`` is not 2, 4 or 8.
    """
    if element_size not in _SWAPPABLE_SIZES:
        raise ValueError(f'cannot byte-swap elements of size {element_size}')
    count = data.size // element_size
    if count == 0:
        return
    whole = data[:count * element_size]
    whole.view(np.dtype(f'u{element_size}')).byteswap(inplace=True)
    logger.debug('byte-swapped %d element(s) of %d bytes', count, element_size)
