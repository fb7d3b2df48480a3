"""Row-major layout arithmetic and dump size validation."""

import dataclasses
import logging
from typing import List, Sequence, Tuple

from dump2h5.config import UNLIMITED
from dump2h5.descriptor import Dimension
from dump2h5.errors import SizeMismatchError, AlignmentError

logger = logging.getLogger(__name__)


def compute_block_sizes(dims: Sequence[Dimension]) -> List[int]:
    """Number of elements spanned by a unit step along each dimension.

    The last dimension varies fastest (C order), so its block size is 1
    and ``block[i] = block[i + 1] * dims[i + 1].size``. The size of the
    first dimension never enters the result, which is what allows it to
    be unlimited.
    """
    rank = len(dims)
    assert rank >= 1, 'rank must be at least 1'
    blocks = [1] * rank
    for i in range(rank - 2, -1, -1):
        blocks[i] = blocks[i + 1] * dims[i + 1].size
    return blocks


def validate_and_resolve_size(dims: Sequence[Dimension], block_sizes: Sequence[int],
                              element_size: int, total_bytes: int) -> Tuple[Dimension, ...]:
    """Check a dump length against its dimensions.

    An unlimited first dimension is resolved to the number of whole
    blocks in the payload. A total of zero bytes is valid here; the
    caller is expected to skip writing such a dataset.

    Returns:
        the dimensions with the first one resolved to a concrete size.

    Raises:
        SizeMismatchError: length inconsistent with the declared shape.
        AlignmentError: length not a multiple of ``element_size``. Both
            size rules already imply alignment for integer block sizes,
            so this is a safety guard on the arithmetic.
    """
    first = dims[0]
    block_bytes = block_sizes[0] * element_size
    if first.size == UNLIMITED:
        if block_bytes == 0:
            # a later dimension is 0, so only an empty payload fits
            if total_bytes != 0:
                raise SizeMismatchError(f'Expected size 0, but {total_bytes} found')
            resolved_size = 0
        else:
            if total_bytes % block_bytes != 0:
                raise SizeMismatchError(
                    f'Expected size to be multiple of {block_bytes}, but {total_bytes} found'
                )
            resolved_size = total_bytes // block_bytes
        logger.debug('unlimited dimension resolved to %d', resolved_size)
        first = dataclasses.replace(first, size=resolved_size)
    else:
        expected = block_bytes * first.size
        if total_bytes != expected:
            raise SizeMismatchError(f'Expected size {expected}, but {total_bytes} found')

    if total_bytes % element_size != 0:
        raise AlignmentError(
            f'Expected size to be multiple of element size {element_size}, but {total_bytes} found'
        )
    return (first,) + tuple(dims[1:])
