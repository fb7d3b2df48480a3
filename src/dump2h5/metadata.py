"""Readers for the .dims and .dtype sidecar files of a dump.

A .dims file holds up to ``MAX_RANK`` lines of the form
``<size> [name]``. Only the first size may be ``-1`` (unlimited). Lines
past ``MAX_RANK`` dimensions are ignored. A .dtype file holds a single
line, ``float32`` or ``float64``.
"""

import logging
import re
from typing import List, Tuple

from dump2h5.config import MAX_RANK, MAX_DIM_NAME_LENGTH, UNLIMITED
from dump2h5.descriptor import Dimension, ElementType
from dump2h5.errors import MetadataError

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r'^[+-]?\d+$')


def _parse_dim_line(path: str, line: str) -> Dimension:
    parts = line.split(None, 1)
    token = parts[0]
    if not _INT_RE.match(token):
        raise MetadataError(f'{path}: Invalid dimension')
    size = int(token)
    name = parts[1].strip() if len(parts) > 1 else ''
    if len(name) > MAX_DIM_NAME_LENGTH:
        raise MetadataError(
            f'{path}: Dimension name longer than {MAX_DIM_NAME_LENGTH} characters'
        )
    return Dimension(size=size, name=name or None, unlimited=(size == UNLIMITED))


def parse_shape(path: str) -> Tuple[Dimension, ...]:
    """Read the dimensions listed in a .dims file.

    Returns the dimensions in file order. The result may be empty; the
    caller decides whether a rank of zero is acceptable.

    Raises:
        MetadataError: the file cannot be read, a size is not an integer,
            a name is too long, or a size is out of range.
    """
    dims: List[Dimension] = []
    try:
        with open(path, 'r') as f:
            for line in f:
                if len(dims) >= MAX_RANK:
                    break
                if not line.strip():
                    continue
                dims.append(_parse_dim_line(path, line))
    except (OSError, UnicodeDecodeError) as e:
        raise MetadataError(f'{path}: {e}') from e

    for i, dim in enumerate(dims):
        if dim.size == UNLIMITED and i != 0:
            raise MetadataError(f'{path}: Only the first dimension can be unlimited')
        if dim.size < UNLIMITED:
            raise MetadataError(f'{path}: Invalid dimension size {dim.size}')

    logger.debug('%s: read %d dimension(s): %s', path, len(dims), [d.size for d in dims])
    return tuple(dims)


def parse_element_type(path: str) -> ElementType:
    """Read the element type named on the first line of a .dtype file."""
    try:
        with open(path, 'r') as f:
            first = f.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise MetadataError(f'{path}: {e}') from e
    if not first:
        raise MetadataError(f'{path}: File is empty')

    value = first.strip()
    try:
        return ElementType(value)
    except ValueError:
        raise MetadataError(f'{path}: Unknown dtype "{value}"') from None
