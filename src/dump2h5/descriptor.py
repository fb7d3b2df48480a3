"""Shape and element-type description of one dump file."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from dump2h5.config import ELEMENT_TYPES, MAX_RANK, UNLIMITED, DUMP_BYTE_ORDER


class ElementType(Enum):
    """Element types accepted in a .dtype file."""

    FLOAT32 = 'float32'
    FLOAT64 = 'float64'

    @property
    def itemsize(self) -> int:
        return ELEMENT_TYPES[self.value]

    def dump_dtype(self) -> np.dtype:
        """numpy dtype of the on-disk (big-endian) encoding."""
        return np.dtype(f'{DUMP_BYTE_ORDER}f{self.itemsize}')

    def native_dtype(self) -> np.dtype:
        return np.dtype(f'=f{self.itemsize}')


@dataclass(frozen=True)
class Dimension:
    """One dimension of a dataset.

    ``size`` is the element count, or ``UNLIMITED`` (-1) before the
    extent has been inferred from the dump length. ``unlimited`` stays
    True after resolution so writers can still tell a streaming
    dimension apart from a fixed one.
    """

    size: int
    name: Optional[str] = None
    unlimited: bool = False


@dataclass(frozen=True)
class DatasetDescriptor:
    """Validated shape and element type of a dump.

    Attributes:
        dims: dimensions in C order, slowest-varying first.
        element_type: element encoding of the dump.
    """

    dims: Tuple[Dimension, ...]
    element_type: ElementType

    def __post_init__(self):
        if not 1 <= len(self.dims) <= MAX_RANK:
            raise ValueError(f'rank must be between 1 and {MAX_RANK}, got {len(self.dims)}')
        for i, dim in enumerate(self.dims):
            if dim.size == UNLIMITED and i != 0:
                raise ValueError('only the first dimension can be unlimited')
            if dim.size < UNLIMITED:
                raise ValueError(f'invalid dimension size {dim.size}')

    @property
    def rank(self) -> int:
        return len(self.dims)

    @property
    def shape(self) -> Tuple[int, ...]:
        return tuple(d.size for d in self.dims)

    @property
    def itemsize(self) -> int:
        return self.element_type.itemsize
