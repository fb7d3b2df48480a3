
import numpy as np
import pytest

from dump2h5.descriptor import Dimension
from dump2h5.errors import SizeMismatchError
from dump2h5.layout import compute_block_sizes, validate_and_resolve_size


def _dims(*sizes):
    return tuple(Dimension(size=s, unlimited=(s == -1)) for s in sizes)


@pytest.mark.parametrize('sizes', [
    (5,), (2, 3), (-1, 4), (4, 0, 3), (2, 3, 4, 5, 1, 2, 3),
])
def test_block_sizes_are_row_major_strides(sizes):
    blocks = compute_block_sizes(_dims(*sizes))
    r = len(sizes)
    assert blocks[r - 1] == 1
    for i in range(r - 1):
        assert blocks[i] == blocks[i + 1] * sizes[i + 1]


def test_block_sizes_match_numpy_strides():
    shape = (3, 4, 5)
    arr = np.zeros(shape, dtype='f8')
    blocks = compute_block_sizes(_dims(*shape))
    assert [s // arr.itemsize for s in arr.strides] == blocks


def test_fixed_size_exact_match():
    dims = _dims(2, 3)
    out = validate_and_resolve_size(dims, compute_block_sizes(dims), 8, 48)
    assert [d.size for d in out] == [2, 3]


def test_unlimited_first_dimension_resolves():
    dims = _dims(-1, 4)
    out = validate_and_resolve_size(dims, compute_block_sizes(dims), 4, 320)
    assert out[0].size == 20
    assert out[0].unlimited
    assert out[1].size == 4


def test_unlimited_rejects_partial_block():
    dims = _dims(-1, 4)
    with pytest.raises(SizeMismatchError, match='multiple of 16'):
        validate_and_resolve_size(dims, compute_block_sizes(dims), 4, 324)


def test_fixed_size_mismatch():
    dims = _dims(2, 3)
    with pytest.raises(SizeMismatchError, match='Expected size 48, but 47 found'):
        validate_and_resolve_size(dims, compute_block_sizes(dims), 8, 47)


def test_unlimited_with_zero_block():
    dims = _dims(-1, 0)
    blocks = compute_block_sizes(dims)
    assert validate_and_resolve_size(dims, blocks, 8, 0)[0].size == 0
    with pytest.raises(SizeMismatchError):
        validate_and_resolve_size(dims, blocks, 8, 8)


def test_zero_bytes_is_valid():
    for sizes in [(0, 3), (-1, 3)]:
        dims = _dims(*sizes)
        out = validate_and_resolve_size(dims, compute_block_sizes(dims), 4, 0)
        assert out[0].size == 0
