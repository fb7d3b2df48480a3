import numpy as np
import pytest

from dump2h5.acquire import acquire
from dump2h5.errors import DumpIOError


def test_acquire_read_only_view(tmp_path):
    values = np.arange(6, dtype='>f8')
    path = tmp_path / 'x'
    path.write_bytes(values.tobytes())
    with acquire(str(path)) as raw:
        assert raw.nbytes == 48
        assert not raw.data.flags.writeable
        arr = raw.view(np.dtype('>f8'), (2, 3))
        np.testing.assert_array_equal(arr, values.reshape(2, 3))
        del arr
    assert raw.released


def test_acquire_writable_is_private(tmp_path):
    path = tmp_path / 'x'
    path.write_bytes(bytes(range(8)))
    with acquire(str(path), writable=True) as raw:
        raw.data[0] = 255
        assert raw.data[0] == 255
    # copy-on-write mapping leaves the file alone
    assert path.read_bytes() == bytes(range(8))


def test_release_on_error_path(tmp_path):
    path = tmp_path / 'x'
    path.write_bytes(b'\0' * 8)
    with pytest.raises(RuntimeError):
        with acquire(str(path)) as raw:
            raise RuntimeError('boom')
    assert raw.released
    with pytest.raises(DumpIOError):
        raw.data


def test_acquire_missing_file(tmp_path):
    with pytest.raises(DumpIOError, match='mmap failed'):
        acquire(str(tmp_path / 'missing'))


def test_acquire_empty_file(tmp_path):
    path = tmp_path / 'empty'
    path.write_bytes(b'')
    with pytest.raises(DumpIOError):
        acquire(str(path))
