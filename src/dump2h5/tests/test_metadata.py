import pytest

from dump2h5.descriptor import ElementType
from dump2h5.errors import MetadataError
from dump2h5.metadata import parse_shape, parse_element_type


def _write(tmp_path, name, text):
    p = tmp_path / name
    p.write_text(text)
    return str(p)


def test_parse_shape_plain_sizes(tmp_path):
    dims = parse_shape(_write(tmp_path, 'a.dims', '2\n3\n'))
    assert [d.size for d in dims] == [2, 3]
    assert all(d.name is None for d in dims)
    assert not any(d.unlimited for d in dims)


def test_parse_shape_names_are_trimmed(tmp_path):
    dims = parse_shape(_write(tmp_path, 'a.dims', '-1   time  \n4\tlevel\n'))
    assert dims[0].size == -1 and dims[0].unlimited
    assert dims[0].name == 'time'
    assert dims[1].name == 'level'


def test_parse_shape_stops_at_max_rank(tmp_path):
    text = '\n'.join(['1'] * 9) + '\n'
    dims = parse_shape(_write(tmp_path, 'a.dims', text))
    assert len(dims) == 7


def test_parse_shape_empty_file_has_rank_zero(tmp_path):
    assert parse_shape(_write(tmp_path, 'a.dims', '')) == ()


def test_parse_shape_rejects_unlimited_on_later_line(tmp_path):
    with pytest.raises(MetadataError, match='Only the first dimension can be unlimited'):
        parse_shape(_write(tmp_path, 'a.dims', '3\n-1\n'))


def test_parse_shape_rejects_size_below_minus_one(tmp_path):
    with pytest.raises(MetadataError, match='Invalid dimension size -2'):
        parse_shape(_write(tmp_path, 'a.dims', '-2\n'))


def test_parse_shape_rejects_non_integer(tmp_path):
    with pytest.raises(MetadataError, match='Invalid dimension'):
        parse_shape(_write(tmp_path, 'a.dims', '2\nabc\n'))


def test_parse_shape_accepts_name_at_limit(tmp_path):
    name = 'x' * 512
    dims = parse_shape(_write(tmp_path, 'a.dims', '2 ' + name + '\n'))
    assert dims[0].name == name


def test_parse_shape_rejects_long_name(tmp_path):
    with pytest.raises(MetadataError):
        parse_shape(_write(tmp_path, 'a.dims', '2 ' + 'x' * 513 + '\n'))


def test_parse_shape_missing_file(tmp_path):
    with pytest.raises(MetadataError):
        parse_shape(str(tmp_path / 'missing.dims'))


@pytest.mark.parametrize('text,expected', [
    ('float32\n', ElementType.FLOAT32),
    ('  float64  \n', ElementType.FLOAT64),
])
def test_parse_element_type(tmp_path, text, expected):
    assert parse_element_type(_write(tmp_path, 'a.dtype', text)) is expected


def test_parse_element_type_rejects_int32(tmp_path):
    with pytest.raises(MetadataError, match='Unknown dtype "int32"'):
        parse_element_type(_write(tmp_path, 'a.dtype', 'int32\n'))


def test_parse_element_type_empty_or_missing(tmp_path):
    with pytest.raises(MetadataError):
        parse_element_type(_write(tmp_path, 'a.dtype', ''))
    with pytest.raises(MetadataError):
        parse_element_type(str(tmp_path / 'missing.dtype'))
