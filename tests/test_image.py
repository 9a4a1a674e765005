import pytest

from seafloor.image import Image

IM1_SX = 42
IM1_SY = 42


def _gradient(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_new_image_layout():
    img = Image(IM1_SX, IM1_SY, 0)
    assert img.bits_per_pixel == 32
    assert img.size_line == IM1_SX * 4
    assert len(img.data) == IM1_SX * 4 * IM1_SY


def test_new_image_is_black():
    img = Image(3, 2)
    assert all(value == 0 for row in img.rows() for value in row)


@pytest.mark.parametrize("endian", [0, 1])
@pytest.mark.parametrize("kind", [1, 2])
def test_fill_with_color_map(endian, kind):
    img = Image(IM1_SX, IM1_SY, endian)
    for y in range(IM1_SY):
        for x in range(IM1_SX):
            img.put_pixel(x, y, _gradient(x, y, IM1_SX, IM1_SY, kind))
    for y, row in enumerate(img.rows()):
        assert row == [_gradient(x, y, IM1_SX, IM1_SY, kind) for x in range(IM1_SX)]


def test_little_endian_byte_layout():
    img = Image(2, 1, 0)
    img.put_pixel(0, 0, 0x11223344)
    assert bytes(img.data[0:4]) == bytes([0x44, 0x33, 0x22, 0x11])


def test_big_endian_byte_layout():
    img = Image(2, 1, 1)
    img.put_pixel(1, 0, 0x11223344)
    assert bytes(img.data[4:8]) == bytes([0x11, 0x22, 0x33, 0x44])
    assert img.get_pixel(0, 0) == 0


def test_negative_color_truncated_to_32_bits():
    img = Image(1, 1)
    img.put_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


def test_rows_shape():
    img = Image(5, 3)
    rows = list(img.rows())
    assert len(rows) == 3
    assert all(len(row) == 5 for row in rows)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_range_pixel(x, y):
    img = Image(4, 3)
    with pytest.raises(IndexError):
        img.put_pixel(x, y, 1)
    with pytest.raises(IndexError):
        img.get_pixel(x, y)


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-2, 3)])
def test_invalid_size(width, height):
    with pytest.raises(ValueError):
        Image(width, height)


def test_invalid_endian():
    with pytest.raises(ValueError):
        Image(2, 2, 3)