import pytest

from cubscene.image import Image, new_image

IM1_SX, IM1_SY = 42, 42
IM3_SX, IM3_SY = 242, 242


def _color_map(x, y, w, h, type_):
    if type_ == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("w, h", [(IM1_SX, IM1_SY), (IM3_SX, IM3_SY)])
def test_new_image_layout(w, h):
    img = new_image(w, h)
    assert img.bits_per_pixel == 32
    assert img.line_length == w * 4
    assert img.endian == 0
    assert len(img.data) == img.line_length * h
    assert not any(img.data)


@pytest.mark.parametrize(
    "w, h, type_", [(IM1_SX, IM1_SY, 1), (IM3_SX, IM3_SY, 1), (IM3_SX, IM3_SY, 2)]
)
def test_fill_and_read_back_color_map(w, h, type_):
    img = new_image(w, h)
    for y in range(h):
        for x in range(w):
            img.set_pixel(x, y, _color_map(x, y, w, h, type_))
    for y in range(0, h, 7):
        for x in range(0, w, 5):
            assert img.get_pixel(x, y) == _color_map(x, y, w, h, type_)


def test_little_endian_byte_layout():
    img = new_image(2, 2)
    img.set_pixel(1, 1, 0x112233)
    start = img.line_length + 4
    assert img.data[start:start + 4] == b"\x33\x22\x11\x00"


def test_big_endian_byte_layout():
    img = Image(2, 1, endian=1)
    img.set_pixel(0, 0, 0x112233)
    assert img.data[0:4] == b"\x00\x11\x22\x33"
    assert img.get_pixel(0, 0) == 0x112233


def test_negative_color_wraps_to_unsigned():
    img = new_image(1, 1)
    img.set_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


def test_set_pixel_touches_only_its_pixel():
    img = new_image(3, 3)
    img.set_pixel(1, 1, 0xFF99FF)
    assert img.get_pixel(1, 1) == 0xFF99FF
    others = [img.get_pixel(x, y) for y in range(3) for x in range(3) if (x, y) != (1, 1)]
    assert others == [0] * 8


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (IM1_SX, 0), (0, IM1_SY)])
def test_out_of_range_pixel(x, y):
    img = new_image(IM1_SX, IM1_SY)
    with pytest.raises(IndexError):
        img.set_pixel(x, y, 0)
    with pytest.raises(IndexError):
        img.get_pixel(x, y)


@pytest.mark.parametrize("w, h", [(0, 10), (10, 0), (-1, 5)])
def test_invalid_size(w, h):
    with pytest.raises(ValueError):
        new_image(w, h)


def test_invalid_endian():
    with pytest.raises(ValueError):
        Image(4, 4, endian=2)