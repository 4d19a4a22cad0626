import pytest

from cubscene.visual import channel_shifts, to_visual_pixel


def test_shifts_of_standard_24_bit_visual():
    assert channel_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_shifts_of_565_visual():
    assert channel_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


@pytest.mark.parametrize("mask", [0, -1])
def test_empty_mask_rejected(mask):
    with pytest.raises(ValueError):
        channel_shifts(mask, 0x00FF00, 0x0000FF)


@pytest.mark.parametrize("color", [0x000000, 0xFFFFFF, 0x123456, 0xFF99FF, 0x00FFFF])
def test_deep_visual_keeps_colour(color):
    shifts = channel_shifts(0xF800, 0x07E0, 0x001F)
    assert to_visual_pixel(color, 24, shifts) == color
    assert to_visual_pixel(color, 32, shifts) == color


@pytest.mark.parametrize("color", [0x000000, 0xFFFFFF, 0x123456, 0xFF99FF, 0xABCDEF])
def test_shallow_depth_with_8_bit_channels_is_identity(color):
    shifts = channel_shifts(0xFF0000, 0x00FF00, 0x0000FF)
    assert to_visual_pixel(color, 16, shifts) == color


def test_white_fills_every_565_bit():
    shifts = channel_shifts(0xF800, 0x07E0, 0x001F)
    assert to_visual_pixel(0xFFFFFF, 16, shifts) == 0xFFFF
    assert to_visual_pixel(0x000000, 16, shifts) == 0


def test_565_channels_stay_inside_their_masks():
    shifts = channel_shifts(0xF800, 0x07E0, 0x001F)
    assert to_visual_pixel(0xFF0000, 16, shifts) & ~0xF800 == 0
    assert to_visual_pixel(0x00FF00, 16, shifts) & ~0x07E0 == 0
    assert to_visual_pixel(0x0000FF, 16, shifts) & ~0x001F == 0
    assert to_visual_pixel(0xFF0000, 16, shifts) == 0xF800
    assert to_visual_pixel(0x0000FF, 16, shifts) == 0x001F