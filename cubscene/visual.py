"""Conversion of 0xRRGGBB colours to pixel values of a TrueColor visual."""

from __future__ import annotations

__all__ = ["channel_shifts", "to_visual_pixel"]

Shifts = tuple[int, int, int, int, int, int]


def _mask_layout(mask: int, channel: str) -> tuple[int, int]:
    """Return (offset, width) of the contiguous run of bits in ``mask``."""
    if mask <= 0:
        raise ValueError(f"{channel} mask must be a positive bit mask, got {mask!r}")
    offset = (mask & -mask).bit_length() - 1
    mask >>= offset
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return offset, width


def channel_shifts(red_mask: int, green_mask: int, blue_mask: int) -> Shifts:
    """Describe a visual's channel masks as (offset, width) pairs.

    The result is ``(red_offset, red_width, green_offset, green_width,
    blue_offset, blue_width)``.
    """
    red = _mask_layout(red_mask, "red")
    green = _mask_layout(green_mask, "green")
    blue = _mask_layout(blue_mask, "blue")
    return (*red, *green, *blue)


def to_visual_pixel(color: int, depth: int, shifts: Shifts) -> int:
    """Map a 0xRRGGBB colour to a pixel value of a visual.

    Visuals of depth 24 or more take the colour unchanged.  Shallower
    visuals keep the top bits of each channel, placed as ``shifts`` say.
    """
    if depth >= 24:
        return color
    red_off, red_w, green_off, green_w, blue_off, blue_w = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_w)) << red_off)
        + ((green >> (16 - green_w)) << green_off)
        + ((blue >> (16 - blue_w)) << blue_off)
    )