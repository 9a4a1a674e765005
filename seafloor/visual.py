"""Pixel values for TrueColor visuals of any depth."""

from __future__ import annotations

ChannelShifts = tuple[int, int, int, int, int, int]


def _shift_and_bits(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> ChannelShifts:
    """Return (shift, bits) for red, green and blue, flattened into six values.

    The shift is the position of the lowest set bit of each mask and bits is
    the length of the run of set bits starting there.
    """
    red = _shift_and_bits(red_mask)
    green = _shift_and_bits(green_mask)
    blue = _shift_and_bits(blue_mask)
    return (*red, *green, *blue)


def get_color_value(color: int, depth: int, shifts: ChannelShifts) -> int:
    """Turn a 0xRRGGBB colour into the pixel value for a visual.

    Visuals of depth 24 or more take the colour as it is; shallower ones get
    each channel cut down to its bit count and moved to its shift.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )