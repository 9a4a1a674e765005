import pytest

from seafloor.visual import get_color_value, mask_shifts


def test_mask_shifts_for_24_bit_visual():
    assert mask_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_mask_shifts_for_565_visual():
    assert mask_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


def test_bits_sum_to_total_mask_width():
    shifts = mask_shifts(0x7C00, 0x03E0, 0x001F)
    assert shifts[1] + shifts[3] + shifts[5] == (0x7FFF).bit_length()


@pytest.mark.parametrize("masks", [(0, 0xFF00, 0xFF), (0xFF0000, 0, 0xFF), (0xFF0000, 0xFF00, 0)])
def test_zero_mask_is_rejected(masks):
    with pytest.raises(ValueError):
        mask_shifts(*masks)


@pytest.mark.parametrize("color", [0, 0x123456, 0xFF99FF, 0x00FFFF, 0xFFFFFF])
def test_deep_visual_keeps_color(color):
    shifts = mask_shifts(0xF800, 0x07E0, 0x001F)
    assert get_color_value(color, 24, shifts) == color
    assert get_color_value(color, 32, shifts) == color


@pytest.mark.parametrize("color", [0, 0x123456, 0xFF99FF, 0x00FFFF, 0xABCDEF])
def test_eight_bit_channels_round_trip_at_shallow_depth(color):
    shifts = mask_shifts(0xFF0000, 0x00FF00, 0x0000FF)
    assert get_color_value(color, 16, shifts) == color


def test_white_fills_all_565_bits():
    shifts = mask_shifts(0xF800, 0x07E0, 0x001F)
    assert get_color_value(0xFFFFFF, 16, shifts) == 0xFFFF


def test_pure_channels_land_inside_their_masks():
    shifts = mask_shifts(0xF800, 0x07E0, 0x001F)
    assert get_color_value(0xFF0000, 16, shifts) == 0xF800
    assert get_color_value(0x00FF00, 16, shifts) == 0x07E0
    assert get_color_value(0x0000FF, 16, shifts) == 0x001F