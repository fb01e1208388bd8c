import pytest
from hypothesis import given
from hypothesis import strategies as st

from xlfmt.hsl import HSL, hsl_to_rgb, rgb_to_hsl

channel = st.integers(min_value=0, max_value=255)


def test_black_is_zero_lightness():
    assert rgb_to_hsl(0, 0, 0) == (0.0, 0.0, 0.0)


def test_pure_red():
    assert rgb_to_hsl(255, 0, 0) == (0.0, 1.0, 0.5)


def test_white_from_hsl():
    assert hsl_to_rgb(0.0, 0.0, 1.0) == (255, 255, 255)


def test_rgba_of_white_is_fully_saturated():
    assert HSL(0.0, 0.0, 1.0).rgba() == (0xFFFF, 0xFFFF, 0xFFFF, 0xFFFF)


@given(channel, channel, channel)
def test_round_trip(r, g, b):
    h, s, l = rgb_to_hsl(r, g, b)
    assert hsl_to_rgb(h, s, l) == (r, g, b)


@given(channel, channel, channel)
def test_components_in_unit_range(r, g, b):
    h, s, l = rgb_to_hsl(r, g, b)
    assert 0.0 <= h < 1.0
    assert 0.0 <= s <= 1.0
    assert 0.0 <= l <= 1.0


@given(channel)
def test_greys_are_achromatic(v):
    h, s, l = rgb_to_hsl(v, v, v)
    assert (h, s) == (0.0, 0.0)
    assert hsl_to_rgb(h, s, l) == (v, v, v)


@given(channel, channel, channel)
def test_from_rgb_rgba_scales_channels(r, g, b):
    colour = HSL.from_rgb(r, g, b)
    assert colour.rgba() == (r * 0x101, g * 0x101, b * 0x101, 0xFFFF)


@pytest.mark.parametrize("triple", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_out_of_range_channels_rejected(triple):
    with pytest.raises(ValueError):
        rgb_to_hsl(*triple)