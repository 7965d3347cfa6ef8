import dataclasses

import pytest

from hslcolor import HSLColor, rgb_to_hsl, hsl_to_rgb
from ..samples import samples_rgb_hsl, hue_tolerance, fraction_tolerance, rgb_tolerance


def test_default_is_black():
    color = HSLColor()
    assert (color.h, color.s, color.l) == (0.0, 0.0, 0.0)
    assert color.to_rgb() == (0, 0, 0)


def test_fields_and_aliases():
    color = HSLColor(219.0, 0.58, 0.17)
    assert color.hue == color.h == 219.0
    assert color.saturation == color.s == 0.58
    assert color.lightness == color.l == 0.17


def test_unpacking():
    h, s, l = HSLColor(60.0, 1.0, 0.5)
    assert (h, s, l) == (60.0, 1.0, 0.5)


def test_immutable():
    color = HSLColor(60.0, 1.0, 0.5)
    with pytest.raises(AttributeError):
        color.h = 120.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        color.alpha = 1.0


def test_replace_builds_new_value():
    color = HSLColor(60.0, 1.0, 0.5)
    darker = dataclasses.replace(color, l=0.25)
    assert darker == HSLColor(60.0, 1.0, 0.25)
    assert color.l == 0.5


def test_equality_hash_and_order():
    assert HSLColor(10.0, 0.5, 0.5) == HSLColor(10.0, 0.5, 0.5)
    assert len({HSLColor(10.0, 0.5, 0.5), HSLColor(10.0, 0.5, 0.5)}) == 1
    assert HSLColor(10.0, 0.5, 0.5) < HSLColor(20.0, 0.0, 0.0)
    assert HSLColor(10.0, 0.2, 0.9) < HSLColor(10.0, 0.5, 0.0)


def test_no_clamping_on_construction():
    color = HSLColor(400.0, 1.5, -0.2)
    assert (color.h, color.s, color.l) == (400.0, 1.5, -0.2)


def test_is_achromatic():
    assert HSLColor(123.0, 0.0, 0.4).is_achromatic
    assert not HSLColor(123.0, 0.1, 0.4).is_achromatic


def test_from_rgb():
    for rgb, (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        color = HSLColor.from_rgb(rgb)

        assert color == rgb_to_hsl(*rgb)
        assert abs(color.h - h_exp) <= hue_tolerance
        assert abs(color.s - s_exp) <= fraction_tolerance
        assert abs(color.l - l_exp) <= fraction_tolerance


def test_from_rgb_accepts_list():
    assert HSLColor.from_rgb([0, 0, 255]).h == 240.0


def test_from_rgb_requires_three_channels():
    with pytest.raises(ValueError):
        HSLColor.from_rgb((255, 255))
    with pytest.raises(ValueError):
        HSLColor.from_rgb((255, 255, 255, 255))


def test_to_rgb():
    for (r, g, b), (h, s, l) in samples_rgb_hsl.items():
        rgb = HSLColor(h, s, l).to_rgb()

        assert rgb == hsl_to_rgb(HSLColor(h, s, l))
        assert abs(rgb[0] - r) <= rgb_tolerance
        assert abs(rgb[1] - g) <= rgb_tolerance
        assert abs(rgb[2] - b) <= rgb_tolerance
