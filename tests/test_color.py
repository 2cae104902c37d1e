import pytest

from accent.channels import RGBChannels
from accent.color import Color
from accent.spaces import Model, Space


def test_rgb_is_opaque_srgb():
    c = Color.rgb(255, 0, 0)
    assert c.channels == RGBChannels(255, 0, 0)
    assert c.alpha == 255
    assert c.space is Space.SRGB
    assert c.model is Model.RGB


def test_rgba_keeps_alpha():
    c = Color.rgba(1, 2, 3, 4)
    assert c.channels == RGBChannels(1, 2, 3)
    assert c.alpha == 4


def test_rgb_space_accepts_tuple():
    c = Color((0.1, 0.2, 0.3), 1.0, Space.LINEAR)
    assert c.channels == RGBChannels(0.1, 0.2, 0.3)


def test_rgb_space_rejects_list():
    with pytest.raises(TypeError):
        Color([1, 2, 3], 255, Space.SRGB)


def test_three_channel_space():
    c = Color((0.5, 0.1, 120.0), 1.0, Space.OKLCH)
    assert c.channels == (0.5, 0.1, 120.0)
    assert c.model is Model.LAB


def test_wrong_channel_count():
    with pytest.raises(ValueError, match="expects 3 channels"):
        Color((1.0, 2.0), 1.0, Space.HSL)


def test_non_rgb_space_rejects_rgb_channels():
    with pytest.raises(TypeError):
        Color(RGBChannels(1, 2, 3), 1.0, Space.XYZ)


def test_unbound_space_rejected():
    with pytest.raises(ValueError, match="not bound"):
        Color((0.0, 0.0, 0.0, 0.0), 1.0, Space.SWOP)


def test_srgb_to_linear_pipeline():
    ui_red = Color.rgb(255, 0, 0)
    linear = Color(ui_red.channels.to_linear(), 1.0, Space.LINEAR)
    assert linear.channels.to_srgb() == ui_red.channels