import dataclasses

import pytest

from brickcolor.model import BrickColor


def _white():
    return BrickColor(name="White", number=1, hex="#F2F3F3", r=242, g=243, b=243)


def test_rgba_returns_channels_with_opaque_alpha():
    assert _white().rgba() == (242, 243, 243, 255)


def test_fields_are_kept():
    color = BrickColor(name="Medium Royal blue", number=213, hex="#6C81B7", r=108, g=129, b=183)
    assert color.name == "Medium Royal blue"
    assert color.number == 213
    assert color.hex == "#6C81B7"
    assert color.rgba() == (108, 129, 183, 255)


def test_equal_values_compare_equal_and_hash_alike():
    assert _white() == _white()
    assert len({_white(), _white()}) == 1


def test_instances_are_immutable():
    color = _white()
    with pytest.raises(dataclasses.FrozenInstanceError):
        color.name = "Grey"
    assert color.name == "White"


@pytest.mark.parametrize("channel", ["r", "g", "b", "a"])
@pytest.mark.parametrize("value", [-1, 256])
def test_out_of_range_channel_is_rejected(channel, value):
    values = {"r": 0, "g": 0, "b": 0, "a": 255}
    values[channel] = value
    with pytest.raises(ValueError):
        BrickColor(name="Bad", number=0, hex="#000000", **values)