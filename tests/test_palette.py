import random

import pytest

from brickcolor.palette import ALL, COLORS, number, random_color


def test_random_color_has_name():
    assert random_color().name != ""
    assert random_color() in ALL


def test_random_color_is_reproducible_with_seeded_rng():
    first = random_color(random.Random(123))
    second = random_color(random.Random(123))
    assert first == second
    assert first in ALL


@pytest.mark.parametrize(
    ("n", "want"),
    [(1020, "Lime green"), (1032, "Hot pink")],
)
def test_number(n, want):
    assert number(n).name == want


def test_number_unknown_raises():
    with pytest.raises(KeyError):
        number(4)


def test_all_count_and_first():
    assert len(ALL) >= 208
    first = number(1)
    assert ALL[0] == first
    assert first == COLORS["White"]
    assert first.name == "White"


@pytest.mark.parametrize(
    ("key", "name", "num", "hex_code"),
    [
        ("White", "White", 1, "#F2F3F3"),
        ("MediumRoyalBlue", "Medium Royal blue", 213, "#6C81B7"),
    ],
)
def test_brick_colors(key, name, num, hex_code):
    color = COLORS[key]
    assert color.name == name
    assert color.number == num
    assert color.hex == hex_code
    assert number(num) == color


def test_numbers_unique_and_ascending():
    numbers = [color.number for color in ALL]
    assert numbers == sorted(set(numbers))
    assert number(numbers[0]).name == "White"
    assert number(numbers[-1]).name == "Hot pink"


def test_duplicate_names_have_distinct_keys():
    first = number(219)
    second = number(321)
    assert first.name == "Lilac"
    assert second.name == "Lilac"
    assert first == COLORS["Lilac"]
    assert second == COLORS["Lilac2"]
    assert first.hex == "#6B629B"
    assert second.hex == "#A75E9B"


def test_every_number_round_trips():
    assert all(number(color.number) is color for color in ALL)