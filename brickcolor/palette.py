"""The full BrickColor palette, with lookup by catalogue number and random choice."""

from __future__ import annotations

import random
from types import MappingProxyType

from brickcolor.classic import classic_colors
from brickcolor.model import BrickColor
from brickcolor.modern import modern_colors

COLORS = MappingProxyType({**classic_colors(), **modern_colors()})
"""Every colour keyed by identifier, in catalogue order."""

ALL: tuple[BrickColor, ...] = tuple(COLORS.values())
"""Every colour available on Roblox, in catalogue order."""

_BY_NUMBER: dict[int, BrickColor] = {color.number: color for color in ALL}


def number(n: int) -> BrickColor:
    """Return the colour with catalogue number ``n``.

    Raises KeyError if no colour has that number.
    """
    try:
        return _BY_NUMBER[n]
    except KeyError:
        raise KeyError(f"no BrickColor with number {n}") from None


def random_color(rng: random.Random | None = None) -> BrickColor:
    """Return a colour chosen at random, using ``rng`` if given."""
    chooser = rng if rng is not None else random
    return chooser.choice(ALL)