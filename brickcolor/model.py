"""The BrickColor value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BrickColor:
    """A Roblox part colour: its name, catalogue number, hex code and RGBA channels."""

    name: str
    number: int
    hex: str
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel, value in (("r", self.r), ("g", self.g), ("b", self.b), ("a", self.a)):
            if not 0 <= value <= 255:
                raise ValueError(f"channel {channel} out of range 0..255: {value}")

    def rgba(self) -> tuple[int, int, int, int]:
        """Return the colour as an (r, g, b, a) tuple of 8-bit channels."""
        return (self.r, self.g, self.b, self.a)