"""The Roblox BrickColor codes with their names, numbers, hex values and colours."""

__version__ = "1.0.0"

__all__ = ["classic", "generator", "model", "modern", "palette"]