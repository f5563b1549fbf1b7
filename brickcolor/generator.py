"""Build the BrickColor data module from the published HTML table of codes."""

from __future__ import annotations

import argparse
import re
import sys
import urllib.request
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from html.parser import HTMLParser
from pathlib import Path

from brickcolor.model import BrickColor

_TABLE_CLASS = "MuiTable-root"
_STRIP = str.maketrans({".": None, "(": None, ")": None, "/": " ", "-": " "})
_INTEGER = re.compile(r"[+-]?\d+")
_VOID_TAGS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def identifier(name: str, taken: Iterable[str]) -> str:
    """Turn a colour name into a CamelCase identifier, suffixed with 2 if already taken."""
    cleaned = name.translate(_STRIP)
    chars = []
    previous = " "
    for char in cleaned:
        chars.append(char.upper() if not _is_word_char(previous) else char)
        previous = char
    result = "".join(chars).replace(" ", "")
    if result in set(taken):
        result += "2"
    return result


def _channels(rgb: str) -> list[int]:
    return [int(part) for part in rgb.split(", ") if _INTEGER.fullmatch(part)]


def hex_from_rgb(rgb: str) -> str:
    """Convert an "r, g, b" string to "#RRGGBB", skipping parts that are not integers."""
    return "#" + "".join(f"{value:02X}" for value in _channels(rgb))


class _TableRows(HTMLParser):
    """Collect the cell texts of tbody rows in the first colour table."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.found = False
        self.rows: list[list[str]] = []
        self._stack: list[str] | None = None
        self._row: list[str] | None = None
        self._row_level = 0
        self._cell: list[str] | None = None
        self._cell_level = 0

    def handle_starttag(self, tag, attrs):
        if self._stack is None:
            classes = dict(attrs).get("class") or ""
            if tag == "table" and not self.found and _TABLE_CLASS in classes:
                self.found = True
                self._stack = ["table"]
            return
        if tag == "tr" and self._row is None and self._stack[-1] == "tbody":
            self._row = []
            self._row_level = len(self._stack)
        elif tag == "td" and self._row is not None and self._cell is None and len(self._stack) == self._row_level + 1:
            self._cell = []
            self._cell_level = len(self._stack)
        if tag not in _VOID_TAGS:
            self._stack.append(tag)

    def handle_endtag(self, tag):
        if self._stack is None or tag not in self._stack:
            return
        while self._stack and self._stack.pop() != tag:
            pass
        if self._cell is not None and len(self._stack) <= self._cell_level:
            if self._row is not None:
                self._row.append("".join(self._cell))
            self._cell = None
        if self._row is not None and len(self._stack) <= self._row_level:
            self.rows.append(self._row)
            self._row = None
        if not self._stack:
            self._stack = None

    def handle_data(self, data):
        if self._cell is not None:
            self._cell.append(data)


def parse_rows(html: str) -> list[BrickColor]:
    """Extract the colours from the rows of the BrickColor table in an HTML page."""
    parser = _TableRows()
    parser.feed(html)
    parser.close()
    if not parser.found:
        raise ValueError("no BrickColor table found in the page")

    colors = []
    for cells in parser.rows:
        if len(cells) != 5:
            continue
        name, number, rgb = cells[1], cells[2], cells[3]
        channels = _channels(rgb)
        if len(channels) != 3:
            raise ValueError(f"malformed RGB value for {name!r}: {rgb!r}")
        try:
            catalogue_number = int(number)
        except ValueError:
            raise ValueError(f"malformed number for {name!r}: {number!r}") from None
        r, g, b = channels
        colors.append(
            BrickColor(name=name, number=catalogue_number, hex=hex_from_rgb(rgb), r=r, g=g, b=b)
        )
    return colors


def render_module(colors: Iterable[BrickColor], generated_at: datetime) -> str:
    """Render Python source holding the colours, keyed by identifier, in order."""
    if generated_at.tzinfo is None:
        generated_at = generated_at.replace(tzinfo=timezone.utc)
    stamp = generated_at.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S %z")

    lines = [
        "# Code generated by brickcolor.generator; DO NOT EDIT.",
        "#",
        f"# Generated at: {stamp}",
        '"""Roblox BrickColor codes."""',
        "",
        "from brickcolor.model import BrickColor",
        "",
        "COLORS = {",
    ]
    taken: list[str] = []
    for color in colors:
        key = identifier(color.name, taken)
        taken.append(key)
        lines.append(
            f"    {key!r}: BrickColor(name={color.name!r}, number={color.number}, "
            f"hex={color.hex!r}, r={color.r}, g={color.g}, b={color.b}),"
        )
    lines.append("}")
    return "\n".join(lines) + "\n"


def _load(source: str) -> str:
    if source.startswith(("http://", "https://")):
        with urllib.request.urlopen(source) as response:
            return response.read().decode("utf-8", errors="replace")
    return Path(source).read_text(encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    """Read the colour table from a URL or file and write the data module."""
    parser = argparse.ArgumentParser(
        prog="brickcolor-generate",
        description="Generate the BrickColor data module from the HTML table of codes.",
    )
    parser.add_argument("source", help="URL or path of the HTML page holding the table")
    parser.add_argument("-o", "--output", default="-", help="file to write, or - for standard output")
    args = parser.parse_args(argv)

    source = render_module(parse_rows(_load(args.source)), datetime.now(timezone.utc))
    if args.output == "-":
        sys.stdout.write(source)
    else:
        Path(args.output).write_text(source, encoding="utf-8")
    return 0