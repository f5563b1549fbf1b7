# brickcolor

Every Roblox BrickColor code as a Python value. Each one has its name,
its BrickColor number, its hex string and its RGBA channels.

## Installation

```
pip install brickcolor
```

The package has no dependencies beyond the standard library.

## The colour value

Each colour is a frozen dataclass, `BrickColor`, from `brickcolor.model`.
It has the fields `name`, `number`, `hex`, `r`, `g`, `b` and `a`. Alpha
defaults to 255, which is its value for every colour in the table. A
channel outside 0..255 raises `ValueError`. `rgba()` returns the
channels as an `(r, g, b, a)` tuple.

## Usage

Look up a colour by its BrickColor number. An unknown number raises
`KeyError`:

```python
from brickcolor.palette import number

hot_pink = number(1032)
print(hot_pink.name)     # Hot pink
print(hot_pink.hex)      # #FF00BF
print(hot_pink.rgba())   # (255, 0, 191, 255)
```

Pick a colour at random. Without an argument the `random` module is
used; pass your own `random.Random` to get a repeatable choice:

```python
import random

from brickcolor.palette import random_color

color = random_color(random.Random(123))
print(color.number, color.name)
```

`brickcolor.palette` also holds the whole table: `COLORS`, a read-only
mapping from identifier (such as `"HotPink"` or `"Lilac2"`) to colour,
and `ALL`, a tuple of every colour. Both are in catalogue order.

The table is split into two parts. `classic_colors()` in
`brickcolor.classic` returns the colours numbered below 300, and
`modern_colors()` in `brickcolor.modern` those numbered from 300
upwards. Each returns a new dict keyed by identifier:

```python
from brickcolor.classic import classic_colors
from brickcolor.modern import modern_colors

for key, color in classic_colors().items():
    print(key, color.number, color.hex, color.name)

print(len(modern_colors()))
```

## Building a table from the listing

The `brickcolor-generate` command reads an HTML page holding the table of
BrickColor codes, from a URL or a local file, and writes Python source
with a `COLORS` dict keyed by identifier:

```
brickcolor-generate page.html -o colors.py
```

With no `-o`, or with `-o -`, the source goes to standard output. It is
a single module; the command does not rewrite `brickcolor.classic` or
`brickcolor.modern`.

The helpers are in `brickcolor.generator`: `parse_rows` extracts the
colours from the page (raising `ValueError` if there is no table or a
row is malformed), `hex_from_rgb` turns `"r, g, b"` into `"#RRGGBB"`,
`identifier` turns a colour name into a CamelCase identifier, adding
`2` when it is already taken, and `render_module` produces the source.

## Running the tests

```
pip install -e ".[test]"
pytest
```