import ast
from datetime import datetime, timezone

import pytest

from brickcolor.generator import hex_from_rgb, identifier, main, parse_rows, render_module
from brickcolor.model import BrickColor

PAGE = """
<html><body>
<table class="other"><tbody>
<tr><td>x</td><td>Decoy</td><td>999</td><td>1, 2, 3</td><td>x</td></tr>
</tbody></table>
<table class="MuiTable-root css-table">
<thead><tr><th>Swatch</th><th>Name</th><th>Number</th><th>RGB</th><th>Hex</th></tr></thead>
<tbody>
<tr><td><span></span></td><td>White</td><td>1</td><td>242, 243, 243</td><td>#F2F3F3</td></tr>
<tr><td>note</td><td>only four cells</td><td>7</td><td>1, 1, 1</td></tr>
<tr><td><img src="s.png"></td><td>Medium Royal blue</td><td>213</td><td>108, 129, 183</td><td>#6C81B7</td></tr>
<tr><td></td><td>Lilac</td><td>219</td><td>107, 98, 155</td><td></td></tr>
<tr><td></td><td>Lilac</td><td>321</td><td>167, 94, 155</td><td></td></tr>
</tbody>
</table>
</body></html>
"""


def _colors_from_source(source):
    tree = ast.parse(source)
    assign = next(node for node in tree.body if isinstance(node, ast.Assign))
    result = {}
    for key, call in zip(assign.value.keys, assign.value.values):
        fields = {kw.arg: ast.literal_eval(kw.value) for kw in call.keywords}
        result[ast.literal_eval(key)] = BrickColor(**fields)
    return result


@pytest.mark.parametrize(
    "name, expected",
    [
        ("White", "White"),
        ("Medium Royal blue", "MediumRoyalBlue"),
        ("Light green (Mint)", "LightGreenMint"),
        ("Lig. Yellowich orange", "LigYellowichOrange"),
        ("Red flip/flop", "RedFlipFlop"),
        ("Pastel blue-green", "PastelBlueGreen"),
        ("CGA brown", "CGABrown"),
        ("Tr. Flu. Reddish orange", "TrFluReddishOrange"),
    ],
)
def test_identifier_from_names(name, expected):
    assert identifier(name, []) == expected


def test_identifier_suffixes_taken_name():
    assert identifier("Lilac", ["Lilac"]) == "Lilac2"
    assert identifier("Deep orange", {"DeepOrange"}) == "DeepOrange2"
    assert identifier("Gold", ["White"]) == "Gold"


@pytest.mark.parametrize(
    "rgb, expected",
    [
        ("242, 243, 243", "#F2F3F3"),
        ("255, 0, 191", "#FF00BF"),
        ("0, 16, 176", "#0010B0"),
        ("108, 129, 183", "#6C81B7"),
    ],
)
def test_hex_from_rgb(rgb, expected):
    assert hex_from_rgb(rgb) == expected


def test_hex_from_rgb_skips_non_integers():
    assert hex_from_rgb("255, x, 191") == "#FFBF"


def test_parse_rows_reads_only_five_cell_rows_of_target_table():
    colors = parse_rows(PAGE)
    assert [c.number for c in colors] == [1, 213, 219, 321]
    white, royal = colors[0], colors[1]
    assert white.name == "White"
    assert white.hex == "#F2F3F3"
    assert white.rgba() == (242, 243, 243, 255)
    assert royal.name == "Medium Royal blue"
    assert royal.hex == "#6C81B7"


def test_parse_rows_without_table_raises():
    with pytest.raises(ValueError):
        parse_rows("<html><body><p>nothing</p></body></html>")


def test_parse_rows_with_bad_rgb_raises():
    page = (
        '<table class="MuiTable-root"><tbody>'
        "<tr><td></td><td>Odd</td><td>5</td><td>1, 2</td><td></td></tr>"
        "</tbody></table>"
    )
    with pytest.raises(ValueError):
        parse_rows(page)


def test_render_module_round_trips_colors():
    colors = parse_rows(PAGE)
    stamp = datetime(2025, 6, 2, 10, 14, 26, tzinfo=timezone.utc)
    source = render_module(colors, stamp)
    assert "# Generated at: 2025-06-02 10:14:26 +0000" in source
    parsed = _colors_from_source(source)
    assert list(parsed) == ["White", "MediumRoyalBlue", "Lilac", "Lilac2"]
    assert list(parsed.values()) == colors


def test_render_module_with_no_colors_is_valid_source():
    source = render_module([], datetime(2025, 6, 2, 10, 14, 26, tzinfo=timezone.utc))
    assert _colors_from_source(source) == {}


def test_main_writes_output_file(tmp_path):
    page = tmp_path / "page.html"
    page.write_text(PAGE, encoding="utf-8")
    out = tmp_path / "colors.py"
    assert main([str(page), "--output", str(out)]) == 0
    parsed = _colors_from_source(out.read_text(encoding="utf-8"))
    assert parsed["MediumRoyalBlue"].hex == "#6C81B7"
    assert len(parsed) == 4


def test_main_writes_to_stdout(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text(PAGE, encoding="utf-8")
    assert main([str(page)]) == 0
    parsed = _colors_from_source(capsys.readouterr().out)
    assert parsed["White"].number == 1