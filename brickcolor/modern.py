"""The newer BrickColor codes: catalogue numbers from 300 upwards."""

from __future__ import annotations

from brickcolor.model import BrickColor

_ROWS: tuple[tuple[str, str, int, str, int, int, int], ...] = (
    ("SlimeGreen", "Slime green", 301, "#506D54", 80, 109, 84),
    ("SmokyGrey", "Smoky grey", 302, "#5B5D69", 91, 93, 105),
    ("DarkBlue", "Dark blue", 303, "#0010B0", 0, 16, 176),
    ("ParsleyGreen", "Parsley green", 304, "#2C651D", 44, 101, 29),
    ("SteelBlue", "Steel blue", 305, "#527CAE", 82, 124, 174),
    ("StormBlue", "Storm blue", 306, "#335882", 51, 88, 130),
    ("Lapis", "Lapis", 307, "#102ADC", 16, 42, 220),
    ("DarkIndigo", "Dark indigo", 308, "#3D1585", 61, 21, 133),
    ("SeaGreen", "Sea green", 309, "#348E40", 52, 142, 64),
    ("Shamrock", "Shamrock", 310, "#5B9A4C", 91, 154, 76),
    ("Fossil", "Fossil", 311, "#9FA1AC", 159, 161, 172),
    ("Mulberry", "Mulberry", 312, "#592259", 89, 34, 89),
    ("ForestGreen", "Forest green", 313, "#1F801D", 31, 128, 29),
    ("CadetBlue", "Cadet blue", 314, "#9FADC0", 159, 173, 192),
    ("ElectricBlue", "Electric blue", 315, "#0989CF", 9, 137, 207),
    ("Eggplant", "Eggplant", 316, "#7B007B", 123, 0, 123),
    ("Moss", "Moss", 317, "#7C9C6B", 124, 156, 107),
    ("Artichoke", "Artichoke", 318, "#8AAB85", 138, 171, 133),
    ("SageGreen", "Sage green", 319, "#B9C4B1", 185, 196, 177),
    ("GhostGrey", "Ghost grey", 320, "#CACBD1", 202, 203, 209),
    ("Lilac2", "Lilac", 321, "#A75E9B", 167, 94, 155),
    ("Plum", "Plum", 322, "#7B2F7B", 123, 47, 123),
    ("Olivine", "Olivine", 323, "#94BE81", 148, 190, 129),
    ("LaurelGreen", "Laurel green", 324, "#A8BD99", 168, 189, 153),
    ("QuillGrey", "Quill grey", 325, "#DFDFDE", 223, 223, 222),
    ("Crimson", "Crimson", 327, "#970000", 151, 0, 0),
    ("Mint", "Mint", 328, "#B1E5A6", 177, 229, 166),
    ("BabyBlue", "Baby blue", 329, "#98C2DB", 152, 194, 219),
    ("CarnationPink", "Carnation pink", 330, "#FF98DC", 255, 152, 220),
    ("Persimmon", "Persimmon", 331, "#FF5959", 255, 89, 89),
    ("Maroon", "Maroon", 332, "#750000", 117, 0, 0),
    ("Gold2", "Gold", 333, "#EFB838", 239, 184, 56),
    ("DaisyOrange", "Daisy orange", 334, "#F8D96D", 248, 217, 109),
    ("Pearl", "Pearl", 335, "#E7E7EC", 231, 231, 236),
    ("Fog", "Fog", 336, "#C7D4E4", 199, 212, 228),
    ("Salmon", "Salmon", 337, "#FF9494", 255, 148, 148),
    ("TerraCotta", "Terra Cotta", 338, "#BE6862", 190, 104, 98),
    ("Cocoa", "Cocoa", 339, "#562424", 86, 36, 36),
    ("Wheat", "Wheat", 340, "#F1E7C7", 241, 231, 199),
    ("Buttermilk", "Buttermilk", 341, "#FEF3BB", 254, 243, 187),
    ("Mauve", "Mauve", 342, "#E0B2D0", 224, 178, 208),
    ("Sunrise", "Sunrise", 343, "#D490BD", 212, 144, 189),
    ("Tawny", "Tawny", 344, "#965555", 150, 85, 85),
    ("Rust2", "Rust", 345, "#8F4C2A", 143, 76, 42),
    ("Cashmere", "Cashmere", 346, "#D3BE96", 211, 190, 150),
    ("Khaki", "Khaki", 347, "#E2DCBC", 226, 220, 188),
    ("LilyWhite", "Lily white", 348, "#EDEAEA", 237, 234, 234),
    ("Seashell", "Seashell", 349, "#E9DADA", 233, 218, 218),
    ("Burgundy", "Burgundy", 350, "#883E3E", 136, 62, 62),
    ("Cork", "Cork", 351, "#BC9B5D", 188, 155, 93),
    ("Burlap", "Burlap", 352, "#C7AC78", 199, 172, 120),
    ("Beige", "Beige", 353, "#CABFA3", 202, 191, 163),
    ("Oyster", "Oyster", 354, "#BBB3B2", 187, 179, 178),
    ("PineCone", "Pine Cone", 355, "#6C584B", 108, 88, 75),
    ("FawnBrown", "Fawn brown", 356, "#A0844F", 160, 132, 79),
    ("HurricaneGrey", "Hurricane grey", 357, "#958988", 149, 137, 136),
    ("CloudyGrey", "Cloudy grey", 358, "#ABA89E", 171, 168, 158),
    ("Linen", "Linen", 359, "#AF9483", 175, 148, 131),
    ("Copper", "Copper", 360, "#966766", 150, 103, 102),
    ("MediumBrown", "Medium brown", 361, "#564236", 86, 66, 54),
    ("Bronze", "Bronze", 362, "#7E683F", 126, 104, 63),
    ("Flint", "Flint", 363, "#69665C", 105, 102, 92),
    ("DarkTaupe", "Dark taupe", 364, "#5A4C42", 90, 76, 66),
    ("BurntSienna", "Burnt Sienna", 365, "#6A3909", 106, 57, 9),
    ("InstitutionalWhite", "Institutional white", 1001, "#F8F8F8", 248, 248, 248),
    ("MidGray", "Mid gray", 1002, "#CDCDCD", 205, 205, 205),
    ("ReallyBlack", "Really black", 1003, "#111111", 17, 17, 17),
    ("ReallyRed", "Really red", 1004, "#FF0000", 255, 0, 0),
    ("DeepOrange", "Deep orange", 1005, "#FFB000", 255, 176, 0),
    ("Alder", "Alder", 1006, "#B480FF", 180, 128, 255),
    ("DustyRose", "Dusty Rose", 1007, "#A34B4B", 163, 75, 75),
    ("Olive", "Olive", 1008, "#C1BE42", 193, 190, 66),
    ("NewYeller", "New Yeller", 1009, "#FFFF00", 255, 255, 0),
    ("ReallyBlue", "Really blue", 1010, "#0000FF", 0, 0, 255),
    ("NavyBlue", "Navy blue", 1011, "#002060", 0, 32, 96),
    ("DeepBlue", "Deep blue", 1012, "#2154B9", 33, 84, 185),
    ("Cyan", "Cyan", 1013, "#04AFEC", 4, 175, 236),
    ("CGABrown", "CGA brown", 1014, "#AA5500", 170, 85, 0),
    ("Magenta", "Magenta", 1015, "#AA00AA", 170, 0, 170),
    ("Pink", "Pink", 1016, "#FF66CC", 255, 102, 204),
    ("DeepOrange2", "Deep orange", 1017, "#FFAF00", 255, 175, 0),
    ("Teal", "Teal", 1018, "#12EED4", 18, 238, 212),
    ("Toothpaste", "Toothpaste", 1019, "#00FFFF", 0, 255, 255),
    ("LimeGreen", "Lime green", 1020, "#00FF00", 0, 255, 0),
    ("Camo", "Camo", 1021, "#3A7D15", 58, 125, 21),
    ("Grime", "Grime", 1022, "#7F8E64", 127, 142, 100),
    ("Lavender", "Lavender", 1023, "#8C5B9F", 140, 91, 159),
    ("PastelLightBlue", "Pastel light blue", 1024, "#AFDDFF", 175, 221, 255),
    ("PastelOrange", "Pastel orange", 1025, "#FFC9C9", 255, 201, 201),
    ("PastelViolet", "Pastel violet", 1026, "#B1A7FF", 177, 167, 255),
    ("PastelBlueGreen", "Pastel blue-green", 1027, "#9FF3E9", 159, 243, 233),
    ("PastelGreen", "Pastel green", 1028, "#CCFFCC", 204, 255, 204),
    ("PastelYellow", "Pastel yellow", 1029, "#FFFFCC", 255, 255, 204),
    ("PastelBrown", "Pastel brown", 1030, "#FFCC99", 255, 204, 153),
    ("RoyalPurple", "Royal purple", 1031, "#6225D1", 98, 37, 209),
    ("HotPink", "Hot pink", 1032, "#FF00BF", 255, 0, 191),
)

_MODERN: dict[str, BrickColor] = {
    key: BrickColor(name=name, number=number, hex=hex_code, r=r, g=g, b=b)
    for key, name, number, hex_code, r, g, b in _ROWS
}


def modern_colors() -> dict[str, BrickColor]:
    """Return the newer colours keyed by identifier, in catalogue order."""
    return dict(_MODERN)