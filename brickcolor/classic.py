"""The classic BrickColor codes: catalogue numbers below 300."""

from __future__ import annotations

from brickcolor.model import BrickColor

_ROWS: tuple[tuple[str, str, int, str, int, int, int], ...] = (
    ("White", "White", 1, "#F2F3F3", 242, 243, 243),
    ("Grey", "Grey", 2, "#A1A5A2", 161, 165, 162),
    ("LightYellow", "Light yellow", 3, "#F9E999", 249, 233, 153),
    ("BrickYellow", "Brick yellow", 5, "#D7C59A", 215, 197, 154),
    ("LightGreenMint", "Light green (Mint)", 6, "#C2DAB8", 194, 218, 184),
    ("LightReddishViolet", "Light reddish violet", 9, "#E8BAC8", 232, 186, 200),
    ("PastelBlue", "Pastel Blue", 11, "#80BBDB", 128, 187, 219),
    ("LightOrangeBrown", "Light orange brown", 12, "#CB8442", 203, 132, 66),
    ("Nougat", "Nougat", 18, "#CC8E69", 204, 142, 105),
    ("BrightRed", "Bright red", 21, "#C4281C", 196, 40, 28),
    ("MedReddishViolet", "Med. reddish violet", 22, "#C470A0", 196, 112, 160),
    ("BrightBlue", "Bright blue", 23, "#0D69AC", 13, 105, 172),
    ("BrightYellow", "Bright yellow", 24, "#F5CD30", 245, 205, 48),
    ("EarthOrange", "Earth orange", 25, "#624732", 98, 71, 50),
    ("Black", "Black", 26, "#1B2A35", 27, 42, 53),
    ("DarkGrey", "Dark grey", 27, "#6D6E6C", 109, 110, 108),
    ("DarkGreen", "Dark green", 28, "#287F47", 40, 127, 71),
    ("MediumGreen", "Medium green", 29, "#A1C48C", 161, 196, 140),
    ("LigYellowichOrange", "Lig. Yellowich orange", 36, "#F3CF9B", 243, 207, 155),
    ("BrightGreen", "Bright green", 37, "#4B974B", 75, 151, 75),
    ("DarkOrange", "Dark orange", 38, "#A05F35", 160, 95, 53),
    ("LightBluishViolet", "Light bluish violet", 39, "#C1CADE", 193, 202, 222),
    ("Transparent", "Transparent", 40, "#ECECEC", 236, 236, 236),
    ("TrRed", "Tr. Red", 41, "#CD544B", 205, 84, 75),
    ("TrLgBlue", "Tr. Lg blue", 42, "#C1DFF0", 193, 223, 240),
    ("TrBlue", "Tr. Blue", 43, "#7BB6E8", 123, 182, 232),
    ("TrYellow", "Tr. Yellow", 44, "#F7F18D", 247, 241, 141),
    ("LightBlue", "Light blue", 45, "#B4D2E4", 180, 210, 228),
    ("TrFluReddishOrange", "Tr. Flu. Reddish orange", 47, "#D9856C", 217, 133, 108),
    ("TrGreen", "Tr. Green", 48, "#84B68D", 132, 182, 141),
    ("TrFluGreen", "Tr. Flu. Green", 49, "#F8F184", 248, 241, 132),
    ("PhosphWhite", "Phosph. White", 50, "#ECE8DE", 236, 232, 222),
    ("LightRed", "Light red", 100, "#EEC4B6", 238, 196, 182),
    ("MediumRed", "Medium red", 101, "#DA867A", 218, 134, 122),
    ("MediumBlue", "Medium blue", 102, "#6E99CA", 110, 153, 202),
    ("LightGrey", "Light grey", 103, "#C7C1B7", 199, 193, 183),
    ("BrightViolet", "Bright violet", 104, "#6B327C", 107, 50, 124),
    ("BrYellowishOrange", "Br. yellowish orange", 105, "#E29B40", 226, 155, 64),
    ("BrightOrange", "Bright orange", 106, "#DA8541", 218, 133, 65),
    ("BrightBluishGreen", "Bright bluish green", 107, "#008F9C", 0, 143, 156),
    ("EarthYellow", "Earth yellow", 108, "#685C43", 104, 92, 67),
    ("BrightBluishViolet", "Bright bluish violet", 110, "#435493", 67, 84, 147),
    ("TrBrown", "Tr. Brown", 111, "#BFB7B1", 191, 183, 177),
    ("MediumBluishViolet", "Medium bluish violet", 112, "#6874AC", 104, 116, 172),
    ("TrMediReddishViolet", "Tr. Medi. reddish violet", 113, "#E5ADC8", 229, 173, 200),
    ("MedYellowishGreen", "Med. yellowish green", 115, "#C7D23C", 199, 210, 60),
    ("MedBluishGreen", "Med. bluish green", 116, "#55A5AF", 85, 165, 175),
    ("LightBluishGreen", "Light bluish green", 118, "#B7D7D5", 183, 215, 213),
    ("BrYellowishGreen", "Br. yellowish green", 119, "#A4BD47", 164, 189, 71),
    ("LigYellowishGreen", "Lig. yellowish green", 120, "#D9E4A7", 217, 228, 167),
    ("MedYellowishOrange", "Med. yellowish orange", 121, "#E7AC58", 231, 172, 88),
    ("BrReddishOrange", "Br. reddish orange", 123, "#D36F4C", 211, 111, 76),
    ("BrightReddishViolet", "Bright reddish violet", 124, "#923978", 146, 57, 120),
    ("LightOrange", "Light orange", 125, "#EAB892", 234, 184, 146),
    ("TrBrightBluishViolet", "Tr. Bright bluish violet", 126, "#A5A5CB", 165, 165, 203),
    ("Gold", "Gold", 127, "#DCBC81", 220, 188, 129),
    ("DarkNougat", "Dark nougat", 128, "#AE7A59", 174, 122, 89),
    ("Silver", "Silver", 131, "#9CA3A8", 156, 163, 168),
    ("NeonOrange", "Neon orange", 133, "#D5733D", 213, 115, 61),
    ("NeonGreen", "Neon green", 134, "#D8DD56", 216, 221, 86),
    ("SandBlue", "Sand blue", 135, "#74869D", 116, 134, 157),
    ("SandViolet", "Sand violet", 136, "#877C90", 135, 124, 144),
    ("MediumOrange", "Medium orange", 137, "#E09864", 224, 152, 100),
    ("SandYellow", "Sand yellow", 138, "#958A73", 149, 138, 115),
    ("EarthBlue", "Earth blue", 140, "#203A56", 32, 58, 86),
    ("EarthGreen", "Earth green", 141, "#27462D", 39, 70, 45),
    ("TrFluBlue", "Tr. Flu. Blue", 143, "#CFE2F7", 207, 226, 247),
    ("SandBlueMetallic", "Sand blue metallic", 145, "#7988A1", 121, 136, 161),
    ("SandVioletMetallic", "Sand violet metallic", 146, "#958EA3", 149, 142, 163),
    ("SandYellowMetallic", "Sand yellow metallic", 147, "#938767", 147, 135, 103),
    ("DarkGreyMetallic", "Dark grey metallic", 148, "#575857", 87, 88, 87),
    ("BlackMetallic", "Black metallic", 149, "#161D32", 22, 29, 50),
    ("LightGreyMetallic", "Light grey metallic", 150, "#ABADAC", 171, 173, 172),
    ("SandGreen", "Sand green", 151, "#789082", 120, 144, 130),
    ("SandRed", "Sand red", 153, "#957977", 149, 121, 119),
    ("DarkRed", "Dark red", 154, "#7B2E2F", 123, 46, 47),
    ("TrFluYellow", "Tr. Flu. Yellow", 157, "#FFF67B", 255, 246, 123),
    ("TrFluRed", "Tr. Flu. Red", 158, "#E1A4C2", 225, 164, 194),
    ("GunMetallic", "Gun metallic", 168, "#756C62", 117, 108, 98),
    ("RedFlipFlop", "Red flip/flop", 176, "#97695B", 151, 105, 91),
    ("YellowFlipFlop", "Yellow flip/flop", 178, "#B48455", 180, 132, 85),
    ("SilverFlipFlop", "Silver flip/flop", 179, "#898788", 137, 135, 136),
    ("Curry", "Curry", 180, "#D7A94B", 215, 169, 75),
    ("FireYellow", "Fire Yellow", 190, "#F9D62E", 249, 214, 46),
    ("FlameYellowishOrange", "Flame yellowish orange", 191, "#E8AB2D", 232, 171, 45),
    ("ReddishBrown", "Reddish brown", 192, "#694028", 105, 64, 40),
    ("FlameReddishOrange", "Flame reddish orange", 193, "#CF6024", 207, 96, 36),
    ("MediumStoneGrey", "Medium stone grey", 194, "#A3A2A5", 163, 162, 165),
    ("RoyalBlue", "Royal blue", 195, "#4667A4", 70, 103, 164),
    ("DarkRoyalBlue", "Dark Royal blue", 196, "#23478B", 35, 71, 139),
    ("BrightReddishLilac", "Bright reddish lilac", 198, "#8E4285", 142, 66, 133),
    ("DarkStoneGrey", "Dark stone grey", 199, "#635F62", 99, 95, 98),
    ("LemonMetalic", "Lemon metalic", 200, "#828A5D", 130, 138, 93),
    ("LightStoneGrey", "Light stone grey", 208, "#E5E4DF", 229, 228, 223),
    ("DarkCurry", "Dark Curry", 209, "#B08E44", 176, 142, 68),
    ("FadedGreen", "Faded green", 210, "#709578", 112, 149, 120),
    ("Turquoise", "Turquoise", 211, "#79B5B5", 121, 181, 181),
    ("LightRoyalBlue", "Light Royal blue", 212, "#9FC3E9", 159, 195, 233),
    ("MediumRoyalBlue", "Medium Royal blue", 213, "#6C81B7", 108, 129, 183),
    ("Rust", "Rust", 216, "#904C2A", 144, 76, 42),
    ("Brown", "Brown", 217, "#7C5C46", 124, 92, 70),
    ("ReddishLilac", "Reddish lilac", 218, "#96709F", 150, 112, 159),
    ("Lilac", "Lilac", 219, "#6B629B", 107, 98, 155),
    ("LightLilac", "Light lilac", 220, "#A7A9CE", 167, 169, 206),
    ("BrightPurple", "Bright purple", 221, "#CD6298", 205, 98, 152),
    ("LightPurple", "Light purple", 222, "#E4ADC8", 228, 173, 200),
    ("LightPink", "Light pink", 223, "#DC9095", 220, 144, 149),
    ("LightBrickYellow", "Light brick yellow", 224, "#F0D5A0", 240, 213, 160),
    ("WarmYellowishOrange", "Warm yellowish orange", 225, "#EBB87F", 235, 184, 127),
    ("CoolYellow", "Cool yellow", 226, "#FDEA8D", 253, 234, 141),
    ("DoveBlue", "Dove blue", 232, "#7DBBDD", 125, 187, 221),
    ("MediumLilac", "Medium lilac", 268, "#342B75", 52, 43, 117),
)

_CLASSIC: dict[str, BrickColor] = {
    key: BrickColor(name=name, number=number, hex=hex_code, r=r, g=g, b=b)
    for key, name, number, hex_code, r, g, b in _ROWS
}


def classic_colors() -> dict[str, BrickColor]:
    """Return the classic colours keyed by identifier, in catalogue order."""
    return dict(_CLASSIC)