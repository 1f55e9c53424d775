"""Folder color names and the RGB values used to draw their swatches."""

# Folder colors shipped by papirus-folders, in display order
FOLDER_COLORS: tuple[str, ...] = (
    "adwaita", "black", "blue", "bluegrey", "breeze", "brown", "carmine",
    "cyan", "darkcyan", "deeporange", "green", "grey", "indigo", "magenta",
    "nordic", "orange", "palebrown", "paleorange", "pink", "red", "teal",
    "violet", "white", "yaru", "yellow",
)

# Approximate folder tint for each color, used for the list swatches
FOLDER_PALETTE: dict[str, tuple[int, int, int]] = {
    "adwaita": (147, 192, 234),
    "black": (79, 79, 79),
    "blue": (82, 148, 226),
    "bluegrey": (96, 125, 139),
    "breeze": (61, 174, 233),
    "brown": (174, 137, 118),
    "carmine": (163, 0, 2),
    "cyan": (0, 188, 212),
    "darkcyan": (69, 171, 183),
    "deeporange": (235, 98, 52),
    "green": (135, 185, 92),
    "grey": (142, 142, 142),
    "indigo": (92, 107, 192),
    "magenta": (202, 113, 223),
    "nordic": (129, 161, 193),
    "orange": (238, 146, 58),
    "palebrown": (209, 191, 174),
    "paleorange": (238, 202, 143),
    "pink": (240, 98, 146),
    "red": (231, 77, 77),
    "teal": (22, 160, 133),
    "violet": (126, 87, 194),
    "white": (229, 229, 229),
    "yaru": (103, 103, 103),
    "yellow": (249, 189, 48),
}

# Standard 16-color ANSI palette RGB values (VGA)
ANSI_16_PALETTE: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0), (170, 0, 0), (0, 170, 0), (170, 85, 0),
    (0, 0, 170), (170, 0, 170), (0, 170, 170), (170, 170, 170),
    (85, 85, 85), (255, 85, 85), (85, 255, 85), (255, 255, 85),
    (85, 85, 255), (255, 85, 255), (85, 255, 255), (255, 255, 255),
)
