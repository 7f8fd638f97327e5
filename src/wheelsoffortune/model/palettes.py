"""Color Palettes (Catalog) - inspired by Pacita Abad's "Wheels of Fortune"."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class PaletteRole(IntEnum):
    """Position of each color inside a palette."""
    BASE = 0
    OUTER_ACCENT = 1
    INNER_ACCENT = 2
    SPOKE_ACCENT = 3
    CENTER = 4


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Palette:
    """
    Five role-tagged colors of one wheel, stored as '#RRGGBB' strings.
    """
    base: str
    outer_accent: str
    inner_accent: str
    spoke_accent: str
    center: str

    @classmethod
    def from_sequence(cls, colors: Sequence[str]) -> Palette:
        if len(colors) != len(PaletteRole):
            raise ValueError(f"A palette needs {len(PaletteRole)} colors, got {len(colors)}.")
        return cls(*(normalize_hex(c) for c in colors))


def normalize_hex(color: str) -> str:
    """Return the color as an upper-case '#RRGGBB' string."""
    value = color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Invalid hex color '{color}'.")
    int(value, 16)  # raises ValueError on non-hex digits
    return f"#{value.upper()}"


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    value = normalize_hex(color)[1:]
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


# ------------------------------------------------------------------------------
# Catalog
# ------------------------------------------------------------------------------
BACKGROUND_COLOR = "#2A363B"

PALETTES: tuple[Palette, ...] = (
    # Deep blue/purple with yellow/orange accents
    Palette.from_sequence(["#45206A", "#FFD700", "#FF8C00", "#B0E0E6", "#8A2BE2"]),
    # Fiery reds and oranges with green/blue contrast
    Palette.from_sequence(["#D90429", "#F4D35E", "#F7B267", "#0A796F", "#2E4057"]),
    # Warm earthy tones with bright pinks/greens
    Palette.from_sequence(["#A34A2A", "#F2AF29", "#E0A890", "#3E8914", "#D4327C"]),
    # Cool blues and greens with yellow/pink pop
    Palette.from_sequence(["#004C6D", "#7FC2BF", "#FFC94F", "#D83A56", "#5C88BF"]),
    # Vibrant pinks and purples with yellow/green
    Palette.from_sequence(["#C11F68", "#F9E795", "#F5EEF8", "#2ECC71", "#8E44AD"]),
    # Deep teal with orange/red
    Palette.from_sequence(["#006D77", "#FF8C00", "#E29578", "#83C5BE", "#D64045"]),
)
