"""Display color for folder swatches."""

from dataclasses import dataclass
from enum import Enum

from papirus_switcher.core.constants import ANSI_16_PALETTE


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    STANDARD_16 = "16"      # Standard 16-color (SGR 30-37, 40-47, 90-97, 100-107)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


@dataclass(frozen=True)
class Color:
    """
    A swatch color.
    
    Folder tints are defined as true color; terminals without 24-bit
    support get the nearest of the 16 standard colors instead.
    """
    mode: ColorMode
    value: int | tuple[int, int, int]

    @classmethod
    def from_index(cls, index: int) -> "Color":
        """Create a Color from a standard palette index (0-15)."""
        if not 0 <= index <= 15:
            raise ValueError(f"Standard color index must be 0-15, got {index}")
        return cls(ColorMode.STANDARD_16, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    @property
    def rgb(self) -> tuple[int, int, int]:
        """RGB triple for this color."""
        if isinstance(self.value, int):
            return ANSI_16_PALETTE[self.value]
        return self.value

    def nearest_16(self) -> "Color":
        """Closest standard 16 color by squared RGB distance."""
        if self.mode == ColorMode.STANDARD_16:
            return self
        r, g, b = self.rgb
        best = min(
            range(len(ANSI_16_PALETTE)),
            key=lambda i: (
                (ANSI_16_PALETTE[i][0] - r) ** 2
                + (ANSI_16_PALETTE[i][1] - g) ** 2
                + (ANSI_16_PALETTE[i][2] - b) ** 2
            ),
        )
        return Color(ColorMode.STANDARD_16, best)

    def _sgr(self, normal: int, bright: int, direct: int) -> str:
        if isinstance(self.value, int):
            return str(normal + self.value if self.value < 8 else bright + self.value - 8)
        r, g, b = self.rgb
        return f"{direct};2;{r};{g};{b}"

    def to_sgr_fg(self) -> str:
        """SGR parameters selecting this as the foreground color."""
        return self._sgr(30, 90, 38)

    def to_sgr_bg(self) -> str:
        return self._sgr(40, 100, 48)

    def for_terminal(self, truecolor: bool) -> "Color":
        """This color, or its 16-color approximation when truecolor is off."""
        return self if truecolor else self.nearest_16()

