"""RGB colours with components in the range 0 to 1."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


def _to_byte(component: float) -> int:
    # Truncates like an integer cast, after absorbing floating-point noise.
    return int(round(component * 255, 6))


@dataclass(frozen=True)
class Color:
    """An RGB colour; each component is a float, normally between 0 and 1."""

    red: float
    green: float
    blue: float

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]

    @classmethod
    def parse(cls, text: str) -> Color:
        """Decode ``#rrggbb`` or ``#aarrggbb``; the alpha part is ignored."""
        if len(text) in (7, 9) and text.startswith("#"):
            digits = text[-6:]
            try:
                red, green, blue = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
            except ValueError as exc:
                raise ValueError("Color can not be decoded.") from exc
            return cls(red / 255, green / 255, blue / 255)
        raise ValueError("Color can not be decoded.")

    def to_hex(self) -> str:
        """Return the colour as ``#rrggbb`` with lower-case hex digits."""
        return "#" + "".join(
            f"{_to_byte(c):02x}" for c in (self.red, self.green, self.blue)
        )

    def scaled(self, scale: float) -> Color:
        """Return the colour with every component multiplied by ``scale``."""
        return Color(self.red * scale, self.green * scale, self.blue * scale)

    def lerp(self, other: Color, f: float) -> Color:
        """Interpolate linearly towards ``other`` by the fraction ``f``."""
        return Color(
            self.red + (other.red - self.red) * f,
            self.green + (other.green - self.green) * f,
            self.blue + (other.blue - self.blue) * f,
        )

    def __str__(self) -> str:
        return f"[{self.red:g},{self.green:g},{self.blue:g}]"

    def __hash__(self) -> int:
        return (
            (_to_byte(self.red) << 16)
            | (_to_byte(self.green) << 8)
            | _to_byte(self.blue)
        )


Color.BLACK = Color(0.0, 0.0, 0.0)
Color.WHITE = Color(1.0, 1.0, 1.0)