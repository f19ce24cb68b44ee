"""Color value type and hex conversion."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """An 8-bit RGBA color."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    a: int = Field(default=255, ge=0, le=255)

    @property
    def is_opaque(self) -> bool:
        return self.a == 255

    @property
    def alpha_fraction(self) -> float:
        return self.a / 255.0

    def to_hex(self) -> str:
        """Return the ``0xRRGGBB`` string three.js materials are written with.

        Alpha is not part of the hex value; it travels as material opacity.
        """
        return f"0x{self.r:02X}{self.g:02X}{self.b:02X}"

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#RRGGBB``, ``#RRGGBBAA`` or ``0xRRGGBB`` notation."""
        text = value.strip()
        if text.lower().startswith("0x"):
            text = text[2:]
        text = text.lstrip("#")
        if len(text) not in (6, 8):
            raise ValueError(f"Invalid hex color: {value!r}")
        r = int(text[0:2], 16)
        g = int(text[2:4], 16)
        b = int(text[4:6], 16)
        a = int(text[6:8], 16) if len(text) == 8 else 255
        return cls(r=r, g=g, b=b, a=a)


ColorLike = Union[Color, str, tuple]


def as_color(value: ColorLike) -> Color:
    """Coerce a hex string or ``(r, g, b[, a])`` tuple to a :class:`Color`."""
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        return Color.from_hex(value)
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        return Color(**dict(zip("rgba", value)))
    raise ValueError(f"Cannot interpret {value!r} as a color")


BLACK = Color(r=0, g=0, b=0)
WHITE = Color(r=255, g=255, b=255)
DARK_GRAY = Color(r=169, g=169, b=169)
