"""RGB colours with HSV and HSL conversions and a table of named colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering

__all__ = ["Color", "ColorHSV", "ColorHSL"]


def _channel_to_byte(value: float) -> int:
    """Convert a float channel value to a byte, truncating and saturating."""
    if math.isnan(value):
        return 0
    if value <= 0.0:
        return 0
    if value >= 255.0:
        return 255
    return int(value)


def _hue_sector(hue: float, chroma: float) -> tuple[float, float, float]:
    """Return the (r, g, b) components before the lightness offset is added."""
    hue_prime = hue / 60.0
    x = chroma * (1.0 - abs(math.fmod(hue_prime, 2.0) - 1.0))
    if hue_prime < 1.0:
        return chroma, x, 0.0
    if hue_prime < 2.0:
        return x, chroma, 0.0
    if hue_prime < 3.0:
        return 0.0, chroma, x
    if hue_prime < 4.0:
        return 0.0, x, chroma
    if hue_prime < 5.0:
        return x, 0.0, chroma
    return chroma, 0.0, x


def _hue(r: float, g: float, b: float, high: float, delta: float) -> float:
    if delta == 0.0:
        sector = 0.0
    elif high == r:
        sector = (g - b) / delta
    elif high == g:
        sector = (b - r) / delta + 2.0
    else:
        sector = (r - g) / delta + 4.0
    hue = sector * 60.0
    if hue < 0.0:
        hue += 360.0
    return hue


@dataclass(frozen=True)
class ColorHSV:
    """A colour as hue (degrees), saturation and value (both 0..1)."""

    hue: float
    saturation: float
    value: float


@dataclass(frozen=True)
class ColorHSL:
    """A colour as hue (degrees), saturation and lightness (both 0..1)."""

    hue: float
    saturation: float
    lightness: float


@total_ordering
@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels.

    Colours order by blue, then green, then red, matching their packed layout.
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            channel = getattr(self, name)
            if not isinstance(channel, int) or isinstance(channel, bool):
                raise TypeError(f"{name} must be an int, not {type(channel).__name__}")
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"{name} must be in 0..255, got {channel}")

    def _order_key(self) -> tuple[int, int, int]:
        return self.blue, self.green, self.red

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._order_key() < other._order_key()

    def _unit_channels(self) -> tuple[float, float, float]:
        return self.red / 255.0, self.green / 255.0, self.blue / 255.0

    def to_hsv(self) -> ColorHSV:
        """Convert to HSV."""
        r, g, b = self._unit_channels()
        high = max(r, g, b)
        low = min(r, g, b)
        delta = high - low
        saturation = 0.0 if high == 0.0 else delta / high
        return ColorHSV(_hue(r, g, b, high, delta), saturation, high)

    def to_hsl(self) -> ColorHSL:
        """Convert to HSL."""
        r, g, b = self._unit_channels()
        high = max(r, g, b)
        low = min(r, g, b)
        delta = high - low
        lightness = (high + low) / 2.0
        if lightness in (0.0, 1.0):
            saturation = 0.0
        else:
            saturation = delta / (1.0 - abs(2.0 * lightness - 1.0))
        return ColorHSL(_hue(r, g, b, high, delta), saturation, lightness)

    @classmethod
    def from_hsv(cls, hsv: ColorHSV) -> Color:
        """Build a colour from HSV; channels are truncated and saturated to 0..255."""
        chroma = hsv.value * hsv.saturation
        r, g, b = _hue_sector(hsv.hue, chroma)
        m = hsv.value - chroma
        return cls(
            _channel_to_byte((r + m) * 255.0),
            _channel_to_byte((g + m) * 255.0),
            _channel_to_byte((b + m) * 255.0),
        )

    @classmethod
    def from_hsl(cls, hsl: ColorHSL) -> Color:
        """Build a colour from HSL; channels are truncated and saturated to 0..255."""
        chroma = (1.0 - abs(2.0 * hsl.lightness - 1.0)) * hsl.saturation
        r, g, b = _hue_sector(hsl.hue, chroma)
        m = hsl.lightness - chroma / 2.0
        return cls(
            _channel_to_byte((r + m) * 255.0),
            _channel_to_byte((g + m) * 255.0),
            _channel_to_byte((b + m) * 255.0),
        )

    @classmethod
    def from_int(cls, value: int) -> Color:
        """Unpack a colour from a 32-bit word laid out as 0xRRGGBBxx.

        The top byte is masked off first, so the red channel always comes out 0.
        """
        masked = value & 0x00FFFFFF
        return cls(
            (masked >> 24) & 0xFF,
            (masked >> 16) & 0xFF,
            (masked >> 8) & 0xFF,
        )

    def __int__(self) -> int:
        """Pack the colour into a 32-bit word laid out as 0xRRGGBB00."""
        return (self.red << 24) | (self.green << 16) | (self.blue << 8)


_NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "BLACK": (0x00, 0x00, 0x00),
    "SILVER": (0xC0, 0xC0, 0xC0),
    "GRAY": (0x80, 0x80, 0x80),
    "WHITE": (0xFF, 0xFF, 0xFF),
    "MAROON": (0x80, 0x00, 0x00),
    "RED": (0xFF, 0x00, 0x00),
    "PURPLE": (0x80, 0x00, 0x80),
    "FUCHSIA": (0xFF, 0x00, 0xFF),
    "GREEN": (0x00, 0x80, 0x00),
    "LIME": (0x00, 0xFF, 0x00),
    "OLIVE": (0x80, 0x80, 0x00),
    "YELLOW": (0xFF, 0xFF, 0x00),
    "NAVY": (0x00, 0x00, 0x80),
    "BLUE": (0x00, 0x00, 0xFF),
    "TEAL": (0x00, 0x80, 0x80),
    "AQUA": (0x00, 0xFF, 0xFF),
    "ALICEBLUE": (0xF0, 0xF8, 0xFF),
    "ANTIQUEWHITE": (0xFA, 0xEB, 0xD7),
    "AQUAMARINE": (0x7F, 0xFF, 0xD4),
    "AZURE": (0xF0, 0xFF, 0xFF),
    "BEIGE": (0xF5, 0xF5, 0xDC),
    "BISQUE": (0xFF, 0xE4, 0xC4),
    "BLANCHEDALMOND": (0xFF, 0xEB, 0xCD),
    "BLUEVIOLET": (0x8A, 0x2B, 0xE2),
    "BROWN": (0xA5, 0x2A, 0x2A),
    "BURLYWOOD": (0xDE, 0xB8, 0x87),
    "CADETBLUE": (0x5F, 0x9E, 0xA0),
    "CHARTREUSE": (0x7F, 0xFF, 0x00),
    "CHOCOLATE": (0xD2, 0x69, 0x1E),
    "CORAL": (0xFF, 0x7F, 0x50),
    "CORNFLOWERBLUE": (0x64, 0x95, 0xED),
    "CORNSILK": (0xFF, 0xF8, 0xDC),
    "CRIMSON": (0xDC, 0x14, 0x3C),
    "DARKBLUE": (0x00, 0x00, 0x8B),
    "DARKCYAN": (0x00, 0x8B, 0x8B),
    "DARKGOLDENROD": (0xB8, 0x86, 0x0B),
    "DARKGRAY": (0xA9, 0xA9, 0xA9),
    "DARKGREEN": (0x00, 0x64, 0x00),
    "DARKGREY": (0xA9, 0xA9, 0xA9),
    "DARKKHAKI": (0xBD, 0xB7, 0x6B),
    "DARKMAGENTA": (0x8B, 0x00, 0x8B),
    "DARKOLIVEGREEN": (0x55, 0x6B, 0x2F),
    "DARKORANGE": (0xFF, 0x8C, 0x00),
    "DARKORCHID": (0x99, 0x32, 0xCC),
    "DARKRED": (0x8B, 0x00, 0x00),
    "DARKSALMON": (0xE9, 0x96, 0x7A),
    "DARKSEAGREEN": (0x8F, 0xBC, 0x8F),
    "DARKSLATEBLUE": (0x48, 0x3D, 0x8B),
    "DARKSLATEGRAY": (0x2F, 0x4F, 0x4F),
    "DARKSLATEGREY": (0x2F, 0x4F, 0x4F),
    "DARKTURQUOISE": (0x00, 0xCE, 0xD1),
    "DARKVIOLET": (0x94, 0x00, 0xD3),
    "DEEPPINK": (0xFF, 0x14, 0x93),
    "DEEPSKYBLUE": (0x00, 0xBF, 0xFF),
    "DIMGRAY": (0x69, 0x69, 0x69),
    "DIMGREY": (0x69, 0x69, 0x69),
    "DODGERBLUE": (0x1E, 0x90, 0xFF),
    "FIREBRICK": (0xB2, 0x22, 0x22),
    "FLORALWHITE": (0xFF, 0xFA, 0xF0),
    "FORESTGREEN": (0x22, 0x8B, 0x22),
    "GAINSBORO": (0xDC, 0xDC, 0xDC),
    "GHOSTWHITE": (0xF8, 0xF8, 0xFF),
    "GOLD": (0xFF, 0xD7, 0x00),
    "GOLDENROD": (0xDA, 0xA5, 0x20),
    "GREENYELLOW": (0xAD, 0xFF, 0x2F),
    "HONEYDEW": (0xF0, 0xFF, 0xF0),
    "HOTPINK": (0xFF, 0x69, 0xB4),
    "INDIANRED": (0xCD, 0x5C, 0x5C),
    "INDIGO": (0x4B, 0x00, 0x82),
    "IVORY": (0xFF, 0xFF, 0xF0),
    "KHAKI": (0xF0, 0xE6, 0x8C),
    "LAVENDER": (0xE6, 0xE6, 0xFA),
    "LAVENDERBLUSH": (0xFF, 0xF0, 0xF5),
    "LAWNGREEN": (0x7C, 0xFC, 0x00),
    "LEMONCHIFFON": (0xFF, 0xFA, 0xCD),
    "LIGHTBLUE": (0xAD, 0xD8, 0xE6),
    "LIGHTCORAL": (0xF0, 0x80, 0x80),
    "LIGHTCYAN": (0xE0, 0xFF, 0xFF),
    "LIGHTGOLDENRODYELLOW": (0xFA, 0xFA, 0xD2),
    "LIGHTGRAY": (0xD3, 0xD3, 0xD3),
    "LIGHTGREEN": (0x90, 0xEE, 0x90),
    "LIGHTGREY": (0xD3, 0xD3, 0xD3),
    "LIGHTPINK": (0xFF, 0xB6, 0xC1),
    "LIGHTSALMON": (0xFF, 0xA0, 0x7A),
    "LIGHTSEAGREEN": (0x20, 0xB2, 0xAA),
    "LIGHTSKYBLUE": (0x87, 0xCE, 0xFA),
    "LIGHTSLATEGRAY": (0x77, 0x88, 0x99),
    "LIGHTSLATEGREY": (0x77, 0x88, 0x99),
    "LIGHTSTEELBLUE": (0xB0, 0xC4, 0xDE),
    "LIGHTYELLOW": (0xFF, 0xFF, 0xE0),
    "LIMEGREEN": (0x32, 0xCD, 0x32),
    "LINEN": (0xFA, 0xF0, 0xE6),
    "MEDIUMAQUAMARINE": (0x66, 0xCD, 0xAA),
    "MEDIUMBLUE": (0x00, 0x00, 0xCD),
    "MEDIUMORCHID": (0xBA, 0x55, 0xD3),
    "MEDIUMPURPLE": (0x93, 0x70, 0xDB),
    "MEDIUMSEAGREEN": (0x3C, 0xB3, 0x71),
    "MEDIUMSLATEBLUE": (0x7B, 0x68, 0xEE),
    "MEDIUMSPRINGGREEN": (0x00, 0xFA, 0x9A),
    "MEDIUMTURQUOISE": (0x48, 0xD1, 0xCC),
    "MEDIUMVIOLETRED": (0xC7, 0x15, 0x85),
    "MIDNIGHTBLUE": (0x19, 0x19, 0x70),
    "MINTCREAM": (0xF5, 0xFF, 0xFA),
    "MISTYROSE": (0xFF, 0xE4, 0xE1),
    "MOCCASIN": (0xFF, 0xE4, 0xB5),
    "NAVAJOWHITE": (0xFF, 0xDE, 0xAD),
    "OLDLACE": (0xFD, 0xF5, 0xE6),
    "OLIVEDRAB": (0x6B, 0x8E, 0x23),
    "ORANGE": (0xFF, 0xA5, 0x00),
    "ORANGERED": (0xFF, 0x45, 0x00),
    "ORCHID": (0xDA, 0x70, 0xD6),
    "PALEGOLDENROD": (0xEE, 0xE8, 0xAA),
    "PALEGREEN": (0x98, 0xFB, 0x98),
    "PALETURQUOISE": (0xAF, 0xEE, 0xEE),
    "PALEVIOLETRED": (0xDB, 0x70, 0x93),
    "PAPAYAWHIP": (0xFF, 0xEF, 0xD5),
    "PEACHPUFF": (0xFF, 0xDA, 0xB9),
    "PERU": (0xCD, 0x85, 0x3F),
    "PINK": (0xFF, 0xC0, 0xCB),
    "PLUM": (0xDD, 0xA0, 0xDD),
    "POWDERBLUE": (0xB0, 0xE0, 0xE6),
    "REBECCAPURPLE": (0x66, 0x33, 0x99),
    "ROSYBROWN": (0xBC, 0x8F, 0x8F),
    "ROYALBLUE": (0x41, 0x69, 0xE1),
    "SADDLEBROWN": (0x8B, 0x45, 0x13),
    "SALMON": (0xFA, 0x80, 0x72),
    "SANDYBROWN": (0xF4, 0xA4, 0x60),
    "SEAGREEN": (0x2E, 0x8B, 0x57),
    "SEASHELL": (0xFF, 0xF5, 0xEE),
    "SIENNA": (0xA0, 0x52, 0x2D),
    "SKYBLUE": (0x87, 0xCE, 0xEB),
    "SLATEBLUE": (0x6A, 0x5A, 0xCD),
    "SLATEGRAY": (0x70, 0x80, 0x90),
    "SLATEGREY": (0x70, 0x80, 0x90),
    "SNOW": (0xFF, 0xFA, 0xFA),
    "SPRINGGREEN": (0x00, 0xFF, 0x7F),
    "STEELBLUE": (0x46, 0x82, 0xB4),
    "TAN": (0xD2, 0xB4, 0x8C),
    "THISTLE": (0xD8, 0xBF, 0xD8),
    "TOMATO": (0xFF, 0x63, 0x47),
    "TURQUOISE": (0x40, 0xE0, 0xD0),
    "VIOLET": (0xEE, 0x82, 0xEE),
    "WHEAT": (0xF5, 0xDE, 0xB3),
    "WHITESMOKE": (0xF5, 0xF5, 0xF5),
    "YELLOWGREEN": (0x9A, 0xCD, 0x32),
}

for _name, _rgb in _NAMED_COLORS.items():
    setattr(Color, _name, Color(*_rgb))
del _name, _rgb