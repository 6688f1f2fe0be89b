"""Color codec: named, hex and RGB colors to ASS ``&HBBGGRR`` strings.

WHY: ASS stores colors with the bytes reversed relative to the usual RGB
notation (blue, green, red, optionally preceded by alpha) behind a
``&H`` sigil. Caption configs, on the other hand, are written by people
who say "white", "#FEE715" or (255, 0, 0). This module is the only place
that translates between the two.

HOW: A color value is one of four small dataclasses (a tagged union):
NamedColor, HexColor, RGBColor and EncodedColor (an ``&H...`` string that
is already in ASS byte order). Each variant decodes itself to an RGB
triple via ``to_rgb()``; color_to_bgr() then packs the triple.
coerce_color() builds the right variant from raw config values at the
boundary.

RULES:
- Bad color input is never fatal: log a warning and use opaque white.
  Caption generation must not abort a video pipeline over a cosmetic
  mistake.
- Channels are two uppercase hex digits each.
- Alpha 00 is fully visible, FF fully transparent.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from .presets import PALETTE

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

WHITE: RGB = (255, 255, 255)

_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{6})$")
_ENCODED_RE = re.compile(r"^&H([0-9A-Fa-f]{2})?([0-9A-Fa-f]{6})&?$")


@dataclass(frozen=True)
class NamedColor:
    """A color from PALETTE, looked up case-insensitively."""
    name: str

    def to_rgb(self) -> RGB:
        rgb = PALETTE.get(self.name.lower())
        if rgb is None:
            logger.warning("Unknown color name %r, defaulting to white", self.name)
            return WHITE
        return rgb


@dataclass(frozen=True)
class HexColor:
    """A ``#RRGGBB`` or ``RRGGBB`` string."""
    value: str

    def to_rgb(self) -> RGB:
        match = _HEX_RE.match(self.value.strip())
        if match is None:
            logger.warning("Malformed hex color %r, defaulting to white", self.value)
            return WHITE
        digits = match.group(1)
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


@dataclass(frozen=True)
class RGBColor:
    """An explicit (r, g, b) triple, each channel 0-255."""
    r: int
    g: int
    b: int

    def to_rgb(self) -> RGB:
        channels = (self.r, self.g, self.b)
        if not all(isinstance(c, int) and 0 <= c <= 255 for c in channels):
            logger.warning("RGB color %r out of range, defaulting to white", channels)
            return WHITE
        return channels


@dataclass(frozen=True)
class EncodedColor:
    """A color already in ASS order: ``&HBBGGRR`` or ``&HAABBGGRR``."""
    value: str

    def to_rgb(self) -> RGB:
        try:
            return bgr_to_rgb(self.value)
        except ValueError:
            logger.warning("Malformed ASS color %r, defaulting to white", self.value)
            return WHITE


Color = Union[NamedColor, HexColor, RGBColor, EncodedColor]
ColorInput = Union[Color, str, Sequence[int]]


def coerce_color(value: ColorInput) -> Color:
    """Build a Color variant from a raw config value.

    Strings starting with ``&H`` are EncodedColor, palette names are
    NamedColor, ``#RRGGBB``/``RRGGBB`` strings are HexColor; anything else
    that is a string is treated as a (possibly unknown) name. Sequences of
    three numbers become RGBColor.
    """
    if isinstance(value, (NamedColor, HexColor, RGBColor, EncodedColor)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.upper().startswith("&H"):
            return EncodedColor(text)
        if text.lower() in PALETTE:
            return NamedColor(text)
        if _HEX_RE.match(text):
            return HexColor(text)
        return NamedColor(text)
    channels = tuple(value)
    if len(channels) != 3:
        logger.warning("Color %r is not an RGB triple, defaulting to white", value)
        return RGBColor(*WHITE)
    return RGBColor(*channels)


def parse_color(value: ColorInput) -> RGB:
    """Decode any accepted color input to an RGB triple."""
    return coerce_color(value).to_rgb()


def rgb_to_bgr(r: int, g: int, b: int) -> str:
    """Pack RGB into ASS ``&HBBGGRR`` order."""
    return "&H{:02X}{:02X}{:02X}".format(b, g, r)


def rgb_to_bgr_with_alpha(r: int, g: int, b: int, alpha: int = 0) -> str:
    """Pack RGB plus alpha into ASS ``&HAABBGGRR`` order."""
    return "&H{:02X}{:02X}{:02X}{:02X}".format(alpha, b, g, r)


def bgr_to_rgb(encoded: str) -> RGB:
    """Decode an ``&HBBGGRR`` / ``&HAABBGGRR`` string back to RGB.

    The alpha byte, if present, is discarded.

    Raises:
        ValueError: If the string is not an ASS color.
    """
    match = _ENCODED_RE.match(encoded.strip())
    if match is None:
        raise ValueError("Not an ASS color: {!r}".format(encoded))
    digits = match.group(2)
    b, g, r = int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
    return (r, g, b)


def color_to_bgr(value: ColorInput, alpha: Optional[int] = None) -> str:
    """Encode any accepted color input as an ASS color string.

    Args:
        value: Color variant or raw config value.
        alpha: Optional alpha byte; when given, the result is
            ``&HAABBGGRR`` instead of ``&HBBGGRR``.
    """
    r, g, b = parse_color(value)
    if alpha is None:
        return rgb_to_bgr(r, g, b)
    return rgb_to_bgr_with_alpha(r, g, b, alpha)
