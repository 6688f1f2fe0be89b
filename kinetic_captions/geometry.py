"""Resolve a named screen zone to concrete pixels for a given canvas.

WHY: Caption styles are authored once for the 1080x1920 reference canvas,
but the video being captioned can be any size. Font size, outline and
margins have to scale with it or captions drift toward the edges and
change weight between a 720p draft and a 4K master.

HOW: ZONES gives each named position an alignment code and a vertical
margin at the reference height. resolve_geometry() scales that margin by
``height / reference_height`` and everything horizontal (font size,
outline, spacing, side margins) by ``width / reference_width``. Every
scaled value is rounded to the nearest whole pixel.

RULES:
- An unknown zone key is a caller bug, not bad user data: raise
  UnknownZoneError.
- Rounding is half up, matching the timestamp codec.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from .errors import UnknownZoneError
from .presets import REFERENCE_CANVAS, ZONES


@dataclass(frozen=True)
class Geometry:
    """Pixel values for one style on one canvas."""
    alignment: int
    margin_v: int
    margin_l: int
    margin_r: int
    font_size: int
    outline: int
    spacing: int


def _scaled(value: float, factor: float) -> int:
    return int(math.floor(value * factor + 0.5))


def zone_for(position: str) -> Tuple[int, int]:
    """Return ``(alignment, reference_margin_v)`` for a zone key."""
    try:
        return ZONES[position]
    except KeyError:
        raise UnknownZoneError(position, list(ZONES.keys())) from None


def scale_margin_v(position: str, height: int) -> int:
    """Vertical margin of ``position`` on a canvas ``height`` pixels tall."""
    _, margin_v = zone_for(position)
    return _scaled(margin_v, height / REFERENCE_CANVAS["height"])


def resolve_geometry(
    position: str,
    width: int,
    height: int,
    font_size: int,
    outline: int,
    spacing: int = 0,
) -> Geometry:
    """Scale reference-canvas style values to the actual canvas.

    Args:
        position: Zone key from ZONES.
        width: Actual canvas width in pixels.
        height: Actual canvas height in pixels.
        font_size: Font size at the reference width.
        outline: Outline width at the reference width.
        spacing: Letter spacing at the reference width.

    Returns:
        Geometry with every value rounded to whole pixels.

    Raises:
        UnknownZoneError: If ``position`` is not a known zone.
        ValueError: If the canvas has a non-positive dimension.
    """
    if width <= 0 or height <= 0:
        raise ValueError("Canvas size must be positive, got {}x{}".format(width, height))

    alignment, _ = zone_for(position)
    factor = width / REFERENCE_CANVAS["width"]

    return Geometry(
        alignment=alignment,
        margin_v=scale_margin_v(position, height),
        margin_l=_scaled(REFERENCE_CANVAS["margin_left"], factor),
        margin_r=_scaled(REFERENCE_CANVAS["margin_right"], factor),
        font_size=_scaled(font_size, factor),
        outline=_scaled(outline, factor),
        spacing=_scaled(spacing, factor),
    )
