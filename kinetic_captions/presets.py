"""Palette, reference canvas, position zones and caption-style presets.

WHY: Caption styling is a handful of numbers and colors that editors tune
per platform. Keeping them as importable constants lets callers pick a
preset by name, and lets the geometry and color code look values up
without any global mutable state.

HOW: PALETTE maps color names to RGB triples. REFERENCE_CANVAS describes
the 9:16 canvas (1080x1920) all pixel values below are authored for.
ZONES maps a named screen position to an alignment code and a vertical
margin at the reference height. Each caption preset is a plain dict of
compiler options; PRESETS maps preset names to those dicts.

RULES:
- Everything here is read-only. PALETTE and ZONES are MappingProxyType;
  preset dicts must be deep-copied before use (resolve_config does this).
- Pixel values are for the reference canvas. geometry.py scales them.
- Alignment codes use the numpad layout: 7 8 9 top, 4 5 6 middle,
  1 2 3 bottom.
"""

import copy
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

PALETTE: Mapping[str, Tuple[int, int, int]] = MappingProxyType({
    "white": (255, 255, 255),
    "black": (0, 0, 0),
    "yellow": (255, 229, 92),
    "tiktok_yellow": (254, 231, 21),  # #FEE715
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
    "cyan": (0, 255, 255),
    "magenta": (255, 0, 255),
})

# 9:16 vertical video; safe zone is the area not covered by platform UI.
REFERENCE_CANVAS: Mapping[str, int] = MappingProxyType({
    "width": 1080,
    "height": 1920,
    "safe_zone_width": 840,
    "safe_zone_height": 1280,
    "margin_top": 120,
    "margin_bottom": 240,
    "margin_left": 60,
    "margin_right": 120,
})

ZONES: Mapping[str, Tuple[int, int]] = MappingProxyType({
    "upper-middle": (8, 300),  # hooks, top centre
    "middle": (5, 0),
    "lower-middle": (2, 400),  # above the navigation bar
    "top": (8, 120),
    "bottom": (2, 240),
})

DEFAULT_POSITION = "upper-middle"

# Word-by-word animated captions for vertical video
PRESET_TIKTOK: Dict[str, Any] = {
    "font": "Helvetica Bold",
    "font_size": 80,
    "active_color": "white",
    "inactive_color": "tiktok_yellow",
    "stroke_color": (0, 0, 0),
    "stroke_width": 8,
    "letter_spacing": 3,
    "position": DEFAULT_POSITION,
    "bounce_scale": 1.12,
    "max_chars_per_line": 27,
    "use_bounce": True,
    "fade_duration": 0.15,
    "pause_between_segments": 0.1,
    "animation_duration": 50,
    "max_words_per_phrase": 4,
}

PRESET_KARAOKE: Dict[str, Any] = {
    "font": "Arial",
    "font_size": 28,
    "active_color": "white",
    "inactive_color": "cyan",
    "stroke_color": (0, 0, 0),
    "stroke_width": 2,
    "letter_spacing": 0,
    "position": "bottom",
    "bounce_scale": 1.0,
    "max_chars_per_line": 42,
    "use_bounce": False,
    "fade_duration": 0.1,
    "pause_between_segments": 0.05,
    "animation_duration": 50,
    "max_words_per_phrase": 7,
}

PRESET_BOUNCE: Dict[str, Any] = {
    "font": "Impact",
    "font_size": 72,
    "active_color": "yellow",
    "inactive_color": "white",
    "stroke_color": (0, 0, 0),
    "stroke_width": 4,
    "letter_spacing": 0,
    "position": "lower-middle",
    "bounce_scale": 1.25,
    "max_chars_per_line": 20,
    "use_bounce": True,
    "fade_duration": 0.1,
    "pause_between_segments": 0.1,
    "animation_duration": 80,
    "max_words_per_phrase": 3,
}

PRESET_TYPEWRITER: Dict[str, Any] = {
    "font": "Courier New",
    "font_size": 48,
    "active_color": "green",
    "inactive_color": "green",
    "stroke_color": (0, 0, 0),
    "stroke_width": 1,
    "letter_spacing": 0,
    "position": "bottom",
    "bounce_scale": 1.0,
    "max_chars_per_line": 32,
    "use_bounce": False,
    "fade_duration": 0.0,
    "pause_between_segments": 0.0,
    "animation_duration": 0,
    "max_words_per_phrase": 6,
}

PRESETS: Dict[str, Dict[str, Any]] = {
    "tiktok": PRESET_TIKTOK,
    "karaoke": PRESET_KARAOKE,
    "bounce": PRESET_BOUNCE,
    "typewriter": PRESET_TYPEWRITER,
}

DEFAULT_PRESET = "tiktok"


def resolve_config(
    preset: str = DEFAULT_PRESET,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Return a private copy of a preset with caller overrides applied.

    WHY: Presets are shared constants. Every compilation call must get its
    own dict so that concurrent calls with different options never see
    each other's changes.

    HOW: Deep-copies the named preset, then applies ``overrides`` key by
    key. ``None`` override values are ignored so CLI flags that were not
    given fall through to the preset.

    Args:
        preset: Preset name, one of PRESETS.
        overrides: Option values replacing the preset's.

    Returns:
        A new config dict.

    Raises:
        ValueError: If the preset name or an override key is unknown.
    """
    if preset not in PRESETS:
        raise ValueError(
            "Unknown preset '{}'. Available: {}".format(
                preset, ", ".join(PRESETS.keys())
            )
        )
    cfg = copy.deepcopy(PRESETS[preset])

    for key, value in (overrides or {}).items():
        if key not in cfg:
            raise ValueError("Unknown caption option '{}'".format(key))
        if value is not None:
            cfg[key] = value

    return cfg
