"""Document assembly and ASS serialization.

WHY: The renderer (ffmpeg's ``ass`` filter via libass) is strict about the
file layout: section headers, a Format line per table, comma-joined
fields in a fixed order, ``-1``/``0`` for booleans. This module owns that
layout so the rest of the package deals only in dataclasses.

HOW: Style and event factories fill in format defaults; create_document()
wraps them with the canvas size; generate_ass() turns a Document into
text; save_document() writes it. build_caption_style() derives the
animated-caption style from a caption config and the actual canvas, and
build_plain_document() produces classic one-event-per-phrase subtitles.

RULES:
- generate_ass() is a pure function of the Document.
- The event text field is written last and unescaped apart from line
  breaks (written as ``\\N``); it may contain commas.
- Lines are joined with "\\n"; files are UTF-8.
"""

import dataclasses
import logging
from pathlib import Path
from typing import Any, Dict, Sequence, Union

from .colors import WHITE, color_to_bgr, rgb_to_bgr, rgb_to_bgr_with_alpha
from .errors import EmptyCaptionsError
from .geometry import resolve_geometry
from .layout import ASS_LINE_BREAK, wrap_text
from .models import CaptionPhrase, DisplayEvent, Document, Style
from .presets import PALETTE
from .timecode import seconds_to_ass_time

logger = logging.getLogger(__name__)

STYLE_FORMAT = (
    "Name", "Fontname", "Fontsize", "PrimaryColour", "SecondaryColour",
    "OutlineColour", "BackColour", "Bold", "Italic", "Underline", "StrikeOut",
    "ScaleX", "ScaleY", "Spacing", "Angle", "BorderStyle", "Outline", "Shadow",
    "Alignment", "MarginL", "MarginR", "MarginV", "Encoding",
)

EVENT_FORMAT = (
    "Layer", "Start", "End", "Style", "Name",
    "MarginL", "MarginR", "MarginV", "Effect", "Text",
)

DEFAULT_TITLE = "Generated Subtitles"


# =============================================================================
# Factories
# =============================================================================

def create_default_style(name: str = "Default", **overrides: Any) -> Style:
    """Arial 48, bold white text with a black outline, bottom centre."""
    return dataclasses.replace(Style(name=name), **overrides)


def create_tiktok_style(name: str = "TikTok", **overrides: Any) -> Style:
    """Heavy-outline style tuned for 1080x1920 vertical video.

    Primary is the inactive yellow, secondary the active white; the thick
    outline keeps contrast above 4.5:1 on busy footage.
    """
    values: Dict[str, Any] = {
        "fontname": "Helvetica Bold",
        "fontsize": 80,
        "primary_color": rgb_to_bgr(*PALETTE["tiktok_yellow"]),
        "secondary_color": rgb_to_bgr(*WHITE),
        "outline_color": rgb_to_bgr(0, 0, 0),
        "back_color": rgb_to_bgr_with_alpha(0, 0, 0, 255),
        "bold": True,
        "outline": 8,
        "shadow": 0,
        "spacing": 3,
        "alignment": 8,
        "margin_l": 60,
        "margin_r": 120,
        "margin_v": 300,
    }
    values.update(overrides)
    return create_default_style(name, **values)


def build_caption_style(
    config: Dict[str, Any],
    width: int,
    height: int,
    name: str = "TikTok",
) -> Style:
    """Derive the caption style for ``config`` on a ``width`` x ``height`` canvas.

    The inactive color is the style's primary color (what un-highlighted
    words fall back to after a reset); the active color is secondary.

    Raises:
        UnknownZoneError: If config["position"] is not a known zone.
    """
    geometry = resolve_geometry(
        config["position"],
        width,
        height,
        font_size=config["font_size"],
        outline=config["stroke_width"],
        spacing=config["letter_spacing"],
    )
    return create_tiktok_style(
        name,
        fontname=config["font"],
        fontsize=geometry.font_size,
        primary_color=color_to_bgr(config["inactive_color"]),
        secondary_color=color_to_bgr(config["active_color"]),
        outline_color=color_to_bgr(config["stroke_color"]),
        outline=geometry.outline,
        spacing=geometry.spacing,
        alignment=geometry.alignment,
        margin_l=geometry.margin_l,
        margin_r=geometry.margin_r,
        margin_v=geometry.margin_v,
    )


def create_event(
    start: float,
    end: float,
    text: str,
    style: str = "Default",
    **overrides: Any,
) -> DisplayEvent:
    return DisplayEvent(start=start, end=end, text=text, style=style, **overrides)


def create_document(
    width: int,
    height: int,
    styles: Sequence[Style],
    events: Sequence[DisplayEvent],
    title: str = DEFAULT_TITLE,
) -> Document:
    """Wrap styles and events for a ``width`` x ``height`` canvas.

    Wrap style 2 (no automatic wrapping) because lines are already packed.
    """
    return Document(
        title=title,
        play_res_x=width,
        play_res_y=height,
        styles=tuple(styles),
        events=tuple(events),
        wrap_style=2,
        scaled_border_and_shadow=True,
    )


def build_plain_document(
    captions: Sequence[CaptionPhrase],
    config: Dict[str, Any],
    width: int,
    height: int,
    title: str = DEFAULT_TITLE,
) -> Document:
    """Classic subtitles: one static event per phrase, no animation.

    Phrase text is wrapped to config["max_chars_per_line"]; explicit line
    breaks in the source (e.g. multi-line SRT cues) are kept as ``\\N``.

    Raises:
        EmptyCaptionsError: If no cue has any text.
    """
    style = build_caption_style(config, width, height, name="Default")
    style = dataclasses.replace(style, primary_color=color_to_bgr(config["active_color"]))

    events = []
    for caption in captions:
        lines = [
            wrap_text(part, config["max_chars_per_line"])
            for part in caption.text.splitlines()
            if part.strip()
        ]
        if not lines:
            logger.warning("Skipping empty cue at %.3f", caption.start)
            continue
        events.append(create_event(
            caption.start,
            max(caption.end, caption.start),
            ASS_LINE_BREAK.join(lines),
            style.name,
        ))

    if not events:
        raise EmptyCaptionsError("Captions contain no text; nothing to render")

    return create_document(width, height, [style], events, title)


# =============================================================================
# Serialization
# =============================================================================

def _flag(value: bool) -> str:
    return "-1" if value else "0"


def format_style(style: Style) -> str:
    """Render one ``Style:`` line in STYLE_FORMAT order."""
    fields = [
        style.name, style.fontname, style.fontsize,
        style.primary_color, style.secondary_color, style.outline_color, style.back_color,
        _flag(style.bold), _flag(style.italic), _flag(style.underline), _flag(style.strikeout),
        style.scale_x, style.scale_y, style.spacing, style.angle,
        style.border_style, style.outline, style.shadow,
        style.alignment, style.margin_l, style.margin_r, style.margin_v, style.encoding,
    ]
    return "Style: " + ",".join(str(f) for f in fields)


def _hard_breaks(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n").replace("\n", ASS_LINE_BREAK)


def format_event(event: DisplayEvent) -> str:
    """Render one ``Dialogue:`` line in EVENT_FORMAT order.

    Raw line breaks in the text become the ASS hard break ``\\N``; a
    literal newline would end the Dialogue line early.
    """
    fields = [
        event.layer,
        seconds_to_ass_time(event.start),
        seconds_to_ass_time(event.end),
        event.style,
        event.name,
        event.margin_l, event.margin_r, event.margin_v,
        event.effect,
        _hard_breaks(event.text),
    ]
    return "Dialogue: " + ",".join(str(f) for f in fields)


def generate_ass(doc: Document) -> str:
    """Serialize a Document to ASS text."""
    lines = [
        "[Script Info]",
        "Title: {}".format(doc.title),
        "ScriptType: v4.00+",
        "PlayResX: {}".format(doc.play_res_x),
        "PlayResY: {}".format(doc.play_res_y),
        "WrapStyle: {}".format(doc.wrap_style),
        "ScaledBorderAndShadow: {}".format("yes" if doc.scaled_border_and_shadow else "no"),
        "",
        "[V4+ Styles]",
        "Format: " + ", ".join(STYLE_FORMAT),
    ]
    lines.extend(format_style(style) for style in doc.styles)
    lines.append("")
    lines.append("[Events]")
    lines.append("Format: " + ", ".join(EVENT_FORMAT))
    lines.extend(format_event(event) for event in doc.events)

    return "\n".join(lines)


def save_document(doc: Document, output_path: Union[str, Path]) -> Path:
    """Write ``doc`` as UTF-8 ASS text and return the path written."""
    path = Path(output_path)
    path.write_text(generate_ass(doc), encoding="utf-8")
    logger.info("Saved %d events to %s", len(doc.events), path)
    return path
