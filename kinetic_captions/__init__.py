"""Word-by-word animated caption compiler for ASS subtitles.

WHY: Vertical social video uses captions that reveal one word at a time,
highlight the word being spoken and bounce it for emphasis. The video
pipeline burns these in with ffmpeg's ``ass`` filter; this package builds
the ``.ass`` file it needs from a word-level transcript.

HOW: compile_captions(captions, preset, width, height) resolves the
preset into a config dict, synthesizes one Dialogue event per word,
derives a style scaled to the canvas, and serializes the document.
build_document() stops before serialization; write_captions() also
writes the file.

RULES:
- The public entry points are compile_captions(), build_document() and
  write_captions().
- Preset names: "tiktok" (default), "karaoke", "bounce", "typewriter".
- ``options`` override individual preset keys; presets are never mutated.
- Each call works on its own config copy and Document; nothing is shared
  between calls.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

from .colors import EncodedColor, HexColor, NamedColor, RGBColor, color_to_bgr
from .document import build_caption_style, build_plain_document, create_document, generate_ass, save_document
from .errors import CaptionError, EmptyCaptionsError, TranscriptFormatError, UnknownZoneError
from .events import synthesize_events
from .layout import segment_phrases, split_into_lines
from .models import CaptionPhrase, DisplayEvent, Document, Style, Word
from .presets import DEFAULT_PRESET, PRESETS, ZONES, resolve_config
from .timecode import seconds_to_ass_time

__version__ = "0.1.0"

__all__ = [
    "compile_captions",
    "build_document",
    "write_captions",
    "CaptionPhrase",
    "Word",
    "Style",
    "DisplayEvent",
    "Document",
    "NamedColor",
    "HexColor",
    "RGBColor",
    "EncodedColor",
    "CaptionError",
    "EmptyCaptionsError",
    "UnknownZoneError",
    "TranscriptFormatError",
    "PRESETS",
    "ZONES",
    "color_to_bgr",
    "seconds_to_ass_time",
    "segment_phrases",
    "split_into_lines",
    "build_plain_document",
]

CAPTION_STYLE_NAME = "TikTok"
DEFAULT_DOCUMENT_TITLE = "TikTok Captions"


def build_document(
    captions: Sequence[CaptionPhrase],
    preset: str = DEFAULT_PRESET,
    width: int = 1080,
    height: int = 1920,
    options: Optional[Dict[str, Any]] = None,
    title: str = DEFAULT_DOCUMENT_TITLE,
) -> Document:
    """Compile caption phrases into an animated-caption Document.

    Args:
        captions: Phrases in display order; phrases without ``words`` are
            split evenly over their time range.
        preset: Preset name from PRESETS.
        width: Canvas width of the target video in pixels.
        height: Canvas height of the target video in pixels.
        options: Per-call overrides of preset keys.
        title: Script title written to the header.

    Returns:
        A Document with one style and one event per word.

    Raises:
        ValueError: If the preset or an option key is unknown.
        EmptyCaptionsError: If there are no phrases or no words.
        UnknownZoneError: If the position option is not a known zone.
    """
    cfg = resolve_config(preset, options)
    style = build_caption_style(cfg, width, height, name=CAPTION_STYLE_NAME)
    events = synthesize_events(captions, cfg, style_name=style.name)
    return create_document(width, height, [style], events, title)


def compile_captions(
    captions: Sequence[CaptionPhrase],
    preset: str = DEFAULT_PRESET,
    width: int = 1080,
    height: int = 1920,
    options: Optional[Dict[str, Any]] = None,
    title: str = DEFAULT_DOCUMENT_TITLE,
) -> str:
    """Compile caption phrases straight to ASS text. See build_document()."""
    return generate_ass(build_document(captions, preset, width, height, options, title))


def write_captions(
    captions: Sequence[CaptionPhrase],
    output_path: Union[str, Path],
    preset: str = DEFAULT_PRESET,
    width: int = 1080,
    height: int = 1920,
    options: Optional[Dict[str, Any]] = None,
    title: str = DEFAULT_DOCUMENT_TITLE,
) -> Path:
    """Compile caption phrases and write the ASS file; returns its path."""
    doc = build_document(captions, preset, width, height, options, title)
    return save_document(doc, output_path)
