"""Command-line interface for the caption compiler.

WHY: Shell-driven video pipelines need the ``.ass`` file as a build step:
transcript in, subtitle file out, then ``ffmpeg -vf ass=...``. The CLI
wraps the library for that use without any Python glue.

HOW: argparse reads the input path, output path and style options.
Input is a JSON transcript (phrases or flat words) or an SRT file;
``--plain`` emits classic static subtitles instead of word reveals.
Defaults for preset and canvas size come from config.py (environment /
.env). Status messages go to stderr; with no output path the document is
printed to stdout.

RULES:
- Usage:
    python -m kinetic_captions words.json captions.ass --width 720 --height 1280
    python -m kinetic_captions cues.srt captions.ass --plain --preset karaoke
    cat words.json | python -m kinetic_captions - > captions.ass
- Exit codes: 0 = success, 1 = error.
- Caption errors (ValueError) and I/O errors are reported on stderr,
  never as tracebacks.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import build_document
from .config import DEFAULT_HEIGHT, DEFAULT_PRESET, DEFAULT_WIDTH, LOG_LEVEL, LOG_LEVELS
from .document import build_plain_document, generate_ass
from .errors import EmptyCaptionsError
from .models import CaptionPhrase
from .presets import PRESETS, ZONES, resolve_config
from .transcript import load_captions, parse_srt, parse_transcript, try_parse_json


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _read_captions(args: argparse.Namespace, max_words: int) -> List[CaptionPhrase]:
    if args.input_file != "-":
        return load_captions(args.input_file, max_words, srt=args.srt)

    raw = sys.stdin.read()
    if args.srt:
        return parse_srt(raw)
    return parse_transcript(try_parse_json(raw), max_words)


def _options_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    options: Dict[str, Any] = {
        "position": args.position,
        "font_size": args.font_size,
        "active_color": args.active_color,
        "inactive_color": args.inactive_color,
        "max_chars_per_line": args.max_chars,
        "max_words_per_phrase": args.max_words,
    }
    if args.no_bounce:
        options["use_bounce"] = False
    return options


def run(args: argparse.Namespace) -> None:
    """Compile the captions described by ``args`` and write them out."""
    options = _options_from_args(args)
    cfg = resolve_config(args.preset, options)

    captions = _read_captions(args, cfg["max_words_per_phrase"])
    if not captions:
        raise EmptyCaptionsError("No captions found in input")
    _status("Read {} caption phrases".format(len(captions)))

    if args.plain:
        doc = build_plain_document(captions, cfg, args.width, args.height, title=args.title)
    else:
        doc = build_document(
            captions, args.preset, args.width, args.height, options, title=args.title
        )
    content = generate_ass(doc)

    if args.output_file:
        Path(args.output_file).write_text(content, encoding="utf-8")
        _status("Wrote {} events ({}x{}) to {}".format(
            len(doc.events), args.width, args.height, args.output_file
        ))
    else:
        print(content)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser; separate from main() so tests can inspect it."""
    parser = argparse.ArgumentParser(
        prog="kinetic_captions",
        description="Compile a word-level transcript into word-by-word animated "
                    "ASS captions for ffmpeg's ass filter.",
    )
    parser.add_argument("input_file", help="JSON transcript or SRT file ('-' for stdin).")
    parser.add_argument(
        "output_file", nargs="?", default=None,
        help="Where to write the .ass file (default: stdout).",
    )
    parser.add_argument(
        "--preset", default=DEFAULT_PRESET, choices=sorted(PRESETS.keys()),
        help="Caption style preset (default: %(default)s).",
    )
    parser.add_argument(
        "--width", type=int, default=DEFAULT_WIDTH,
        help="Video width in pixels (default: %(default)s).",
    )
    parser.add_argument(
        "--height", type=int, default=DEFAULT_HEIGHT,
        help="Video height in pixels (default: %(default)s).",
    )
    parser.add_argument(
        "--position", default=None, choices=list(ZONES.keys()),
        help="Screen zone for the captions (default: from preset).",
    )
    parser.add_argument("--font-size", type=int, default=None,
                        help="Font size at 1080px width.")
    parser.add_argument("--active-color", default=None,
                        help="Highlighted word color: name, #RRGGBB or &HBBGGRR.")
    parser.add_argument("--inactive-color", default=None,
                        help="Color of already revealed words.")
    parser.add_argument("--max-chars", type=int, default=None,
                        help="Maximum characters per line.")
    parser.add_argument("--max-words", type=int, default=None,
                        help="Maximum words per phrase for flat word input.")
    parser.add_argument("--no-bounce", action="store_true",
                        help="Disable the bounce animation on the active word.")
    parser.add_argument("--plain", action="store_true",
                        help="Emit static subtitles (one event per phrase).")
    parser.add_argument("--srt", action="store_true",
                        help="Treat input as SRT regardless of its extension.")
    parser.add_argument("--title", default="TikTok Captions",
                        help="Script title (default: %(default)s).")
    parser.add_argument(
        "--log-level", default=LOG_LEVEL,
        choices=LOG_LEVELS,
        help="Logging verbosity (default: %(default)s).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m kinetic_captions`` and the console script.

    argv=None means use sys.argv; explicit argv is for testing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(message)s")

    try:
        run(args)
    except (ValueError, OSError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
