"""Transcript input: JSON word/phrase lists and SRT files to CaptionPhrases.

WHY: Word-level timings come from whatever speech-to-text service the
pipeline used, and pre-grouped captions sometimes arrive as SRT. The
compiler only understands CaptionPhrase and Word, so every input shape is
normalized here before it reaches the synthesizer.

HOW: JSON input is decoded (recovering truncated files by bracket
completion), validated against a JSON Schema with jsonschema, then turned
into phrases. Accepted shapes:
  1. ``{"captions": [...]}`` or a list of phrases
     ``{"text", "start", "end", "words"?}``
  2. ``{"words": [...]}`` or a list of words ``{"word"|"text", "start", "end"}``
     (grouped into phrases with layout.segment_phrases)
A bare list is a phrase list if any item carries a ``words`` array or if
its items use ``text`` without ``word``; it is a word list if items use
``word``. SRT cue blocks become one phrase each.

RULES:
- Whitespace runs in word text (newlines included) collapse to one
  space and the ends are stripped; the text is never otherwise edited.
- Words with empty text are dropped.
- Any unparseable or schema-invalid input raises TranscriptFormatError.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Union

import jsonschema

from .errors import TranscriptFormatError
from .layout import segment_phrases
from .models import CaptionPhrase, Word

WORD_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "word": {"type": "string"},
        "text": {"type": "string"},
        "start": {"type": "number", "minimum": 0},
        "end": {"type": "number", "minimum": 0},
    },
    "required": ["start", "end"],
    "anyOf": [{"required": ["word"]}, {"required": ["text"]}],
    "not": {"required": ["words"]},
}

PHRASE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "text": {"type": "string"},
        "start": {"type": "number", "minimum": 0},
        "end": {"type": "number", "minimum": 0},
        "words": {"type": "array", "items": WORD_SCHEMA},
    },
    "required": ["text", "start", "end"],
}

TRANSCRIPT_SCHEMA: Dict[str, Any] = {
    "oneOf": [
        {
            "type": "object",
            "properties": {"captions": {"type": "array", "items": PHRASE_SCHEMA}},
            "required": ["captions"],
        },
        {
            "type": "object",
            "properties": {"words": {"type": "array", "items": WORD_SCHEMA}},
            "required": ["words"],
            "not": {"required": ["captions"]},
        },
        {"type": "array", "items": {"anyOf": [PHRASE_SCHEMA, WORD_SCHEMA]}},
    ],
}

SRT_TIME_RE = re.compile(
    r"(\d{2}):(\d{2}):(\d{2})[,.](\d{3})\s*-->\s*(\d{2}):(\d{2}):(\d{2})[,.](\d{3})"
)


# Closers tried, in order, on JSON that was cut off mid-document.
_CLOSING_SUFFIXES = ("", "]", "}]", "}]}", "]}", "]}}", "]}]")


def _repair_candidates(raw: str) -> Iterator[str]:
    trimmed = re.sub(r",\s*$", "", raw)
    for base in dict.fromkeys((trimmed, raw)):
        for suffix in _CLOSING_SUFFIXES:
            yield base + suffix


def try_parse_json(raw: str) -> Any:
    """Decode JSON text, closing brackets left open by a truncated export.

    Transcript exports are sometimes cut short by the tool that saved
    them. The text is decoded as is first; failing that, a trailing comma
    is dropped and each closer in _CLOSING_SUFFIXES is appended until one
    decodes.

    Raises:
        TranscriptFormatError: If no candidate decodes.
    """
    text = "\n".join(raw.splitlines()).strip()
    for candidate in _repair_candidates(text):
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            continue

    raise TranscriptFormatError("Could not parse JSON input (even with attempted fixes)")


def _word_from_dict(item: Dict[str, Any]) -> Word:
    # Internal line breaks would split the Dialogue line they end up in.
    text = " ".join(item.get("word", item.get("text", "")).split())
    return Word(text=text, start=float(item["start"]), end=float(item["end"]))


def _words_from_list(items: List[Dict[str, Any]]) -> List[Word]:
    words = (_word_from_dict(item) for item in items)
    return [w for w in words if w.text]


def _phrase_from_dict(item: Dict[str, Any]) -> CaptionPhrase:
    words = None
    if "words" in item:
        words = _words_from_list(item["words"])
    return CaptionPhrase(
        text=item["text"],
        start=float(item["start"]),
        end=float(item["end"]),
        words=words,
    )


def _is_phrase_list(items: List[Dict[str, Any]]) -> bool:
    if any("words" in item for item in items):
        return True
    return not any("word" in item for item in items)


def parse_transcript(data: Any, max_words_per_phrase: int = 4) -> List[CaptionPhrase]:
    """Validate decoded JSON and convert it to caption phrases.

    Args:
        data: Decoded JSON (see module docstring for accepted shapes).
        max_words_per_phrase: Phrase bound used when the input is a flat
            word list.

    Returns:
        Caption phrases in input order.

    Raises:
        TranscriptFormatError: If ``data`` does not match the schema.
    """
    try:
        jsonschema.validate(instance=data, schema=TRANSCRIPT_SCHEMA)
    except jsonschema.ValidationError as e:
        raise TranscriptFormatError("Invalid transcript: {}".format(e.message)) from e

    if isinstance(data, dict):
        if "captions" in data:
            return [_phrase_from_dict(item) for item in data["captions"]]
        return segment_phrases(_words_from_list(data["words"]), max_words_per_phrase)

    if _is_phrase_list(data):
        return [_phrase_from_dict(item) for item in data]
    return segment_phrases(_words_from_list(data), max_words_per_phrase)


def _srt_seconds(h: str, m: str, s: str, ms: str) -> float:
    return int(h) * 3600 + int(m) * 60 + int(s) + int(ms) / 1000


def parse_srt(content: str) -> List[CaptionPhrase]:
    """Parse SRT cue blocks into phrases without word timings.

    Blocks with fewer than three lines or an unreadable time line are
    skipped. Multi-line cue text keeps its newlines.
    """
    phrases: List[CaptionPhrase] = []
    content = content.replace("\r\n", "\n").replace("\r", "\n").strip()

    for block in re.split(r"\n\s*\n", content):
        lines = block.split("\n")
        if len(lines) < 3:
            continue
        match = SRT_TIME_RE.search(lines[1])
        if match is None:
            continue
        g = match.groups()
        phrases.append(CaptionPhrase(
            text="\n".join(lines[2:]),
            start=_srt_seconds(*g[0:4]),
            end=_srt_seconds(*g[4:8]),
        ))

    return phrases


def load_captions(
    path: Union[str, Path],
    max_words_per_phrase: int = 4,
    srt: bool = False,
) -> List[CaptionPhrase]:
    """Read a ``.srt`` or JSON transcript file into caption phrases.

    The file is read as SRT when ``srt`` is set or its suffix is ``.srt``.

    Raises:
        TranscriptFormatError: If the file content cannot be parsed.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    raw = path.read_text(encoding="utf-8")
    if srt or path.suffix.lower() == ".srt":
        return parse_srt(raw)
    return parse_transcript(try_parse_json(raw), max_words_per_phrase)
