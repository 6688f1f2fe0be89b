"""Data models for the caption compiler.

WHY: Every stage of the compiler passes the same handful of shapes
around: timed words in, caption phrases grouping them, style bundles and
display events out, and the document that wraps it all. Giving them
explicit dataclasses keeps the pipeline functions small and typed.

HOW: Plain dataclasses. Word and Style are frozen because nothing is
allowed to change them once created; Document holds tuples so that a
serialized document cannot be mutated afterwards.

RULES:
- All times are float seconds, never milliseconds.
- Word.text is never rewritten by the compiler.
- Colors inside a Style are already encoded (``&HBBGGRR``).
- One DisplayEvent per word reveal step, not per phrase.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Word:
    """A single transcribed word with its spoken time range.

    Attributes:
        text: Word text exactly as transcribed (punctuation included).
        start: Start time in seconds.
        end: End time in seconds.
    """
    text: str
    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass
class CaptionPhrase:
    """A caption unit covering one or more words.

    When ``words`` is None the synthesizer derives evenly timed words by
    dividing ``[start, end]`` among the whitespace-delimited tokens of
    ``text``.
    """
    text: str
    start: float
    end: float
    words: Optional[List[Word]] = None


@dataclass(frozen=True)
class Style:
    """One row of the ``[V4+ Styles]`` table.

    Field order matches the format line of the style table; see
    document.STYLE_FORMAT.
    """
    name: str = "Default"
    fontname: str = "Arial"
    fontsize: int = 48
    primary_color: str = "&HFFFFFF"
    secondary_color: str = "&H00FFFF"
    outline_color: str = "&H000000"
    back_color: str = "&H00000000"
    bold: bool = True
    italic: bool = False
    underline: bool = False
    strikeout: bool = False
    scale_x: int = 100
    scale_y: int = 100
    spacing: int = 0
    angle: int = 0
    border_style: int = 1  # 1 = outline + shadow, 3 = opaque box
    outline: int = 2
    shadow: int = 0
    alignment: int = 2  # numpad layout, 2 = bottom centre
    margin_l: int = 40
    margin_r: int = 40
    margin_v: int = 60
    encoding: int = 1


@dataclass
class DisplayEvent:
    """One ``Dialogue:`` line: a timed, fully styled text span.

    ``text`` already contains inline override tags and is written
    unescaped as the last field of the line.
    """
    start: float
    end: float
    text: str
    style: str = "Default"
    layer: int = 0
    name: str = ""
    margin_l: int = 0
    margin_r: int = 0
    margin_v: int = 0
    effect: str = ""


@dataclass(frozen=True)
class Document:
    """A complete subtitle document ready for serialization.

    Attributes:
        title: Value of the ``Title:`` header.
        play_res_x: Canvas width the script is authored for.
        play_res_y: Canvas height the script is authored for.
        wrap_style: 0 smart, 1 end-of-line, 2 no wrap, 3 smart (lower wider).
        scaled_border_and_shadow: Scale outline/shadow with the video.
        styles: Style table rows, in output order.
        events: Dialogue rows, in output order.
    """
    title: str
    play_res_x: int
    play_res_y: int
    styles: Tuple[Style, ...] = field(default_factory=tuple)
    events: Tuple[DisplayEvent, ...] = field(default_factory=tuple)
    wrap_style: int = 2
    scaled_border_and_shadow: bool = True
