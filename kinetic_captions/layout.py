"""Grouping words into phrases and phrases into display lines.

WHY: Word-level transcripts arrive as a flat stream. Captions need two
levels of grouping on top of that: phrases (what is on screen together)
and, within a phrase, lines that fit the width of a vertical video.

HOW: Three greedy passes, all left to right:
  1. segment_phrases() closes a phrase at a word-count bound or after a
     word ending in . ! or ?.
  2. auto_split_words() invents evenly spaced word timings for phrases
     that only carry text.
  3. split_into_lines() packs a phrase's words into lines under a
     character budget.

RULES:
- Word text is never split, merged or rewritten. A word longer than the
  budget sits alone on its own line.
- Every word in is a word out, in the same order.
- Line length counts one space between words and none before the first.
"""

import re
from typing import List, Sequence

from .models import CaptionPhrase, Word

SENTENCE_END_RE = re.compile(r"[.!?]$")

# Hard line break inside ASS event text
ASS_LINE_BREAK = "\\N"


def ends_sentence(text: str) -> bool:
    """True if the word ends with . ! or ?"""
    return bool(SENTENCE_END_RE.search(text.strip()))


def split_into_lines(words: Sequence[Word], max_chars: int = 27) -> List[List[Word]]:
    """Pack words into lines of at most ``max_chars`` characters.

    Args:
        words: Words in display order.
        max_chars: Character budget per line, spaces included.

    Returns:
        Non-empty word groups. Concatenated, they equal ``words``.
    """
    lines: List[List[Word]] = []
    current: List[Word] = []
    current_len = 0

    for word in words:
        word_len = len(word.text)
        if current and current_len + 1 + word_len > max_chars:
            lines.append(current)
            current = [word]
            current_len = word_len
        else:
            current_len += word_len + (1 if current else 0)
            current.append(word)

    if current:
        lines.append(current)

    return lines


def wrap_text(text: str, max_chars: int = 27) -> str:
    """Greedy-wrap plain text, joining lines with the ASS ``\\N`` break."""
    tokens = text.split()
    words = [Word(text=t, start=0.0, end=0.0) for t in tokens]
    return ASS_LINE_BREAK.join(
        " ".join(w.text for w in line) for line in split_into_lines(words, max_chars)
    )


def auto_split_words(text: str, start: float, end: float) -> List[Word]:
    """Divide ``[start, end]`` evenly among the whitespace tokens of ``text``.

    A reversed range (end before start) is treated as zero-length, so every
    word comes back with ``end == start`` instead of negative duration.
    """
    tokens = text.split()
    if not tokens:
        return []

    end = max(end, start)
    per_word = (end - start) / len(tokens)
    return [
        Word(text=token, start=start + i * per_word, end=start + (i + 1) * per_word)
        for i, token in enumerate(tokens)
    ]


def segment_phrases(words: Sequence[Word], max_words: int = 4) -> List[CaptionPhrase]:
    """Group a flat word stream into caption phrases.

    A phrase closes when it reaches ``max_words`` words or when a word ends
    a sentence. A trailing partial phrase is kept.

    Args:
        words: Transcribed words in time order.
        max_words: Upper bound on words per phrase (at least 1).

    Returns:
        Phrases whose start/end are their first/last word's times and whose
        ``words`` hold the grouped Word objects.

    Raises:
        ValueError: If max_words is less than 1.
    """
    if max_words < 1:
        raise ValueError("max_words must be at least 1, got {}".format(max_words))

    phrases: List[CaptionPhrase] = []
    current: List[Word] = []

    def flush() -> None:
        phrases.append(CaptionPhrase(
            text=" ".join(w.text for w in current),
            start=current[0].start,
            end=current[-1].end,
            words=list(current),
        ))

    for word in words:
        current.append(word)
        if len(current) >= max_words or ends_sentence(word.text):
            flush()
            current = []

    if current:
        flush()

    return phrases
