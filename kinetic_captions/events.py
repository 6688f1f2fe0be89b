"""Event synthesis: caption phrases to word-by-word reveal events.

WHY: Social video captions reveal a line one word at a time. The word
being spoken is highlighted (and optionally bounces) while the words
before it stay on screen in the inactive color. ASS has no notion of a
"reveal", so every step has to be its own Dialogue event carrying the
whole line so far.

HOW: plan_phrases() resolves each phrase's word list, enforces the pause
after the previous phrase and packs the words into lines.
synthesize_events() then walks every line and emits one event per word:
the event text is the line up to and including that word, with the
current word in the active color and every earlier word in the inactive
color. The first event of a line fades in; the last one fades out and
is held for the fade duration past the word's end.

RULES:
- N words in, N events out. Never one event per phrase or per line.
- A phrase's onset is pushed to at least previous_end + pause, where
  previous_end is the end of the last word of the previous phrase's
  last line. Its end is left alone.
- A phrase with no words is skipped with a warning; the rest of the
  document is still built.
- No captions at all, or no words anywhere, raises EmptyCaptionsError.
- config is the dict returned by presets.resolve_config().
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from .errors import EmptyCaptionsError
from .layout import auto_split_words, split_into_lines
from .models import CaptionPhrase, DisplayEvent, Word
from .tags import bounce_tag, color_tag, fade_tag, reset_tag

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass
class ResolvedPhrase:
    """A phrase after gap enforcement and line packing."""
    start: float
    end: float
    lines: List[List[Word]] = field(default_factory=list)

    @property
    def last_word_end(self) -> float:
        return self.lines[-1][-1].end


def plan_phrases(captions: Sequence[CaptionPhrase], config: Dict[str, Any]) -> List[ResolvedPhrase]:
    """Resolve word lists, onset gaps and line breaks for every phrase.

    Args:
        captions: Phrases in display order.
        config: Resolved caption config.

    Returns:
        One ResolvedPhrase per phrase that has at least one word.
    """
    pause = config["pause_between_segments"]
    plans: List[ResolvedPhrase] = []
    previous_end = 0.0

    for index, caption in enumerate(captions):
        start = caption.start
        if start < previous_end + pause:
            logger.debug(
                "Phrase %d onset moved from %.3f to %.3f",
                index, start, previous_end + pause,
            )
            start = previous_end + pause

        if caption.words is not None:
            words = list(caption.words)
        else:
            words = auto_split_words(caption.text, start, caption.end)

        if not words:
            logger.warning("Skipping phrase %d: no words in %r", index, caption.text)
            continue

        plan = ResolvedPhrase(
            start=start,
            end=caption.end,
            lines=split_into_lines(words, config["max_chars_per_line"]),
        )
        plans.append(plan)
        previous_end = plan.last_word_end

    return plans


def _word_duration_ms(word: Word) -> int:
    return _round_half_up(word.duration * 1000)


def build_word_text(word: Word, is_active: bool, config: Dict[str, Any]) -> str:
    """Render one word with its color and, if active, its bounce."""
    color = config["active_color"] if is_active else config["inactive_color"]
    text = color_tag(color) + word.text + reset_tag()

    if is_active and config["use_bounce"]:
        scale = _round_half_up(config["bounce_scale"] * 100)
        bounce = bounce_tag(_word_duration_ms(word), scale, config["animation_duration"])
        return bounce + text

    return text


def build_line_events(
    line: Sequence[Word],
    config: Dict[str, Any],
    style_name: str,
) -> List[DisplayEvent]:
    """Emit the progressive-reveal events for a single packed line."""
    fade_ms = _round_half_up(config["fade_duration"] * 1000)
    active = color_tag(config["active_color"])
    last_index = len(line) - 1
    events: List[DisplayEvent] = []

    for word_index, word in enumerate(line):
        parts = [
            build_word_text(line[i], i == word_index, config)
            for i in range(word_index + 1)
        ]
        line_text = " ".join(parts)
        event_end = word.end

        # Active color goes first so the fade does not flash the style color.
        if word_index == 0:
            line_text = active + fade_tag(fade_ms, 0) + " ".join(parts)
        if word_index == last_index:
            line_text = active + fade_tag(0, fade_ms) + " ".join(parts)
            event_end = word.end + config["fade_duration"]

        events.append(DisplayEvent(
            start=word.start,
            end=max(event_end, word.start),
            text=line_text,
            style=style_name,
        ))

    return events


def synthesize_events(
    captions: Sequence[CaptionPhrase],
    config: Dict[str, Any],
    style_name: str = "TikTok",
) -> List[DisplayEvent]:
    """Build every Dialogue event for a caption track.

    Args:
        captions: Phrases in display order.
        config: Resolved caption config.
        style_name: Style every event references.

    Returns:
        Events in creation order, one per word.

    Raises:
        EmptyCaptionsError: If ``captions`` is empty or holds no words.
    """
    if not captions:
        raise EmptyCaptionsError("Captions list is empty; nothing to synthesize")

    events: List[DisplayEvent] = []
    for plan in plan_phrases(captions, config):
        for line in plan.lines:
            events.extend(build_line_events(line, config, style_name))

    if not events:
        raise EmptyCaptionsError("Captions contain no words; nothing to synthesize")

    logger.info("Generated %d caption events", len(events))
    return events
