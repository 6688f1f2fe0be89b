"""Inline ASS override tags.

WHY: Every animated effect in the output (color switch, fade, scale
bounce) is an override block embedded in the event text. Building them
in one place keeps the escaping and number formatting consistent.

HOW: Each function returns one or more ``{...}`` blocks as a string.
Blocks compose by concatenation and the renderer applies them left to
right, so callers control precedence through ordering.

RULES:
- Times inside ``\\t`` and ``\\fad`` are milliseconds relative to the
  start of the event the tag appears in.
- A zero fade value disables that edge.
- bounce_tag never emits a negative time bound. Very short words may get
  overlapping up/down windows; the renderer resolves that last-wins and
  the overlap is left as is.
"""

from typing import Union

from .colors import ColorInput, color_to_bgr

Number = Union[int, float]


def _num(value: Number) -> str:
    """Format a number the way it should appear inside a tag."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def color_tag(color: ColorInput) -> str:
    """Switch the primary text color, e.g. ``{\\c&HFFFFFF&}``."""
    return "{\\c" + color_to_bgr(color) + "&}"


def reset_tag() -> str:
    """Clear all active overrides back to the line's style."""
    return "{\\r}"


def fade_tag(fade_in_ms: Number, fade_out_ms: Number) -> str:
    return "{\\fad(" + _num(fade_in_ms) + "," + _num(fade_out_ms) + ")}"


def transition_tag(start_ms: Number, end_ms: Number, effect: str) -> str:
    """Animate ``effect`` between two event-relative times."""
    return "{\\t(" + _num(start_ms) + "," + _num(end_ms) + "," + effect + ")}"


def bounce_tag(
    duration_ms: Number,
    scale: int = 112,
    anim_duration_ms: Number = 50,
) -> str:
    """Scale up to ``scale`` percent, then back to 100 before the word ends.

    Args:
        duration_ms: Total visible time of the word.
        scale: Peak scale in percent on both axes.
        anim_duration_ms: Length of each of the two transitions.

    Returns:
        Two chained ``\\t`` blocks. The first runs over
        ``[0, min(anim, duration/2)]``, the second over
        ``[max(0, duration-anim), duration]``.
    """
    duration = max(0, duration_ms)
    anim = max(0, anim_duration_ms)
    scale_up_end = min(anim, duration / 2)
    scale_down_start = max(0, duration - anim)

    return (
        transition_tag(0, scale_up_end, "\\fscx{0}\\fscy{0}".format(scale))
        + transition_tag(scale_down_start, duration, "\\fscx100\\fscy100")
    )


def position_tag(x: Number, y: Number) -> str:
    return "{\\pos(" + _num(x) + "," + _num(y) + ")}"


def alignment_tag(alignment: int) -> str:
    """Override the alignment for one event (numpad layout 1-9).

    Raises:
        ValueError: If alignment is outside 1-9.
    """
    if not 1 <= alignment <= 9:
        raise ValueError("Alignment must be 1-9, got {}".format(alignment))
    return "{\\an" + str(alignment) + "}"
