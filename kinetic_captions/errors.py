"""Exception types raised by the caption compiler.

WHY: Callers embedding the compiler in a video pipeline need to tell
contract violations (no captions at all, an unknown screen zone, an
unreadable transcript) apart from ordinary bugs, so they can surface a
clear message to the end user instead of a traceback.

HOW: A small hierarchy rooted at CaptionError. The root subclasses
ValueError, matching how the rest of the package reports bad arguments,
so existing ``except ValueError`` handlers keep working.

RULES:
- Recoverable conditions (bad colors, empty phrases) are logged and
  defaulted locally; they never raise.
- Everything raised here is fatal to the current compilation call.
"""

from typing import Iterable


class CaptionError(ValueError):
    """Base class for all caption compiler errors."""


class EmptyCaptionsError(CaptionError):
    """Raised when there is nothing to synthesize (no phrases or no words)."""


class UnknownZoneError(CaptionError):
    """Raised when a position zone key is not in the zone table."""

    def __init__(self, zone: str, known: Iterable[str]) -> None:
        super().__init__(
            "Unknown position '{}'. Available: {}".format(zone, ", ".join(known))
        )
        self.zone = zone


class TranscriptFormatError(CaptionError):
    """Raised when transcript input cannot be parsed or fails validation."""
