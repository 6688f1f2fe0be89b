"""Shared test fixtures for the kinetic_captions test suite.

WHY: Most modules are exercised with the same short hook caption
("Follow the Apostles Diet") so expected tags and timestamps can be
worked out by hand once and reused.

HOW: Fixtures provide the word list, the phrase wrapping it, and a fresh
copy of the default (tiktok) config.

RULES:
- Word timings are chosen so millisecond durations are exact.
- Every fixture returns a new object; tests may mutate what they get.
"""

import pytest

from kinetic_captions.models import CaptionPhrase, Word
from kinetic_captions.presets import resolve_config

HOOK_WORDS = [
    ("Follow", 0.0, 0.5),
    ("the", 0.5, 0.8),
    ("Apostles", 0.8, 1.5),
    ("Diet", 1.5, 3.0),
]


@pytest.fixture
def hook_words():
    return [Word(text=t, start=s, end=e) for t, s, e in HOOK_WORDS]


@pytest.fixture
def hook_caption(hook_words):
    return CaptionPhrase(text="Follow the Apostles Diet", start=0.0, end=3.0, words=hook_words)


@pytest.fixture
def tiktok_config():
    return resolve_config("tiktok")
