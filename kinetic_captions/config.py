"""Command-line defaults loaded from the environment and .env.

WHY: Batch jobs render many videos with the same preset and canvas size.
Letting those defaults live in a .env file next to the job keeps shell
scripts short. The compiler library itself never reads the environment;
only the CLI consults these values.

HOW: python-dotenv loads .env on import. Each setting is a module-level
constant read with os.getenv and a hard-coded fallback.

RULES:
- KINETIC_CAPTIONS_PRESET: preset name used when --preset is not given.
- KINETIC_CAPTIONS_WIDTH / KINETIC_CAPTIONS_HEIGHT: canvas size used when
  --width / --height are not given (default 1080x1920).
- KINETIC_CAPTIONS_LOG_LEVEL: root log level for the CLI (default INFO).
- Malformed integers and unknown log levels raise ValueError on import
  with the variable name.
"""

from __future__ import annotations

import os
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError("{} must be an integer, got {!r}".format(name, value)) from None


def _env_choice(name: str, default: str, choices: Tuple[str, ...]) -> str:
    value = os.getenv(name, "").strip().upper()
    if not value:
        return default
    if value not in choices:
        raise ValueError("{} must be one of {}, got {!r}".format(name, ", ".join(choices), value))
    return value


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

DEFAULT_PRESET = os.getenv("KINETIC_CAPTIONS_PRESET", "tiktok")
DEFAULT_WIDTH = _env_int("KINETIC_CAPTIONS_WIDTH", 1080)
DEFAULT_HEIGHT = _env_int("KINETIC_CAPTIONS_HEIGHT", 1920)
LOG_LEVEL = _env_choice("KINETIC_CAPTIONS_LOG_LEVEL", "INFO", LOG_LEVELS)
