from __future__ import annotations

import os
import sys


DEFAULT_PACE = 1.0


def get_pace() -> float:
    raw = os.getenv("EBOOKSTUDIO_PACE")
    if raw is None:
        return DEFAULT_PACE
    try:
        pace = float(raw)
    except ValueError as exc:
        raise ValueError("EBOOKSTUDIO_PACE must be a number") from exc
    return validate_pace(pace)


def validate_pace(pace: float) -> float:
    if pace < 0:
        raise ValueError("Pace must be zero or positive")
    return pace


def debug_enabled() -> bool:
    value = os.getenv("EBOOKSTUDIO_DEBUG", "")
    return value.lower() in {"1", "true", "yes", "on"}


def debug_log(message: str) -> None:
    if debug_enabled():
        print(message, file=sys.stderr)
