from __future__ import annotations

from typing import Sequence

from .models import Brief


def clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


def char_code_sum(*values: str) -> int:
    return sum(ord(char) for char in "".join(values))


def derive_seed(brief: Brief) -> int:
    """Deterministic, non-negative selection seed for a brief.

    Not collision-free: any two briefs with the same character-code total
    and chapter count share a seed.
    """
    return (
        char_code_sum(brief.title, brief.topic, brief.audience, brief.brief, brief.tone)
        + brief.chapters * 11
    )


def rotate_pick(pool: Sequence[str], offset: int) -> str:
    if not pool:
        raise ValueError("Cannot pick from an empty phrase pool")
    # Python's modulo is already non-negative for a positive divisor.
    return pool[offset % len(pool)]


def paragraph(parts: Sequence[str]) -> str:
    return " ".join(part for part in parts if part)
