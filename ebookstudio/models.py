from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal


AgentStatus = Literal["queued", "working", "done"]


@dataclass(frozen=True)
class ToneProfile:
    label: str
    cadence: str
    lexicon: str


@dataclass(frozen=True)
class Brief:
    """A resolved content brief.

    Instances built through ``brief.build_brief`` always carry clamped
    ``chapters`` and ``words_per_chapter`` values and a known ``tone`` key.
    """

    title: str
    author: str
    topic: str
    audience: str
    tone: str
    chapters: int
    words_per_chapter: int
    brief: str = ""
    include_highlights: bool = True
    include_action_plan: bool = True


@dataclass(frozen=True)
class Chapter:
    title: str
    summary: str
    content: tuple[str, ...] = ()
    spotlight: str = ""


@dataclass(frozen=True)
class Ebook:
    title: str
    subtitle: str
    author: str
    theme: str
    audience: str
    positioning: str
    chapters: tuple[Chapter, ...]
    highlights: tuple[str, ...]
    action_plan: tuple[str, ...]
    closing: str
    hero_hook: str


@dataclass(frozen=True)
class AgentLogEntry:
    id: str
    name: str
    description: str
    status: AgentStatus = "queued"
    notes: tuple[str, ...] = field(default_factory=tuple)
