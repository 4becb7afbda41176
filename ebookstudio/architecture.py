from __future__ import annotations

from .defaults import CHAPTER_BOUNDS, TONE_PROFILES
from .models import Brief, Chapter
from .seed import clamp, paragraph, rotate_pick


ARCS = (
    "Foundations",
    "Systems Choreography",
    "Creative Rituals",
    "Experiments In Motion",
    "Momentum Mechanics",
    "Scaling The Narrative",
    "Signals And Story",
    "Future Horizons",
)

VERBS = (
    "Igniting",
    "Mapping",
    "Designing",
    "Activating",
    "Elevating",
    "Orchestrating",
    "Harmonizing",
    "Amplifying",
)

THROUGHLINES = (
    "agent teaming",
    "feedback choreography",
    "narrative intelligence",
    "experience craft",
    "adaptive strategy",
    "creative autonomy",
    "insight harvesting",
    "domain mastery",
)


def build_outline(brief: Brief, seed: int) -> list[Chapter]:
    cadence = TONE_PROFILES[brief.tone].cadence
    outline: list[Chapter] = []
    # This clamp is authoritative even when the brief skipped input clamping.
    for index in range(clamp(brief.chapters, *CHAPTER_BOUNDS)):
        anchor = seed + index * 23
        verb = rotate_pick(VERBS, anchor)
        arc = rotate_pick(ARCS, anchor + 5)
        throughline = rotate_pick(THROUGHLINES, anchor + 11)
        summary = paragraph(
            [f"{verb} {brief.topic} by weaving", f"{throughline} with {cadence}."]
        )
        outline.append(Chapter(title=f"Chapter {index + 1}: {arc}", summary=summary))
    return outline
