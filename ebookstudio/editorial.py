from __future__ import annotations

from .defaults import ACTION_PLAN_STEPS, MAX_HIGHLIGHTS, TONE_PROFILES
from .models import Brief, Chapter
from .seed import rotate_pick


HIGHLIGHT_STARTERS = (
    "Agent handoffs become vibrant when",
    "Creativity scales the moment",
    "Momentum multiplies once",
    "Teams stay calibrated because",
    "Vision translates into delivery when",
    "Unexpected delight appears as soon as",
)

ACTION_STEPS = (
    "Map the agent cohort and name their personalities.",
    "Storyboard one flagship journey with narrative beats and proof points.",
    "Draft the instrumentation ritual that keeps humans in the driver seat.",
    "Prototype a feedback salon and invite cross-functional voices.",
    "Publish a manifesto declaring how the ecosystem creates value together.",
    "Measure resonance using story-aligned metrics instead of vanity dashboards.",
    "Run a live scenario test where agents mediate a customer challenge.",
)

RESONANCES = (
    "The promise is not speed for its own sake, but fidelity to the story you want people to live inside.",
    "When we teach agents to collaborate like ensemble casts, every launch feels like a premiere.",
    "The craft is learning to choreograph possibility without losing the human fingerprints on the work.",
    "The future belongs to studios that can turn intelligence into experiences with warmth and verve.",
)

def rewrite_summary(summary: str) -> str:
    rewritten = summary.replace("This chapter", "the work", 1)
    return rewritten.replace("we", "teams", 1)


def craft_highlights(brief: Brief, chapters: list[Chapter]) -> list[str]:
    highlights = []
    for index, chapter in enumerate(chapters[:MAX_HIGHLIGHTS]):
        start = rotate_pick(HIGHLIGHT_STARTERS, index * 5 + len(chapters))
        highlights.append(
            f"{start} {rewrite_summary(chapter.summary)} so "
            f"{brief.audience.lower()} can move faster with {brief.topic}."
        )
    return highlights


def craft_action_plan(brief: Brief, seed: int) -> list[str]:
    # The stride equals the pool size, so every step repeats the first pick.
    return [rotate_pick(ACTION_STEPS, seed + index * 7) for index in range(ACTION_PLAN_STEPS)]


def craft_closing(brief: Brief, seed: int) -> str:
    return rotate_pick(RESONANCES, seed)


def build_hero_hook(brief: Brief, seed: int) -> str:
    tone = TONE_PROFILES[brief.tone]
    audience = brief.audience.lower()
    hooks = (
        f"What if {brief.topic} felt like a stage where {tone.lexicon} invite audiences to lean forward?",
        f"Imagine {brief.topic} tuned to {tone.cadence}, delivering momentum to {audience}.",
        f"This ebook is a field guide for {audience} who want to orchestrate {brief.topic} with elegance.",
        f"A manifesto for anyone ready to script {brief.topic} as a living ecosystem, not a static asset.",
    )
    return rotate_pick(hooks, seed + 5)
