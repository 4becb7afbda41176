from __future__ import annotations

from dataclasses import replace

from .defaults import PARAGRAPH_BOUNDS, WORDS_PER_PARAGRAPH
from .models import Brief, Chapter
from .seed import clamp, paragraph, rotate_pick


TENSION_ANGLES = (
    "The friction usually shows up when ambition outpaces instrumentation.",
    "Teams that race ahead without storyboarded rituals struggle to stay coherent.",
    "Confusion spikes whenever tools speak in metrics but teams crave meaning.",
    "Momentum leaks out when creators can't see their fingerprints across the system.",
)

RESOLUTION_ANGLES = (
    "Anchoring the work in vivid constraints creates room for daring leaps.",
    "We stretch into experimentation with guardrails that talk back in real time.",
    "Momentum builds when the toolkit invites riffing instead of rigid compliance.",
    "Every iteration loops through reflection, remixing, and renewed commitments.",
)

PRAXIS_ANGLES = (
    "Sketch prompt libraries that double as storyboards for every agent.",
    "Co-create north star dashboards that narrate the customer journey.",
    "Ship tiny theatre pieces: micro-deliverables that prove the arc is working.",
    "Host weekly critique salons where agents and humans replay key decisions.",
)

INTEGRATION_ANGLES = (
    "Fuse qualitative insights with telemetry so the system keeps learning.",
    "Interleave moments of human review so intuition guides automation.",
    "Use narrative checkpoints to explain each recommendation before it ships.",
    "Let every experiment end with a storytelling retrospective to surface texture.",
)

MEASUREMENT_ANGLES = (
    "Tie progress to audience resonance metrics instead of vanity dashboards.",
    "Track the tempo between ideas, prototypes, and market feedback in weeks.",
    "Instrument each agent handoff so teams can see where energy compounds.",
    "Translate data into story beats the executive team can retell with confidence.",
)

SCOUT_ROLES = ("Signal Scout", "Pattern Archivist", "Story Synthesizer", "Launch Conductor")

PARTNER_ROLES = (
    "Feedback Choreographer",
    "Momentum Coach",
    "Experience Editor",
    "Ethics Custodian",
)

NEXT_MOVES = (
    "Document what surprised you and feed it back into the agent prompts.",
    "Invite a partner team to stress test the workflow in a live session.",
    "Capture a short behind-the-scenes narrative to share with your community.",
    "Translate the lesson into a reusable template for the wider organization.",
)

REFLECTION_PROMPTS = (
    "Which handoff in this chapter would break first if the pace doubled?",
    "Where did a human call beat the automated suggestion, and why?",
    "What would your audience retell about this move a week later?",
    "Which signal would tell you this ritual has stopped earning its time?",
)


def entry_angles(brief: Brief) -> tuple[str, ...]:
    return (
        f"The {brief.audience.lower()} in this chapter confront the myths around {brief.topic}.",
        f"We slow down to map the moving pieces that make {brief.topic} feel slippery.",
        f"Each page treats {brief.topic} as a living studio instead of a static process.",
        f"Practical agency emerges when we script {brief.topic} like a multi-scene montage.",
    )


def closing_angles(brief: Brief) -> tuple[str, ...]:
    return (
        f"The chapter lands on a promise: {brief.topic} can feel like guided improvisation.",
        "We exit with the reminder that orchestration is a craft, not just automation.",
        "The invitation is simple: design cues that help technology feel collaborative.",
        "Creativity scales when we choreograph conversations between people and agents.",
    )


def target_paragraphs(words_per_chapter: int) -> int:
    # Rounds half up: 450 words gives 3 paragraphs.
    rounded = (words_per_chapter + WORDS_PER_PARAGRAPH // 2) // WORDS_PER_PARAGRAPH
    return clamp(rounded, *PARAGRAPH_BOUNDS)


def craft_chapter(brief: Brief, chapter: Chapter, index: int, seed: int) -> Chapter:
    """Fill an outline chapter with body paragraphs and a spotlight line.

    Paragraphs past the word budget are dropped from the end, so shorter
    budgets lose the later paragraphs first.
    """
    pick = seed + index * 31
    body = [
        paragraph(
            [rotate_pick(entry_angles(brief), pick), rotate_pick(TENSION_ANGLES, pick + 7)]
        ),
        paragraph(
            [rotate_pick(RESOLUTION_ANGLES, pick + 13), rotate_pick(PRAXIS_ANGLES, pick + 19)]
        ),
        paragraph(
            [
                rotate_pick(closing_angles(brief), pick + 29),
                f"Throughout, we honour the brief: {brief.brief}" if brief.brief else "",
            ]
        ),
        paragraph(
            [
                rotate_pick(INTEGRATION_ANGLES, pick + 23),
                rotate_pick(MEASUREMENT_ANGLES, pick + 41),
            ]
        ),
        paragraph(["Next move:", rotate_pick(NEXT_MOVES, pick + 53)]),
        paragraph(["Reflection prompt:", rotate_pick(REFLECTION_PROMPTS, pick + 59)]),
    ]
    spotlight = paragraph(
        [
            "Agent Spotlight:",
            f"Pair a {rotate_pick(SCOUT_ROLES, pick + 17)} with a "
            f"{rotate_pick(PARTNER_ROLES, pick + 21)} to orchestrate this move.",
        ]
    )
    return replace(
        chapter,
        content=tuple(body[: target_paragraphs(brief.words_per_chapter)]),
        spotlight=spotlight,
    )


def weave_chapters(brief: Brief, outline: list[Chapter], seed: int) -> list[Chapter]:
    return [craft_chapter(brief, chapter, index, seed) for index, chapter in enumerate(outline)]
