from __future__ import annotations

from .models import AgentLogEntry, ToneProfile


TONE_PROFILES: dict[str, ToneProfile] = {
    "visionary": ToneProfile(
        label="Visionary",
        cadence="sweeping narratives and bold contrasts",
        lexicon="possibility, transformation, long-view strategy",
    ),
    "practical": ToneProfile(
        label="Practical Strategist",
        cadence="clean structure and actionable breakdowns",
        lexicon="frameworks, constraints, execution rhythms",
    ),
    "empathetic": ToneProfile(
        label="Empathetic Guide",
        cadence="inviting language with reflective pauses",
        lexicon="human stories, emotional intelligence, belonging",
    ),
    "highenergy": ToneProfile(
        label="High-Energy Coach",
        cadence="punchy sentences and kinetic pacing",
        lexicon="momentum, acceleration, performance loops",
    ),
}

CHAPTER_BOUNDS = (3, 12)
WORDS_PER_CHAPTER_BOUNDS = (200, 1000)
PARAGRAPH_BOUNDS = (3, 6)
WORDS_PER_PARAGRAPH = 180
MAX_HIGHLIGHTS = 6
ACTION_PLAN_STEPS = 5

FALLBACK_TITLE = "Untitled Ebook"
FALLBACK_AUTHOR = "Unknown Author"
FALLBACK_AUDIENCE = "Curious readers"
FALLBACK_SLUG = "ebook"
FALLBACK_ERROR = "Something went sideways in the agent pipeline."

DEFAULT_BRIEF = {
    "title": "Agents of Imagination",
    "author": "Studio Lambda",
    "topic": "building AI-powered creative ecosystems",
    "audience": "Product builders, strategists, and indie creators",
    "tone": "visionary",
    "chapters": 6,
    "words_per_chapter": 420,
    "brief": (
        "Show how multi-agent orchestration can accelerate ideation, design, "
        "and storytelling workflows without losing the human voice."
    ),
    "include_highlights": True,
    "include_action_plan": True,
}

AGENT_BLUEPRINT: tuple[AgentLogEntry, ...] = (
    AgentLogEntry(
        id="discovery",
        name="Discovery Strategist",
        description="Scans the landscape, extracts trendlines, and assembles raw insight clusters.",
    ),
    AgentLogEntry(
        id="architecture",
        name="Narrative Architect",
        description="Converts the insight map into a cinematic chapter-by-chapter flow.",
    ),
    AgentLogEntry(
        id="weaver",
        name="Prose Weaver",
        description="Drafts compelling chapters calibrated to the chosen voice and cadence.",
    ),
    AgentLogEntry(
        id="editorial",
        name="Editorial Finisher",
        description="Elevates clarity, sculpts highlights, and packages tactical action plans.",
    ),
)

STATUS_LABELS = {
    "queued": "Queued",
    "working": "In Flight",
    "done": "Complete",
}
