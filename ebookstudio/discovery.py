from __future__ import annotations

from .models import Brief
from .seed import paragraph, rotate_pick


HORIZON = (
    "ecosystem orchestration replacing siloed automation",
    "trust tooling to make AI interpretable and coachable",
    "rituals that keep humans in the creative leadership loop",
    "micro-agents syncing to macro narratives across teams",
    "principles borrowed from world-building and systems design",
    "analytics feedback loops measuring story resonance",
    "playbooks that merge speculative design with delivery velocity",
)

CATALYSTS = (
    "community-sourced prompts that act like live briefs",
    "modular knowledge graphs binding research and execution",
    "lightweight governance layers to audit emergent behaviors",
    "delight metrics that track moments of user surprise",
    "tempo-based rituals for sprinting from idea to artifact",
    "skill clouds mapping creator strengths to agent roles",
    "story-driven dashboards that narrate progress between agents",
)

EMOTIONAL_DRIVERS = (
    "the fear of being replaced by automation instead of augmented",
    "the hunger to build signature experiences faster than incumbents",
    "the pride of orchestrating technology that feels conversational",
    "the relief of moving from chaotic brainstorming to guided flow",
    "the curiosity to prototype futures without heavy engineering lift",
    "the responsibility to create transparent AI collaborations",
)

OPPORTUNITIES = (
    "crafting starter kits so new contributors onboard in minutes",
    "teaching teams to debug narratives like they debug code",
    "blending quantitative dashboards with qualitative story labs",
    "packaging rituals into workshops and live cohort programs",
    "anchoring innovation stories in measurable business arcs",
    "using agents to shrink the distance between concept and launch",
)


def build_insights(brief: Brief, seed: int) -> list[str]:
    """Four research insights, one per phrase pool. The pools are topic-agnostic."""
    return [
        paragraph(
            ["Signal clusters reveal", rotate_pick(HORIZON, seed), "as a defining opportunity."]
        ),
        paragraph(
            [
                "Successful teams choreograph",
                rotate_pick(CATALYSTS, seed + 13),
                "to align every agent around the mission.",
            ]
        ),
        paragraph(
            [
                "Emotional voltage comes from addressing",
                rotate_pick(EMOTIONAL_DRIVERS, seed + 27) + ".",
            ]
        ),
        paragraph(
            ["The breakout advantage is won by", rotate_pick(OPPORTUNITIES, seed + 41) + "."]
        ),
    ]
