from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, TypeVar

from . import config
from .architecture import build_outline
from .defaults import AGENT_BLUEPRINT, FALLBACK_ERROR
from .discovery import build_insights
from .document import assemble_ebook
from .editorial import build_hero_hook, craft_action_plan, craft_closing, craft_highlights
from .models import AgentLogEntry, AgentStatus, Brief, Ebook
from .seed import derive_seed
from .weaver import weave_chapters


T = TypeVar("T")
LogSnapshot = tuple[AgentLogEntry, ...]
Observer = Callable[[LogSnapshot], None]

STATUS_ORDER: dict[str, int] = {"queued": 0, "working": 1, "done": 2}

OUTLINE_OFFSET = 17
CHAPTER_OFFSET = 37
ACTION_PLAN_OFFSET = 73
CLOSING_OFFSET = 89
HERO_HOOK_OFFSET = 101


@dataclass(frozen=True)
class Stage:
    id: str
    lead_in: str
    pause_before: float
    pause_after: float
    pause_before_notes: float = 0.0


DISCOVERY = Stage(
    "discovery", "Scanning signals, rituals, and use cases across the domain.", 0.35, 0.20
)
ARCHITECTURE = Stage(
    "architecture", "Metabolizing research into an emotionally-resonant structure.", 0.32, 0.26
)
WEAVER = Stage(
    "weaver", "Drafting chapters with calibrated pacing and calls to action.", 0.34, 0.20
)
EDITORIAL = Stage(
    "editorial", "Sculpting highlights, action plans, and a resonant closing.", 0.0, 0.0, 0.26
)
STAGES = (DISCOVERY, ARCHITECTURE, WEAVER, EDITORIAL)


@dataclass
class PipelineResult:
    ebook: Ebook | None
    logs: LogSnapshot
    error: str | None
    seed: int


def fresh_logs() -> LogSnapshot:
    return tuple(replace(agent, status="queued", notes=()) for agent in AGENT_BLUEPRINT)


class EbookStudio:
    """Runs the four-stage pipeline and owns the visible agent log.

    Every log change replaces ``logs`` with a new snapshot and hands it to
    ``on_update``. A failed run keeps the previous ``ebook`` and leaves the
    log exactly as it stood when the failure happened.
    """

    def __init__(
        self,
        on_update: Observer | None = None,
        sleep: Callable[[float], Any] = time.sleep,
        pace: float = config.DEFAULT_PACE,
    ) -> None:
        self.on_update = on_update
        self.sleep = sleep
        self.pace = config.validate_pace(pace)
        self.logs: LogSnapshot = fresh_logs()
        self.ebook: Ebook | None = None
        self.error: str | None = None
        self.is_generating = False

    def run(self, brief: Brief) -> PipelineResult:
        self._publish(fresh_logs())
        self.error = None
        self.is_generating = True
        seed = derive_seed(brief)
        config.debug_log(f"[ebookstudio.pipeline] seed={seed} tone={brief.tone}")

        try:
            insights = self._run_stage(
                DISCOVERY,
                lambda: build_insights(brief, seed),
                lambda result: [f"• {insight}" for insight in result],
            )
            outline = self._run_stage(
                ARCHITECTURE,
                lambda: build_outline(brief, seed + OUTLINE_OFFSET),
                lambda result: [
                    f"{number}. {chapter.title} → {chapter.summary}"
                    for number, chapter in enumerate(result, 1)
                ],
            )
            chapters = self._run_stage(
                WEAVER,
                lambda: weave_chapters(brief, outline, seed + CHAPTER_OFFSET),
                lambda result: [
                    f"{chapter.title} drafted with {len(chapter.content)} scenes."
                    for chapter in result
                ],
            )
            highlights, action_plan, closing, hero_hook = self._run_stage(
                EDITORIAL,
                lambda: (
                    craft_highlights(brief, chapters) if brief.include_highlights else [],
                    craft_action_plan(brief, seed + ACTION_PLAN_OFFSET)
                    if brief.include_action_plan
                    else [],
                    craft_closing(brief, seed + CLOSING_OFFSET),
                    build_hero_hook(brief, seed + HERO_HOOK_OFFSET),
                ),
                lambda result: [
                    f"{len(result[0])} highlights and {len(result[1])} action steps composed."
                ],
            )
            self.ebook = assemble_ebook(
                brief, chapters, highlights, action_plan, closing, hero_hook
            )
        except Exception as exc:
            self.error = str(exc) or FALLBACK_ERROR
            config.debug_log(f"[ebookstudio.pipeline] aborted: {self.error}")
            return PipelineResult(ebook=None, logs=self.logs, error=self.error, seed=seed)
        finally:
            self.is_generating = False

        return PipelineResult(ebook=self.ebook, logs=self.logs, error=None, seed=seed)

    def _run_stage(
        self,
        stage: Stage,
        work: Callable[[], T],
        describe: Callable[[T], Iterable[str]],
    ) -> T:
        started = time.perf_counter()
        self._set_status(stage.id, "working")
        self._append_note(stage.id, stage.lead_in)
        self._pause(stage.pause_before)
        result = work()
        self._pause(stage.pause_before_notes)
        for note in describe(result):
            self._append_note(stage.id, note)
        self._pause(stage.pause_after)
        self._set_status(stage.id, "done")
        config.debug_log(
            f"[ebookstudio.pipeline] stage={stage.id} "
            f"elapsed={time.perf_counter() - started:.3f}s"
        )
        return result

    def _pause(self, seconds: float) -> None:
        scaled = seconds * self.pace
        if scaled > 0:
            self.sleep(scaled)

    def _set_status(self, agent_id: str, status: AgentStatus) -> None:
        def update(agent: AgentLogEntry) -> AgentLogEntry:
            if STATUS_ORDER[status] <= STATUS_ORDER[agent.status]:
                raise RuntimeError(
                    f"Agent {agent_id} cannot move from {agent.status} to {status}"
                )
            return replace(agent, status=status)

        self._update(agent_id, update)

    def _append_note(self, agent_id: str, note: str) -> None:
        self._update(agent_id, lambda agent: replace(agent, notes=agent.notes + (note,)))

    def _update(self, agent_id: str, change: Callable[[AgentLogEntry], AgentLogEntry]) -> None:
        self._publish(
            tuple(change(agent) if agent.id == agent_id else agent for agent in self.logs)
        )

    def _publish(self, logs: LogSnapshot) -> None:
        self.logs = logs
        if self.on_update is not None:
            self.on_update(logs)
