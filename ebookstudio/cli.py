from __future__ import annotations

import json
from pathlib import Path

import typer

from . import config
from .brief import resolve_brief
from .defaults import DEFAULT_BRIEF, STATUS_LABELS, TONE_PROFILES
from .document import slugify
from .export import write_outputs
from .models import AgentLogEntry
from .paths import brief_path, ensure_dirs, root_path
from .pipeline import EbookStudio, LogSnapshot

app = typer.Typer(help="Ebook Studio CLI")

STATUS_COLORS = {
    "queued": typer.colors.WHITE,
    "working": typer.colors.BLUE,
    "done": typer.colors.GREEN,
}


class LogPrinter:
    """Echo status changes and new notes between successive log snapshots."""

    def __init__(self) -> None:
        self.previous: dict[str, AgentLogEntry] = {}

    def __call__(self, logs: LogSnapshot) -> None:
        for agent in logs:
            before = self.previous.get(agent.id)
            if before is None or before.status != agent.status:
                if agent.status != "queued":
                    typer.secho(
                        f"[{STATUS_LABELS[agent.status]}] {agent.name}",
                        fg=STATUS_COLORS[agent.status],
                    )
            seen = len(before.notes) if before is not None else 0
            for note in agent.notes[seen:]:
                typer.echo(f"    {note}")
        self.previous = {agent.id: agent for agent in logs}


@app.command("init")
def init(
    root: str = typer.Option(".", "--root", help="Root directory"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing brief"),
) -> None:
    """Initialize a workspace with the default brief."""
    root_dir = root_path(root)
    target = brief_path(root_dir)
    try:
        ensure_dirs(root_dir)
        if target.exists() and not force:
            raise FileExistsError(f"Refusing to overwrite {target} without --force")
    except (FileExistsError, ValueError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    target.write_text(json.dumps(DEFAULT_BRIEF, indent=2, sort_keys=True) + "\n")
    typer.secho(f"Initialized Ebook Studio at {root_dir}", fg=typer.colors.GREEN)


@app.command("generate")
def generate(
    root: str = typer.Option(".", "--root", help="Root directory"),
    brief_file: Path | None = typer.Option(None, "--brief", help="Brief JSON file"),
    title: str | None = typer.Option(None, "--title", help="Ebook title"),
    author: str | None = typer.Option(None, "--author", help="Author name"),
    topic: str | None = typer.Option(None, "--topic", help="Central subject"),
    audience: str | None = typer.Option(None, "--audience", help="Primary audience"),
    tone: str | None = typer.Option(None, "--tone", help="Narrative tone key"),
    chapters: int | None = typer.Option(None, "--chapters", help="Chapter count (3-12)"),
    words_per_chapter: int | None = typer.Option(
        None, "--words-per-chapter", help="Words per chapter (200-1000)"
    ),
    notes: str | None = typer.Option(None, "--notes", help="Creative brief text"),
    highlights: bool | None = typer.Option(
        None, "--highlights/--no-highlights", help="Include highlights reel"
    ),
    action_plan: bool | None = typer.Option(
        None, "--action-plan/--no-action-plan", help="Include action plan"
    ),
    pace: float | None = typer.Option(None, "--pace", help="Pause multiplier, 0 disables"),
    force: bool = typer.Option(False, "--force", help="Overwrite existing outputs"),
    run_id: str | None = typer.Option(None, "--run-id", help="Run identifier"),
    json_output: bool = typer.Option(False, "--json", help="Print ebook JSON"),
    stdout: bool = typer.Option(False, "--stdout", help="Print ebook markdown"),
) -> None:
    """Run the agent pipeline and export the ebook."""
    root_dir = root_path(root)
    if brief_file is None and brief_path(root_dir).exists():
        brief_file = brief_path(root_dir)

    overrides = {
        "title": title,
        "author": author,
        "topic": topic,
        "audience": audience,
        "tone": tone,
        "chapters": chapters,
        "words_per_chapter": words_per_chapter,
        "brief": notes,
        "include_highlights": highlights,
        "include_action_plan": action_plan,
    }
    try:
        brief_result = resolve_brief(brief_file, overrides)
        chosen_pace = config.get_pace() if pace is None else config.validate_pace(pace)
    except (FileNotFoundError, ValueError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    quiet = json_output or stdout
    studio = EbookStudio(on_update=None if quiet else LogPrinter(), pace=chosen_pace)
    result = studio.run(brief_result.brief)
    if result.error is not None:
        typer.secho(result.error, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    try:
        exported = write_outputs(root_dir, result, brief_result, run_id, force)
    except (FileExistsError, ValueError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    if json_output:
        typer.echo(json.dumps(exported.ebook, indent=2, sort_keys=True))
    elif stdout:
        typer.echo(exported.markdown)
    else:
        typer.secho(f"Ebook written to {exported.markdown_path}", fg=typer.colors.GREEN)


@app.command("tones")
def tones() -> None:
    """List the available narrative tones."""
    for key, profile in TONE_PROFILES.items():
        typer.echo(f"{key}: {profile.label} ({profile.cadence})")


@app.command("slug")
def slug(text: str = typer.Argument(..., help="Title to slugify")) -> None:
    """Print the export filename stem for a title."""
    typer.echo(slugify(text))


def main():
    app()

if __name__ == "__main__":
    main()
