from __future__ import annotations

import re
from dataclasses import asdict
from typing import Any

from .brief import describe_error, load_schema
from .defaults import FALLBACK_AUTHOR, FALLBACK_SLUG, FALLBACK_TITLE, TONE_PROFILES
from .models import Brief, Chapter, Ebook


SLUG_PATTERN = re.compile(r"[^a-z0-9]+")
SLUG_LIMIT = 60


def assemble_ebook(
    brief: Brief,
    chapters: list[Chapter],
    highlights: list[str],
    action_plan: list[str],
    closing: str,
    hero_hook: str,
) -> Ebook:
    tone = TONE_PROFILES[brief.tone]
    audience = brief.audience.lower()
    return Ebook(
        title=brief.title.strip() or FALLBACK_TITLE,
        subtitle=f"An agentic playbook for {brief.topic}",
        author=brief.author.strip() or FALLBACK_AUTHOR,
        theme=brief.topic,
        audience=brief.audience,
        positioning=f"Crafted for {audience} with a {tone.label.lower()} cadence.",
        chapters=tuple(chapters),
        highlights=tuple(highlights),
        action_plan=tuple(action_plan),
        closing=closing,
        hero_hook=hero_hook,
    )


def build_markdown(ebook: Ebook) -> str:
    """Serialize an ebook to markdown.

    Empty entries are filtered out before joining, so blank separators and
    empty optional headings never reach the output. The action plan and
    closing headings carry their own newlines.
    """
    lines: list[str] = [
        f"# {ebook.title}",
        f"_{ebook.subtitle}_",
        "",
        f"**Author:** {ebook.author}",
        f"**Audience:** {ebook.audience}",
        f"**Positioning:** {ebook.positioning}",
        "",
        "## Hero Hook",
        ebook.hero_hook,
        "",
        "## Table of Contents",
    ]
    lines.extend(f"{number}. {chapter.title}" for number, chapter in enumerate(ebook.chapters, 1))
    lines.append("")
    for chapter in ebook.chapters:
        lines.extend([f"## {chapter.title}", f"_{chapter.summary}_", ""])
        lines.extend(chapter.content)
        lines.extend(["", f"> {chapter.spotlight}", ""])
    lines.append("## Highlights" if ebook.highlights else "")
    lines.extend(f"- {highlight}" for highlight in ebook.highlights)
    lines.append("\n## Action Plan\n" if ebook.action_plan else "")
    lines.extend(f"{number}. {step}" for number, step in enumerate(ebook.action_plan, 1))
    lines.extend(["\n## Closing Thoughts\n", ebook.closing])
    return "\n".join(line for line in lines if line)


def slugify(text: str) -> str:
    slug = SLUG_PATTERN.sub("-", text.lower()).strip("-")
    return slug[:SLUG_LIMIT] or FALLBACK_SLUG


def ebook_to_dict(ebook: Ebook) -> dict[str, Any]:
    data = asdict(ebook)
    data["chapters"] = [
        {**chapter, "content": list(chapter["content"])} for chapter in data["chapters"]
    ]
    data["highlights"] = list(ebook.highlights)
    data["action_plan"] = list(ebook.action_plan)
    return data


def validate_ebook_data(data: dict[str, Any]) -> None:
    try:
        import jsonschema
    except ImportError as exc:
        raise RuntimeError("jsonschema is required for validation") from exc

    validator = jsonschema.Draft202012Validator(load_schema("ebook.schema.json"))
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(part) for part in e.path])
    if errors:
        details = "; ".join(describe_error(error) for error in errors)
        raise ValueError(f"Assembled ebook failed validation: {details}")
