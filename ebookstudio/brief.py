from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

from .defaults import (
    CHAPTER_BOUNDS,
    DEFAULT_BRIEF,
    FALLBACK_AUDIENCE,
    TONE_PROFILES,
    WORDS_PER_CHAPTER_BOUNDS,
)
from .models import Brief
from .seed import clamp


@dataclass
class BriefResult:
    brief: Brief
    resolved: dict[str, Any]
    changed_keys: list[str]


def resolve_brief(
    path: Path | None,
    overrides: dict[str, Any] | None = None,
) -> BriefResult:
    """Layer a brief file and option overrides on top of the default brief.

    ``None`` override values are treated as "not given" so unset CLI options
    never clobber the file.
    """
    file_data: dict[str, Any] = {}
    if path is not None:
        if not path.exists():
            raise FileNotFoundError(f"Missing brief at {path}")
        try:
            file_data = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ValueError(f"Brief at {path} is not valid JSON: {exc}") from exc
        if not isinstance(file_data, dict):
            raise ValueError(f"Brief at {path} must be a JSON object")

    given = {key: value for key, value in (overrides or {}).items() if value is not None}
    resolved = {**DEFAULT_BRIEF, **file_data, **given}
    validate_brief_data(resolved)

    brief = build_brief(resolved)
    changed = sorted(key for key in resolved if resolved[key] != DEFAULT_BRIEF.get(key))
    return BriefResult(brief=brief, resolved=resolved, changed_keys=changed)


def build_brief(data: dict[str, Any]) -> Brief:
    tone = data.get("tone", DEFAULT_BRIEF["tone"])
    if tone not in TONE_PROFILES:
        known = ", ".join(TONE_PROFILES)
        raise ValueError(f"Unknown tone {tone!r}; expected one of: {known}")

    topic = str(data.get("topic", ""))
    if not topic.strip():
        raise ValueError("Brief topic is required")

    audience = str(data.get("audience", ""))
    if not audience.strip():
        audience = FALLBACK_AUDIENCE

    return Brief(
        title=str(data.get("title", "")),
        author=str(data.get("author", "")),
        topic=topic,
        audience=audience,
        tone=tone,
        chapters=clamp(int(data.get("chapters", DEFAULT_BRIEF["chapters"])), *CHAPTER_BOUNDS),
        words_per_chapter=clamp(
            int(data.get("words_per_chapter", DEFAULT_BRIEF["words_per_chapter"])),
            *WORDS_PER_CHAPTER_BOUNDS,
        ),
        brief=str(data.get("brief", "")),
        include_highlights=bool(data.get("include_highlights", True)),
        include_action_plan=bool(data.get("include_action_plan", True)),
    )


def validate_brief_data(data: dict[str, Any]) -> None:
    try:
        import jsonschema
    except ImportError as exc:
        raise RuntimeError("jsonschema is required for validation") from exc

    validator = jsonschema.Draft202012Validator(load_schema("brief.schema.json"))
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(part) for part in e.path])
    if errors:
        details = "; ".join(describe_error(error) for error in errors)
        raise ValueError(f"Invalid brief: {details}")


def describe_error(error: Any) -> str:
    location = ".".join(str(part) for part in error.path)
    return f"{location}: {error.message}" if location else error.message


def load_schema(name: str) -> dict[str, Any]:
    schema_path = resources.files("ebookstudio.schemas").joinpath(name)
    with schema_path.open("r", encoding="utf-8") as handle:
        return json.load(handle)
