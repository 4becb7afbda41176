from __future__ import annotations

import hashlib
import json
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from . import config
from .brief import BriefResult
from .document import build_markdown, ebook_to_dict, slugify, validate_ebook_data
from .models import Ebook
from .paths import agent_log_path, ebook_json_path, ebook_markdown_path, ebook_meta_path
from .pipeline import PipelineResult


@dataclass
class ExportResult:
    markdown_path: Path
    json_path: Path
    meta_path: Path
    log_path: Path
    markdown: str
    ebook: dict[str, Any]


def output_paths(root: Path, ebook: Ebook) -> list[Path]:
    return [
        ebook_markdown_path(root, slugify(ebook.title)),
        ebook_json_path(root),
        ebook_meta_path(root),
        agent_log_path(root),
    ]


def ensure_writable(paths: list[Path], force: bool) -> None:
    for path in paths:
        if path.exists() and not force:
            raise FileExistsError(f"Refusing to overwrite {path} without --force")


def write_outputs(
    root: Path,
    result: PipelineResult,
    brief_result: BriefResult,
    run_id: str | None,
    force: bool,
) -> ExportResult:
    if result.ebook is None:
        raise ValueError("No ebook to export")

    markdown_path, json_path, meta_path, log_path = output_paths(root, result.ebook)
    ensure_writable([markdown_path, json_path, meta_path, log_path], force)

    ebook_data = ebook_to_dict(result.ebook)
    validate_ebook_data(ebook_data)
    markdown = build_markdown(result.ebook)

    markdown_path.parent.mkdir(parents=True, exist_ok=True)
    json_path.parent.mkdir(parents=True, exist_ok=True)

    markdown_path.write_text(markdown + "\n", encoding="utf-8")
    write_json(json_path, ebook_data)

    meta = {
        "created_at": datetime.now(timezone.utc).isoformat(),
        "seed": result.seed,
        "input_hash": sha256_text(json.dumps(brief_result.resolved, sort_keys=True)),
        "changed_keys": brief_result.changed_keys,
        "markdown": str(markdown_path.relative_to(root)),
        "run_id": run_id,
    }
    write_json(meta_path, meta)
    write_json(
        log_path,
        {"agents": [dict(asdict(agent), notes=list(agent.notes)) for agent in result.logs]},
    )
    config.debug_log(f"[ebookstudio.export] wrote {markdown_path}")

    return ExportResult(
        markdown_path=markdown_path,
        json_path=json_path,
        meta_path=meta_path,
        log_path=log_path,
        markdown=markdown,
        ebook=ebook_data,
    )


def write_json(path: Path, payload: dict[str, Any]) -> None:
    text = json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)
    path.write_text(text + "\n", encoding="utf-8")


def sha256_text(text: str) -> str:
    digest = hashlib.sha256()
    digest.update(text.encode("utf-8"))
    return digest.hexdigest()
