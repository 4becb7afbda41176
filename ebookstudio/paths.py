from __future__ import annotations

from pathlib import Path


def root_path(root: str | None) -> Path:
    return Path(root or ".").resolve()


def ensure_dirs(root: Path) -> None:
    for rel in ["artifacts", "out"]:
        path = root / rel
        if path.exists() and not path.is_dir():
            raise ValueError(f"Expected directory at {path}, found a file")
        path.mkdir(parents=True, exist_ok=True)


def brief_path(root: Path) -> Path:
    return root / "brief.json"


def ebook_markdown_path(root: Path, slug: str) -> Path:
    return root / "out" / f"{slug}.md"


def ebook_json_path(root: Path) -> Path:
    return root / "artifacts" / "ebook.json"


def ebook_meta_path(root: Path) -> Path:
    return root / "artifacts" / "ebook.meta.json"


def agent_log_path(root: Path) -> Path:
    return root / "artifacts" / "agent_log.json"
