"""Small file helpers."""

from __future__ import annotations

from pathlib import Path


def save_to_file(path: str | Path, contents: str) -> None:
    """Write ``contents`` to ``path``, creating parent directories as needed."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(contents, encoding="utf-8")


def read_file(path: str | Path) -> str:
    """Return the whole text of the file at ``path``."""
    return Path(path).read_text(encoding="utf-8")


def get_file_name(file_path: str | Path) -> str:
    """Return the file name of ``file_path`` without its final extension."""
    path = Path(file_path)
    if path.name in ("", ".", ".."):
        raise ValueError(f"path has no file name: {str(file_path)!r}")
    return path.stem