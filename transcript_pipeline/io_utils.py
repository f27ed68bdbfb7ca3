# transcript_pipeline/io_utils.py
from __future__ import annotations

from pathlib import Path
from typing import Union

from .errors import FileAccessError


# Also allows passing a str without breaking anything.
PathLike = Union[str, Path]


def write_text(path: PathLike, text: str) -> Path:
    """
    Write a UTF-8 text artifact (fail-closed). Parent dirs are created.
    """
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
    except OSError as e:
        raise FileAccessError(f"Cannot write {p}: {e}", stage="write") from e
    return p


def absolute_path(path: PathLike) -> Path:
    """Absolute form of path, resolved against the current working directory."""
    return Path(path).resolve()


def remove_file(path: PathLike) -> None:
    """Delete a file if present (fail-closed on anything but absence)."""
    p = Path(path)
    try:
        p.unlink(missing_ok=True)
    except OSError as e:
        raise FileAccessError(f"Cannot remove {p}: {e}", stage="write") from e
