# transcript_pipeline/errors.py
from __future__ import annotations

from typing import Optional


class ConversionError(Exception):
    """
    Fail-closed conversion error. The first one raised aborts the run.

    stage is one of: "read", "parse", "write", "render".
    """
    stage = "convert"

    def __init__(self, message: str, *, stage: Optional[str] = None) -> None:
        super().__init__(message)
        if stage is not None:
            self.stage = stage

    def __str__(self) -> str:
        return f"[{self.stage}] {super().__str__()}"


class FileAccessError(ConversionError, OSError):
    """Input could not be opened/read/decoded, or the HTML could not be written."""
    stage = "read"


class RecordParseError(ConversionError, ValueError):
    """A JSONL line is not valid JSON or does not have the Line Record shape."""
    stage = "parse"

    def __init__(self, message: str, *, line_no: int) -> None:
        super().__init__(f"line {line_no}: {message}")
        self.line_no = line_no


class RenderError(ConversionError, RuntimeError):
    """The PDF renderer failed to launch, exited non-zero, or wrote no usable PDF."""
    stage = "render"
