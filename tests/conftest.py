"""Shared fixtures: JSONL writers and a fake PDF renderer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, List, Tuple

import pytest
from pypdf import PdfWriter


USER_HELLO = {"type": "user", "message": {"role": "user", "content": "Hello"}}
ASSISTANT_HI = {
    "type": "assistant",
    "message": {"role": "assistant", "content": [{"type": "text", "text": "Hi there"}]},
}


@pytest.fixture
def write_jsonl(tmp_path: Path) -> Callable[..., Path]:
    """Write records (dicts are JSON-encoded, strings written as-is) one per line."""

    def _write(records: List[Any], name: str = "session.jsonl") -> Path:
        path = tmp_path / name
        lines = [r if isinstance(r, str) else json.dumps(r) for r in records]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


class FakeRenderer:
    """Records calls; writes a real one-page PDF unless told otherwise."""

    def __init__(self, succeed: bool = True, write_pdf: bool = True) -> None:
        self.succeed = succeed
        self.write_pdf = write_pdf
        self.calls: List[Tuple[Path, Path]] = []

    def __call__(self, html_path: Path, pdf_path: Path) -> bool:
        self.calls.append((html_path, pdf_path))
        if self.succeed and self.write_pdf:
            writer = PdfWriter()
            writer.add_blank_page(width=72, height=72)
            with open(pdf_path, "wb") as f:
                writer.write(f)
        return self.succeed


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()
