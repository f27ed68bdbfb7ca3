# transcript_pipeline/contracts.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable


# ---- External renderer boundary ----
# (absolute HTML path, destination PDF path) -> True on success.
# The browser needs an absolute file:// URL so relative references resolve.
PdfRenderer = Callable[[Path, Path], bool]


@dataclass(frozen=True)
class ConversionPaths:
    """Input JSONL, intermediate HTML (left on disk), and output PDF."""
    input_jsonl: Path
    html: Path
    pdf: Path


@dataclass
class ExtractionStats:
    """Counters for one extraction pass. Filtering is silent; these are for debug logs."""
    lines_read: int = 0
    records_kept: int = 0
    skipped_kind: int = 0
    skipped_no_message: int = 0
    blocks_skipped: int = 0


@dataclass(frozen=True)
class ConversionResult:
    paths: ConversionPaths
    page_count: int
    markdown_chars: int
    html_chars: int
