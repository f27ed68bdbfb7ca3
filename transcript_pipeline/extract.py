# transcript_pipeline/extract.py
from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from transcript_schemas.schemas_transcript import LineRecord

from .contracts import ExtractionStats
from .ingest import iter_line_records
from .io_utils import PathLike

logger = logging.getLogger(__name__)


def _section_heading(role: str) -> str:
    # role is used verbatim, no normalization
    return f"## {role}\n\n"


def records_to_markdown(records: Iterable[LineRecord]) -> Tuple[str, ExtractionStats]:
    """
    Build the conversation Markdown from parsed records, in input order.

    Per record:
      - drop unless type is exactly "assistant" or "user"
      - drop if there is no message
      - emit "## <role>" then each text piece followed by a blank line
    Non-text blocks and text blocks without text contribute nothing.
    """
    stats = ExtractionStats()
    out: List[str] = []

    for rec in records:
        stats.lines_read += 1

        if not rec.is_conversation_turn:
            stats.skipped_kind += 1
            continue

        msg = rec.message
        if msg is None:
            stats.skipped_no_message += 1
            continue

        stats.records_kept += 1
        out.append(_section_heading(msg.role))

        if isinstance(msg.content, str):
            out.append(msg.content)
            out.append("\n\n")
            continue

        for block in msg.content:
            if not block.is_text:
                stats.blocks_skipped += 1
                continue
            out.append(block.text)
            out.append("\n\n")

    return "".join(out), stats


def extract_conversation_markdown(path: PathLike) -> str:
    """
    Read a session JSONL file and return its user/assistant turns as Markdown.

    Raises FileAccessError if the file cannot be read and RecordParseError on
    the first malformed line.
    """
    markdown, stats = records_to_markdown(iter_line_records(path))
    logger.debug(
        "Extracted %s: lines=%d kept=%d skipped_kind=%d skipped_no_message=%d blocks_skipped=%d",
        path,
        stats.lines_read,
        stats.records_kept,
        stats.skipped_kind,
        stats.skipped_no_message,
        stats.blocks_skipped,
    )
    return markdown
