# transcript_pipeline/ingest.py
from __future__ import annotations

from pathlib import Path
from typing import Iterator

from pydantic import ValidationError

from transcript_schemas.schemas_transcript import LineRecord

from .errors import FileAccessError, RecordParseError
from .io_utils import PathLike


def parse_line_record(line: str, line_no: int) -> LineRecord:
    """
    Parse one JSONL line into a LineRecord.

    Fails closed: invalid JSON and wrong shapes both raise RecordParseError.
    There is no per-line recovery; blank lines are invalid JSON too.
    """
    try:
        return LineRecord.model_validate_json(line)
    except ValidationError as e:
        raise RecordParseError(str(e), line_no=line_no) from e


def iter_line_records(path: PathLike) -> Iterator[LineRecord]:
    """
    Lazily yield one LineRecord per line of a JSONL file (single pass).

    The first unparseable line aborts iteration; nothing after it is read.
    """
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8", newline="\n") as f:
            for line_no, raw_line in enumerate(f, start=1):
                yield parse_line_record(raw_line.rstrip("\r\n"), line_no)
    except UnicodeDecodeError as e:
        raise FileAccessError(f"Input is not valid UTF-8: {p}: {e}") from e
    except OSError as e:
        raise FileAccessError(f"Cannot read input file {p}: {e}") from e
