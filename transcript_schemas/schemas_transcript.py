# transcript_schemas/schemas_transcript.py
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# Record kinds that carry conversational turns. Everything else
# (summary, system, progress, file-history-snapshot, ...) is dropped.
CONVERSATION_KINDS = ("assistant", "user")

TEXT_BLOCK = "text"


class ContentBlock(BaseModel):
    """
    One typed fragment of a multi-part message.

    Only `text` blocks are rendered. tool_use / tool_result / image / thinking
    blocks parse fine (extra keys ignored) and are skipped by the extractor.
    """
    model_config = ConfigDict(extra="ignore")

    block_type: str = Field(..., alias="type")
    text: Optional[str] = None

    @property
    def is_text(self) -> bool:
        return self.block_type == TEXT_BLOCK and self.text is not None


class Message(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Not constrained to user/assistant: any string becomes the section heading.
    role: str

    # Either a plain string or an ordered list of blocks.
    content: Union[str, List[ContentBlock]]


class LineRecord(BaseModel):
    """
    One JSONL line of a session log.

    Every line is validated against this shape whatever its `type`, so a
    present-but-malformed `message` fails the run even on a record the
    extractor would have dropped.
    """
    model_config = ConfigDict(extra="ignore")

    # Populated from the JSON key "type" only; a "record_type" key is ignored.
    record_type: Optional[str] = Field(default=None, alias="type")
    message: Optional[Message] = None

    @property
    def is_conversation_turn(self) -> bool:
        return self.record_type in CONVERSATION_KINDS
