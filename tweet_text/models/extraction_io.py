"""
Typed Pydantic models for the extraction I/O contract.

ExtractionRequest is what a service accepts from untrusted callers;
ExtractionOutput mirrors EXTRACTION_OUTPUT_SCHEMA so consumers get typed
access to the same payload.
"""
from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from tweet_text.config.settings import MAX_INPUT_LENGTH

OffsetUnit = Literal["codepoint", "utf16"]
EntityKindName = Literal["hashtag", "mention", "list_mention", "url", "cashtag"]


class ExtractionRequest(BaseModel):
    """A single message to scan."""

    text: str = Field(..., max_length=MAX_INPUT_LENGTH, description="Message text, already normalized.")
    offset_unit: OffsetUnit = Field("codepoint", description="Unit for entity start/end in the output.")
    extract_url_without_protocol: Optional[bool] = Field(
        None, description="Accept bare domains; None uses the configured default."
    )


class EntityRecord(BaseModel):
    """One entity as serialized in the output."""

    kind: EntityKindName
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=1)
    text: str = Field(..., min_length=1)
    value: str = Field(..., min_length=1)
    subgroups: Dict[str, Optional[str]] = Field(default_factory=dict)

    @field_validator("end")
    @classmethod
    def validate_end(cls, v: int, info: ValidationInfo) -> int:
        start = info.data.get("start")
        if start is not None and v <= start:
            raise ValueError("end must be strictly greater than start")
        return v


class ExtractionOutput(BaseModel):
    """Entities found in one message plus message-level flags."""

    pattern_version: str
    text_length: int = Field(..., ge=0)
    offset_unit: OffsetUnit
    has_rtl: bool
    has_invalid_characters: bool
    entities: List[EntityRecord]

    @field_validator("entities")
    @classmethod
    def validate_order(cls, v: List[EntityRecord]) -> List[EntityRecord]:
        for prev, cur in zip(v, v[1:]):
            if cur.start < prev.end:
                raise ValueError(
                    f"entities must be sorted and non-overlapping: "
                    f"[{prev.start},{prev.end}) then [{cur.start},{cur.end})"
                )
        return v
