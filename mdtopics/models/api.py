"""Request/response models for the public API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .record import Record


class EncodeRequest(BaseModel):
    """Markdown document to split into records."""

    markdown: str
    topic_prefix: Optional[str] = Field(
        default=None, description="When set, the response also lists broker topics."
    )


class EncodeResponse(BaseModel):
    records: List[Record]
    topics: List[str] = Field(default_factory=list)


class DecodeRequest(BaseModel):
    """Records to reassemble, in any order."""

    records: List[Record]


class DecodeResponse(BaseModel):
    markdown: str
