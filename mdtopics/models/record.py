"""Record model exchanged with the transport."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict

from mdtopics.utils.paths import path_to_topic


class Record(BaseModel):
    """A (path, content) pair addressing one paragraph."""

    model_config = ConfigDict(frozen=True)

    path: str
    content: str

    def topic(self, prefix: str) -> str:
        return path_to_topic(prefix, self.path)

    def as_pair(self) -> Tuple[str, str]:
        return (self.path, self.content)
