"""Rebuild a markdown document from an unordered set of records."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Tuple, Union

from mdtopics.models.record import Record
from mdtopics.utils.paths import decode_segment, split

logger = logging.getLogger(__name__)

HEADING_MARKER = "#"

RecordLike = Union[Record, Tuple[str, str]]


def _as_pair(item: RecordLike) -> Tuple[str, str]:
    if isinstance(item, Record):
        return item.as_pair()
    path, content = item
    return path, content


def sort_records(records: Iterable[RecordLike]) -> List[Tuple[str, str]]:
    """Order records by their joined path string.

    Comparing the joined strings keeps every prefix ahead of the paths
    nested under it. Duplicate paths fall back to content order.
    """
    return sorted(_as_pair(item) for item in records)


def heading_line(depth: int, segment: str) -> str:
    return f"{HEADING_MARKER * depth} {decode_segment(segment)}"


def iter_lines(records: Iterable[RecordLike]) -> Iterator[str]:
    """Yield document lines, re-emitting only the headings that changed."""
    last: List[str] = []
    for path, content in sort_records(records):
        segments = split(path)
        for index, segment in enumerate(segments):
            if index < len(last) and last[index] == segment:
                continue
            yield heading_line(index + 1, segment)
            yield ""
            del last[index:]
            last.append(segment)
        yield content
        yield ""


def decode(records: Iterable[RecordLike]) -> str:
    lines = list(iter_lines(records))
    logger.debug("Decoded records into %s lines", len(lines))
    return "\n".join(lines)
