"""Conversions between heading titles, record paths and broker topics."""

from __future__ import annotations

from typing import Iterable, List

from mdtopics.errors import EmptyPath

SEPARATOR = "/"
SPACE = " "
SPACE_REPLACEMENT = "_"
WILDCARD = "#"


def encode_segment(title: str) -> str:
    """Replace spaces with underscores. Nothing is trimmed or escaped."""
    return title.replace(SPACE, SPACE_REPLACEMENT)


def decode_segment(segment: str) -> str:
    return segment.replace(SPACE_REPLACEMENT, SPACE)


def join(titles: Iterable[str]) -> str:
    """Encode every title and join the results into a single path."""
    segments = [encode_segment(title) for title in titles]
    if not segments:
        raise EmptyPath("Cannot build a path from zero titles")
    return SEPARATOR.join(segments)


def split(path: str) -> List[str]:
    """Split a path into segments.

    Only inverts :func:`join` when no title contained a literal ``/``.
    An empty string is a single empty segment.
    """
    return path.split(SEPARATOR)


def is_ambiguous(title: str) -> bool:
    return SEPARATOR in title or SPACE_REPLACEMENT in title


def path_to_topic(prefix: str, path: str) -> str:
    return f"{prefix}{SEPARATOR}{path}"


def topic_to_path(prefix: str, topic: str) -> str:
    """Strip ``prefix/`` from a topic, rejecting topics without a path part."""
    head = f"{prefix}{SEPARATOR}"
    if not topic.startswith(head):
        raise EmptyPath(f"Topic {topic!r} has no path under prefix {prefix!r}")
    return topic[len(head):]


def subscription_filter(prefix: str) -> str:
    return f"{prefix}{SEPARATOR}{WILDCARD}"
