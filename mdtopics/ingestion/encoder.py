"""Turn a document tree into path-addressed paragraph records."""

from __future__ import annotations

import logging
import warnings
from typing import Iterable, Iterator, List

from mdtopics.errors import EncodingAmbiguity, InvalidHeadingLevel, MalformedTree
from mdtopics.models.document import Block, DocumentTree, Heading, Paragraph
from mdtopics.models.record import Record
from mdtopics.utils.paths import is_ambiguous, join

logger = logging.getLogger(__name__)


class HeadingStack:
    """Titles of the currently open headings, outermost first."""

    def __init__(self) -> None:
        self.titles: List[str] = []

    def __len__(self) -> int:
        return len(self.titles)

    def open(self, level: int, title: str) -> None:
        """Close every heading at ``level`` or deeper, then open ``title``.

        Skipped levels are not padded: a level-3 heading under a level-1
        heading lands at depth 2.
        """
        if level < 1:
            raise InvalidHeadingLevel(level)
        if len(self.titles) >= level:
            del self.titles[level - 1:]
        self.titles.append(title)

    def path(self) -> str:
        return join(self.titles)


def _warn_if_ambiguous(title: str) -> None:
    if not is_ambiguous(title):
        return
    message = f"Heading title {title!r} contains '/' or '_' and will not decode back unchanged"
    logger.warning(message)
    warnings.warn(message, EncodingAmbiguity, stacklevel=2)


def _walk(nodes: Iterable[object], stack: HeadingStack) -> Iterator[Record]:
    for node in nodes:
        if isinstance(node, Heading):
            title = node.title
            _warn_if_ambiguous(title)
            stack.open(node.level, title)
            yield from _walk(node.children, stack)
        elif isinstance(node, Paragraph):
            content = node.content
            if not content:
                continue
            if not len(stack):
                logger.debug("Dropping paragraph outside any heading: %.40r", content)
                continue
            yield Record(path=stack.path(), content=content)
        elif isinstance(node, Block):
            yield from _walk(node.children, stack)
        else:
            raise MalformedTree(f"Unsupported node in document tree: {type(node).__name__}")


def encode(tree: DocumentTree) -> Iterator[Record]:
    """Yield one record per non-empty paragraph that sits under a heading.

    Each call starts from an empty heading stack, so the same tree always
    yields the same records in document order.
    """
    yield from _walk(tree.children, HeadingStack())


def encode_records(tree: DocumentTree) -> List[Record]:
    return list(encode(tree))
