"""Parse markdown text into the document tree walked by the encoder.

Soft and hard line breaks inside a paragraph become a single space, so
wrapped lines keep their words apart instead of being glued together.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token

from mdtopics.models.document import Block, DocumentTree, Heading, Node, Paragraph

logger = logging.getLogger(__name__)

LINE_BREAKS = {"softbreak", "hardbreak"}


def build_parser() -> MarkdownIt:
    return MarkdownIt("commonmark")


def direct_texts(inline: Token) -> List[str]:
    """Return the plain-text children of an inline token.

    Text nested inside emphasis, links or other inline containers is
    skipped, as are code spans and images. Line breaks count as a space.
    """
    texts: List[str] = []
    depth = 0
    for child in inline.children or []:
        if child.nesting == 1:
            depth += 1
        elif child.nesting == -1:
            depth -= 1
        elif depth == 0:
            if child.type == "text":
                texts.append(child.content)
            elif child.type in LINE_BREAKS:
                texts.append(" ")
    return texts


def _inline_after(tokens: Sequence[Token], index: int) -> List[str]:
    if index + 1 < len(tokens) and tokens[index + 1].type == "inline":
        return direct_texts(tokens[index + 1])
    return []


def build_tree(tokens: Sequence[Token]) -> DocumentTree:
    """Fold a markdown-it token stream into a :class:`DocumentTree`.

    Headings and paragraphs come out flat in document order; containers
    such as lists and block quotes nest their content as children.
    """
    tree = DocumentTree()
    open_children: List[List[Node]] = [tree.children]

    for index, token in enumerate(tokens):
        siblings = open_children[-1]
        if token.type == "heading_open":
            siblings.append(Heading(level=int(token.tag[1:]), texts=_inline_after(tokens, index)))
        elif token.type == "paragraph_open":
            texts = _inline_after(tokens, index)
            if token.hidden:
                # tight list items carry bare text, not paragraphs
                siblings.append(Block(kind="text_block", texts=texts))
            else:
                siblings.append(Paragraph(texts=texts))
        elif token.type in ("heading_close", "paragraph_close", "inline"):
            continue
        elif token.nesting == 1:
            block = Block(kind=token.type[: -len("_open")])
            siblings.append(block)
            open_children.append(block.children)
        elif token.nesting == -1:
            open_children.pop()
        else:
            siblings.append(Block(kind=token.type, texts=[token.content] if token.content else []))

    return tree


def parse_markdown(text: str) -> DocumentTree:
    tokens = build_parser().parse(text)
    tree = build_tree(tokens)
    logger.debug("Parsed %s markdown tokens into %s top-level nodes", len(tokens), len(tree.children))
    return tree


def parse_markdown_file(path: Path) -> DocumentTree:
    return parse_markdown(path.read_text(encoding="utf-8"))
