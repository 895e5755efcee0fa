"""Tests for the heading-stack path encoder."""

from __future__ import annotations

import types

import pytest

from mdtopics.errors import EncodingAmbiguity, InvalidHeadingLevel, MalformedTree
from mdtopics.ingestion.encoder import HeadingStack, encode, encode_records
from mdtopics.models.document import Block, DocumentTree, Heading, Paragraph
from mdtopics.models.record import Record


def h(level: int, title: str) -> Heading:
    return Heading(level=level, texts=[title] if title else [])


def p(*texts: str) -> Paragraph:
    return Paragraph(texts=list(texts))


def pairs(tree: DocumentTree) -> list[tuple[str, str]]:
    return [record.as_pair() for record in encode(tree)]


def test_example_document() -> None:
    tree = DocumentTree(
        children=[h(1, "Title"), h(2, "Section A"), p("Hello world."), h(2, "Section B"), p("Goodbye.")]
    )
    assert encode_records(tree) == [
        Record(path="Title/Section_A", content="Hello world."),
        Record(path="Title/Section_B", content="Goodbye."),
    ]


def test_heading_closes_same_and_deeper_levels() -> None:
    tree = DocumentTree(
        children=[
            h(1, "A"),
            h(2, "B"),
            h(3, "C"),
            p("deep"),
            h(2, "D"),
            p("sibling"),
            h(1, "E"),
            p("top"),
        ]
    )
    assert pairs(tree) == [("A/B/C", "deep"), ("A/D", "sibling"), ("E", "top")]


def test_paragraph_directly_under_each_level() -> None:
    tree = DocumentTree(children=[h(1, "A"), p("one"), h(2, "B"), p("two"), h(1, "C"), p("three")])
    assert pairs(tree) == [("A", "one"), ("A/B", "two"), ("C", "three")]


def test_content_is_concatenated_and_trimmed() -> None:
    tree = DocumentTree(children=[h(1, "A"), p("  Hello", " ", "world.  ")])
    assert pairs(tree) == [("A", "Hello world.")]


def test_whitespace_paragraph_is_dropped() -> None:
    tree = DocumentTree(children=[h(1, "A"), p("   "), p(), p("kept")])
    assert pairs(tree) == [("A", "kept")]


def test_paragraph_before_any_heading_is_dropped() -> None:
    tree = DocumentTree(children=[p("preamble"), h(1, "A"), p("body")])
    assert pairs(tree) == [("A", "body")]


def test_degenerate_heading_opens_scope() -> None:
    tree = DocumentTree(children=[h(1, "A"), h(2, ""), p("under empty")])
    assert pairs(tree) == [("A/", "under empty")]


def test_skipped_level_is_not_padded() -> None:
    tree = DocumentTree(children=[h(1, "A"), h(3, "C"), p("x"), h(2, "B"), p("y")])
    assert pairs(tree) == [("A/C", "x"), ("A/B", "y")]


def test_blocks_are_walked_but_not_recorded() -> None:
    quote = Block(kind="blockquote", children=[p("quoted")])
    code = Block(kind="fence", texts=["print('hi')\n"])
    tree = DocumentTree(children=[h(1, "A"), code, quote])
    assert pairs(tree) == [("A", "quoted")]


def test_heading_children_are_visited_in_order() -> None:
    tree = DocumentTree(
        children=[Heading(level=1, texts=["A"], children=[p("first"), Heading(level=2, texts=["B"]), p("second")])]
    )
    assert pairs(tree) == [("A", "first"), ("A/B", "second")]


def test_encode_is_lazy_and_restartable() -> None:
    tree = DocumentTree(children=[h(1, "A"), p("one"), h(2, "B"), p("two")])
    records = encode(tree)
    assert isinstance(records, types.GeneratorType)
    assert next(records).as_pair() == ("A", "one")
    assert encode_records(tree) == encode_records(tree)


def test_invalid_heading_level() -> None:
    tree = DocumentTree(children=[Heading(level=0, texts=["Zero"]), p("x")])
    with pytest.raises(InvalidHeadingLevel) as excinfo:
        encode_records(tree)
    assert excinfo.value.level == 0
    assert isinstance(excinfo.value, MalformedTree)


def test_records_before_a_malformed_node_are_still_produced() -> None:
    tree = DocumentTree(children=[h(1, "A"), p("ok"), Heading(level=-1, texts=["bad"])])
    records = encode(tree)
    assert next(records).as_pair() == ("A", "ok")
    with pytest.raises(InvalidHeadingLevel):
        next(records)


def test_unknown_node_is_malformed() -> None:
    tree = DocumentTree.model_construct(children=[h(1, "A"), "not a node"])
    with pytest.raises(MalformedTree):
        encode_records(tree)


def test_ambiguous_title_warns_but_encodes() -> None:
    tree = DocumentTree(children=[h(1, "either/or"), p("x")])
    with pytest.warns(EncodingAmbiguity):
        assert pairs(tree) == [("either/or", "x")]


def test_heading_stack() -> None:
    stack = HeadingStack()
    stack.open(1, "A")
    stack.open(2, "B")
    stack.open(2, "C")
    assert stack.titles == ["A", "C"]
    assert stack.path() == "A/C"
    stack.open(1, "D")
    assert len(stack) == 1
