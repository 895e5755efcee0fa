"""Shared fixtures for the mdtopics test suite."""

from __future__ import annotations

import pytest

from mdtopics.models.record import Record
from mdtopics.transport.base import MemoryTransport

EXAMPLE_MARKDOWN = """\
# Title
## Section A
Hello world.
## Section B
Goodbye.
"""

EXAMPLE_DECODED = """\
# Title

## Section A

Hello world.

## Section B

Goodbye.
"""


@pytest.fixture
def example_markdown() -> str:
    return EXAMPLE_MARKDOWN


@pytest.fixture
def example_decoded() -> str:
    return EXAMPLE_DECODED


@pytest.fixture
def example_records() -> list[Record]:
    return [
        Record(path="Title/Section_A", content="Hello world."),
        Record(path="Title/Section_B", content="Goodbye."),
    ]


@pytest.fixture
def memory_transport() -> MemoryTransport:
    return MemoryTransport()
