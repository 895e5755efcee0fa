"""Exceptions raised across the encoder, decoder and transports."""

from __future__ import annotations


class MDTopicsError(Exception):
    """Base class for every error raised by mdtopics."""


class EmptyPath(MDTopicsError, ValueError):
    """A path with zero segments was produced or received."""


class MalformedTree(MDTopicsError, ValueError):
    """The document tree does not follow the heading/paragraph contract."""


class InvalidHeadingLevel(MalformedTree):
    """A heading carries a level below 1."""

    def __init__(self, level: int) -> None:
        super().__init__(f"Heading level must be >= 1, got {level}")
        self.level = level


class TransportError(MDTopicsError, RuntimeError):
    """The message broker refused a connect, subscribe or publish."""


class EncodingAmbiguity(UserWarning):
    """A heading title cannot be told apart from other titles once encoded.

    Titles containing ``/`` split into extra segments on decode, and titles
    containing ``_`` come back with spaces.
    """
