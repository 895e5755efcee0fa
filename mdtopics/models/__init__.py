"""Typed models shared across the application."""

from .api import DecodeRequest, DecodeResponse, EncodeRequest, EncodeResponse
from .document import Block, DocumentTree, Heading, Node, Paragraph
from .record import Record

__all__ = [
    "Block",
    "DecodeRequest",
    "DecodeResponse",
    "DocumentTree",
    "EncodeRequest",
    "EncodeResponse",
    "Heading",
    "Node",
    "Paragraph",
    "Record",
]
