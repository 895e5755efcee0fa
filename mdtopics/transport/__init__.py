"""Publish/subscribe transports for records."""

from .base import MemoryTransport, MessageHandler, Transport, topic_matches

__all__ = ["MemoryTransport", "MessageHandler", "Transport", "topic_matches"]
