"""Transport interface plus an in-process implementation."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, List, Protocol, Tuple

logger = logging.getLogger(__name__)

MessageHandler = Callable[[str, str], None]


class Transport(Protocol):
    """Topic-addressed publish/subscribe channel."""

    def publish(self, key: str, value: str) -> None: ...

    def subscribe(self, pattern: str, handler: MessageHandler) -> None: ...

    def unsubscribe(self, pattern: str) -> None: ...

    def close(self) -> None: ...


def topic_matches(pattern: str, topic: str) -> bool:
    """MQTT filter matching with ``+`` (one level) and ``#`` (remaining levels)."""
    pattern_levels = pattern.split("/")
    topic_levels = topic.split("/")
    for index, level in enumerate(pattern_levels):
        if level == "#":
            return True
        if index >= len(topic_levels):
            return False
        if level != "+" and level != topic_levels[index]:
            return False
    return len(pattern_levels) == len(topic_levels)


class MemoryTransport:
    """Keeps retained messages in memory and delivers them synchronously.

    New subscribers first receive every retained message that matches,
    the way a broker replays retained topics.
    """

    def __init__(self, retain: bool = True) -> None:
        self.retain = retain
        self.retained: Dict[str, str] = {}
        self.published: List[Tuple[str, str]] = []
        self.handlers: Dict[str, List[MessageHandler]] = {}
        self._lock = threading.Lock()

    def publish(self, key: str, value: str) -> None:
        with self._lock:
            self.published.append((key, value))
            if self.retain:
                self.retained[key] = value
            targets = [
                handler
                for pattern, handlers in self.handlers.items()
                if topic_matches(pattern, key)
                for handler in handlers
            ]
        for handler in targets:
            handler(key, value)

    def subscribe(self, pattern: str, handler: MessageHandler) -> None:
        with self._lock:
            self.handlers.setdefault(pattern, []).append(handler)
            replay = [(key, value) for key, value in self.retained.items() if topic_matches(pattern, key)]
        for key, value in replay:
            handler(key, value)

    def unsubscribe(self, pattern: str) -> None:
        with self._lock:
            self.handlers.pop(pattern, None)

    def close(self) -> None:
        with self._lock:
            self.handlers.clear()
