"""Collect published records for a time window and rebuild the document."""

from __future__ import annotations

import logging
import signal
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from mdtopics.config import settings
from mdtopics.errors import EmptyPath
from mdtopics.models.record import Record
from mdtopics.reconstruction.decoder import decode
from mdtopics.transport.base import Transport
from mdtopics.utils.paths import subscription_filter, topic_to_path

logger = logging.getLogger(__name__)

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class RecordCollector:
    """Message handler that keeps the latest content seen for each path."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        self.messages: Dict[str, str] = {}
        self.skipped = 0
        self._lock = threading.Lock()

    def __call__(self, topic: str, payload: str) -> None:
        try:
            path = topic_to_path(self.prefix, topic)
        except EmptyPath as exc:
            logger.warning("Skipping message: %s", exc)
            with self._lock:
                self.skipped += 1
            return
        with self._lock:
            self.messages[path] = payload

    def records(self) -> List[Record]:
        with self._lock:
            return [Record(path=path, content=content) for path, content in self.messages.items()]


@contextmanager
def stop_on_signals(stop: threading.Event) -> Iterator[None]:
    """Set ``stop`` on SIGINT/SIGTERM while the block runs."""
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def handler(signum, frame) -> None:
        logger.info("Interrupted, reconstructing...")
        stop.set()

    previous = {sig: signal.signal(sig, handler) for sig in STOP_SIGNALS}
    try:
        yield
    finally:
        for sig, old in previous.items():
            signal.signal(sig, old)


def collect_records(
    transport: Transport,
    prefix: Optional[str] = None,
    duration: Optional[float] = None,
    stop: Optional[threading.Event] = None,
) -> List[Record]:
    """Subscribe under ``prefix`` and gather records until the window closes.

    The window ends after ``duration`` seconds or as soon as ``stop`` is
    set. Whatever arrived by then is returned; no total is known upfront.
    """
    prefix = settings.topic_prefix if prefix is None else prefix
    duration = settings.collect_duration if duration is None else duration
    stop = stop or threading.Event()
    pattern = subscription_filter(prefix)
    collector = RecordCollector(prefix)

    transport.subscribe(pattern, collector)
    logger.info("Collecting messages for %s seconds...", duration)
    try:
        with stop_on_signals(stop):
            stop.wait(duration)
    finally:
        transport.unsubscribe(pattern)

    records = collector.records()
    logger.info("Collected %s records (%s skipped)", len(records), collector.skipped)
    return records


def write_output(markdown: str, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(markdown, encoding="utf-8")
    logger.info("Reconstructed Markdown written to %s", output_path)


def reconstruct(
    transport: Transport,
    prefix: Optional[str] = None,
    duration: Optional[float] = None,
    output_path: Optional[Path] = None,
    stop: Optional[threading.Event] = None,
) -> str:
    """Collect, decode and optionally write the rebuilt document."""
    markdown = decode(collect_records(transport, prefix, duration, stop))
    if output_path is not None:
        write_output(markdown, output_path)
    return markdown
