"""Encode a markdown document and publish every record to the broker."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from mdtopics.config import settings
from mdtopics.ingestion.encoder import encode
from mdtopics.ingestion.parse_markdown import parse_markdown, parse_markdown_file
from mdtopics.models.record import Record
from mdtopics.transport.base import Transport

logger = logging.getLogger(__name__)


def publish_records(records: Iterable[Record], transport: Transport, prefix: Optional[str] = None) -> int:
    """Publish records one by one as they are produced."""
    prefix = settings.topic_prefix if prefix is None else prefix
    count = 0
    for record in records:
        topic = record.topic(prefix)
        transport.publish(topic, record.content)
        count += 1
        logger.info("Published to %s: %s", topic, record.content)
    return count


def publish_markdown(text: str, transport: Transport, prefix: Optional[str] = None) -> int:
    return publish_records(encode(parse_markdown(text)), transport, prefix)


def publish_file(path: Path, transport: Transport, prefix: Optional[str] = None) -> int:
    """Parse, encode and publish a markdown file."""
    if not path.exists():
        raise FileNotFoundError(f"Markdown file {path} does not exist.")
    count = publish_records(encode(parse_markdown_file(path)), transport, prefix)
    logger.info("Published %s records from %s", count, path)
    return count
