"""Reassembly of documents from collected records."""

from .collect import RecordCollector, collect_records, reconstruct
from .decoder import decode, iter_lines

__all__ = ["RecordCollector", "collect_records", "decode", "iter_lines", "reconstruct"]
