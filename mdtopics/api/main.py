"""FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from mdtopics import __version__
from mdtopics.errors import MDTopicsError
from mdtopics.ingestion.encoder import encode_records
from mdtopics.ingestion.parse_markdown import parse_markdown
from mdtopics.models.api import DecodeRequest, DecodeResponse, EncodeRequest, EncodeResponse
from mdtopics.reconstruction.decoder import decode

logger = logging.getLogger(__name__)

app = FastAPI(
    title="mdtopics",
    description="Split markdown into path-addressed records and rebuild it",
    version=__version__,
)


@app.get("/health")
def health() -> dict[str, str]:
    """Simple readiness probe."""
    return {"status": "ok"}


@app.post("/encode", response_model=EncodeResponse)
def encode_document(payload: EncodeRequest) -> EncodeResponse:
    """Return the records a publisher would send for this document."""
    try:
        records = encode_records(parse_markdown(payload.markdown))
    except MDTopicsError as exc:
        logger.warning("Encoding failed: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    topics = [record.topic(payload.topic_prefix) for record in records] if payload.topic_prefix else []
    return EncodeResponse(records=records, topics=topics)


@app.post("/decode", response_model=DecodeResponse)
def decode_records(payload: DecodeRequest) -> DecodeResponse:
    """Rebuild markdown from records given in any order."""
    return DecodeResponse(markdown=decode(payload.records))
