from __future__ import annotations

import logging

from app.models.audio import AudioDocument, AudioStreamResponse
from app.storage.audio_files import read_audio
from app.storage.documents import read_document

logger = logging.getLogger(__name__)


def fetch_audio_document(doc_id: str) -> AudioDocument:
    document = read_document(doc_id)
    logger.info("Audio document: %s", document.details())
    return document


def build_audio_stream(doc_id: str) -> AudioStreamResponse:
    """
    Two-stage lookup: document id -> metadata record -> audio blob.

    The first failure propagates as-is. The blob is never read when the
    metadata lookup fails, and no partially filled response is returned.
    """
    document = fetch_audio_document(doc_id)
    payload = read_audio(document)

    logger.info("Audio buffer size: %d bytes (doc_id=%s)", payload.size, doc_id)

    return AudioStreamResponse(
        document=document,
        audioBufferSize=payload.size,
        audioBuffer=payload.buffer,
    )
