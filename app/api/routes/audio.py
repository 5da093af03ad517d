import logging

from fastapi import APIRouter, Request
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from app.core.errors import BadRequestError
from app.models.audio import AudioDocument, AudioStreamRequest, AudioStreamResponse
from app.services.audio.stream_service import build_audio_stream, fetch_audio_document

router = APIRouter(tags=["audio"])

logger = logging.getLogger(__name__)


async def _decode_request(request: Request) -> AudioStreamRequest:
    """
    Decode {"documentID": "..."} from the raw body.
    Decoding is done here (not by FastAPI) so a bad body is a plain 400, not a 422.
    """
    body = await request.body()
    try:
        return AudioStreamRequest.model_validate_json(body)
    except ValidationError as e:
        raise BadRequestError(e.errors()[0]["msg"]) from e


@router.post("/document", response_model=AudioDocument)
async def audio_document(request: Request) -> AudioDocument:
    """
    Metadata only, no audio payload.

    This is the one POST path the stream handler below does not serve:
    a stream request sent to /document gets the record without audio.
    """
    req = await _decode_request(request)
    return await run_in_threadpool(fetch_audio_document, req.documentID)


# Registered last: catches every other POST path
@router.post("/{full_path:path}", response_model=AudioStreamResponse)
async def audio_stream(request: Request, full_path: str) -> AudioStreamResponse:
    """
    Metadata + the whole audio file (base64) in a single JSON response.
    """
    req = await _decode_request(request)
    return await run_in_threadpool(build_audio_stream, req.documentID)
