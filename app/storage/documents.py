import logging
from pathlib import Path

from pydantic import ValidationError

from app.core.config import settings
from app.core.errors import AudioLookupError, LookupFailure
from app.models.audio import AudioDocument

logger = logging.getLogger(__name__)


def get_document_root() -> Path:
    return Path(settings.DATA_DIR) / settings.DOCUMENT_DIR


def get_document_path(doc_id: str) -> Path:
    return get_document_root() / f"{doc_id}{settings.DOCUMENT_SUFFIX}"


def read_document(doc_id: str) -> AudioDocument:
    """
    Resolve a document id to its metadata record:
        <DATA_DIR>/Document/<doc_id>.json

    Every call reads the file again (nothing is cached).
    Missing fields are accepted and left at their zero value.
    """
    p = get_document_path(doc_id)

    try:
        with p.open("rb") as f:
            raw = f.read()
    except (OSError, ValueError) as e:
        raise AudioLookupError.from_os_error(p, e) from e

    try:
        return AudioDocument.model_validate_json(raw)
    except ValidationError as e:
        logger.debug("Metadata parse failed for %s: %s", p, e)
        raise AudioLookupError(
            LookupFailure.PARSE_FAILURE,
            f"invalid metadata in {p}: {e.errors()[0]['msg']}",
            path=p,
        ) from e
