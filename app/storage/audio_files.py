import os
from pathlib import Path
from typing import BinaryIO

from app.core.config import settings
from app.core.errors import AudioLookupError, LookupFailure
from app.models.audio import AudioDocument, AudioPayload


def get_storage_root() -> Path:
    return Path(settings.DATA_DIR) / settings.STORAGE_DIR


def get_audio_path(document: AudioDocument) -> Path:
    # fileType is not checked against a known set
    return get_storage_root() / f"{document.storageID}.{document.fileType}"


def read_exact(f: BinaryIO, size: int, path: Path | None = None) -> bytearray:
    """
    Read exactly `size` bytes from f.

    A single read() may return fewer bytes than asked for, so keep
    calling readinto() until the buffer is full. Reaching EOF first is an
    error, never a shorter successful read. The filled buffer is returned
    as-is, without a copy.
    """
    buffer = bytearray(size)
    view = memoryview(buffer)
    total = 0

    while total < size:
        n = f.readinto(view[total:])
        if not n:
            raise AudioLookupError(
                LookupFailure.READ_SIZE_MISMATCH,
                f"short read from {path or 'stream'}: expected {size} bytes, got {total}",
                path=path,
            )
        total += n

    return buffer


def read_audio(document: AudioDocument) -> AudioPayload:
    """
    Load the whole audio blob referenced by a document into memory:
        <DATA_DIR>/Storage/<storageID>.<fileType>
    """
    p = get_audio_path(document)

    try:
        with p.open("rb") as f:
            size = os.fstat(f.fileno()).st_size
            try:
                buffer = read_exact(f, size, path=p)
            except OSError as e:
                raise AudioLookupError.from_os_error(p, e, op="read") from e
    except (OSError, ValueError) as e:
        raise AudioLookupError.from_os_error(p, e) from e

    return AudioPayload(buffer=buffer, size=len(buffer))
