"""Typed errors for audio lookups."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class LookupFailure(str, Enum):
    NOT_FOUND = "not_found"
    IO_FAILURE = "io_failure"
    PARSE_FAILURE = "parse_failure"
    READ_SIZE_MISMATCH = "read_size_mismatch"


class AudioStreamError(Exception):
    """Base exception for all audio stream errors."""


class AudioLookupError(AudioStreamError):
    """
    Raised when a metadata record or an audio blob cannot be produced.

    HTTP callers only see the message (always a 500), `kind` keeps the
    actual cause for logs and tests.
    """

    def __init__(self, kind: LookupFailure, message: str, path: Path | None = None) -> None:
        self.kind = kind
        self.message = message
        self.path = path
        super().__init__(message)

    @classmethod
    def from_os_error(
        cls, path: Path, exc: OSError | ValueError, op: str = "open"
    ) -> AudioLookupError:
        # ValueError: the path itself is unusable (e.g. embedded null byte)
        kind = (
            LookupFailure.NOT_FOUND
            if isinstance(exc, FileNotFoundError)
            else LookupFailure.IO_FAILURE
        )
        reason = getattr(exc, "strerror", None) or str(exc)
        return cls(kind, f"{op} {path}: {reason}", path=path)


class BadRequestError(AudioStreamError):
    """Raised when a request body does not decode to {"documentID": str}."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__("Bad request")
