import base64
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator


class AudioStreamRequest(BaseModel):
    # {}, null and {"documentID": null} all decode to the empty identifier
    documentID: str = ""

    @model_validator(mode="before")
    @classmethod
    def _null_body(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("documentID", mode="before")
    @classmethod
    def _null_document_id(cls, v: Any) -> Any:
        return "" if v is None else v


class AudioDocument(BaseModel):
    documentID: str = ""
    artists: list[str] = Field(default_factory=list)
    title: str = ""
    fileType: str = ""  # e.g. "mp3", used as-is for the storage suffix
    storageID: str = ""

    @model_validator(mode="before")
    @classmethod
    def _null_record(cls, data: Any) -> Any:
        return {} if data is None else data

    # JSON null decodes to the zero value
    @field_validator("documentID", "title", "fileType", "storageID", mode="before")
    @classmethod
    def _null_string(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("artists", mode="before")
    @classmethod
    def _null_artists(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, list):
            return ["" if a is None else a for a in v]
        return v

    def details(self) -> str:
        return f"Song is {self.title} by {','.join(self.artists)}"


@dataclass(frozen=True)
class AudioPayload:
    buffer: bytes | bytearray
    size: int


class AudioStreamResponse(BaseModel):
    document: AudioDocument
    audioBufferSize: int
    audioBuffer: bytes

    @field_serializer("audioBuffer", when_used="json")
    def _serialize_audio_buffer(self, value: bytes) -> str:
        return base64.b64encode(value).decode("ascii")
