from pathlib import Path

import pytest

import app.services.audio.stream_service as stream_service
from app.core.errors import AudioLookupError, LookupFailure
from app.services.audio.stream_service import build_audio_stream
from tests.helpers import write_document


def test_build_audio_stream_happy_path(song_abc123: Path):
    res = build_audio_stream("abc123")

    assert res.document.title == "Song"
    assert res.document.artists == ["A", "B"]
    assert res.audioBufferSize == 5
    assert res.audioBuffer == bytes([1, 2, 3, 4, 5])


def test_missing_document_never_reads_audio(temp_data_dir: Path, monkeypatch):
    calls = []

    def fake_read_audio(document):
        calls.append(document)
        raise AssertionError("audio store must not be touched")

    monkeypatch.setattr(stream_service, "read_audio", fake_read_audio)

    with pytest.raises(AudioLookupError) as ei:
        build_audio_stream("missing")

    assert ei.value.kind == LookupFailure.NOT_FOUND
    assert calls == []


def test_corrupt_document_never_reads_audio(temp_data_dir: Path, monkeypatch):
    write_document(temp_data_dir, "broken", "{")
    monkeypatch.setattr(
        stream_service,
        "read_audio",
        lambda document: pytest.fail("audio store must not be touched"),
    )

    with pytest.raises(AudioLookupError) as ei:
        build_audio_stream("broken")

    assert ei.value.kind == LookupFailure.PARSE_FAILURE


def test_missing_audio_yields_no_envelope(temp_data_dir: Path):
    write_document(
        temp_data_dir,
        "orphan",
        {"documentID": "orphan", "title": "T", "fileType": "mp3", "storageID": "gone"},
    )

    result = None
    with pytest.raises(AudioLookupError) as ei:
        result = build_audio_stream("orphan")

    assert result is None
    assert ei.value.kind == LookupFailure.NOT_FOUND
    assert "gone.mp3" in str(ei.value)


def test_each_call_rereads_the_store(song_abc123: Path):
    first = build_audio_stream("abc123")

    (song_abc123 / "Storage" / "s1.mp3").write_bytes(b"\x09\x08")
    second = build_audio_stream("abc123")

    assert first.audioBufferSize == 5
    assert second.audioBufferSize == 2
    assert second.audioBuffer == b"\x09\x08"
