from pathlib import Path

import pytest

from app.core.config import settings
from tests.helpers import write_audio, write_document


@pytest.fixture()
def temp_data_dir(tmp_path: Path):
    """
    Uses a temporary DATA_DIR for tests and restores the original
    value after execution.
    """
    old = settings.DATA_DIR
    settings.DATA_DIR = str(tmp_path)
    (tmp_path / "Document").mkdir(parents=True, exist_ok=True)
    (tmp_path / "Storage").mkdir(parents=True, exist_ok=True)
    yield tmp_path
    settings.DATA_DIR = old


@pytest.fixture()
def song_abc123(temp_data_dir: Path) -> Path:
    write_document(
        temp_data_dir,
        "abc123",
        {
            "documentID": "abc123",
            "artists": ["A", "B"],
            "title": "Song",
            "fileType": "mp3",
            "storageID": "s1",
        },
    )
    write_audio(temp_data_dir, "s1.mp3", bytes([1, 2, 3, 4, 5]))
    return temp_data_dir
