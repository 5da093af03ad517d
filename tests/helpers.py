import json
from pathlib import Path


def write_document(data_dir: Path, doc_id: str, payload) -> Path:
    p = data_dir / "Document" / f"{doc_id}.json"
    if isinstance(payload, str):
        p.write_text(payload, encoding="utf-8")
    else:
        p.write_text(json.dumps(payload), encoding="utf-8")
    return p


def write_audio(data_dir: Path, name: str, content: bytes) -> Path:
    p = data_dir / "Storage" / name
    p.write_bytes(content)
    return p
