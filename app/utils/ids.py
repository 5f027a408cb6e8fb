"""Id generation for chunks. Deterministic so repeated chunking yields the same ids."""

import hashlib


def generate_chunk_id(document_id: str | None, chunk_index: int, chunk_hash: str) -> str:
    """Generate a deterministic chunk_id from document, index, and hash. Anonymous text uses an empty document id."""
    payload = f"{document_id or ''}:{chunk_index}:{chunk_hash}"
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()[:24]
    return f"chunk_{digest}"
