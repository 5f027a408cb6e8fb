"""Request/response schemas for POST /chunk."""

from pydantic import BaseModel, Field


class ChunkRequest(BaseModel):
    """POST /chunk request body. Raw text plus optional profile and chunk size override."""

    text: str = Field(..., description="Text to split into chunks")
    chunk_token_size: int | None = Field(
        default=None, ge=1, le=10000, description="Optional override for target chunk size in tokens (max 10000)"
    )
    profile: str = Field(default="active", min_length=1, description="Chunking profile from static.json")
    document_id: str | None = Field(default=None, min_length=1, description="Optional id mixed into chunk ids")


class ChunkRecord(BaseModel):
    """One emitted chunk."""

    chunk_id: str
    chunk_index: int = Field(..., ge=0)
    chunk_text: str
    chunk_token_count: int = Field(..., ge=0)
    chunk_hash: str


class ChunkResponse(BaseModel):
    """POST /chunk response body."""

    profile: str = Field(..., description="Profile the chunks were produced with")
    chunk_token_size: int = Field(..., ge=1, description="Effective target chunk size in tokens")
    total_chunks: int = Field(..., ge=0)
    chunks: list[ChunkRecord] = Field(default_factory=list)
