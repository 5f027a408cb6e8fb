"""Chunking configuration models. Read-only; no business logic."""

from pydantic import BaseModel, ConfigDict, Field


class ChunkingConfig(BaseModel):
    """Token budget and character floors for the boundary chunker."""

    model_config = ConfigDict(frozen=True)

    chunk_token_size: int = Field(default=75, ge=1, description="Target chunk size in tokens")
    min_chunk_size_chars: int = Field(
        default=350, ge=0, description="Boundary character must sit past this offset to truncate"
    )
    min_chunk_length_to_embed: int = Field(
        default=5, ge=0, description="Chunks not longer than this are discarded"
    )
    max_num_chunks: int = Field(default=10000, ge=1, description="Cap on chunking loop iterations")
    encoding_name: str = Field(default="cl100k_base", min_length=1, description="tiktoken encoding")
