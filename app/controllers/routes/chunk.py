"""POST /chunk: split request text into token-sized chunks using a chunking profile."""

from fastapi import APIRouter, HTTPException

from app.config.chunking.static import get_active_profile_name, resolve_chunking_config
from app.config.logging import get_logger
from app.controllers.schema.chunk import ChunkRecord, ChunkRequest, ChunkResponse
from app.services.chunking.chunker import build_chunk_records, get_text_chunks_async

logger = get_logger(__name__)

router = APIRouter(prefix="/chunk", tags=["chunking"])


@router.post("", response_model=ChunkResponse)
async def chunk_text(body: ChunkRequest) -> ChunkResponse:
    """
    Chunk the request text. The profile ("active" by default) supplies floors and caps;
    chunk_token_size, when given, replaces the profile's target size.
    """
    overrides = {}
    if body.chunk_token_size is not None:
        overrides["chunk_token_size"] = body.chunk_token_size
    try:
        config = resolve_chunking_config(body.profile, overrides)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    profile_name = get_active_profile_name() if body.profile == "active" else body.profile

    chunks = await get_text_chunks_async(body.text, config=config)
    records = build_chunk_records(chunks, config, document_id=body.document_id)
    logger.info(
        "Chunked request text",
        extra={"profile": profile_name, "text_chars": len(body.text), "total_chunks": len(records)},
    )
    return ChunkResponse(
        profile=profile_name,
        chunk_token_size=config.chunk_token_size,
        total_chunks=len(records),
        chunks=[ChunkRecord(**r) for r in records],
    )
