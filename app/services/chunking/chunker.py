"""
Chunker: splits raw text into ~chunk_token_size token chunks, cutting at the last
sentence or line boundary when one sits far enough into the candidate chunk.
Deterministic for the same text, config, and tokenizer.
"""

import asyncio
import hashlib
import json
from typing import Any

from app.config.chunking.models import ChunkingConfig
from app.config.chunking.static import get_active_chunking_config
from app.config.logging import get_logger
from app.services.chunking.cleaners import is_blank, normalize_chunk, truncate_at_boundary
from app.services.chunking.tokenizer import Tokenizer, count_tokens, get_tokenizer
from app.utils.ids import generate_chunk_id

logger = get_logger(__name__)


def get_text_chunks(
    text: str,
    chunk_token_size: int | None = None,
    *,
    config: ChunkingConfig | None = None,
    tokenizer: Tokenizer | None = None,
) -> list[str]:
    """
    Split text into chunks of ~chunk_token_size tokens, based on punctuation and newline boundaries.

    chunk_token_size overrides config.chunk_token_size when not None. config defaults to the
    active chunking profile, tokenizer to the shared tiktoken tokenizer for config.encoding_name.
    Returns at most config.max_num_chunks chunks from the main loop, plus one trailing chunk
    for any tokens left once the loop stops. Tokenizer errors propagate.
    """
    if is_blank(text):
        return []

    cfg = config if config is not None else get_active_chunking_config()
    tok = tokenizer if tokenizer is not None else get_tokenizer(cfg.encoding_name)

    tokens = tok.encode(text)
    chunk_size = chunk_token_size if chunk_token_size is not None else cfg.chunk_token_size

    chunks: list[str] = []
    num_chunks = 0
    pos = 0

    while pos < len(tokens) and num_chunks < cfg.max_num_chunks:
        candidate = tokens[pos : pos + chunk_size]
        chunk_text = tok.decode(candidate)

        # Token runs that decode to nothing visible are dropped without counting
        if is_blank(chunk_text):
            pos += len(candidate)
            continue

        chunk_text = truncate_at_boundary(chunk_text, cfg.min_chunk_size_chars)

        chunk_text_to_append = normalize_chunk(chunk_text)
        if len(chunk_text_to_append) > cfg.min_chunk_length_to_embed:
            chunks.append(chunk_text_to_append)

        # Advance by the truncated text's own token count, not the candidate's
        pos += len(tok.encode(chunk_text))
        num_chunks += 1

    if pos < len(tokens):
        if num_chunks >= cfg.max_num_chunks:
            logger.warning(
                "Chunk limit reached, folding remaining tokens into one chunk",
                extra={"max_num_chunks": cfg.max_num_chunks, "remaining_tokens": len(tokens) - pos},
            )
        remaining_text = normalize_chunk(tok.decode(tokens[pos:]))
        if len(remaining_text) > cfg.min_chunk_length_to_embed:
            chunks.append(remaining_text)

    logger.debug(
        "Chunked text",
        extra={
            "text_chars": len(text),
            "total_tokens": len(tokens),
            "chunk_token_size": chunk_size,
            "iterations": num_chunks,
            "chunks": len(chunks),
        },
    )
    return chunks


async def get_text_chunks_async(
    text: str,
    chunk_token_size: int | None = None,
    *,
    config: ChunkingConfig | None = None,
    tokenizer: Tokenizer | None = None,
) -> list[str]:
    """Run get_text_chunks in a worker thread so the event loop stays free."""
    return await asyncio.to_thread(
        get_text_chunks, text, chunk_token_size, config=config, tokenizer=tokenizer
    )


def compute_chunk_hash(chunk_text: str, config: ChunkingConfig) -> str:
    """Chunk hash = SHA-256(chunk_text + canonical config)."""
    config_canonical = json.dumps(config.model_dump(mode="json"), sort_keys=True)
    payload = f"{chunk_text}|{config_canonical}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def build_chunk_records(
    chunks: list[str],
    config: ChunkingConfig,
    document_id: str | None = None,
    tokenizer: Tokenizer | None = None,
) -> list[dict[str, Any]]:
    """
    Build chunk records (chunk_id, chunk_index, chunk_text, chunk_token_count, chunk_hash)
    for chunks produced under config. Ids are stable for the same document, text, and config.
    """
    records: list[dict[str, Any]] = []
    for i, chunk_text in enumerate(chunks):
        chunk_hash = compute_chunk_hash(chunk_text, config)
        records.append({
            "chunk_id": generate_chunk_id(document_id, i, chunk_hash),
            "chunk_index": i,
            "chunk_text": chunk_text,
            # Actual token count; config.chunk_token_size is only the target
            "chunk_token_count": count_tokens(chunk_text, config.encoding_name, tokenizer=tokenizer),
            "chunk_hash": chunk_hash,
        })
    return records
