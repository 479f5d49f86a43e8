"""Observability logging for RAG retrieval.

This module logs retrieval operations for debugging and auditability.
"""

from loguru import logger

from reffortune.rag.types import ScoredChunk


def log_retrieval(
    query: str,
    system_id: str | None,
    intent: str | None,
    limit: int,
    *,
    chunks: list[ScoredChunk],
    corpus_size: int,
) -> None:
    """Log a retrieval operation.

    Args:
        query: Query text
        system_id: System id filter
        intent: Intent filter
        limit: Requested number of chunks
        chunks: Retrieved chunks
        corpus_size: Number of chunks scanned
    """
    logger.info(
        "rag_retrieval",
        query=query,
        system_id=system_id,
        intent=intent,
        limit=limit,
        corpus_size=corpus_size,
        chunks_returned=len(chunks),
        chunk_ids=[item.chunk.chunk_id for item in chunks],
        scores=[item.score for item in chunks],
        sources=sorted({item.chunk.source for item in chunks}),
    )


def log_context_assembly(chunks: list[ScoredChunk], context: str) -> None:
    """Log context formatting.

    Args:
        chunks: Chunks that were formatted
        context: Resulting context block
    """
    logger.debug(
        "rag_context_assembly",
        num_chunks=len(chunks),
        context_chars=len(context),
        chunk_ids=[item.chunk.chunk_id for item in chunks],
    )
