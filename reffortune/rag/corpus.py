"""Process-wide knowledge-base chunk cache.

Chunks are built once per process from the configured KB files and never
invalidated; changing a KB file requires a restart. ``set_retriever``
replaces the default lexical retriever with any ``Retriever`` implementation.
The cache is a plain module global with no lock, which is safe under a
single-threaded or event-loop host only.
"""

from pathlib import Path

from loguru import logger

from reffortune.config.settings import settings
from reffortune.rag.ingest.chunker import chunk_corpus
from reffortune.rag.ingest.loader import load_documents
from reffortune.rag.logging import log_context_assembly, log_retrieval
from reffortune.rag.retrieve.assembler import format_rag_context
from reffortune.rag.retrieve.retriever import LexicalRetriever, Retriever
from reffortune.rag.types import RagChunk, ScoredChunk

_chunk_cache: list[RagChunk] | None = None
_retriever_cache: Retriever | None = None


def build_chunks(kb_dir: Path, files: list[tuple[str, str]]) -> list[RagChunk]:
    """Load and chunk the knowledge base without touching the cache.

    Args:
        kb_dir: Knowledge-base directory
        files: Ordered (file name, kind) pairs

    Returns:
        All chunks in configured file order
    """
    return chunk_corpus(load_documents(kb_dir, files))


def load_rag_chunks() -> list[RagChunk]:
    """Return the cached chunk list, building it on first use."""
    global _chunk_cache
    if _chunk_cache is None:
        _chunk_cache = build_chunks(settings.kb_dir, settings.kb_files)
        logger.info(
            "rag_chunks_loaded",
            kb_dir=str(settings.kb_dir),
            files=len(settings.kb_files),
            chunks=len(_chunk_cache),
        )
    return _chunk_cache


def get_retriever() -> Retriever:
    """Return the process-wide retriever.

    This is a ``LexicalRetriever`` over the cached chunks unless another
    retriever was installed with ``set_retriever``.
    """
    global _retriever_cache
    if _retriever_cache is None:
        _retriever_cache = LexicalRetriever(load_rag_chunks())
    return _retriever_cache


def set_retriever(retriever: Retriever | None) -> None:
    """Install the retriever used by ``retrieve_rag``.

    Args:
        retriever: Any ``Retriever`` implementation, or None to go back to the
            default ``LexicalRetriever``
    """
    global _retriever_cache
    _retriever_cache = retriever
    logger.info("rag_retriever_set", retriever=type(retriever).__name__ if retriever else None)


def clear_cache() -> None:
    """Drop the cached chunks and retriever so the next call rebuilds them."""
    global _chunk_cache, _retriever_cache
    _chunk_cache = None
    _retriever_cache = None
    logger.debug("rag_cache: Cache cleared")


def retrieve_rag(
    query: str,
    *,
    system_id: str | None = None,
    intent: str | None = None,
    limit: int | None = None,
) -> list[ScoredChunk]:
    """Retrieve ranked chunks from the process-wide knowledge base.

    Args:
        query: Query text
        system_id: Optional system id boost
        intent: Optional intent boost
        limit: Maximum chunks (defaults to ``settings.rag_default_limit``)

    Returns:
        Scored chunks, best first
    """
    retriever = get_retriever()
    effective_limit = settings.rag_default_limit if limit is None else limit
    chunks = retriever.retrieve(query, system_id=system_id, intent=intent, limit=effective_limit)
    log_retrieval(
        query,
        system_id,
        intent,
        effective_limit,
        chunks=chunks,
        corpus_size=len(retriever.chunks),
    )
    return chunks


def build_knowledge_context(
    query: str,
    *,
    system_id: str | None = None,
    intent: str | None = None,
    limit: int | None = None,
) -> str:
    """Retrieve and format a knowledge-base block for a prompt.

    Returns:
        Formatted context, or "" when nothing matched
    """
    chunks = retrieve_rag(query, system_id=system_id, intent=intent, limit=limit)
    context = format_rag_context(chunks)
    log_context_assembly(chunks, context)
    return context
