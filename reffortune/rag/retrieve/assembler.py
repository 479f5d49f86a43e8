"""Context formatter for retrieved chunks.

Renders ranked chunks into the bounded text block injected into prompts.
"""

from reffortune.rag.types import ScoredChunk

KB_START_MARKER = "<knowledge_base>"
KB_END_MARKER = "</knowledge_base>"
CHUNK_DIVIDER = "\n\n---\n\n"


def format_chunk_metadata(item: ScoredChunk) -> str:
    """Render the metadata line for one chunk.

    Args:
        item: Scored chunk

    Returns:
        ``kind | system_id=... | intents=... | source`` with empty parts omitted
    """
    chunk = item.chunk
    parts = [
        chunk.kind,
        f"system_id={chunk.system_id}" if chunk.system_id else None,
        f"intents={','.join(chunk.intents)}" if chunk.intents else None,
        chunk.source,
    ]
    return " | ".join(part for part in parts if part)


def format_rag_context(chunks: list[ScoredChunk]) -> str:
    """Format ranked chunks for LLM consumption.

    Args:
        chunks: Ranked chunks, best first

    Returns:
        Marker-wrapped block, or "" with no markers when ``chunks`` is empty
    """
    if not chunks:
        return ""

    parts = [
        f"[#{i}] {item.chunk.title}\n({format_chunk_metadata(item)})\n{item.chunk.text}"
        for i, item in enumerate(chunks, start=1)
    ]
    return f"\n\n{KB_START_MARKER}\n{CHUNK_DIVIDER.join(parts)}\n{KB_END_MARKER}\n"
