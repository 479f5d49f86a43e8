"""Deterministic heading-scoped chunker for knowledge-base markdown.

Headings at levels 2-4 open a new chunk. The heading path is a stack indexed
by ``level - 2``: a level-L heading replaces the entry at that index and drops
everything deeper. Identical input always yields the identical chunk list,
which is what makes the process-wide chunk cache safe.
"""

import re

from reffortune.rag.ingest.inference import infer_intents, infer_system_id
from reffortune.rag.types import RagChunk, RagDocKind, RagDocument

_HEADING_PATTERN = re.compile(r"^(#{2,4})\s+(.*)$")
_LINE_SPLIT = re.compile(r"\r?\n")


def generate_chunk_id(kind: str, source: str, index: int) -> str:
    """Generate deterministic chunk ID.

    Args:
        kind: Document kind
        source: Source identifier
        index: Position of the chunk within its document

    Returns:
        Chunk ID in ``kind:source:index`` form
    """
    return f"{kind}:{source}:{index}"


def chunk_markdown(
    markdown: str,
    source: str,
    kind: RagDocKind,
    *,
    system_id: str | None = None,
    intents: tuple[str, ...] | None = None,
) -> list[RagChunk]:
    """Split markdown into heading-scoped chunks.

    Args:
        markdown: Markdown body (front-matter already removed)
        source: Source identifier
        kind: Chunk kind
        system_id: Declared system id; inferred from the heading path when None
        intents: Declared intents; inferred from title and body when None

    Returns:
        Chunks in document order. Sections whose body is blank are dropped.
    """
    if not markdown:
        return []

    chunks: list[RagChunk] = []
    heading_path: list[str] = []
    buffer: list[str] = []
    current_title = ""
    declared = system_id is not None or intents is not None

    def flush() -> None:
        text = "\n".join(buffer).strip()
        if not text:
            return
        title = current_title or (heading_path[-1] if heading_path else source)
        path = tuple(heading_path)
        chunks.append(
            RagChunk(
                chunk_id=generate_chunk_id(kind, source, len(chunks)),
                kind=kind,
                title=title,
                heading_path=path,
                text=text,
                source=source,
                system_id=system_id if system_id is not None else infer_system_id(path),
                intents=intents if intents is not None else infer_intents(f"{title}\n{text}"),
                metadata_declared=declared,
            )
        )

    for line in _LINE_SPLIT.split(markdown):
        match = _HEADING_PATTERN.match(line)
        if not match:
            buffer.append(line)
            continue

        flush()
        buffer = []

        idx = len(match.group(1)) - 2
        title = match.group(2).strip()
        # A deeper heading with no parent leaves empty slots; keep them so
        # the index still equals level - 2.
        heading_path = heading_path[:idx] + [""] * max(0, idx - len(heading_path))
        heading_path.append(title)
        current_title = title

    flush()
    return chunks


def chunk_document(doc: RagDocument) -> list[RagChunk]:
    """Chunk a loaded document, honoring its declared metadata.

    Args:
        doc: Document to chunk

    Returns:
        List of RagChunk instances
    """
    return chunk_markdown(
        doc.content,
        doc.source,
        doc.kind,
        system_id=doc.system_id,
        intents=doc.intents,
    )


def chunk_corpus(documents: list[RagDocument]) -> list[RagChunk]:
    """Chunk all documents in the corpus.

    Args:
        documents: List of documents to chunk

    Returns:
        List of all chunks
    """
    all_chunks: list[RagChunk] = []

    for doc in documents:
        all_chunks.extend(chunk_document(doc))

    return all_chunks
