"""Lexical retrieval API for the knowledge base.

This is a substring-scan prototype: every chunk is scored against the query
on each call. Call sites depend only on the ``Retriever`` protocol, so a BM25
or vector implementation can replace ``LexicalRetriever`` without changes
elsewhere.
"""

from typing import Protocol

from reffortune.rag.retrieve.text import normalize, tokenize
from reffortune.rag.types import RagChunk, ScoredChunk

TOKEN_MATCH_SCORE = 2
PHRASE_BONUS = 6
PHRASE_MIN_CHARS = 6
SYSTEM_FILTER_BONUS = 6
INTENT_FILTER_BONUS = 4
KB_GROUNDING_BONUS = 1
MIN_TOKEN_CHARS = 2


class Retriever(Protocol):
    """Anything that ranks knowledge chunks for a query."""

    chunks: list[RagChunk]

    def retrieve(
        self,
        query: str,
        *,
        system_id: str | None = None,
        intent: str | None = None,
        limit: int = 6,
    ) -> list[ScoredChunk]: ...


class LexicalRetriever:
    """Token and phrase overlap retriever with metadata boosts."""

    def __init__(self, chunks: list[RagChunk]):
        """Initialize retriever.

        Args:
            chunks: Chunks to search, in corpus order. Order is the tiebreak.
        """
        self.chunks = chunks
        self._normalized = [normalize(f"{chunk.title}\n{chunk.text}") for chunk in chunks]

    def score_chunk(
        self,
        index: int,
        query_tokens: list[str],
        query_norm: str,
        *,
        system_id: str | None,
        intent: str | None,
    ) -> int:
        """Score a single chunk.

        Args:
            index: Chunk position in ``self.chunks``
            query_tokens: Tokenized query
            query_norm: Normalized full query
            system_id: Optional system filter
            intent: Optional intent filter

        Returns:
            Summed score (may be 0)
        """
        chunk = self.chunks[index]
        text_norm = self._normalized[index]
        score = 0

        for token in query_tokens:
            if len(token) < MIN_TOKEN_CHARS:
                continue
            if token in text_norm:
                score += TOKEN_MATCH_SCORE

        if len(query_norm) >= PHRASE_MIN_CHARS and query_norm in text_norm:
            score += PHRASE_BONUS

        if system_id and chunk.system_id == system_id:
            score += SYSTEM_FILTER_BONUS
        if intent and intent in chunk.intents:
            score += INTENT_FILTER_BONUS

        if chunk.kind == "kb":
            score += KB_GROUNDING_BONUS

        return score

    def retrieve(
        self,
        query: str,
        *,
        system_id: str | None = None,
        intent: str | None = None,
        limit: int = 6,
    ) -> list[ScoredChunk]:
        """Rank chunks for a query.

        Pipeline:
        1. Normalize and tokenize the query
        2. Score every chunk
        3. Drop chunks scoring 0 or less
        4. Stable sort by descending score (ties keep corpus order)
        5. Truncate to ``limit``

        Args:
            query: Query text
            system_id: Optional system id boost
            intent: Optional intent boost
            limit: Maximum number of chunks to return

        Returns:
            Scored chunks, best first
        """
        query_tokens = tokenize(query)
        query_norm = normalize(query)

        scored: list[ScoredChunk] = []
        for idx, chunk in enumerate(self.chunks):
            score = self.score_chunk(
                idx,
                query_tokens,
                query_norm,
                system_id=system_id,
                intent=intent,
            )
            if score > 0:
                scored.append(ScoredChunk(chunk=chunk, score=score))

        # list.sort is stable, so equal scores keep corpus order
        scored.sort(key=lambda item: item.score, reverse=True)
        return scored[: max(limit, 0)]
