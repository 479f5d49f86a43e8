"""Canonical RAG types for the lexical knowledge-base retriever.

This module defines the core data structures used throughout the RAG pipeline.
All types are frozen dataclasses to ensure immutability and deterministic behavior.
"""

from dataclasses import dataclass
from typing import Literal

RagDocKind = Literal["kb", "example", "glossary", "schema"]

RAG_DOC_KINDS: frozenset[str] = frozenset({"kb", "example", "glossary", "schema"})


@dataclass(frozen=True)
class RagDocument:
    """A knowledge-base markdown file with optional declared metadata.

    ``system_id`` and ``intents`` come from YAML front-matter when the file
    declares them. When they are None, the chunker falls back to keyword
    inference per chunk.
    """

    source: str
    kind: RagDocKind
    content: str
    system_id: str | None = None
    intents: tuple[str, ...] | None = None


@dataclass(frozen=True)
class RagChunk:
    """A heading-scoped slice of a knowledge-base document.

    ``chunk_id`` is ``kind:source:index`` where index is the position of the
    chunk within its document, so rebuilding from identical content yields
    identical ids.
    """

    chunk_id: str
    kind: RagDocKind
    title: str
    heading_path: tuple[str, ...]
    text: str
    source: str
    system_id: str | None = None
    intents: tuple[str, ...] = ()
    metadata_declared: bool = False


@dataclass(frozen=True)
class ScoredChunk:
    """A chunk paired with its retrieval score."""

    chunk: RagChunk
    score: int
