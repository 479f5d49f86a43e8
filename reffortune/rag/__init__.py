"""Lexical knowledge-base retrieval.

Markdown KB files are chunked by heading, scored against queries by token and
phrase overlap, and rendered into a bounded context block for prompts.
"""

from reffortune.rag.corpus import build_knowledge_context, load_rag_chunks, retrieve_rag, set_retriever
from reffortune.rag.retrieve.assembler import format_rag_context
from reffortune.rag.retrieve.retriever import LexicalRetriever, Retriever
from reffortune.rag.types import RagChunk, RagDocument, ScoredChunk

__all__ = [
    "LexicalRetriever",
    "RagChunk",
    "RagDocument",
    "Retriever",
    "ScoredChunk",
    "build_knowledge_context",
    "format_rag_context",
    "load_rag_chunks",
    "retrieve_rag",
    "set_retriever",
]
