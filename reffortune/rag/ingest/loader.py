"""Markdown knowledge-base loader with optional YAML front-matter.

The knowledge base is a fixed, ordered set of markdown files. A missing file
is logged and treated as empty so the remaining files still load.
"""

import re
from pathlib import Path

import yaml
from loguru import logger

from reffortune.rag.types import RAG_DOC_KINDS, RagDocKind, RagDocument

_FRONTMATTER_PATTERN = re.compile(r"^---\s*\n(.*?)\n---\s*\n(.*)$", re.DOTALL)


def parse_frontmatter(content: str) -> tuple[dict[str, object], str]:
    """Split optional YAML front-matter from markdown content.

    Args:
        content: Full markdown file content

    Returns:
        Tuple of (front-matter dict, body). The dict is empty when the file
        has no front-matter block.

    Raises:
        ValueError: If a front-matter block exists but is not a YAML mapping
    """
    match = _FRONTMATTER_PATTERN.match(content)
    if not match:
        return {}, content

    try:
        frontmatter = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML frontmatter: {e}") from e

    if frontmatter is None:
        return {}, match.group(2)
    if not isinstance(frontmatter, dict):
        raise ValueError("Frontmatter must be a YAML dictionary")
    return frontmatter, match.group(2)


def _declared_intents(raw: object) -> tuple[str, ...] | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list):
        return None
    seen: list[str] = []
    for item in raw:
        intent = str(item).strip()
        if intent and intent not in seen:
            seen.append(intent)
    return tuple(seen)


def build_document(content: str, source: str, kind: RagDocKind) -> RagDocument:
    """Build a RagDocument from raw markdown.

    Args:
        content: Raw markdown (may start with a front-matter block)
        source: Source identifier, usually the file name
        kind: Chunk kind for everything in this document

    Returns:
        RagDocument with declared metadata when present

    Raises:
        ValueError: If kind is unknown or front-matter is malformed
    """
    if kind not in RAG_DOC_KINDS:
        raise ValueError(f"Unknown document kind '{kind}' for {source}")

    try:
        frontmatter, body = parse_frontmatter(content)
    except ValueError as e:
        raise ValueError(f"Failed to parse {source}: {e}") from e

    system_id = frontmatter.get("system_id")
    if system_id is not None and not isinstance(system_id, str):
        raise ValueError(f"Invalid 'system_id' field in {source}")

    return RagDocument(
        source=source,
        kind=kind,
        content=body,
        system_id=system_id or None,
        intents=_declared_intents(frontmatter.get("intents")),
    )


def read_text(kb_dir: Path, file_name: str) -> str:
    """Read a knowledge file, returning an empty string when it is missing.

    Args:
        kb_dir: Knowledge-base directory
        file_name: File name within the directory

    Returns:
        File content, or "" if the file does not exist
    """
    path = kb_dir / file_name
    if not path.exists():
        logger.warning("RAG file not found", file_name=file_name, kb_dir=str(kb_dir))
        return ""
    return path.read_text(encoding="utf-8")


def load_documents(kb_dir: Path, files: list[tuple[str, str]]) -> list[RagDocument]:
    """Load the configured knowledge files in order.

    Args:
        kb_dir: Knowledge-base directory
        files: Ordered (file name, kind) pairs

    Returns:
        One RagDocument per existing file, in configured order
    """
    documents: list[RagDocument] = []
    for file_name, kind in files:
        content = read_text(kb_dir, file_name)
        if not content:
            continue
        documents.append(build_document(content, file_name, kind))  # type: ignore[arg-type]
    return documents
