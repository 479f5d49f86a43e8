"""Keyword-based metadata inference for knowledge-base chunks.

Documents may declare ``system_id`` and ``intents`` in YAML front-matter.
When they do not, these matchers infer the values from the heading path and
chunk text. The same matchers back ``lint_chunk_metadata``, which reports
declared metadata that disagrees with what the keywords suggest.
"""

import re
from dataclasses import dataclass

from reffortune.rag.retrieve.text import normalize
from reffortune.rag.types import RagChunk

# First match wins, so order matters.
SYSTEM_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ("tarot_th", ("ไพ่", "tarot")),
    ("numerology_th", ("เลขศาสตร์", "numerology")),
    ("thai_astrology", ("โหราศาสตร์ไทย", "thai astrology")),
    ("fengshui", ("ฮวงจุ้ย", "feng")),
    ("chinese_zodiac", ("นักษัตร", "chinese zodiac")),
    ("palmistry", ("ลายมือ",)),
    ("physiognomy", ("โหงวเฮ้ง",)),
    ("esiimsi", ("เซียมซี", "esiimsi")),
]

INTENT_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("work", re.compile(r"(งาน|อาชีพ|โปรเจค|หัวหน้า|ทีม|เลื่อนตำแหน่ง)")),
    ("love", re.compile(r"(รัก|ความสัมพันธ์|แฟน|คนคุย|คู่)")),
    ("money", re.compile(r"(เงิน|รายได้|หนี้|ลงทุน|โชคลาภ)")),
    ("matching", re.compile(r"(เข้ากัน|คู่แท้|match|compat)")),
    ("timing", re.compile(r"(เวลา|ช่วง|เดือนไหน|สัปดาห์|รายวัน|รายเดือน|ฤกษ์)")),
]

KNOWN_SYSTEM_IDS: frozenset[str] = frozenset(system_id for system_id, _ in SYSTEM_KEYWORDS)
KNOWN_INTENTS: frozenset[str] = frozenset(intent for intent, _ in INTENT_PATTERNS)


def infer_system_id(heading_path: tuple[str, ...] | list[str]) -> str | None:
    """Infer divination system from a heading path.

    Args:
        heading_path: Ordered headings from outermost to innermost

    Returns:
        System id, or None when no keyword matches
    """
    joined = " / ".join(heading_path).lower()
    for system_id, keywords in SYSTEM_KEYWORDS:
        if any(keyword in joined for keyword in keywords):
            return system_id
    return None


def infer_intents(text: str) -> tuple[str, ...]:
    """Infer question intents from chunk title and body.

    Args:
        text: Title plus body text

    Returns:
        Deduplicated intents in pattern order
    """
    normalized = normalize(text)
    return tuple(intent for intent, pattern in INTENT_PATTERNS if pattern.search(normalized))


@dataclass(frozen=True)
class MetadataMismatch:
    """Declared chunk metadata that disagrees with keyword inference."""

    chunk_id: str
    field: str
    declared: str
    inferred: str


def lint_chunk_metadata(chunks: list[RagChunk]) -> list[MetadataMismatch]:
    """Compare declared front-matter metadata against keyword inference.

    Only chunks whose document declared metadata are checked. Inferred
    ``None`` system ids are not reported, since a missing keyword is not a
    contradiction.

    Args:
        chunks: Chunks to lint

    Returns:
        Mismatches in chunk order
    """
    mismatches: list[MetadataMismatch] = []
    for chunk in chunks:
        if not chunk.metadata_declared:
            continue

        inferred_system = infer_system_id(chunk.heading_path)
        if inferred_system is not None and inferred_system != chunk.system_id:
            mismatches.append(
                MetadataMismatch(
                    chunk_id=chunk.chunk_id,
                    field="system_id",
                    declared=chunk.system_id or "",
                    inferred=inferred_system,
                )
            )

        inferred_intents = infer_intents(f"{chunk.title}\n{chunk.text}")
        if set(inferred_intents) != set(chunk.intents):
            mismatches.append(
                MetadataMismatch(
                    chunk_id=chunk.chunk_id,
                    field="intents",
                    declared=",".join(chunk.intents),
                    inferred=",".join(inferred_intents),
                )
            )

    return mismatches
