"""Parsing of raw LLM completions into ``AIResponse``."""

import json
from typing import Any

from loguru import logger

from reffortune.ai.metrics import ValidationMonitor
from reffortune.ai.types import AIResponse, DivinationType
from reffortune.ai.validation import ensure_fortune_structure

INCOMPLETE_SUMMARY = "สรุปคำทำนายยังไม่สมบูรณ์ในรอบนี้"
INCOMPLETE_STRUCTURE_SUMMARY = "สรุปคำทำนายยังไม่สมบูรณ์"

CARD_FIELD_LABELS = (
    ("position", "ตำแหน่ง"),
    ("card", "ไพ่"),
    ("direction", "ทิศทาง"),
    ("mainMeaning", "ใจความ"),
)


def to_readable(value: Any) -> str:
    """Flatten a decoded JSON value into display text.

    Strings pass through, lists join with newlines, card-like objects render as
    ``ตำแหน่ง: ... • ไพ่: ...`` and other objects as ``key: value`` lines.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return str(value)
    if isinstance(value, list):
        return "\n".join(to_readable(item) for item in value)
    if isinstance(value, dict):
        if any(value.get(key) for key, _ in CARD_FIELD_LABELS):
            return " • ".join(
                f"{label}: {to_readable(value[key])}" for key, label in CARD_FIELD_LABELS if value.get(key)
            )
        return "\n".join(f"{key}: {to_readable(item)}" for key, item in value.items())
    return ""


def extract_json_object(raw: str) -> dict[str, Any] | None:
    """Decode a completion as a JSON object, or None when it is not one."""
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("ai_response_not_json", error=str(e), raw_chars=len(raw))
        return None
    if not isinstance(decoded, dict):
        logger.warning("ai_response_not_object", json_type=type(decoded).__name__)
        return None
    return decoded


def decode_ai_response(raw: str) -> AIResponse | None:
    """Read ``summary`` and ``cardStructure`` from a completion without repair.

    Returns:
        Decoded response, or None when the completion is not a JSON object
    """
    obj = extract_json_object(raw)
    if obj is None:
        return None
    return AIResponse(
        summary=to_readable(obj.get("summary")),
        card_structure=to_readable(obj.get("cardStructure")),
    )


def parse_ai_response(
    raw: str,
    *,
    fallback_structure: str,
    divination_type: DivinationType | None = None,
    monitor: ValidationMonitor | None = None,
) -> AIResponse:
    """Decode a completion and repair its card structure.

    Args:
        raw: Completion text (expected to be a JSON object)
        fallback_structure: Deterministic structure used when the completion
            cannot be decoded (e.g., the drawn cards with their meanings)
        divination_type: Reading type, recorded with fallback usage
        monitor: Metrics sink (defaults to the process-wide monitor)

    Returns:
        Response whose card structure carries the required section labels
    """
    decoded = decode_ai_response(raw)
    if decoded is None:
        return AIResponse(
            summary=INCOMPLETE_SUMMARY,
            card_structure=ensure_fortune_structure(
                fallback_structure, INCOMPLETE_STRUCTURE_SUMMARY, divination_type, monitor=monitor
            ),
        )

    return AIResponse(
        summary=decoded.summary or INCOMPLETE_SUMMARY,
        card_structure=ensure_fortune_structure(
            decoded.card_structure, decoded.summary, divination_type, monitor=monitor
        ),
    )
