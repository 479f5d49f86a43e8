"""Response validation and fallback synthesis for AI readings.

Validation failures are never raised. They produce a ``ValidationResult``,
update the monitor and, where the caller repairs the response, a
synthesized fallback structure.
"""

import re

from reffortune.ai.metrics import ValidationMonitor, default_monitor
from reffortune.ai.types import AIResponse, DivinationType, ValidationResult
from reffortune.config.settings import settings

REQUIRED_SECTIONS: tuple[str, ...] = ("ภาพรวมสถานการณ์", "จุดที่ควรระวัง", "แนวทางที่ควรทำ")

THAI_CHAR_PATTERN = re.compile(r"[\u0E00-\u0E7F]")
WHITESPACE_PATTERN = re.compile(r"\s+")

DEPTH_CONNECTIVES: tuple[str, ...] = ("เพราะ", "ดังนั้น", "เนื่องจาก", "ทำให้")

SHORT_SUMMARY_CHARS = 100
SHORT_STRUCTURE_CHARS = 200

EMPTY_FALLBACK_CAUTION = "อย่ารีบตัดสินใจจากอารมณ์หรือข้อมูลที่ยังไม่ครบ"
EMPTY_FALLBACK_ACTION = "โฟกัส 1 ประเด็นหลัก วางขั้นตอน แล้วลงมือทีละส่วน"
WRAPPED_FALLBACK_ACTION = "ตั้งกรอบเวลาให้ชัด เช็กความเสี่ยง และตัดสินใจจากข้อเท็จจริง"


def count_thai_chars(text: str) -> int:
    return len(THAI_CHAR_PATTERN.findall(text))


def validate_minimum_length(text: str | None, min_chars: int = 50) -> bool:
    """Check that text holds at least ``min_chars`` Thai characters.

    Only code points in U+0E00-U+0E7F count; Latin letters, digits and
    punctuation are ignored. Empty or None text is invalid.
    """
    if not text:
        return False
    return count_thai_chars(text) >= min_chars


def validate_structure_sections(structure: str | None, required_sections: tuple[str, ...] = REQUIRED_SECTIONS) -> bool:
    """Check that every required label appears in ``structure``, in any order."""
    if not structure:
        return False
    return all(section in structure for section in required_sections)


def ensure_fortune_structure(
    raw: str,
    summary: str,
    divination_type: DivinationType | str | None = None,
    *,
    monitor: ValidationMonitor | None = None,
) -> str:
    """Return a card structure that carries the required section labels.

    Cases:
    - empty or blank input: synthesize all three sections from ``summary`` plus generic advice
    - input already holding at least one label: return ``raw`` unmodified
    - unlabeled input: collapse whitespace and wrap it in generic section labels

    Both synthesizing branches record a fallback usage. Applying this function to
    its own output returns that output unchanged.

    Args:
        raw: Card structure text from the model
        summary: Summary used for the overview section
        divination_type: Reading type, recorded with the fallback usage
        monitor: Metrics sink (defaults to the process-wide monitor)

    Returns:
        Labeled card structure
    """
    if divination_type is not None:
        divination_type = DivinationType(divination_type)
    monitor = monitor or default_monitor
    text = WHITESPACE_PATTERN.sub(" ", raw or "").strip()

    if not text:
        monitor.track_fallback_usage(divination_type, "Empty cardStructure input")
        return "\n".join(
            [
                f"{REQUIRED_SECTIONS[0]}: {summary}",
                f"{REQUIRED_SECTIONS[1]}: {EMPTY_FALLBACK_CAUTION}",
                f"{REQUIRED_SECTIONS[2]}: {EMPTY_FALLBACK_ACTION}",
            ]
        )

    if any(section in text for section in REQUIRED_SECTIONS):
        return raw

    monitor.track_fallback_usage(divination_type, "Missing section labels in cardStructure")
    return "\n".join(
        [
            f"{REQUIRED_SECTIONS[0]}: {summary or text}",
            f"{REQUIRED_SECTIONS[1]}: {text}",
            f"{REQUIRED_SECTIONS[2]}: {WRAPPED_FALLBACK_ACTION}",
        ]
    )


def depth_warnings(response: AIResponse) -> list[str]:
    """Non-blocking warnings about interpretation depth."""
    warnings: list[str] = []
    if response.summary and len(response.summary) < SHORT_SUMMARY_CHARS:
        warnings.append(f"Summary is quite short (less than {SHORT_SUMMARY_CHARS} characters)")
    if response.card_structure and len(response.card_structure) < SHORT_STRUCTURE_CHARS:
        warnings.append(f"CardStructure is quite short (less than {SHORT_STRUCTURE_CHARS} characters)")

    body = f"{response.summary}\n{response.card_structure}"
    if body.strip() and not any(word in body for word in DEPTH_CONNECTIVES):
        warnings.append("Interpretation has no causal connective (เพราะ, ดังนั้น, เนื่องจาก, ทำให้)")
    return warnings


def validate_ai_response(
    response: AIResponse,
    divination_type: DivinationType | str,
    *,
    monitor: ValidationMonitor | None = None,
) -> ValidationResult:
    """Validate an AI reading for length and structure.

    Counts the attempt on the monitor. On failure, also counts the failure per
    divination type and appends a ``validation`` error-log entry. Warnings never
    affect ``is_valid``.

    Args:
        response: Parsed AI response
        divination_type: Reading type
        monitor: Metrics sink (defaults to the process-wide monitor)

    Returns:
        Validation result with errors and warnings
    """
    divination_type = DivinationType(divination_type)
    monitor = monitor or default_monitor
    min_chars = settings.min_summary_thai_chars
    errors: list[str] = []

    if not response.summary:
        errors.append("Summary is missing")
        monitor.track_error("summary_missing", divination_type)
    elif not validate_minimum_length(response.summary, min_chars):
        errors.append(f"Summary contains fewer than {min_chars} Thai characters")
        monitor.track_error("summary_too_short", divination_type)

    if not response.card_structure:
        errors.append("CardStructure is missing")
        monitor.track_error("cardstructure_missing", divination_type)
    elif not validate_structure_sections(response.card_structure):
        errors.append(
            f"CardStructure is missing one or more required sections ({', '.join(REQUIRED_SECTIONS)})"
        )
        monitor.track_error("cardstructure_incomplete_sections", divination_type)

    warnings = depth_warnings(response)
    is_valid = not errors
    monitor.record_validation(divination_type, passed=is_valid)

    if not is_valid:
        monitor.log_error(
            "validation",
            divination_type,
            f"Validation failed: {', '.join(errors)}",
            {
                "errors": errors,
                "warnings": warnings,
                "summary_length": len(response.summary),
                "card_structure_length": len(response.card_structure),
            },
        )

    return ValidationResult(is_valid=is_valid, errors=errors, warnings=warnings)
