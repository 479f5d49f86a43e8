"""Reading orchestration: prompt -> LLM -> validate -> retry -> fallback.

At most two upstream calls per reading. A second call happens only after the
first one fails validation or raises ``APIError``. The caller always gets a
structurally valid reading; degraded quality shows up only in the outcome's
``fallback``/``reason`` fields and in the monitor.
"""

from dataclasses import dataclass, field
from typing import Literal

from loguru import logger

from reffortune.ai.client import GeminiClient
from reffortune.ai.errors import APIError
from reffortune.ai.metrics import ValidationMonitor, default_monitor
from reffortune.ai.response import decode_ai_response
from reffortune.ai.types import AIResponse, DivinationType, ValidationResult
from reffortune.ai.validation import ensure_fortune_structure, validate_ai_response

FallbackReason = Literal["validation_failed", "api_unavailable", "retry_failed", "missing_api_key"]

MAX_ATTEMPTS = 2


@dataclass
class ReadingOutcome:
    """Final reading returned to the route layer."""

    response: AIResponse
    fallback: bool = False
    reason: FallbackReason | None = None
    attempts: int = 0
    validation: ValidationResult | None = None
    warnings: list[str] = field(default_factory=list)


def baseline_response(
    fallback_summary: str,
    baseline_structure: str,
    divination_type: DivinationType,
    monitor: ValidationMonitor,
) -> AIResponse:
    """Synthesize the deterministic fallback reading."""
    return AIResponse(
        summary=fallback_summary,
        card_structure=ensure_fortune_structure(
            baseline_structure, fallback_summary, divination_type, monitor=monitor
        ),
    )


async def generate_reading(
    prompt: str,
    divination_type: DivinationType | str,
    *,
    fallback_summary: str,
    baseline_structure: str,
    client: GeminiClient,
    monitor: ValidationMonitor | None = None,
) -> ReadingOutcome:
    """Produce a validated reading for a prompt.

    Args:
        prompt: Fully built prompt
        divination_type: Reading type
        fallback_summary: Summary used if the model cannot produce a valid reading
        baseline_structure: Deterministic card structure used for the fallback
            (e.g., the drawn cards with their meanings)
        client: Gemini client
        monitor: Metrics sink (defaults to the process-wide monitor)

    Returns:
        Reading outcome

    Raises:
        httpx.TransportError: Network failure on either attempt
    """
    divination_type = DivinationType(divination_type)
    monitor = monitor or default_monitor

    if not client.configured:
        monitor.log_error("api", divination_type, "Gemini API key is not configured", {"code": "MISSING_API_KEY"})
        return ReadingOutcome(
            response=baseline_response(fallback_summary, baseline_structure, divination_type, monitor),
            fallback=True,
            reason="missing_api_key",
        )

    last_failure: Literal["api", "validation"] | None = None
    validation: ValidationResult | None = None

    for attempt in range(1, MAX_ATTEMPTS + 1):
        try:
            raw = await client.generate(prompt)
        except APIError as e:
            monitor.log_error(
                "api",
                divination_type,
                str(e),
                {"code": e.code, "status_code": e.status_code, "attempt": attempt},
            )
            last_failure = "api"
            continue

        candidate = decode_ai_response(raw) or AIResponse()
        validation = validate_ai_response(candidate, divination_type, monitor=monitor)
        if validation.is_valid:
            logger.info(
                "ai_reading_generated",
                divination_type=divination_type.value,
                attempt=attempt,
                warnings=len(validation.warnings),
            )
            return ReadingOutcome(
                response=candidate,
                attempts=attempt,
                validation=validation,
                warnings=validation.warnings,
            )
        last_failure = "validation"

    if last_failure == "validation":
        reason: FallbackReason = "validation_failed"
    elif validation is not None:
        reason = "retry_failed"
    else:
        reason = "api_unavailable"

    logger.warning(
        "ai_reading_fallback",
        divination_type=divination_type.value,
        reason=reason,
        attempts=MAX_ATTEMPTS,
    )
    return ReadingOutcome(
        response=baseline_response(fallback_summary, baseline_structure, divination_type, monitor),
        fallback=True,
        reason=reason,
        attempts=MAX_ATTEMPTS,
        validation=validation,
        warnings=validation.warnings if validation else [],
    )
