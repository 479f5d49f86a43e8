"""Prompt engineering and response quality for AI readings.

Prompts are assembled from role, knowledge base, cultural context, few-shot
examples, instructions and user data. Generated readings are validated,
repaired with a deterministic fallback when needed, and counted in an
in-process quality monitor.
"""

from reffortune.ai.client import GeminiClient
from reffortune.ai.errors import APIError, FortuneError, TemplateError
from reffortune.ai.metrics import ValidationMetrics, ValidationMonitor, default_monitor
from reffortune.ai.prompts import (
    PromptBuilder,
    PromptSections,
    build_base_prompt,
    build_chat_prompt,
    build_daily_card_prompt,
    build_numerology_prompt,
    build_spirit_path_prompt,
    build_spirit_prompt,
    build_tarot_prompt,
)
from reffortune.ai.reading import ReadingOutcome, generate_reading
from reffortune.ai.response import parse_ai_response
from reffortune.ai.types import AIResponse, DivinationType, Orientation, ValidationResult
from reffortune.ai.validation import ensure_fortune_structure, validate_ai_response

__all__ = [
    "AIResponse",
    "APIError",
    "DivinationType",
    "FortuneError",
    "GeminiClient",
    "Orientation",
    "PromptBuilder",
    "PromptSections",
    "ReadingOutcome",
    "TemplateError",
    "ValidationMetrics",
    "ValidationMonitor",
    "ValidationResult",
    "build_base_prompt",
    "build_chat_prompt",
    "build_daily_card_prompt",
    "build_numerology_prompt",
    "build_spirit_path_prompt",
    "build_spirit_prompt",
    "build_tarot_prompt",
    "default_monitor",
    "ensure_fortune_structure",
    "generate_reading",
    "parse_ai_response",
    "validate_ai_response",
]
