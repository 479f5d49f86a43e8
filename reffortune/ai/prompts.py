"""Public prompt-building entry points.

Each builder records ``TemplateError`` in the quality error log as a
``template`` entry before re-raising it.

Usage:
    from reffortune.ai.prompts import build_tarot_prompt

    prompt = build_tarot_prompt(TarotPromptParams(cards=drawn, spread_type=3, question="..."))
"""

from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from reffortune.ai.errors import TemplateError
from reffortune.ai.metrics import default_monitor
from reffortune.ai.templates import chat, daily_card, numerology, spirit, spirit_path, tarot
from reffortune.ai.templates.base import PromptBuilder, PromptSections, build_base_prompt
from reffortune.ai.types import DivinationType

P = ParamSpec("P")
R = TypeVar("R")


def _record_template_errors(divination_type: DivinationType) -> Callable[[Callable[P, R]], Callable[P, R]]:
    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return func(*args, **kwargs)
            except TemplateError as e:
                default_monitor.log_error(
                    "template",
                    divination_type,
                    str(e),
                    {"code": e.code, "details": e.details, "builder": func.__name__},
                )
                raise

        return wrapper

    return decorator


build_tarot_prompt = _record_template_errors(DivinationType.TAROT)(tarot.build_tarot_prompt)
build_daily_card_prompt = _record_template_errors(DivinationType.TAROT)(daily_card.build_daily_card_prompt)
build_spirit_prompt = _record_template_errors(DivinationType.SPIRIT)(spirit.build_spirit_prompt)
build_spirit_path_prompt = _record_template_errors(DivinationType.SPIRIT)(spirit_path.build_spirit_path_prompt)
build_numerology_prompt = _record_template_errors(DivinationType.NUMEROLOGY)(numerology.build_numerology_prompt)
build_chat_prompt = _record_template_errors(DivinationType.CHAT)(chat.build_chat_prompt)

__all__ = [
    "PromptBuilder",
    "PromptSections",
    "build_base_prompt",
    "build_chat_prompt",
    "build_daily_card_prompt",
    "build_numerology_prompt",
    "build_spirit_path_prompt",
    "build_spirit_prompt",
    "build_tarot_prompt",
]
