"""REFFORTUNE prompt-composition and retrieval core.

Builds Thai divination prompts from a lexical knowledge-base retriever,
cultural context and few-shot examples, and guards generated readings with
validation, fallback synthesis and in-process quality metrics.
"""

from reffortune.core import logger as _logger  # noqa: F401

__version__ = "0.1.0"
