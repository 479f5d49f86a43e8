"""Composable prompt builder.

This module assembles the final LLM prompt from ordered sections:
role -> knowledge base -> cultural context -> few-shot examples ->
instructions -> user data.

Core invariant: given the same sections, the built prompt is always
identical. Optional sections appear only when non-empty; instructions and
user data are required and are constructor arguments, so a builder cannot
exist without them.
"""

from dataclasses import dataclass, replace

from reffortune.ai.errors import TemplateError
from reffortune.ai.types import FewShotExample

SECTION_SEPARATOR = "\n\n"
FEW_SHOT_HEADER = "## ตัวอย่างการตีความที่ดี (Few-Shot Examples)\n"
FEW_SHOT_DIVIDER = "\n\n---\n\n"


@dataclass(frozen=True)
class PromptSections:
    """Prompt content before composition."""

    instructions: str
    user_data: str
    role: str = ""
    knowledge_base: str = ""
    cultural_context: str = ""
    few_shot_examples: str = ""


def format_few_shot_examples(examples: list[FewShotExample]) -> str:
    """Render few-shot examples with explicit input/output boundaries.

    Args:
        examples: Examples in display order

    Returns:
        Header plus numbered examples separated by a rule, or "" when
        ``examples`` is empty
    """
    if not examples:
        return ""

    formatted: list[str] = []
    for index, example in enumerate(examples, start=1):
        parts = [
            f"### ตัวอย่างที่ {index}: {example.scenario}",
            "",
            "**INPUT:**",
            example.input.strip(),
            "",
            "**OUTPUT:**",
            example.output.strip(),
        ]
        if example.notes:
            parts.extend(["", f"*หมายเหตุ: {example.notes}*"])
        formatted.append("\n".join(parts))

    return FEW_SHOT_HEADER + "\n" + FEW_SHOT_DIVIDER.join(formatted)


def build_base_prompt(sections: PromptSections) -> str:
    """Compose sections in fixed order, separated by blank lines.

    Args:
        sections: Prompt sections

    Returns:
        Trimmed prompt string

    Raises:
        TemplateError: If instructions or user data are blank
    """
    missing = [
        name
        for name, value in (("instructions", sections.instructions), ("user_data", sections.user_data))
        if not value.strip()
    ]
    if missing:
        raise TemplateError("MISSING_SECTION", [f"Required prompt section is blank: {name}" for name in missing])

    ordered = (
        sections.role,
        sections.knowledge_base,
        sections.cultural_context,
        sections.few_shot_examples,
        sections.instructions,
        sections.user_data,
    )
    return SECTION_SEPARATOR.join(part for part in ordered if part).strip()


class PromptBuilder:
    """Fluent builder over ``PromptSections``.

    Example:
        prompt = (
            PromptBuilder(instructions=instructions, user_data=user_data)
            .with_role(role)
            .with_cultural_context(get_context_for_divination_type(DivinationType.TAROT))
            .with_few_shot_examples(select_tarot_examples(3))
            .build()
        )
    """

    def __init__(self, *, instructions: str, user_data: str):
        self._sections = PromptSections(instructions=instructions, user_data=user_data)

    def with_role(self, role: str) -> "PromptBuilder":
        self._sections = replace(self._sections, role=role)
        return self

    def with_knowledge_base(self, knowledge_base: str) -> "PromptBuilder":
        """Attach a formatted knowledge block (empty string omits the section)."""
        self._sections = replace(self._sections, knowledge_base=knowledge_base)
        return self

    def with_cultural_context(self, context: str) -> "PromptBuilder":
        self._sections = replace(self._sections, cultural_context=context)
        return self

    def with_few_shot_examples(self, examples: list[FewShotExample]) -> "PromptBuilder":
        self._sections = replace(self._sections, few_shot_examples=format_few_shot_examples(examples))
        return self

    @property
    def sections(self) -> PromptSections:
        return self._sections

    def build(self) -> str:
        return build_base_prompt(self._sections)
