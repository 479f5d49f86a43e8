"""Core types for the prompt engineering and validation system."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class DivinationType(StrEnum):
    """Reading category; selects cultural context and example buckets."""

    TAROT = "tarot"
    SPIRIT = "spirit"
    NUMEROLOGY = "numerology"
    CHAT = "chat"


class Orientation(StrEnum):
    UPRIGHT = "upright"
    REVERSED = "reversed"


ErrorType = Literal["template", "validation", "api"]

SpreadSize = Literal[1, 2, 3, 4, 10]
SUPPORTED_SPREAD_SIZES: tuple[int, ...] = (1, 2, 3, 4, 10)


@dataclass(frozen=True)
class FewShotExample:
    """A worked input/output sample injected into a prompt."""

    scenario: str
    input: str
    output: str
    notes: str | None = None


@dataclass(frozen=True)
class TarotCard:
    """Card data supplied by the deterministic tarot module."""

    name: str
    arcana: Literal["major", "minor"]
    meaning_upright: str
    meaning_reversed: str


@dataclass(frozen=True)
class DrawnCard:
    card: TarotCard
    orientation: Orientation

    @property
    def meaning(self) -> str:
        if self.orientation == Orientation.UPRIGHT:
            return self.card.meaning_upright
        return self.card.meaning_reversed

    @property
    def orientation_th(self) -> str:
        return "ตั้งตรง" if self.orientation == Orientation.UPRIGHT else "กลับหัว"


@dataclass(frozen=True)
class TarotPromptParams:
    cards: list[DrawnCard]
    spread_type: SpreadSize
    question: str | None = None
    count: int | None = None


@dataclass(frozen=True)
class SpiritPromptParams:
    card: TarotCard
    orientation: Orientation
    life_path_number: int
    dob: str


@dataclass(frozen=True)
class NumerologyThemes:
    work: str
    money: str
    relationship: str
    caution: str


@dataclass(frozen=True)
class NumerologyPromptParams:
    """Phone-number analysis produced by the deterministic numerology module."""

    normalized_phone: str
    score: int
    tier: str
    total: int
    root: int
    themes: NumerologyThemes


@dataclass(frozen=True)
class DailyCardPromptParams:
    card: TarotCard
    orientation: Orientation
    day_key: str


@dataclass(frozen=True)
class SpiritPathPromptParams:
    zodiac_card_name: str
    soul_card_name: str
    day: int
    month: int
    year: int
    zodiac_card_meaning: str | None = None
    soul_card_meaning: str | None = None


@dataclass(frozen=True)
class ChatTurn:
    role: Literal["user", "assistant"]
    content: str


@dataclass(frozen=True)
class ChatPromptParams:
    cards: list[DrawnCard]
    follow_up_question: str
    history: list[ChatTurn] = field(default_factory=list)
    base_question: str | None = None


class AIResponse(BaseModel):
    """Reading returned by the LLM (after parsing) or synthesized as fallback."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str = ""
    card_structure: str = Field(default="", alias="cardStructure")


@dataclass
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ErrorLogEntry:
    """One entry of the in-memory quality error log."""

    timestamp: datetime
    error_type: ErrorType
    divination_type: DivinationType | None
    message: str
    context: dict[str, Any] = field(default_factory=dict)
