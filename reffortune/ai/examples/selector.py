"""Few-shot example selection.

Every selector resolves through an enum-keyed registry. ``_check_registries``
runs at import and fails fast if any bucket is missing or empty, so a new
spread size, orientation or score tier cannot silently select nothing.
"""

from enum import StrEnum

from reffortune.ai.errors import TemplateError
from reffortune.ai.examples.chat import CHAT_EXAMPLES
from reffortune.ai.examples.numerology import NUMEROLOGY_HIGH_EXAMPLES, NUMEROLOGY_LOW_EXAMPLES
from reffortune.ai.examples.spirit import SPIRIT_REVERSED_EXAMPLES, SPIRIT_UPRIGHT_EXAMPLES
from reffortune.ai.examples.tarot import (
    TAROT_CELTIC_EXAMPLES,
    TAROT_SINGLE_EXAMPLES,
    TAROT_THREE_EXAMPLES,
)
from reffortune.ai.types import SUPPORTED_SPREAD_SIZES, FewShotExample, Orientation

HIGH_SCORE_THRESHOLD = 80
LOW_SCORE_THRESHOLD = 40


class SpreadBucket(StrEnum):
    SINGLE = "single"
    THREE = "three"
    CELTIC = "celtic"


class ScoreTier(StrEnum):
    """Numerology score tier. Boundaries: high >= 80, low < 40."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


SPREAD_BUCKET_BY_SIZE: dict[int, SpreadBucket] = {
    1: SpreadBucket.SINGLE,
    2: SpreadBucket.THREE,
    3: SpreadBucket.THREE,
    4: SpreadBucket.THREE,
    10: SpreadBucket.CELTIC,
}

TAROT_EXAMPLES_BY_BUCKET: dict[SpreadBucket, tuple[FewShotExample, ...]] = {
    SpreadBucket.SINGLE: TAROT_SINGLE_EXAMPLES,
    SpreadBucket.THREE: TAROT_THREE_EXAMPLES,
    SpreadBucket.CELTIC: TAROT_CELTIC_EXAMPLES,
}

SPIRIT_EXAMPLES_BY_ORIENTATION: dict[Orientation, tuple[FewShotExample, ...]] = {
    Orientation.UPRIGHT: SPIRIT_UPRIGHT_EXAMPLES,
    Orientation.REVERSED: SPIRIT_REVERSED_EXAMPLES,
}

# No dedicated medium set: medium readings reuse the high-tier examples.
NUMEROLOGY_EXAMPLES_BY_TIER: dict[ScoreTier, tuple[FewShotExample, ...]] = {
    ScoreTier.HIGH: NUMEROLOGY_HIGH_EXAMPLES,
    ScoreTier.MEDIUM: NUMEROLOGY_HIGH_EXAMPLES,
    ScoreTier.LOW: NUMEROLOGY_LOW_EXAMPLES,
}


def _check_registries() -> None:
    """Verify every enum member and spread size maps to a non-empty bucket.

    Raises:
        RuntimeError: If any registry has a gap
    """
    gaps: list[str] = []
    for size in SUPPORTED_SPREAD_SIZES:
        if size not in SPREAD_BUCKET_BY_SIZE:
            gaps.append(f"spread size {size}")
    registries: list[tuple[str, type[StrEnum], dict]] = [
        ("tarot", SpreadBucket, TAROT_EXAMPLES_BY_BUCKET),
        ("spirit", Orientation, SPIRIT_EXAMPLES_BY_ORIENTATION),
        ("numerology", ScoreTier, NUMEROLOGY_EXAMPLES_BY_TIER),
    ]
    for name, enum_cls, registry in registries:
        for member in enum_cls:
            if not registry.get(member):
                gaps.append(f"{name}.{member.value}")
    if not CHAT_EXAMPLES:
        gaps.append("chat")
    if gaps:
        raise RuntimeError(f"Few-shot example registry has gaps: {', '.join(gaps)}")


_check_registries()


def spread_bucket(spread_size: int) -> SpreadBucket:
    """Map a spread cardinality to its example bucket.

    Raises:
        TemplateError: If the spread size is not supported
    """
    bucket = SPREAD_BUCKET_BY_SIZE.get(spread_size)
    if bucket is None:
        raise TemplateError("INVALID_PARAMS", [f"Unsupported spread size: {spread_size}"])
    return bucket


def score_tier(score: int) -> ScoreTier:
    if score >= HIGH_SCORE_THRESHOLD:
        return ScoreTier.HIGH
    if score < LOW_SCORE_THRESHOLD:
        return ScoreTier.LOW
    return ScoreTier.MEDIUM


def select_tarot_examples(spread_size: int) -> list[FewShotExample]:
    """Return the tarot examples for a spread size (1, 2, 3, 4 or 10)."""
    return list(TAROT_EXAMPLES_BY_BUCKET[spread_bucket(spread_size)])


def select_spirit_examples(orientation: Orientation) -> list[FewShotExample]:
    """Return the spirit-card examples for an orientation.

    Raises:
        TemplateError: If the orientation is not upright or reversed
    """
    try:
        return list(SPIRIT_EXAMPLES_BY_ORIENTATION[Orientation(orientation)])
    except ValueError as exc:
        raise TemplateError("INVALID_PARAMS", [f"Unknown orientation: {orientation}"]) from exc


def select_numerology_examples(score: int) -> list[FewShotExample]:
    return list(NUMEROLOGY_EXAMPLES_BY_TIER[score_tier(score)])


def select_chat_examples() -> list[FewShotExample]:
    return list(CHAT_EXAMPLES)
