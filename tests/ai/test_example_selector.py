"""Tests for few-shot example selection."""

import pytest

from reffortune.ai.errors import TemplateError
from reffortune.ai.examples.chat import CHAT_EXAMPLES
from reffortune.ai.examples.numerology import NUMEROLOGY_HIGH_EXAMPLES, NUMEROLOGY_LOW_EXAMPLES
from reffortune.ai.examples.selector import (
    ScoreTier,
    SpreadBucket,
    _check_registries,
    score_tier,
    select_chat_examples,
    select_numerology_examples,
    select_spirit_examples,
    select_tarot_examples,
    spread_bucket,
)
from reffortune.ai.examples.spirit import SPIRIT_REVERSED_EXAMPLES, SPIRIT_UPRIGHT_EXAMPLES
from reffortune.ai.examples.tarot import TAROT_CELTIC_EXAMPLES, TAROT_SINGLE_EXAMPLES, TAROT_THREE_EXAMPLES
from reffortune.ai.templates.numerology import build_numerology_instructions
from reffortune.ai.types import Orientation

HIGH_HEADER = "การกรอบคำตอบสำหรับคะแนนสูง (80+)"
MEDIUM_HEADER = "การกรอบคำตอบสำหรับคะแนนปานกลาง (40-79)"
LOW_HEADER = "การกรอบคำตอบสำหรับคะแนนต่ำ (< 40)"


class TestScoreTier:
    """Tests for numerology score tiers."""

    @pytest.mark.parametrize(
        ("score", "tier"),
        [
            (99, ScoreTier.HIGH),
            (80, ScoreTier.HIGH),
            (79, ScoreTier.MEDIUM),
            (40, ScoreTier.MEDIUM),
            (39, ScoreTier.LOW),
            (0, ScoreTier.LOW),
        ],
    )
    def test_boundaries(self, score, tier):
        assert score_tier(score) == tier


class TestNumerologySelection:
    """Tests for numerology example selection and tier framing."""

    def test_high_score_selects_high_bucket(self):
        """Test that score 87 selects the high-tier examples."""
        assert select_numerology_examples(87) == list(NUMEROLOGY_HIGH_EXAMPLES)

    def test_low_score_selects_low_bucket(self):
        assert select_numerology_examples(32) == list(NUMEROLOGY_LOW_EXAMPLES)

    def test_medium_score_reuses_high_examples(self):
        assert select_numerology_examples(55) == list(NUMEROLOGY_HIGH_EXAMPLES)

    @pytest.mark.parametrize(
        ("score", "header"),
        [(87, HIGH_HEADER), (80, HIGH_HEADER), (55, MEDIUM_HEADER), (40, MEDIUM_HEADER), (39, LOW_HEADER), (32, LOW_HEADER)],
    )
    def test_only_own_tier_framing_is_included(self, score, header):
        """Test that the instructions carry exactly one tier header, the one for the score."""
        instructions = build_numerology_instructions(score)

        assert header in instructions
        for other in {HIGH_HEADER, MEDIUM_HEADER, LOW_HEADER} - {header}:
            assert other not in instructions

    def test_low_score_framing_is_constructive(self):
        instructions = build_numerology_instructions(32)

        assert "หลีกเลี่ยงการสร้างความกลัวหรือความท้อแท้" in instructions
        assert "หลีกเลี่ยงการสร้างความกลัวหรือความท้อแท้" not in build_numerology_instructions(87)

class TestTarotSelection:
    """Tests for spread-size buckets."""

    @pytest.mark.parametrize(
        ("size", "bucket", "examples"),
        [
            (1, SpreadBucket.SINGLE, TAROT_SINGLE_EXAMPLES),
            (2, SpreadBucket.THREE, TAROT_THREE_EXAMPLES),
            (3, SpreadBucket.THREE, TAROT_THREE_EXAMPLES),
            (4, SpreadBucket.THREE, TAROT_THREE_EXAMPLES),
            (10, SpreadBucket.CELTIC, TAROT_CELTIC_EXAMPLES),
        ],
    )
    def test_supported_sizes(self, size, bucket, examples):
        assert spread_bucket(size) == bucket
        assert select_tarot_examples(size) == list(examples)

    def test_unsupported_size_raises(self):
        with pytest.raises(TemplateError) as exc_info:
            select_tarot_examples(5)

        assert exc_info.value.code == "INVALID_PARAMS"


class TestSpiritSelection:
    """Tests for orientation-keyed spirit examples."""

    def test_orientations(self):
        assert select_spirit_examples(Orientation.UPRIGHT) == list(SPIRIT_UPRIGHT_EXAMPLES)
        assert select_spirit_examples(Orientation.REVERSED) == list(SPIRIT_REVERSED_EXAMPLES)

    def test_plain_string_orientation(self):
        assert select_spirit_examples("reversed") == list(SPIRIT_REVERSED_EXAMPLES)  # type: ignore[arg-type]

    def test_unknown_orientation_raises(self):
        with pytest.raises(TemplateError):
            select_spirit_examples("sideways")  # type: ignore[arg-type]


class TestRegistries:
    """Tests for registry completeness."""

    def test_registries_have_no_gaps(self):
        _check_registries()

    def test_selectors_return_copies(self):
        examples = select_chat_examples()
        examples.clear()

        assert select_chat_examples() == list(CHAT_EXAMPLES)
