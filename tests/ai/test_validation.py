"""Tests for response validation and fallback structure synthesis."""

import pytest

from reffortune.ai.metrics import ValidationMonitor
from reffortune.ai.types import AIResponse, DivinationType
from reffortune.ai.validation import (
    REQUIRED_SECTIONS,
    count_thai_chars,
    ensure_fortune_structure,
    validate_ai_response,
    validate_minimum_length,
    validate_structure_sections,
)

THAI_SUMMARY = (
    "ภาพรวมของคุณในช่วงนี้มีแนวโน้มที่ดีเพราะไพ่ทุกใบสนับสนุนให้คุณกล้าตัดสินใจ"
    "และลงมือทำตามแผนที่วางไว้อย่างตั้งใจโดยไม่ต้องรอให้ทุกอย่างพร้อมก่อน"
    "ดังนั้นสัปดาห์นี้จึงเหมาะกับการเริ่มต้นเรื่องใหม่ที่คุณคิดไว้นานแล้ว"
)
LABELED_STRUCTURE = (
    "ภาพรวมสถานการณ์: สถานการณ์กำลังเปิดทางให้คุณก้าวไปข้างหน้าเพราะมีคนสนับสนุน\n"
    "จุดที่ควรระวัง: อย่าเร่งตัดสินใจเรื่องเงินก้อนใหญ่ก่อนตรวจสอบข้อมูลให้ครบถ้วน\n"
    "แนวทางที่ควรทำ: จดเป้าหมายสามข้อ แล้วลงมือทำข้อแรกภายในเจ็ดวัน ทำให้เห็นผลเร็วขึ้น"
)


@pytest.fixture
def monitor() -> ValidationMonitor:
    return ValidationMonitor()


class TestLengthAndSections:
    """Tests for the primitive validators."""

    def test_count_thai_chars_ignores_latin_digits_and_punctuation(self):
        assert count_thai_chars("abc กขค 123 !") == 3

    def test_minimum_length_boundary(self):
        assert validate_minimum_length("ก" * 50) is True
        assert validate_minimum_length("ก" * 49 + "abcdefghij") is False

    def test_minimum_length_custom_threshold(self):
        assert validate_minimum_length("กขค", min_chars=3) is True

    @pytest.mark.parametrize("text", ["", None])
    def test_minimum_length_empty(self, text):
        assert validate_minimum_length(text) is False

    def test_sections_in_any_order(self):
        structure = "\n".join(f"{section}: ข้อความ" for section in reversed(REQUIRED_SECTIONS))

        assert validate_structure_sections(structure) is True

    @pytest.mark.parametrize("missing", REQUIRED_SECTIONS)
    def test_missing_section(self, missing):
        """Test that dropping any one of the three labels fails."""
        structure = "\n".join(f"{section}: ข้อความ" for section in REQUIRED_SECTIONS if section != missing)

        assert validate_structure_sections(structure) is False

    def test_missing_structure(self):
        assert validate_structure_sections(None) is False


class TestEnsureFortuneStructure:
    """Tests for ensure_fortune_structure."""

    def test_empty_input_synthesizes_three_sections(self, monitor):
        """Test that empty input yields three labeled lines carrying the summary."""
        result = ensure_fortune_structure("", "X", monitor=monitor)

        lines = result.split("\n")
        assert len(lines) == 3
        assert all(section in result for section in REQUIRED_SECTIONS)
        assert "X" in result
        assert monitor.get_metrics().fallback_usages == 1

    def test_blank_input_counts_as_empty(self, monitor):
        result = ensure_fortune_structure("  \n\t ", "สรุป", DivinationType.TAROT, monitor=monitor)

        assert result.startswith(f"{REQUIRED_SECTIONS[0]}: สรุป")
        assert monitor.get_metrics().fallback_usages == 1

    def test_labeled_input_is_returned_unchanged(self, monitor):
        raw = f"{REQUIRED_SECTIONS[1]}: ระวังเรื่องเงิน\n\nข้อความอื่น"

        assert ensure_fortune_structure(raw, "สรุป", monitor=monitor) == raw
        assert monitor.get_metrics().fallback_usages == 0

    def test_unlabeled_input_is_wrapped(self, monitor):
        result = ensure_fortune_structure("ไพ่ใบนี้บอก\n\nว่าควรพัก", "", monitor=monitor)

        assert result.split("\n") == [
            f"{REQUIRED_SECTIONS[0]}: ไพ่ใบนี้บอก ว่าควรพัก",
            f"{REQUIRED_SECTIONS[1]}: ไพ่ใบนี้บอก ว่าควรพัก",
            f"{REQUIRED_SECTIONS[2]}: ตั้งกรอบเวลาให้ชัด เช็กความเสี่ยง และตัดสินใจจากข้อเท็จจริง",
        ]
        assert monitor.get_metrics().fallback_usages == 1

    @pytest.mark.parametrize("raw", ["", "ข้อความไม่มีหัวข้อ", LABELED_STRUCTURE])
    def test_output_is_a_fixed_point(self, monitor, raw):
        """Test that applying the function to its own output changes nothing."""
        once = ensure_fortune_structure(raw, "สรุป", monitor=monitor)
        usages = monitor.get_metrics().fallback_usages

        assert ensure_fortune_structure(once, "สรุปอื่น", monitor=monitor) == once
        assert monitor.get_metrics().fallback_usages == usages

    def test_fallback_is_logged_without_type(self, monitor):
        ensure_fortune_structure("", "X", monitor=monitor)

        entries = monitor.get_error_logs()
        assert len(entries) == 1
        assert entries[0].error_type == "validation"
        assert entries[0].divination_type is None
        assert entries[0].message == "Fallback structure used: Empty cardStructure input"

    def test_fallback_accepts_plain_string_type(self, monitor):
        ensure_fortune_structure("", "X", "spirit", monitor=monitor)

        assert monitor.get_error_logs()[0].divination_type is DivinationType.SPIRIT


class TestValidateAIResponse:
    """Tests for validate_ai_response."""

    def test_valid_response(self, monitor):
        response = AIResponse(summary=THAI_SUMMARY, card_structure=LABELED_STRUCTURE)

        result = validate_ai_response(response, DivinationType.TAROT, monitor=monitor)

        assert result.is_valid is True
        assert result.errors == []
        metrics = monitor.get_metrics()
        assert (metrics.total_validations, metrics.passed_validations, metrics.failed_validations) == (1, 1, 0)
        assert monitor.get_error_logs() == []

    def test_short_summary_fails(self, monitor):
        response = AIResponse(summary="สั้นไป", card_structure=LABELED_STRUCTURE)

        result = validate_ai_response(response, DivinationType.NUMEROLOGY, monitor=monitor)

        assert result.is_valid is False
        assert result.errors == ["Summary contains fewer than 50 Thai characters"]
        metrics = monitor.get_metrics()
        assert metrics.errors_by_type == {"summary_too_short": 1}
        assert metrics.errors_by_divination_type[DivinationType.NUMEROLOGY] == 1
        assert metrics.errors_by_divination_type[DivinationType.TAROT] == 0

    def test_failure_appends_validation_log_entry(self, monitor):
        response = AIResponse(summary="", card_structure="")

        validate_ai_response(response, DivinationType.CHAT, monitor=monitor)

        entries = monitor.get_error_logs(error_type="validation")
        assert len(entries) == 1
        assert entries[0].divination_type == DivinationType.CHAT
        assert entries[0].context["summary_length"] == 0
        assert entries[0].context["card_structure_length"] == 0
        assert monitor.get_metrics().errors_by_type == {"summary_missing": 1, "cardstructure_missing": 1}

    def test_incomplete_sections_fail(self, monitor):
        response = AIResponse(summary=THAI_SUMMARY, card_structure=f"{REQUIRED_SECTIONS[0]}: ก")

        result = validate_ai_response(response, DivinationType.SPIRIT, monitor=monitor)

        assert result.is_valid is False
        assert monitor.get_metrics().errors_by_type == {"cardstructure_incomplete_sections": 1}

    def test_plain_string_type_on_failure(self, monitor):
        """Test that a plain "tarot" string is accepted and counted as the tarot type."""
        response = AIResponse(summary="สั้นไป", card_structure="")

        result = validate_ai_response(response, "tarot", monitor=monitor)

        assert result.is_valid is False
        assert monitor.get_metrics().errors_by_divination_type[DivinationType.TAROT] == 1
        assert monitor.get_error_logs(error_type="validation")[0].divination_type is DivinationType.TAROT

    def test_unknown_type_string_raises(self, monitor):
        with pytest.raises(ValueError):
            validate_ai_response(AIResponse(summary=THAI_SUMMARY), "astrology", monitor=monitor)

    def test_warnings_do_not_block(self, monitor):
        """Test that short texts produce warnings but stay valid."""
        response = AIResponse(summary="ก" * 60, card_structure="\n".join(f"{s}: ข" for s in REQUIRED_SECTIONS))

        result = validate_ai_response(response, DivinationType.TAROT, monitor=monitor)

        assert result.is_valid is True
        assert len(result.warnings) == 3
        assert any("causal connective" in warning for warning in result.warnings)

    def test_connective_suppresses_depth_warning(self, monitor):
        response = AIResponse(summary=THAI_SUMMARY, card_structure=LABELED_STRUCTURE)

        result = validate_ai_response(response, DivinationType.TAROT, monitor=monitor)

        assert not any("causal connective" in warning for warning in result.warnings)
