"""Tests for the validation monitor."""

from datetime import UTC, datetime, timedelta

from reffortune.ai.metrics import ValidationMonitor, default_monitor
from reffortune.ai.types import DivinationType


class TestCounters:
    """Tests for validation counters and rates."""

    def test_rates_are_none_before_any_validation(self):
        monitor = ValidationMonitor()

        assert monitor.pass_rate() is None
        assert monitor.fallback_usage_rate() is None

    def test_pass_rate(self):
        monitor = ValidationMonitor()
        monitor.record_validation(DivinationType.TAROT, passed=True)
        monitor.record_validation(DivinationType.TAROT, passed=True)
        monitor.record_validation(DivinationType.SPIRIT, passed=False)
        monitor.record_validation(DivinationType.SPIRIT, passed=True)

        assert monitor.pass_rate() == 75.0
        metrics = monitor.get_metrics()
        assert metrics.failed_validations == 1
        assert metrics.errors_by_divination_type[DivinationType.SPIRIT] == 1

    def test_snapshot_is_a_copy(self):
        monitor = ValidationMonitor()
        monitor.track_error("summary_missing", DivinationType.TAROT)

        snapshot = monitor.get_metrics()
        snapshot.errors_by_type["summary_missing"] = 99
        snapshot.total_validations = 99

        assert monitor.get_metrics().errors_by_type == {"summary_missing": 1}
        assert monitor.get_metrics().total_validations == 0

    def test_instances_are_isolated(self):
        monitor = ValidationMonitor()
        monitor.record_validation(DivinationType.TAROT, passed=True)

        assert default_monitor.get_metrics().total_validations == 0

    def test_reset(self):
        monitor = ValidationMonitor()
        monitor.record_validation(DivinationType.TAROT, passed=False)
        monitor.log_error("api", DivinationType.TAROT, "boom")

        monitor.reset()

        assert monitor.get_metrics().total_validations == 0
        assert monitor.get_error_logs() == []


class TestErrorLog:
    """Tests for the error log."""

    def test_fallback_usage_appends_entry(self):
        monitor = ValidationMonitor()

        monitor.track_fallback_usage(DivinationType.NUMEROLOGY, "Empty cardStructure input")

        assert monitor.get_metrics().fallback_usages == 1
        entry = monitor.get_error_logs()[0]
        assert entry.error_type == "validation"
        assert entry.context == {"reason": "Empty cardStructure input"}

    def test_filters(self):
        monitor = ValidationMonitor()
        monitor.log_error("template", DivinationType.TAROT, "a")
        monitor.log_error("api", DivinationType.TAROT, "b")
        monitor.log_error("api", DivinationType.CHAT, "c")

        assert [e.message for e in monitor.get_error_logs(error_type="api")] == ["b", "c"]
        assert [e.message for e in monitor.get_error_logs(divination_type=DivinationType.TAROT)] == ["a", "b"]
        assert [e.message for e in monitor.get_error_logs(limit=2)] == ["b", "c"]
        assert [e.message for e in monitor.get_error_logs(error_type="api", limit=1)] == ["c"]

    def test_since_filter(self):
        monitor = ValidationMonitor()
        monitor.log_error("api", DivinationType.TAROT, "old")

        future = datetime.now(UTC) + timedelta(minutes=1)

        assert monitor.get_error_logs(since=future) == []
        assert len(monitor.get_error_logs(since=future - timedelta(hours=1))) == 1

    def test_context_is_copied(self):
        monitor = ValidationMonitor()
        context = {"code": "UPSTREAM_STATUS"}

        monitor.log_error("api", DivinationType.TAROT, "boom", context)
        context["code"] = "changed"

        assert monitor.get_error_logs()[0].context == {"code": "UPSTREAM_STATUS"}

    def test_capped_log_keeps_newest(self):
        monitor = ValidationMonitor(max_log_entries=2)
        for message in ("a", "b", "c"):
            monitor.log_error("api", DivinationType.TAROT, message)

        assert [e.message for e in monitor.get_error_logs()] == ["b", "c"]

    def test_unbounded_by_default(self):
        monitor = ValidationMonitor()
        for i in range(500):
            monitor.log_error("api", DivinationType.TAROT, str(i))

        assert len(monitor.get_error_logs()) == 500


class TestQualitySummary:
    """Tests for the dashboard summary."""

    def test_no_data(self):
        summary = ValidationMonitor().quality_summary()

        assert summary["quality"] == {"status": "no_data", "warnings": []}
        assert summary["metrics"]["pass_rate"] is None
        assert summary["recent_errors"] == []

    def test_status_thresholds(self):
        excellent = ValidationMonitor()
        for i in range(20):
            excellent.record_validation(DivinationType.TAROT, passed=i != 0)

        good = ValidationMonitor()
        for i in range(10):
            good.record_validation(DivinationType.TAROT, passed=i > 1)

        poor = ValidationMonitor()
        for i in range(10):
            poor.record_validation(DivinationType.TAROT, passed=i > 2)

        assert excellent.quality_summary()["quality"]["status"] == "excellent"
        assert good.quality_summary()["quality"]["status"] == "good"
        assert poor.quality_summary()["quality"]["status"] == "poor"

    def test_high_fallback_warning(self):
        monitor = ValidationMonitor()
        for _ in range(5):
            monitor.record_validation(DivinationType.TAROT, passed=True)
        monitor.track_fallback_usage(DivinationType.TAROT, "Missing section labels in cardStructure")

        summary = monitor.quality_summary()

        assert summary["metrics"]["fallback_rate"] == 20.0
        assert summary["quality"]["warnings"] == ["high_fallback_rate"]

    def test_recent_errors_are_serializable(self):
        monitor = ValidationMonitor()
        monitor.track_fallback_usage(None, "Empty cardStructure input")
        monitor.log_error("api", DivinationType.CHAT, "boom")

        summary = monitor.quality_summary(recent_limit=1)

        assert len(summary["recent_errors"]) == 1
        assert summary["recent_errors"][0]["divination_type"] == "chat"
        assert summary["by_type"] == {"tarot": 0, "spirit": 0, "numerology": 0, "chat": 0}
