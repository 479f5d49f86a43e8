"""AI response quality metrics and error log.

``ValidationMonitor`` owns the counters and the error log. Validators take a
monitor as a parameter, so tests and isolated callers can use their own
instance. Production code shares ``default_monitor``.

Core principles:
1. Counters are mutated only by validation and fallback operations
2. Mutation is not locked; safe under a single-threaded or event-loop host only
3. Every error-log append is mirrored as a structured log line
"""

from collections import deque
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Any, Literal

from loguru import logger

from reffortune.ai.types import DivinationType, ErrorLogEntry, ErrorType
from reffortune.config.settings import settings

QualityStatus = Literal["excellent", "good", "poor", "no_data"]

EXCELLENT_PASS_RATE = 95.0
GOOD_PASS_RATE = 80.0
HIGH_FALLBACK_RATE = 10.0


def _zero_by_divination_type() -> dict[DivinationType, int]:
    return dict.fromkeys(DivinationType, 0)


@dataclass
class ValidationMetrics:
    """Snapshot of validation counters."""

    total_validations: int = 0
    passed_validations: int = 0
    failed_validations: int = 0
    fallback_usages: int = 0
    errors_by_type: dict[str, int] = field(default_factory=dict)
    errors_by_divination_type: dict[DivinationType, int] = field(default_factory=_zero_by_divination_type)


class ValidationMonitor:
    """In-process validation counters plus an append-only error log."""

    def __init__(self, max_log_entries: int | None = None):
        """Initialize monitor.

        Args:
            max_log_entries: Keep only the newest N log entries. None keeps
                every entry for the life of the process.
        """
        self.max_log_entries = max_log_entries
        self._metrics = ValidationMetrics()
        self._error_logs: deque[ErrorLogEntry] = deque(maxlen=max_log_entries)

    def record_validation(self, divination_type: DivinationType, *, passed: bool) -> None:
        self._metrics.total_validations += 1
        if passed:
            self._metrics.passed_validations += 1
        else:
            self._metrics.failed_validations += 1
            self._metrics.errors_by_divination_type[divination_type] += 1

    def track_error(self, error_type: str, divination_type: DivinationType) -> None:
        """Count one occurrence of a validation error type.

        Args:
            error_type: Error key (e.g., "summary_too_short")
            divination_type: Reading type where the error occurred
        """
        self._metrics.errors_by_type[error_type] = self._metrics.errors_by_type.get(error_type, 0) + 1
        logger.warning(
            "ai_validation_error",
            error_type=error_type,
            divination_type=divination_type.value,
        )

    def log_error(
        self,
        error_type: ErrorType,
        divination_type: DivinationType | None,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> ErrorLogEntry:
        """Append an entry to the error log.

        Args:
            error_type: "template", "validation" or "api"
            divination_type: Reading type, None when the caller did not say
            message: Human-readable message
            context: Extra structured context

        Returns:
            The appended entry
        """
        entry = ErrorLogEntry(
            timestamp=datetime.now(UTC),
            error_type=error_type,
            divination_type=divination_type,
            message=message,
            context=dict(context or {}),
        )
        self._error_logs.append(entry)
        logger.error(
            "ai_error_log",
            timestamp=entry.timestamp.isoformat(),
            type=entry.error_type,
            divination=entry.divination_type.value if entry.divination_type else None,
            message=entry.message,
            context=entry.context,
        )
        return entry

    def track_fallback_usage(self, divination_type: DivinationType | None, reason: str) -> None:
        """Count a fallback synthesis and log why it happened.

        Args:
            divination_type: Reading type where fallback was used
            reason: Why the fallback was triggered
        """
        self._metrics.fallback_usages += 1
        self.log_error(
            "validation",
            divination_type,
            f"Fallback structure used: {reason}",
            {"reason": reason},
        )

    def get_metrics(self) -> ValidationMetrics:
        """Return a copy of the current counters."""
        return replace(
            self._metrics,
            errors_by_type=dict(self._metrics.errors_by_type),
            errors_by_divination_type=dict(self._metrics.errors_by_divination_type),
        )

    def pass_rate(self) -> float | None:
        """Validation pass rate in percent, or None before any validation."""
        if self._metrics.total_validations == 0:
            return None
        return self._metrics.passed_validations / self._metrics.total_validations * 100

    def fallback_usage_rate(self) -> float | None:
        """Fallback usages per validation in percent, or None before any validation."""
        if self._metrics.total_validations == 0:
            return None
        return self._metrics.fallback_usages / self._metrics.total_validations * 100

    def get_error_logs(
        self,
        *,
        error_type: ErrorType | None = None,
        divination_type: DivinationType | None = None,
        since: datetime | None = None,
        limit: int | None = None,
    ) -> list[ErrorLogEntry]:
        """Query the error log.

        Args:
            error_type: Keep only this error type
            divination_type: Keep only this reading type
            since: Keep entries at or after this time
            limit: Keep only the most recent N matches

        Returns:
            Matching entries, oldest first
        """
        entries = list(self._error_logs)
        if error_type:
            entries = [e for e in entries if e.error_type == error_type]
        if divination_type:
            entries = [e for e in entries if e.divination_type == divination_type]
        if since:
            entries = [e for e in entries if e.timestamp >= since]
        if limit:
            entries = entries[-limit:]
        return entries

    def quality_summary(self, recent_limit: int = 10) -> dict[str, Any]:
        """Build the payload consumed by the operator metrics dashboard.

        Args:
            recent_limit: Number of recent error-log entries to include

        Returns:
            JSON-serializable summary
        """
        metrics = self.get_metrics()
        pass_rate = self.pass_rate()
        fallback_rate = self.fallback_usage_rate()

        status: QualityStatus = "no_data"
        if pass_rate is not None:
            if pass_rate >= EXCELLENT_PASS_RATE:
                status = "excellent"
            elif pass_rate >= GOOD_PASS_RATE:
                status = "good"
            else:
                status = "poor"

        warnings: list[str] = []
        if fallback_rate is not None and fallback_rate > HIGH_FALLBACK_RATE:
            warnings.append("high_fallback_rate")

        return {
            "metrics": {
                "total_validations": metrics.total_validations,
                "passed_validations": metrics.passed_validations,
                "failed_validations": metrics.failed_validations,
                "fallback_usages": metrics.fallback_usages,
                "pass_rate": round(pass_rate, 1) if pass_rate is not None else None,
                "fallback_rate": round(fallback_rate, 1) if fallback_rate is not None else None,
            },
            "quality": {"status": status, "warnings": warnings},
            "by_type": {key.value: count for key, count in metrics.errors_by_divination_type.items()},
            "error_types": metrics.errors_by_type,
            "recent_errors": [
                {
                    "timestamp": entry.timestamp.isoformat(),
                    "type": entry.error_type,
                    "divination_type": entry.divination_type.value if entry.divination_type else None,
                    "message": entry.message,
                    "context": entry.context,
                }
                for entry in self.get_error_logs(limit=recent_limit)
            ],
        }

    def reset(self) -> None:
        """Clear counters and log. Test isolation only."""
        self._metrics = ValidationMetrics()
        self._error_logs.clear()


default_monitor = ValidationMonitor(max_log_entries=settings.error_log_max_entries)
