"""Request counting and latency tracking for a client session."""

from __future__ import annotations

from schemas.observability import RequestRecord


class MetricsCollector:
    """Collects request records; pass one to DiscoveryClient to enable."""

    def __init__(self) -> None:
        self.records: list[RequestRecord] = []

    def record(self, rec: RequestRecord) -> None:
        self.records.append(rec)

    @property
    def total_calls(self) -> int:
        return len(self.records)

    @property
    def failed_calls(self) -> int:
        return sum(1 for r in self.records if not r.success)

    @property
    def avg_latency_ms(self) -> float:
        if not self.records:
            return 0.0
        return round(sum(r.latency_ms for r in self.records) / len(self.records), 2)

    @property
    def failure_rate(self) -> float:
        if not self.records:
            return 0.0
        return round(self.failed_calls / len(self.records), 4)

    def status_counts(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for r in self.records:
            key = str(r.status_code) if r.status_code is not None else "none"
            counts[key] = counts.get(key, 0) + 1
        return counts

    def summary(self) -> dict:
        return {
            "total_calls": self.total_calls,
            "failed_calls": self.failed_calls,
            "avg_latency_ms": self.avg_latency_ms,
            "failure_rate": self.failure_rate,
            "status_counts": self.status_counts(),
        }
