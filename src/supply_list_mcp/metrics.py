"""Discovery metrics for the stats endpoint."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

# Number of recent entries shown by the stats endpoint
RECENT_SHOWN = 10


@dataclass
class RequestMetrics:
    """Outcome of one discovery call."""

    url: str
    timestamp: datetime
    success: bool
    status_code: int | None = None
    elapsed_ms: float | None = None
    documents: int = 0
    cloud: bool = False
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        entry: dict[str, Any] = {
            "url": self.url,
            "timestamp": self.timestamp.isoformat(),
            "status_code": self.status_code,
            "source": "cloud" if self.cloud else "page",
        }
        if self.success:
            entry["documents"] = self.documents
            entry["elapsed_ms"] = self.elapsed_ms
        else:
            entry["error"] = self.error
        return entry


def _newest(entries: deque[RequestMetrics]) -> list[dict[str, Any]]:
    return [entry.to_dict() for entry in reversed(list(entries)[-RECENT_SHOWN:])]


@dataclass
class ServerMetrics:
    """Counters kept since the server started."""

    start_time: datetime = field(default_factory=datetime.now)
    total_requests: int = 0
    successful_requests: int = 0
    cloud_requests: int = 0
    empty_results: int = 0
    total_documents: int = 0
    failures_by_status: Counter[int] = field(default_factory=Counter)
    recent_requests: deque[RequestMetrics] = field(default_factory=lambda: deque(maxlen=50))
    recent_errors: deque[RequestMetrics] = field(default_factory=lambda: deque(maxlen=20))

    @property
    def failed_requests(self) -> int:
        return self.total_requests - self.successful_requests

    def record_request(
        self,
        url: str,
        success: bool,
        status_code: int | None = None,
        elapsed_ms: float | None = None,
        documents: int = 0,
        error: str | None = None,
        cloud: bool = False,
    ) -> None:
        """Count one discovery call.

        Args:
            url: Source URL as supplied by the caller
            success: Whether documents could be looked for at all
            status_code: Status reported to the caller
            elapsed_ms: Wall time of the call in milliseconds
            documents: Number of documents returned
            error: Error message of a failed call
            cloud: Whether the source was a Drive/Docs URL
        """
        entry = RequestMetrics(
            url=url,
            timestamp=datetime.now(),
            success=success,
            status_code=status_code,
            elapsed_ms=elapsed_ms,
            documents=documents,
            cloud=cloud,
            error=error,
        )

        self.total_requests += 1
        if cloud:
            self.cloud_requests += 1
        self.recent_requests.append(entry)

        if not success:
            self.failures_by_status[status_code or 500] += 1
            self.recent_errors.append(entry)
            return

        self.successful_requests += 1
        self.total_documents += documents
        if documents == 0:
            self.empty_results += 1

    def get_uptime_seconds(self) -> float:
        return (datetime.now() - self.start_time).total_seconds()

    def get_success_rate(self) -> float:
        """Get success rate as percentage."""
        if self.total_requests == 0:
            return 0.0
        return (self.successful_requests / self.total_requests) * 100

    def to_dict(self) -> dict[str, Any]:
        """Convert metrics to dictionary for JSON serialization."""
        uptime_seconds = self.get_uptime_seconds()
        average = self.total_documents / self.successful_requests if self.successful_requests else 0.0

        return {
            "status": "healthy",
            "uptime": {
                "seconds": uptime_seconds,
                "formatted": self._format_uptime(uptime_seconds),
            },
            "start_time": self.start_time.isoformat(),
            "requests": {
                "total": self.total_requests,
                "successful": self.successful_requests,
                "failed": self.failed_requests,
                "success_rate": round(self.get_success_rate(), 2),
                "cloud_sources": self.cloud_requests,
            },
            # JSON object keys are strings
            "failures_by_status": {str(code): n for code, n in sorted(self.failures_by_status.items())},
            "documents": {
                "total": self.total_documents,
                "empty_results": self.empty_results,
                "average_per_request": round(average, 2),
            },
            "recent_requests": _newest(self.recent_requests),
            "recent_errors": _newest(self.recent_errors),
        }

    @staticmethod
    def _format_uptime(seconds: float) -> str:
        """Format uptime as its two largest units (``2h 1m``)."""
        minutes, secs = divmod(int(seconds), 60)
        hours, minutes = divmod(minutes, 60)
        days, hours = divmod(hours, 24)
        if days:
            return f"{days}d {hours}h"
        if hours:
            return f"{hours}h {minutes}m"
        if minutes:
            return f"{minutes}m {secs}s"
        return f"{secs}s"


_metrics = ServerMetrics()


def get_metrics() -> ServerMetrics:
    """Get the global metrics instance."""
    return _metrics


def reset_metrics() -> None:
    """Replace the global metrics with a fresh instance."""
    global _metrics
    _metrics = ServerMetrics()


def record_request(
    url: str,
    success: bool,
    status_code: int | None = None,
    elapsed_ms: float | None = None,
    documents: int = 0,
    error: str | None = None,
    cloud: bool = False,
) -> None:
    """Count one discovery call in the global metrics."""
    _metrics.record_request(url, success, status_code, elapsed_ms, documents, error, cloud)
