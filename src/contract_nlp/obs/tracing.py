"""Per-query timing and in-memory trace records."""

from __future__ import annotations

import threading
import time
import uuid
from collections import Counter, OrderedDict
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from contract_nlp.schema import QueryResult


@dataclass(slots=True)
class QueryTrace:
    trace_id: str
    timestamp_utc: str
    original_input: str
    query_type: str
    action_type: str
    error_count: int
    latency_ms: float


class QueryTraceStore:
    """Bounded in-memory trace storage; the oldest records are evicted first.

    Safe to share between request threads.
    """

    def __init__(self, capacity: int = 1000) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self._records: OrderedDict[str, QueryTrace] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def record(self, result: QueryResult) -> QueryTrace:
        trace = QueryTrace(
            trace_id=str(uuid.uuid4()),
            timestamp_utc=datetime.now(timezone.utc).isoformat(),
            original_input=result.header.input_tracking.original_input,
            query_type=result.query_metadata.query_type,
            action_type=result.query_metadata.action_type,
            error_count=len(result.errors),
            latency_ms=result.query_metadata.processing_time_ms,
        )
        with self._lock:
            self._records[trace.trace_id] = trace
            while len(self._records) > self.capacity:
                self._records.popitem(last=False)
        return trace

    def get(self, trace_id: str) -> QueryTrace:
        with self._lock:
            record = self._records.get(trace_id)
        if record is None:
            raise KeyError(f"Trace not found: {trace_id}")
        return record

    def list_recent(self, limit: int = 20) -> list[QueryTrace]:
        if limit <= 0:
            return []
        with self._lock:
            return list(self._records.values())[-limit:]

    def summary(self) -> dict[str, Any]:
        """Aggregate latency, error rate and routing counts."""
        with self._lock:
            records = list(self._records.values())
        total = len(records)
        if total == 0:
            return {
                "total_queries": 0,
                "avg_latency_ms": 0.0,
                "p95_latency_ms": 0.0,
                "error_rate": 0.0,
                "action_types": {},
            }

        latencies = sorted(record.latency_ms for record in records)
        p95_index = max(0, int((len(latencies) * 0.95) - 1))
        failed = sum(1 for record in records if record.error_count > 0)

        return {
            "total_queries": total,
            "avg_latency_ms": sum(latencies) / total,
            "p95_latency_ms": latencies[p95_index],
            "error_rate": failed / total,
            "action_types": dict(Counter(record.action_type for record in records)),
        }


class Timer:
    """Context timer around one pipeline run."""

    def __init__(self) -> None:
        self._start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.elapsed_ms = self.current_ms()

    def current_ms(self) -> float:
        return (time.perf_counter() - self._start) * 1000.0
