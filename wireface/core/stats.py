"""Trace statistics data structures and presentation utilities."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class TraceStats:
    attempts: int = 0
    closed: int = 0
    discarded_lower_seed: int = 0
    discarded_outer: int = 0
    # Closed cycles with fewer than 3 vertices (walks back along a dangling edge)
    discarded_degenerate: int = 0
    # Timing (seconds)
    time_total: float = 0.0

    def merge(self, other: 'TraceStats') -> None:
        self.attempts += other.attempts
        self.closed += other.closed
        self.discarded_lower_seed += other.discarded_lower_seed
        self.discarded_outer += other.discarded_outer
        self.discarded_degenerate += other.discarded_degenerate

    @property
    def discarded(self) -> int:
        return self.discarded_lower_seed + self.discarded_outer + self.discarded_degenerate

    def to_dict(self) -> Dict[str, Any]:  # pragma: no cover - simple mapping
        return {
            'attempts': self.attempts,
            'closed': self.closed,
            'discarded_lower_seed': self.discarded_lower_seed,
            'discarded_outer': self.discarded_outer,
            'discarded_degenerate': self.discarded_degenerate,
            'closed_rate': (self.closed / self.attempts) if self.attempts else 0.0,
            'time_total': self.time_total,
            'time_avg': (self.time_total / self.attempts) if self.attempts else 0.0,
        }


def format_trace_stats(stats: TraceStats) -> str:
    """Return a human readable two-line table summarizing a reconstruction."""
    s = stats.to_dict()
    header = ["attempts", "closed", "lowerSeed", "outer", "degen", "closed%", "total_ms"]
    row = [
        str(s['attempts']), str(s['closed']), str(s['discarded_lower_seed']),
        str(s['discarded_outer']), str(s['discarded_degenerate']),
        f"{s['closed_rate'] * 100.0:6.2f}", f"{s['time_total'] * 1000.0:8.3f}",
    ]
    col_w = [max(len(h), len(v)) for h, v in zip(header, row)]
    def fmt(r):
        return " ".join(r[i].rjust(col_w[i]) for i in range(len(r)))
    return "\n".join([fmt(header), "-" * (sum(col_w) + len(col_w) - 1), fmt(row)])


__all__ = ["TraceStats", "format_trace_stats"]
