# tcping/engine/state.py
import statistics
from dataclasses import dataclass, field
from typing import List, Optional

from tcping.engine.metrics import loss_percentage, smooth_jitter
from tcping.schemas import ProbeEvent


@dataclass
class PingStats:
    transmitted: int = 0
    received: int = 0
    # one entry per successful probe, in arrival order
    rtt_samples: List[float] = field(default_factory=list)
    min_rtt: Optional[float] = None
    max_rtt: Optional[float] = None
    jitter: Optional[float] = None

    def record(self, event: ProbeEvent) -> None:
        self.transmitted += 1

        rtt = event.get("rtt_ms")
        if event.get("status") != "connected" or rtt is None:
            return

        self.received += 1
        if self.rtt_samples:
            self.jitter = smooth_jitter(self.jitter, rtt - self.rtt_samples[-1])
        self.rtt_samples.append(rtt)
        self.min_rtt = rtt if self.min_rtt is None else min(self.min_rtt, rtt)
        self.max_rtt = rtt if self.max_rtt is None else max(self.max_rtt, rtt)

    @property
    def lost(self) -> int:
        return self.transmitted - self.received

    @property
    def loss_pct(self) -> float:
        return loss_percentage(self.transmitted, self.received)

    @property
    def avg_rtt(self) -> Optional[float]:
        if not self.rtt_samples:
            return None
        return sum(self.rtt_samples) / self.received

    @property
    def median_rtt(self) -> Optional[float]:
        if not self.rtt_samples:
            return None
        # statistics.median sorts a copy, rtt_samples keeps arrival order
        return float(statistics.median(self.rtt_samples))

    @property
    def stddev_rtt(self) -> Optional[float]:
        """Sample (n - 1) standard deviation; undefined below two samples."""
        if len(self.rtt_samples) < 2:
            return None
        return statistics.stdev(self.rtt_samples)

    def summary(self) -> dict:
        return {
            "transmitted": self.transmitted,
            "received": self.received,
            "lost": self.lost,
            "loss_pct": self.loss_pct,
            "min_ms": self.min_rtt,
            "avg_ms": self.avg_rtt,
            "max_ms": self.max_rtt,
            "median_ms": self.median_rtt,
            "stddev_ms": self.stddev_rtt,
            "jitter_ms": self.jitter,
        }
