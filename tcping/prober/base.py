# tcping/prober/base.py
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

from tcping.schemas import ProbeEvent, ProbeStatus, ResolvedTarget


def make_event(target: ResolvedTarget, seq: int, status: ProbeStatus,
               elapsed_ms: float = 0.0,
               rtt_ms: Optional[float] = None,
               local_addr: Optional[str] = None,
               detail: Optional[str] = None) -> ProbeEvent:
    return {
        "seq": seq,
        "target": target.display,
        "status": status,
        "rtt_ms": rtt_ms if status == "connected" else None,
        "elapsed_ms": elapsed_ms,
        "local_addr": local_addr,
        "detail": detail,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


class Prober(ABC):
    @abstractmethod
    def probe_once(self, target: ResolvedTarget, seq: int = 0) -> ProbeEvent:
        """Make exactly one connection attempt to target and return a ProbeEvent dict."""
        raise NotImplementedError
