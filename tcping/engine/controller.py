# tcping/engine/controller.py

import logging
from typing import Optional

from tcping.config import Settings
from tcping.engine.state import PingStats
from tcping.prober.base import Prober
from tcping.schemas import ResolvedTarget
from tcping.signals import RunFlag

log = logging.getLogger(__name__)


class PingController:
    """
    Drives one probe per tick against a single resolved target.

    idle -> running -> (probing -> waiting)* -> stopped

    At most one probe is in flight; outcomes are recorded in seq order.
    The run flag is checked before each probe and before each wait, and the
    wait itself wakes up as soon as the flag is flipped.
    """

    def __init__(self, prober: Prober, settings: Settings, reporter=None, flag: Optional[RunFlag] = None):
        self.prober = prober
        self.s = settings
        self.reporter = reporter
        self.flag = flag if flag is not None else RunFlag()
        self.state = "idle"
        self.stop_reason: Optional[str] = None

    def _limit_reached(self, seq: int) -> bool:
        return self.s.count > 0 and seq >= self.s.count

    def _should_stop(self, seq: int) -> bool:
        if not self.flag.keep_running:
            self.stop_reason = "cancelled"
            return True
        if self._limit_reached(seq):
            self.stop_reason = "count_exhausted"
            return True
        return False

    def run(self, target: ResolvedTarget) -> PingStats:
        stats = PingStats()
        self.state = "running"
        self.stop_reason = None
        log.debug("probing %s every %dms (timeout %dms, count %s)",
                  target.display, self.s.interval_ms, self.s.timeout_ms, self.s.count or "unbounded")

        seq = 0
        while not self._should_stop(seq):
            # -------------------------------
            # 1) One probe, recorded at once
            # -------------------------------
            self.state = "probing"
            ev = self.prober.probe_once(target, seq)
            stats.record(ev)
            if self.reporter is not None:
                self.reporter.probe(ev)
            seq += 1

            # -------------------------------
            # 2) Last one or cancelled? skip the wait
            # -------------------------------
            if self._should_stop(seq):
                break

            self.state = "waiting"
            if self.flag.wait(self.s.interval_s):
                log.debug("stop requested during the wait after seq=%d", seq - 1)

        self.state = "stopped"
        log.debug("run stopped after %d probe(s): %s", stats.transmitted, self.stop_reason)
        return stats
