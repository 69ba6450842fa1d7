# tcping/output.py
import sys

from tcping.config import Settings
from tcping.engine.state import PingStats
from tcping.schemas import ProbeEvent, ResolvedTarget

# ANSI color escape sequences
GREEN = "\033[92m"
RED = "\033[91m"
RESET = "\033[0m"


def paint(text: str, color: str, enabled: bool) -> str:
    if not enabled:
        return text
    return f"{color}{text}{RESET}"


def print_error(message: str, color: bool = False, stream=None) -> None:
    print(paint(message, RED, color), file=stream or sys.stderr)


class ConsoleReporter:
    """Renders probe events and the end-of-run summary as ping-style text."""

    def __init__(self, settings: Settings, stream=None):
        self.s = settings
        self.stream = stream or sys.stdout

    def _out(self, line: str = "") -> None:
        print(line, file=self.stream, flush=True)

    def banner(self, target: ResolvedTarget) -> None:
        self._out(f"TCP ping {target.host} ({target.family_label} - {target.ip}) port {target.port}")
        if self.s.verbose:
            count = str(self.s.count) if self.s.count else "unbounded"
            self._out(f"parameters: timeout={self.s.timeout_ms}ms, interval={self.s.interval_ms}ms, count={count}")

    def probe(self, ev: ProbeEvent) -> None:
        status = ev.get("status")
        seq = ev.get("seq")
        where = ev.get("target")

        if status == "connected":
            self._out(paint(f"Reply from {where}: seq={seq} time={ev['rtt_ms']:.2f}ms", GREEN, self.s.color))
            if self.s.verbose:
                if ev.get("local_addr"):
                    self._out(f"  -> local endpoint: {ev['local_addr']} -> {where}")
                else:
                    self._out("  -> local endpoint unavailable")
            return

        if status == "timeout":
            self._out(paint(f"Timeout from {where}: seq={seq}", RED, self.s.color))
            if self.s.verbose:
                self._out(f"  -> timeout detail: {ev.get('elapsed_ms', 0.0):.2f}ms elapsed, "
                          f"threshold {self.s.timeout_ms}ms")
            return

        self._out(paint(f"Cannot connect to {where}: seq={seq}", RED, self.s.color))
        if self.s.verbose and ev.get("detail"):
            self._out(f"  -> failure detail: {ev['detail']}")

    def summary(self, host: str, stats: PingStats) -> None:
        self._out()
        self._out(f"--- {host} TCP ping statistics ---")
        self._out(f"{stats.transmitted} probes transmitted, {stats.received} received, "
                  f"{stats.lost} lost ({stats.loss_pct:.1f}% loss)")

        if stats.received == 0:
            return
        self._out(f"rtt min = {stats.min_rtt:.2f}ms, max = {stats.max_rtt:.2f}ms, avg = {stats.avg_rtt:.2f}ms")

        if self.s.verbose and stats.received >= 2:
            self._out(f"median = {stats.median_rtt:.2f}ms")
            self._out(f"stddev = {stats.stddev_rtt:.2f}ms")
            if stats.jitter is not None:
                self._out(f"jitter = {stats.jitter:.2f}ms")
