# tcping/prober/fake.py
from collections import deque

from tcping.prober.base import Prober, make_event
from tcping.schemas import ProbeEvent, ResolvedTarget


class FakeProber(Prober):
    """
    script: sequence of ProbeEvent-like dicts returned one per call, in order.
    seq/target are filled in from the call. Once the script runs dry every
    probe is a timeout.
    on_probe: optional callable(seq, event) invoked after each probe, handy for
    flipping a RunFlag mid-run in tests.
    """
    def __init__(self, script=None, on_probe=None):
        self.script = deque(script or [])
        self.on_probe = on_probe
        self.calls = []

    def probe_once(self, target: ResolvedTarget, seq: int = 0) -> ProbeEvent:
        if self.script:
            ev = make_event(target, seq, "timeout")
            ev.update(self.script.popleft())
            ev["seq"] = seq
            ev["target"] = target.display
        else:
            # default: timeout
            ev = make_event(target, seq, "timeout", detail="connection timed out")
        self.calls.append(seq)
        if self.on_probe is not None:
            self.on_probe(seq, ev)
        return ev
