# tcping/signals.py
import logging
import os
import signal
import time

log = logging.getLogger(__name__)

# how often an interval wait looks at the flag
POLL_S = 0.05


class RunFlag:
    """
    "Keep running" handle shared by the signal handler and the probe loop.
    Starts out running; stop() flips it once and for all.

    A plain bool: the signal handler runs on the main thread, possibly in the
    middle of wait(), so nothing here may take a lock.
    """

    def __init__(self):
        self._running = True

    @property
    def keep_running(self) -> bool:
        return self._running

    def stop(self) -> bool:
        """Request a stop. Returns True only for the first request."""
        first = self._running
        self._running = False
        return first

    def wait(self, seconds: float) -> bool:
        """Sleep up to `seconds` in short slices, waking early on stop(). Returns True if stopped."""
        deadline = time.monotonic() + seconds
        while self._running:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            time.sleep(min(POLL_S, remaining))
        return True


def install_signal_handler(flag: RunFlag, sigs=(signal.SIGINT, signal.SIGTERM)) -> bool:
    """
    First SIGINT/SIGTERM: let the current probe finish, then stop.
    Second one: exit the process on the spot with os._exit, skipping any
    cleanup, for when the in-flight probe is stuck.
    """
    def _handler(signum, frame):
        if not flag.keep_running:
            os._exit(0)
        flag.stop()
        # raw fd write; print() could re-enter a half-written stdout buffer
        os.write(1, b"\n")

    try:
        for sig in sigs:
            signal.signal(sig, _handler)
    except (ValueError, OSError) as e:
        log.warning("could not install signal handler: %s", e)
        return False
    return True
