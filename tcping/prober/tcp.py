# tcping/prober/tcp.py
import asyncio
import errno
import logging
import time
from typing import Optional, Tuple

from tcping.prober.base import Prober, make_event
from tcping.schemas import ProbeEvent, ProbeStatus, ResolvedTarget

log = logging.getLogger(__name__)

# errnos that mean "somebody answered no" rather than a local failure
REFUSED_ERRNOS = {
    errno.ECONNREFUSED,
    errno.ENETUNREACH,
    errno.EHOSTUNREACH,
    errno.ECONNRESET,
}


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


def _format_sockname(sockname) -> Optional[str]:
    if not sockname:
        return None
    host, port = sockname[0], sockname[1]
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


class TcpProber(Prober):
    """
    One plain TCP connect per probe. The connect is raced against timeout_ms
    with asyncio.wait_for, so the deadline does not depend on the OS connect
    timeout. The socket is closed as soon as the handshake is observed.
    """

    def __init__(self, timeout_ms: int = 1000):
        if timeout_ms <= 0:
            raise ValueError("timeout_ms must be > 0")
        self.timeout_ms = timeout_ms

    async def _close(self, writer, target: ResolvedTarget) -> None:
        writer.close()
        try:
            await writer.wait_closed()
        except OSError as e:
            log.debug("error while closing probe socket to %s: %s", target.display, e)

    async def _attempt(self, target: ResolvedTarget) -> Tuple[ProbeStatus, Optional[str], Optional[str], float]:
        host, port = target.sockaddr
        start = time.perf_counter()
        try:
            _reader, writer = await asyncio.wait_for(
                asyncio.open_connection(host, port), timeout=self.timeout_ms / 1000.0
            )
        except asyncio.TimeoutError:
            return "timeout", None, "connection timed out", _elapsed_ms(start)
        except ConnectionRefusedError as e:
            return "refused", None, str(e) or "connection refused", _elapsed_ms(start)
        except OSError as e:
            status = "refused" if e.errno in REFUSED_ERRNOS else "error"
            return status, None, str(e) or e.__class__.__name__, _elapsed_ms(start)
        elapsed_ms = _elapsed_ms(start)

        local_addr = None
        try:
            local_addr = _format_sockname(writer.get_extra_info("sockname"))
        except (OSError, IndexError, TypeError) as e:
            log.debug("local address unavailable for %s: %s", target.display, e)
        await self._close(writer, target)
        return "connected", local_addr, None, elapsed_ms

    def probe_once(self, target: ResolvedTarget, seq: int = 0) -> ProbeEvent:
        status, local_addr, detail, elapsed_ms = asyncio.run(self._attempt(target))

        # a handshake that only completed after the deadline still counts as lost
        if status == "connected" and elapsed_ms >= self.timeout_ms:
            return make_event(target, seq, "timeout", elapsed_ms=elapsed_ms,
                              detail=f"reply took {elapsed_ms:.2f}ms, over the {self.timeout_ms}ms timeout")

        rtt_ms = elapsed_ms if status == "connected" else None
        return make_event(target, seq, status, elapsed_ms=elapsed_ms, rtt_ms=rtt_ms,
                          local_addr=local_addr, detail=detail)
