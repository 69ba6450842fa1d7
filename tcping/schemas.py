# tcping/schemas.py
import ipaddress
from dataclasses import dataclass
from typing import Literal, TypedDict, Optional, Union

ProbeStatus = Literal["connected", "timeout", "refused", "error"]

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass(frozen=True)
class ResolvedTarget:
    host: str          # as given on the command line
    ip: IPAddress
    port: int

    @property
    def family_label(self) -> str:
        return "IPv6" if self.ip.version == 6 else "IPv4"

    @property
    def sockaddr(self) -> tuple:
        return (str(self.ip), self.port)

    @property
    def display(self) -> str:
        # IPv6 needs brackets to keep the port readable
        if self.ip.version == 6:
            return f"[{self.ip}]:{self.port}"
        return f"{self.host}:{self.port}"


class ProbeEvent(TypedDict, total=False):
    seq: int
    target: str
    status: ProbeStatus
    rtt_ms: Optional[float]       # only set when status == "connected"
    elapsed_ms: float             # wall time spent on the attempt, whatever the outcome
    local_addr: Optional[str]
    detail: Optional[str]
    timestamp: str
