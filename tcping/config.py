# tcping/config.py
from dataclasses import dataclass

FAMILIES = ("auto", "ipv4", "ipv6")

@dataclass
class Settings:
    host: str
    port: int = 80
    count: int = 0                    # 0 = keep probing until interrupted
    timeout_ms: int = 1000
    interval_ms: int = 1000
    family: str = "auto"              # "auto" | "ipv4" | "ipv6"
    verbose: bool = False
    color: bool = False

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if not self.host:
            raise ValueError("host must not be empty")
        if not 0 <= self.port <= 65535:
            raise ValueError(f"port must be between 0 and 65535, got {self.port}")
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout must be > 0 ms, got {self.timeout_ms}")
        if self.interval_ms < 0:
            raise ValueError(f"interval must be >= 0 ms, got {self.interval_ms}")
        if self.family not in FAMILIES:
            raise ValueError(f"family must be one of {', '.join(FAMILIES)}, got {self.family!r}")

    @property
    def timeout_s(self) -> float:
        return self.timeout_ms / 1000.0

    @property
    def interval_s(self) -> float:
        return self.interval_ms / 1000.0
