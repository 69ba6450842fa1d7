# tcping/errors.py


class TcpingError(Exception):
    """Base class for errors that abort a whole run."""


class ResolutionError(TcpingError):
    def __init__(self, host: str):
        self.host = host
        super().__init__(f"cannot resolve host: {host}")


class NoAddressForFamilyError(TcpingError):
    def __init__(self, host: str, family: str):
        self.host = host
        self.family = family
        label = {"ipv4": "IPv4", "ipv6": "IPv6"}.get(family, "usable")
        super().__init__(f"no {label} address found for host {host}")
