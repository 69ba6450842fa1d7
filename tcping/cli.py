# tcping/cli.py
# Usage examples:
#   tcping www.example.com
#   tcping www.example.com -p 443 -n 5
#   python3 -m tcping -t 2000 -i 500 -6 -v www.example.com

import argparse
import logging
import sys

from tcping.config import Settings
from tcping.engine.controller import PingController
from tcping.errors import TcpingError
from tcping.output import ConsoleReporter, print_error
from tcping.prober.tcp import TcpProber
from tcping.resolver import select_target
from tcping.signals import RunFlag, install_signal_handler

VERSION = "0.1.0"

EXAMPLES = """\
examples:
  tcping www.example.com                   probe the HTTP port (80)
  tcping www.example.com -p 443            probe a specific port
  tcping -n 5 www.example.com              stop after 5 probes
  tcping -t 2000 -i 500 www.example.com    2s timeout, 0.5s between probes
  tcping -4 www.example.com                IPv4 only
  tcping -6 www.example.com                IPv6 only
  tcping -v www.example.com                verbose output
  tcping -c www.example.com                colored output
"""


def build_argparser():
    ap = argparse.ArgumentParser(
        prog="tcping",
        description="TCP ping: check that a TCP port answers and measure connect time",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("host", help="Target host name or IP address")
    ap.add_argument("-p", "--port", type=int, default=80, help="Target TCP port")
    ap.add_argument("-n", "--count", type=int, default=0, help="Number of probes (0 = until interrupted)")
    ap.add_argument("-t", "--timeout", type=int, default=1000, help="Per-probe timeout (milliseconds)")
    ap.add_argument("-i", "--interval", type=int, default=1000, help="Pause between probes (milliseconds)")
    fam = ap.add_mutually_exclusive_group()
    fam.add_argument("-4", "--ipv4", action="store_true", help="Use IPv4 only")
    fam.add_argument("-6", "--ipv6", action="store_true", help="Use IPv6 only")
    ap.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    ap.add_argument("-c", "--color", action="store_true", help="Colored output")
    ap.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    return ap


def settings_from_args(ap, args) -> Settings:
    family = "ipv4" if args.ipv4 else "ipv6" if args.ipv6 else "auto"
    try:
        return Settings(
            host=args.host,
            port=args.port,
            count=args.count,
            timeout_ms=args.timeout,
            interval_ms=args.interval,
            family=family,
            verbose=args.verbose,
            color=args.color,
        )
    except ValueError as e:
        ap.error(str(e))


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    # DEBUG for tcping.* only, other libraries stay at WARNING
    logging.getLogger("tcping").setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv=None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    s = settings_from_args(ap, args)
    setup_logging(s.verbose)

    try:
        target = select_target(s.host, s.port, s.family)
    except TcpingError as e:
        print_error(str(e), s.color)
        return 1

    flag = RunFlag()
    install_signal_handler(flag)

    reporter = ConsoleReporter(s)
    reporter.banner(target)
    ctrl = PingController(TcpProber(timeout_ms=s.timeout_ms), s, reporter=reporter, flag=flag)
    stats = ctrl.run(target)

    if stats.transmitted > 0:
        reporter.summary(s.host, stats)
    return 0
