# tools/run_fake.py
# Usage examples:
#   python3 -m tools.run_fake
#   python3 -m tools.run_fake --count 8 --loss-every 3 --verbose

import json
import argparse
import ipaddress
from tcping.config import Settings
from tcping.engine.controller import PingController
from tcping.output import ConsoleReporter
from tcping.prober.fake import FakeProber
from tcping.schemas import ResolvedTarget

def build_script(args):
    script = []
    for seq in range(args.count):
        if args.loss_every and (seq + 1) % args.loss_every == 0:
            script.append({"status": "timeout", "elapsed_ms": float(args.timeout_ms)})
        else:
            rtt = args.base_rtt + (seq % 4) * 2.5
            script.append({"status": "connected", "rtt_ms": rtt, "elapsed_ms": rtt,
                           "local_addr": "127.0.0.1:50000"})
    return script

def build_argparser():
    ap = argparse.ArgumentParser(description="Dry-run the probe loop against a scripted fake prober")
    ap.add_argument("--host", default="example.invalid", help="Host name shown in the output")
    ap.add_argument("--port", type=int, default=80)
    ap.add_argument("--count", type=int, default=5, help="Number of probes")
    ap.add_argument("--base-rtt", type=float, default=20.0, help="Base RTT of scripted replies (ms)")
    ap.add_argument("--loss-every", type=int, default=0, help="Every Nth probe times out (0 = none)")
    ap.add_argument("--timeout-ms", type=int, default=1000)
    ap.add_argument("--verbose", action="store_true")
    return ap

if __name__ == "__main__":
    args = build_argparser().parse_args()
    s = Settings(host=args.host, port=args.port, count=args.count, timeout_ms=args.timeout_ms,
                 interval_ms=0, verbose=args.verbose)
    target = ResolvedTarget(host=args.host, ip=ipaddress.ip_address("192.0.2.1"), port=args.port)
    reporter = ConsoleReporter(s)
    ctrl = PingController(FakeProber(script=build_script(args)), s, reporter=reporter)
    stats = ctrl.run(target)
    reporter.summary(args.host, stats)
    print(json.dumps(stats.summary(), indent=2))
