#
# Copyright contributors to the netprobe project
#
# Usage: netprobe 192.0.2.10:53 -t 2 -c 5
import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from .engine import run_probe
from .errors import ProbeError, ProbeValidationError
from .settings import SETTINGS

logger = logging.getLogger("netprobe.cli")


def split_address(value: str) -> Tuple[str, int]:
    """Split ``host:port`` on its last colon; ``[v6]:port`` brackets are stripped."""
    i = value.rfind(":")
    if i <= 0:
        raise ProbeValidationError(f"invalid address {value!r}, expected host:port")
    host, port_str = value[:i], value[i + 1:]
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        port = int(port_str)
    except ValueError:
        raise ProbeValidationError(f"invalid port {port_str!r} in address {value!r}") from None
    return host, port


def build_argparser():
    ap = argparse.ArgumentParser(prog="netprobe", description="Single-destination reachability probe")
    ap.add_argument("address", help="Destination as host:port ([v6]:port for IPv6 literals)")
    ap.add_argument("-t", "--timeout", type=float, default=SETTINGS.default_timeout,
                    help="Per-attempt timeout in seconds")
    ap.add_argument("-c", "--count", type=int, default=SETTINGS.default_count, help="Number of attempts")
    ap.add_argument("-p", "--protocol", default="udp", choices=["udp", "tcp", "icmp"],
                    help="Transport protocol to probe with")
    return ap


def main(argv: Optional[List[str]] = None) -> None:
    args = build_argparser().parse_args(argv)
    # stdout carries only the JSON results
    logging.basicConfig(level=SETTINGS.log_level, stream=sys.stderr,
                        format="%(asctime)s %(levelname)s %(name)s %(message)s")

    try:
        host, port = split_address(args.address)
        results = run_probe({
            "destination": host,
            "destination_port": port,
            "protocol": args.protocol,
            "count": args.count,
            "timeout": args.timeout,
        })
    except ProbeError as e:
        logger.error("probe run failed: %s", e)
        sys.exit(1)

    print(json.dumps([r.payload() for r in results], indent="\t"))


if __name__ == "__main__":
    main()
