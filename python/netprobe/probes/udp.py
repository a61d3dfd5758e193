"""
Copyright contributors to the netprobe project
"""

"""UDP reachability strategy.

UDP has no handshake, so the only definitive signals are a reply
datagram or an ICMP port-unreachable surfaced by the kernel as a
refused connection. Silence is ambiguous: the port may be open with a
server that ignores unsolicited datagrams, or the packet may have been
dropped. Silence is reported with the ``timeout`` tag and
``success=False``; callers should read that tag as inconclusive rather
than as a failure. A refusal proves the host is alive and is reported as
``success=True`` with the refusal tag kept for nuance.
"""

import ipaddress
import logging
import socket

from ..models import ProbeOutcome, ProbeRequest
from .base import ProbeStrategy

logger = logging.getLogger("netprobe.probes.udp")

PAYLOAD = b"Ping!Ping!Ping!"
READ_SIZE = 1500

E_TIMEOUT = "timeout"
E_CONN_REFUSED = "connection refused (no response)"


def address_family(address: str) -> int:
    """Socket family matching the IP literal ``address``."""
    return socket.AF_INET6 if ipaddress.ip_address(address).version == 6 else socket.AF_INET


class UdpStrategy(ProbeStrategy):
    protocol = "udp"

    def __init__(self, payload: bytes = PAYLOAD, read_size: int = READ_SIZE):
        self.payload = payload
        self.read_size = read_size

    def attempt(self, request: ProbeRequest) -> ProbeOutcome:
        target = (request.resolved_address, request.destination_port)
        try:
            sock = socket.socket(address_family(request.resolved_address), socket.SOCK_DGRAM)
        except OSError as e:
            logger.warning("udp socket creation failed", extra={"target": target, "error": str(e)})
            return ProbeOutcome(success=False, error=str(e))

        with sock:
            # connect() so the kernel reports ICMP errors for this peer on recv()
            try:
                sock.connect(target)
                sock.send(self.payload)
            except OSError as e:
                logger.info("udp send failed", extra={"target": target, "error": str(e)})
                return ProbeOutcome(success=False, error=str(e))

            sock.settimeout(request.timeout)
            try:
                data = sock.recv(self.read_size)
            except socket.timeout:
                return ProbeOutcome(success=False, error=E_TIMEOUT)
            except (ConnectionRefusedError, ConnectionResetError):
                # Windows reports port unreachable as a reset
                return ProbeOutcome(success=True, error=E_CONN_REFUSED)
            except OSError as e:
                return ProbeOutcome(success=False, error=f"read error: {e}")

        logger.debug("udp reply received", extra={"target": target, "bytes": len(data)})
        return ProbeOutcome(success=True)
