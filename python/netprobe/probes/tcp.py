"""
Copyright contributors to the netprobe project
"""

"""TCP connect strategy.

A lightweight, non-invasive check: an attempt succeeds when the three-way
handshake completes within the deadline. The connection is closed
immediately without sending any data. This is a connect check only, not
a full TCP prober.
"""

import logging
import socket

from ..models import ProbeOutcome, ProbeRequest
from .base import ProbeStrategy

logger = logging.getLogger("netprobe.probes.tcp")

E_TIMEOUT = "timeout"
E_CONN_REFUSED = "connection refused"


class TcpStrategy(ProbeStrategy):
    protocol = "tcp"

    def attempt(self, request: ProbeRequest) -> ProbeOutcome:
        target = (request.resolved_address, request.destination_port)
        try:
            with socket.create_connection(target, timeout=request.timeout):
                pass
        except socket.timeout:
            return ProbeOutcome(success=False, error=E_TIMEOUT)
        except ConnectionRefusedError:
            return ProbeOutcome(success=False, error=E_CONN_REFUSED)
        except OSError as e:
            logger.info("tcp connect failed", extra={"target": target, "error": str(e)})
            return ProbeOutcome(success=False, error=str(e))
        return ProbeOutcome(success=True)
