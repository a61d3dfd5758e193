"""
Copyright contributors to the netprobe project
"""

"""Network reachability tools.

This module registers the ``reachability_probe`` tool, which runs a
bounded series of sequential attempts against a single destination and
returns one result per attempt: whether the target was reachable, how
long the attempt took, and how a failure was classified. Run-level
failures (bad parameters, unsupported protocol) are returned as an error
envelope instead of results.
"""

from typing import Dict, Any, Optional
import logging

from ..engine import run_probe
from ..errors import ProbeError
from .utils import ok, err_from


def attach(mcp):
    """Register network tools onto the given FastMCP instance."""
    logger = logging.getLogger("netprobe.mcp.net")

    @mcp.tool()
    def reachability_probe(destination: str,
                           destination_port: Optional[int] = None,
                           protocol: str = "udp",
                           count: int = 0,
                           timeout: float = 0) -> Dict[str, Any]:
        """Probe a single destination and report per-attempt reachability.

        Parameters
        ----------
        destination : str
            Hostname or IP address to probe.
        destination_port : Optional[int]
            Port to probe; required for ``udp`` and ``tcp``.
        protocol : str
            ``udp`` or ``tcp``. ``icmp`` is accepted by validation but
            not supported yet.
        count : int, optional
            Number of attempts; 0 uses the configured default (3).
        timeout : float, optional
            Per-attempt deadline in seconds; 0 uses the configured
            default (5).

        Returns
        -------
        dict
            ``results`` holds one record per attempt in order. For UDP an
            ``error`` of ``timeout`` means no reply arrived, which is
            inconclusive rather than a proof the port is closed.
        """
        params = {
            "destination": destination,
            "destination_port": destination_port,
            "protocol": protocol,
            "count": count,
            "timeout": timeout,
        }
        try:
            results = run_probe(params)
        except ProbeError as e:
            logger.warning("reachability_probe rejected", extra={"destination": destination, "error": str(e)})
            return err_from(e, destination=destination)
        payloads = [r.payload() for r in results]
        all_ok = all(r.success for r in results)
        if not all_ok:
            logger.info("reachability_probe failures", extra={
                "destination": destination,
                "failed_attempts": [i for i, r in enumerate(results) if not r.success],
            })
        return ok({
            "destination": destination,
            "results": payloads,
            "all_ok": all_ok,
        })
