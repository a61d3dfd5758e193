"""
Copyright contributors to the netprobe project
"""

"""Probe execution engine.

Runs ``count`` attempts against a validated request, strictly one after
the other, using the strategy registered for the request's protocol.
Every attempt is timed and recorded, whatever its outcome; there is no
early termination. Only strategy selection can abort a run, and it does
so before the first attempt.
"""

from typing import Any, Callable, List, Mapping, Optional, Union, cast
import logging
import time

from .errors import UnsupportedProtocolError
from .models import ProbeParameters, ProbeRequest, ProbeResult
from .probes import ProbeStrategy, get_strategy
from .resolver import resolve_host
from .validator import Resolver, validate

logger = logging.getLogger("netprobe.engine")


class ProbeEngine:
    """Sequential attempt loop over a pluggable set of strategies.

    Parameters
    ----------
    strategies : Optional[Mapping[str, ProbeStrategy]]
        Protocol name to strategy instance. When omitted, the built-in
        registry from ``netprobe.probes`` is used.
    clock : Callable[[], float]
        Monotonic clock used to time attempts, in seconds.
    """

    def __init__(self,
                 strategies: Optional[Mapping[str, ProbeStrategy]] = None,
                 clock: Callable[[], float] = time.perf_counter):
        self.strategies = strategies
        self.clock = clock

    def select_strategy(self, protocol: str) -> ProbeStrategy:
        if self.strategies is None:
            return get_strategy(protocol)
        try:
            return self.strategies[protocol]
        except KeyError:
            raise UnsupportedProtocolError(protocol) from None

    def run(self, request: ProbeRequest) -> List[ProbeResult]:
        strategy = self.select_strategy(request.protocol)

        results: List[Optional[ProbeResult]] = [None] * request.count
        for index in range(request.count):
            logger.info("[%d] pinging %s:%s", index, request.destination, request.destination_port,
                        extra={"address": request.resolved_address, "protocol": request.protocol})
            start = self.clock()
            outcome = strategy.attempt(request)
            elapsed = max(0.0, self.clock() - start)
            results[index] = ProbeResult(
                success=outcome.success,
                error=outcome.error,
                destination=request.destination,
                destination_port=request.destination_port,
                protocol=request.protocol,
                rtt=elapsed,
            )

        succeeded = sum(1 for r in results if r is not None and r.success)
        logger.info("probe run finished", extra={
            "destination": request.destination,
            "attempts": request.count,
            "succeeded": succeeded,
        })
        return cast(List[ProbeResult], results)


def run_probe(raw: Union[ProbeParameters, Mapping[str, Any]],
              resolver: Resolver = resolve_host,
              engine: Optional[ProbeEngine] = None) -> List[ProbeResult]:
    """Validate ``raw`` and run it to completion.

    Raises ``ProbeValidationError`` or ``UnsupportedProtocolError``; per
    attempt errors are only ever visible inside the returned results.
    """
    request = validate(raw, resolver=resolver)
    return (engine or ProbeEngine()).run(request)
