#
# Copyright contributors to the netprobe project
#
from abc import ABC, abstractmethod

from ..models import ProbeOutcome, ProbeRequest


class ProbeStrategy(ABC):
    """One reachability attempt for a single transport protocol."""

    protocol: str = ""

    @abstractmethod
    def attempt(self, request: ProbeRequest) -> ProbeOutcome:
        """Run exactly one attempt against ``request.resolved_address`` and classify it.

        Transport errors are folded into the returned outcome; only
        programming errors may escape.
        """
        raise NotImplementedError
