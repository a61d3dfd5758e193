# tests/conftest.py
from collections import deque

import pytest

from netprobe.models import ProbeOutcome, ProbeRequest
from netprobe.probes.base import ProbeStrategy


class FakeStrategy(ProbeStrategy):
    """
    outcomes: ProbeOutcome objects returned in order, one per attempt.
    Once the script runs out, every further attempt reports a timeout.
    """
    protocol = "udp"

    def __init__(self, outcomes=None):
        self.outcomes = deque(outcomes or [])
        self.calls = []

    def attempt(self, request: ProbeRequest) -> ProbeOutcome:
        self.calls.append(request)
        if self.outcomes:
            return self.outcomes.popleft()
        return ProbeOutcome(success=False, error="timeout")


def make_resolver(answer=None, error=None):
    """Resolver stub: raises ``error`` if given, else returns ``answer``."""
    lookups = []

    def resolve(name):
        lookups.append(name)
        if error is not None:
            raise error
        return list(answer or [])

    resolve.lookups = lookups
    return resolve


@pytest.fixture
def udp_request():
    return ProbeRequest(
        destination="127.0.0.1",
        destination_port=9,
        protocol="udp",
        count=3,
        timeout=1,
        resolved_address="127.0.0.1",
    )
