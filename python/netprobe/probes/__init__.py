"""Probe strategies, one per transport protocol.

``STRATEGIES`` maps a protocol name to the strategy class handling it.
Protocols without an entry (currently ``icmp``) are rejected by
``get_strategy`` before any attempt is made.
"""
from typing import Dict, Type

from ..errors import UnsupportedProtocolError
from .base import ProbeStrategy
from .tcp import TcpStrategy
from .udp import UdpStrategy

STRATEGIES: Dict[str, Type[ProbeStrategy]] = {
    UdpStrategy.protocol: UdpStrategy,
    TcpStrategy.protocol: TcpStrategy,
}


def get_strategy(protocol: str) -> ProbeStrategy:
    try:
        return STRATEGIES[protocol]()
    except KeyError:
        raise UnsupportedProtocolError(protocol) from None


__all__ = ["STRATEGIES", "ProbeStrategy", "TcpStrategy", "UdpStrategy", "get_strategy"]
