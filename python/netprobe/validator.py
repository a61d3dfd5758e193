"""
Copyright contributors to the netprobe project
"""

"""Parameter validation for probe runs.

Turns the raw parameter set handed over by the orchestrator into an
immutable ``ProbeRequest``: the port is checked against the protocol,
the destination is resolved to a single IP literal, and unset timeout
and count values are replaced by the configured defaults. Any failure
raises ``ProbeValidationError`` before a single attempt is made.
"""

from typing import Any, Callable, List, Mapping, Union
import ipaddress
import logging

from pydantic import ValidationError

from .errors import ProbeValidationError
from .models import ProbeParameters, ProbeRequest
from .resolver import resolve_host
from .settings import SETTINGS

logger = logging.getLogger("netprobe.validator")

Resolver = Callable[[str], List[str]]


def _describe(e: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'parameters'}: {err['msg']}"
        for err in e.errors()
    )


def _parse_parameters(raw: Union[ProbeParameters, Mapping[str, Any]]) -> ProbeParameters:
    if isinstance(raw, ProbeParameters):
        return raw
    try:
        return ProbeParameters.model_validate(raw)
    except ValidationError as e:
        raise ProbeValidationError(f"invalid probe parameters: {_describe(e)}") from e


def _resolve_destination(destination: str, resolver: Resolver) -> str:
    """Pick the address to dial for ``destination``.

    A lookup failure means the destination is not a host name, so it is
    used as-is and left for the literal check. A lookup that succeeds with
    no addresses is an error in its own right.
    """
    try:
        addresses = resolver(destination)
    except OSError as e:
        logger.debug("destination did not resolve, treating as literal", extra={"destination": destination, "error": str(e)})
        return destination
    if not addresses:
        raise ProbeValidationError("FQDN does not resolve to any known ip")
    return addresses[0]


def validate(raw: Union[ProbeParameters, Mapping[str, Any]], resolver: Resolver = resolve_host) -> ProbeRequest:
    """Validate and normalize ``raw`` into a runnable request."""
    params = _parse_parameters(raw)
    protocol = params.protocol

    port = params.destination_port
    if protocol == "icmp":
        # ICMP carries no port
        port = None
    elif port is None or port < 0 or port > 65535:
        raise ProbeValidationError(
            f"{protocol} ping requires a valid destination port between 0 and 65535, got {port}"
        )
    if params.timeout < 0:
        raise ProbeValidationError(f"timeout must not be negative, got {params.timeout}")
    if params.count < 0:
        raise ProbeValidationError(f"count must not be negative, got {params.count}")

    address = _resolve_destination(params.destination, resolver)
    try:
        ipaddress.ip_address(address)
    except ValueError:
        raise ProbeValidationError(f"destination IP is invalid: {address}") from None

    try:
        request = ProbeRequest(
            destination=params.destination,
            destination_port=port,
            protocol=protocol,
            count=params.count or SETTINGS.default_count,
            timeout=params.timeout or SETTINGS.default_timeout,
            resolved_address=address,
        )
    except ValidationError as e:
        # only reachable through bad configured defaults
        raise ProbeValidationError(f"invalid probe settings: {_describe(e)}") from e
    logger.debug("validated probe request", extra={"request": request.model_dump()})
    return request
