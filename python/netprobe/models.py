#
# Copyright contributors to the netprobe project
#

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Any, Optional, Literal

Protocol = Literal["icmp", "tcp", "udp"]


class ProbeParameters(BaseModel):
    """Parameter set supplied by the orchestrator for a single run.

    Attributes
    ----------
    destination : str
        IPv4 or IPv6 literal, or a host name to resolve.
    destination_port : Optional[int]
        Port to probe. Required for ``tcp`` and ``udp``, ignored for
        ``icmp``. Also accepted as ``destinationport`` or
        ``destinationPort``.
    protocol : str
        One of ``icmp``, ``tcp`` or ``udp`` (case-insensitive).
    count : int
        Number of attempts. Zero means "use the configured default".
    timeout : float
        Per-attempt deadline in seconds. Zero means "use the configured
        default".
    """

    model_config = ConfigDict(populate_by_name=True)

    destination: str
    destination_port: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("destination_port", "destinationport", "destinationPort"),
    )
    protocol: Protocol = "udp"
    count: int = 0
    timeout: float = Field(default=0, allow_inf_nan=False)

    @field_validator("protocol", mode="before")
    @classmethod
    def _normalize_protocol(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class ProbeRequest(BaseModel):
    """A validated, runnable request. Never mutated once built.

    ``resolved_address`` is the IP literal actually dialed; ``destination``
    keeps whatever the caller supplied so results stay self-describing.
    """

    model_config = ConfigDict(frozen=True)

    destination: str
    destination_port: Optional[int] = None
    protocol: Protocol
    count: int = Field(gt=0)
    timeout: float = Field(gt=0, allow_inf_nan=False)
    resolved_address: str


class ProbeOutcome(BaseModel):
    """Classified outcome of one attempt, as reported by a strategy."""

    model_config = ConfigDict(frozen=True)

    success: bool
    error: Optional[str] = None


class ProbeResult(BaseModel):
    """Result of a single attempt, ordered by attempt index within a run."""

    success: bool = False
    error: Optional[str] = None
    destination: str
    destination_port: Optional[int] = None
    protocol: str
    rtt: float = 0.0  # seconds

    def payload(self) -> Dict[str, Any]:
        """Compact wire form; ``error``, ``destinationport`` and ``rtt`` are omitted when empty."""
        data: Dict[str, Any] = {"success": self.success}
        if self.error:
            data["error"] = self.error
        data["destination"] = self.destination
        if self.destination_port:
            data["destinationport"] = self.destination_port
        data["protocol"] = self.protocol
        if self.rtt:
            data["rtt"] = self.rtt
        return data
