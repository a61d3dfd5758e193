#
# Copyright contributors to the netprobe project
#


class ProbeError(Exception):
    """Base class for errors that abort a probe run."""


class ProbeValidationError(ProbeError):
    """Raised when the parameter set cannot be turned into a runnable request."""


class UnsupportedProtocolError(ProbeError):
    """Raised when no probe strategy is registered for the requested protocol."""

    def __init__(self, protocol: str):
        super().__init__(f"protocol {protocol} is not supported")
        self.protocol = protocol
