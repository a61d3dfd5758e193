"""Single-destination network reachability probe."""
from .engine import ProbeEngine, run_probe
from .errors import ProbeError, ProbeValidationError, UnsupportedProtocolError
from .models import ProbeParameters, ProbeRequest, ProbeResult
from .validator import validate

__all__ = [
    "ProbeEngine",
    "ProbeError",
    "ProbeParameters",
    "ProbeRequest",
    "ProbeResult",
    "ProbeValidationError",
    "UnsupportedProtocolError",
    "run_probe",
    "validate",
]
