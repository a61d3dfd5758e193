"""
Copyright contributors to the netprobe project
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from ..errors import ProbeError, ProbeValidationError, UnsupportedProtocolError

ERROR_CODES = {
    ProbeValidationError: "VALIDATION_ERROR",
    UnsupportedProtocolError: "UNSUPPORTED_PROTOCOL",
}


def ok(data: Optional[Dict[str, Any]] = None, **extra: Any) -> Dict[str, Any]:
    resp: Dict[str, Any] = {"ok": True}
    if data:
        resp.update(data)
    if extra:
        resp.update(extra)
    return resp


def err(message: str, *, code: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    resp: Dict[str, Any] = {"ok": False, "error": {"message": message}}
    if code:
        resp["error"]["code"] = code
    if extra:
        resp.update(extra)
    return resp


def err_from(exc: ProbeError, **extra: Any) -> Dict[str, Any]:
    """Error envelope for a run-level failure, coded by exception type."""
    code = next((c for t, c in ERROR_CODES.items() if isinstance(exc, t)), "PROBE_ERROR")
    return err(str(exc), code=code, **extra)
