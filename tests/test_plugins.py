# tests/test_plugins.py
import pytest

from netprobe import server
from netprobe.errors import ProbeValidationError, UnsupportedProtocolError
from netprobe.models import ProbeResult
from netprobe.plugins import net
from netprobe.plugins.utils import err_from


class FakeMCP:
    """Collects functions registered through ``@mcp.tool()``."""

    def __init__(self, *args, **kwargs):
        self.args = args
        self.kwargs = kwargs
        self.tools = {}

    def tool(self):
        def register(fn):
            self.tools[fn.__name__] = fn
            return fn
        return register


@pytest.fixture
def probe_tool():
    mcp = FakeMCP()
    net.attach(mcp)
    return mcp.tools["reachability_probe"]


def _result(success, error=None):
    return ProbeResult(success=success, error=error, destination="192.0.2.1",
                       destination_port=53, protocol="udp", rtt=0.01)


def test_tool_returns_results(monkeypatch, probe_tool):
    calls = []

    def fake_run_probe(params):
        calls.append(params)
        return [_result(True), _result(False, "timeout")]

    monkeypatch.setattr(net, "run_probe", fake_run_probe)
    resp = probe_tool("192.0.2.1", destination_port=53, count=2, timeout=1)

    assert resp["ok"] is True
    assert resp["all_ok"] is False
    assert [r["success"] for r in resp["results"]] == [True, False]
    assert resp["results"][1]["error"] == "timeout"
    assert calls[0]["protocol"] == "udp"


def test_tool_reports_validation_error(monkeypatch, probe_tool):
    def fake_run_probe(params):
        raise ProbeValidationError("udp ping requires a valid destination port between 0 and 65535, got 70000")

    monkeypatch.setattr(net, "run_probe", fake_run_probe)
    resp = probe_tool("192.0.2.1", destination_port=70000)
    assert resp["ok"] is False
    assert resp["error"]["code"] == "VALIDATION_ERROR"
    assert "70000" in resp["error"]["message"]


def test_tool_rejects_icmp(probe_tool):
    resp = probe_tool("127.0.0.1", protocol="icmp")
    assert resp["ok"] is False
    assert resp["error"] == {"message": "protocol icmp is not supported", "code": "UNSUPPORTED_PROTOCOL"}


def test_err_from_codes():
    assert err_from(UnsupportedProtocolError("icmp"))["error"]["code"] == "UNSUPPORTED_PROTOCOL"
    assert err_from(ProbeValidationError("bad"), destination="x")["destination"] == "x"


def test_create_app_attaches_probe_tool(monkeypatch):
    monkeypatch.setattr(server, "FastMCP", FakeMCP)
    app = server.create_app()
    assert "reachability_probe" in app.tools
    assert app.args == ("Reachability_Probe_MCP",)
    assert app.kwargs["port"] == server.SETTINGS.port
