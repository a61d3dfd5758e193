# tests/test_cli.py
import json

import pytest

from netprobe import cli
from netprobe.errors import ProbeValidationError, UnsupportedProtocolError
from netprobe.models import ProbeResult


@pytest.mark.parametrize("value,expected", [
    ("127.0.0.1:9", ("127.0.0.1", 9)),
    ("dns.example.test:53", ("dns.example.test", 53)),
    ("[::1]:161", ("::1", 161)),
])
def test_split_address(value, expected):
    assert cli.split_address(value) == expected


@pytest.mark.parametrize("value", ["127.0.0.1", ":53", "host:abc"])
def test_split_address_rejects(value):
    with pytest.raises(ProbeValidationError):
        cli.split_address(value)


def test_argparser_defaults():
    args = cli.build_argparser().parse_args(["127.0.0.1:9"])
    assert args.timeout == 5
    assert args.count == 3
    assert args.protocol == "udp"


def test_main_prints_results(monkeypatch, capsys):
    seen = {}

    def fake_run_probe(params):
        seen.update(params)
        return [ProbeResult(success=False, error="timeout", destination="127.0.0.1",
                            destination_port=9, protocol="udp", rtt=1.0)] * params["count"]

    monkeypatch.setattr(cli, "run_probe", fake_run_probe)
    cli.main(["127.0.0.1:9", "-t", "1", "-c", "2"])

    out = json.loads(capsys.readouterr().out)
    assert seen == {"destination": "127.0.0.1", "destination_port": 9, "protocol": "udp", "count": 2, "timeout": 1.0}
    assert len(out) == 2
    assert out[0] == {"success": False, "error": "timeout", "destination": "127.0.0.1",
                      "destinationport": 9, "protocol": "udp", "rtt": 1.0}


def test_main_exits_on_invalid_address(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["localhost"])
    assert exc.value.code == 1
    assert capsys.readouterr().out == ""


def test_main_exits_on_unsupported_protocol(monkeypatch, capsys):
    def fake_run_probe(params):
        raise UnsupportedProtocolError(params["protocol"])

    monkeypatch.setattr(cli, "run_probe", fake_run_probe)
    with pytest.raises(SystemExit) as exc:
        cli.main(["127.0.0.1:9", "-p", "icmp"])
    assert exc.value.code == 1
    assert capsys.readouterr().out == ""
