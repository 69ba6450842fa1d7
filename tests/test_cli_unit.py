# tests/test_cli_unit.py
import logging
import socket

import pytest

from tcping import cli


@pytest.fixture(autouse=True)
def no_signal_handlers(monkeypatch):
    monkeypatch.setattr(cli, "install_signal_handler", lambda flag: True)


def test_argparser_defaults():
    args = cli.build_argparser().parse_args(["example.test"])
    assert args.port == 80
    assert args.count == 0
    assert args.timeout == 1000
    assert args.interval == 1000
    assert not args.ipv4 and not args.ipv6


def test_family_flags_are_exclusive():
    with pytest.raises(SystemExit):
        cli.build_argparser().parse_args(["-4", "-6", "example.test"])


def test_settings_from_args():
    ap = cli.build_argparser()
    args = ap.parse_args(["-6", "-p", "443", "-n", "3", "-t", "250", "-i", "0", "-v", "-c", "example.test"])
    s = cli.settings_from_args(ap, args)
    assert s.family == "ipv6"
    assert (s.port, s.count, s.timeout_ms, s.interval_ms) == (443, 3, 250, 0)
    assert s.verbose and s.color


def test_invalid_values_are_usage_errors(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["-t", "0", "example.test"])
    assert exc.value.code == 2
    assert "timeout" in capsys.readouterr().err


def test_resolution_failure_exits_before_probing(capsys):
    rc = cli.main(["-4", "::1"])
    captured = capsys.readouterr()
    assert rc == 1
    assert "no IPv4 address" in captured.err
    assert "TCP ping" not in captured.out


def test_end_to_end_against_local_listener(capsys):
    srv = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    srv.bind(("127.0.0.1", 0))
    srv.listen(8)
    port = srv.getsockname()[1]
    try:
        rc = cli.main(["-n", "2", "-i", "0", "-p", str(port), "127.0.0.1"])
    finally:
        srv.close()

    out = capsys.readouterr().out
    assert rc == 0
    assert f"TCP ping 127.0.0.1 (IPv4 - 127.0.0.1) port {port}" in out
    assert out.count("Reply from 127.0.0.1:") == 2
    assert "2 probes transmitted, 2 received, 0 lost (0.0% loss)" in out
    assert "rtt min =" in out


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.build_argparser().parse_args(["-V"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == f"tcping {cli.VERSION}"


def test_verbose_logging_is_limited_to_tcping():
    """-v turns on our debug trace without asyncio's selector chatter."""
    try:
        cli.setup_logging(True)
        assert logging.getLogger("tcping.prober.tcp").isEnabledFor(logging.DEBUG)
        assert not logging.getLogger("asyncio").isEnabledFor(logging.DEBUG)
    finally:
        cli.setup_logging(False)
    assert not logging.getLogger("tcping").isEnabledFor(logging.DEBUG)
