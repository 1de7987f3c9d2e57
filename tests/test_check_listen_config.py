from __future__ import annotations

import pytest

from scripts import check_listen_config


def test_prints_default_address(capsys):
    check_listen_config.main([])
    out = capsys.readouterr().out
    assert "addr=localhost:8080" in out
    assert "kind=default" in out


def test_port_override_ephemeral(capsys):
    check_listen_config.main(["--host", "0.0.0.0", "--port", "0"])
    out = capsys.readouterr().out
    assert "addr=0.0.0.0:0" in out
    assert "kind=ephemeral" in out


def test_negative_port_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        check_listen_config.main(["--port", "-1"])
    assert exc.value.code == 1
    assert "port cannot be negative" in capsys.readouterr().out


def test_prod_without_port_exits(monkeypatch, capsys):
    monkeypatch.setenv("ENV", "prod")
    with pytest.raises(SystemExit) as exc:
        check_listen_config.main([])
    assert exc.value.code == 1
    assert "PORT is required in prod" in capsys.readouterr().out


def test_unparseable_port_env_exits(monkeypatch, capsys):
    monkeypatch.setenv("PORT", "abc")
    with pytest.raises(SystemExit) as exc:
        check_listen_config.main([])
    assert exc.value.code == 1
    assert capsys.readouterr().out.startswith("Invalid settings:")


def test_non_positive_default_port_exits(monkeypatch, capsys):
    monkeypatch.setenv("DEFAULT_PORT", "0")
    with pytest.raises(SystemExit) as exc:
        check_listen_config.main([])
    assert exc.value.code == 1
    assert "default port must be positive" in capsys.readouterr().out
