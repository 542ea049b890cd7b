from __future__ import annotations

from aeries_cli import config
from aeries_cli.http import make_client


def _capture(monkeypatch) -> dict:
    captured = {}

    class _FakeClient:
        def __init__(self, client_cfg):
            captured["cfg"] = client_cfg

    monkeypatch.setattr("aeries_cli.http.AeriesClient", _FakeClient)
    return captured


def test_make_client_uses_saved_config(monkeypatch) -> None:
    for name in (config.ENV_URL, config.ENV_CERT, config.ENV_VERIFY_CERTS):
        monkeypatch.delenv(name, raising=False)
    captured = _capture(monkeypatch)
    cfg = config.AppConfig(base_url="https://demo.aeries.net/aeries/", certificate="cert", verify_certs=False)

    make_client(cfg)

    assert captured["cfg"].base_url == "https://demo.aeries.net/aeries/"
    assert captured["cfg"].certificate == "cert"
    assert captured["cfg"].verify_certs is False


def test_make_client_normalizes_base_url_override(monkeypatch) -> None:
    monkeypatch.delenv(config.ENV_URL, raising=False)
    monkeypatch.delenv(config.ENV_CERT, raising=False)
    captured = _capture(monkeypatch)

    make_client(config.default_config(), base_url_override="example.com/aeries")

    assert captured["cfg"].base_url == "https://example.com/aeries/"
    assert captured["cfg"].certificate is None


def test_make_client_env_certificate(monkeypatch) -> None:
    monkeypatch.delenv(config.ENV_URL, raising=False)
    monkeypatch.setenv(config.ENV_CERT, "env-cert")
    captured = _capture(monkeypatch)

    make_client(config.default_config())

    assert captured["cfg"].certificate == "env-cert"
    assert captured["cfg"].base_url is None
