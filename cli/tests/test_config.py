from aeries_cli import config


def _use_tmp_config_dir(monkeypatch, tmp_path) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)


def test_save_and_load_round_trip(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(monkeypatch, tmp_path)
    cfg = config.AppConfig(
        base_url="https://demo.aeries.net/aeries/",
        certificate="cert",
        verify_certs=False,
    )

    path = config.save_config(cfg)
    contents = tmp_path.joinpath("config.toml").read_text(encoding="utf-8")

    assert path.endswith("config.toml")
    assert "verify_certs = false" in contents
    assert config.load_config() == cfg


def test_load_config_missing_file_returns_default(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(monkeypatch, tmp_path)
    assert config.load_config() == config.default_config()


def test_apply_env_overrides(monkeypatch) -> None:
    cfg = config.AppConfig(base_url="https://a.example.test/", certificate="file-cert")
    monkeypatch.setenv(config.ENV_URL, "b.example.test/aeries")
    monkeypatch.setenv(config.ENV_CERT, "env-cert")
    monkeypatch.setenv(config.ENV_VERIFY_CERTS, "false")

    effective = config.apply_env(cfg)

    assert effective.base_url == "https://b.example.test/aeries/"
    assert effective.certificate == "env-cert"
    assert effective.verify_certs is False
    assert cfg.certificate == "file-cert"


def test_apply_env_keeps_config_when_unset(monkeypatch) -> None:
    for name in (config.ENV_URL, config.ENV_CERT, config.ENV_VERIFY_CERTS):
        monkeypatch.delenv(name, raising=False)
    cfg = config.AppConfig(base_url="https://a.example.test/", certificate="c", verify_certs=False)
    assert config.apply_env(cfg) == cfg


def test_normalize_base_url_defaults_to_https() -> None:
    assert config.normalize_base_url("demo.aeries.net/aeries") == "https://demo.aeries.net/aeries/"


def test_normalize_base_url_defaults_to_http_for_localhost() -> None:
    assert config.normalize_base_url("127.0.0.1:8010") == "http://127.0.0.1:8010/"


def test_normalize_base_url_keeps_single_trailing_slash() -> None:
    assert config.normalize_base_url("https://demo.aeries.net/aeries//") == "https://demo.aeries.net/aeries/"
    assert config.normalize_base_url("  ") == ""


def test_parse_bool() -> None:
    assert config.parse_bool("0") is False
    assert config.parse_bool("Off") is False
    assert config.parse_bool("yes") is True
    assert config.parse_bool(None, default=False) is False
