from __future__ import annotations

import pytest

from eoshttp import config
from eoshttp.errors import ConfigError


def test_load_config_from_default_path(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    tmp_path.joinpath("config.toml").write_text(
        '\n'.join(
            [
                'host = "https://api.example.test/"',
                'bearer = "top-token"',
                "",
            ]
        ),
        encoding="utf-8",
    )

    cfg = config.load_config()

    assert cfg.host == "https://api.example.test"
    assert cfg.bearer == "top-token"


def test_load_config_selects_profile(tmp_path) -> None:
    cfg_path = tmp_path / "eos.toml"
    cfg_path.write_text(
        '\n'.join(
            [
                'host = "http://default.test"',
                'bearer = "default-token"',
                'active_profile = "dev"',
                "",
                "[profiles.dev]",
                'host = "http://dev.test"',
                'bearer = "dev-token"',
                "",
                "[profiles.prod]",
                'host = "https://prod.test"',
                "",
            ]
        ),
        encoding="utf-8",
    )

    dev = config.load_config(str(cfg_path))
    prod = config.load_config(str(cfg_path), profile="prod")

    assert (dev.host, dev.bearer) == ("http://dev.test", "dev-token")
    assert (prod.host, prod.bearer) == ("https://prod.test", "default-token")


def test_unknown_profile_raises_config_error() -> None:
    with pytest.raises(ConfigError):
        config.from_toml({"host": "http://default.test"}, profile="staging")


def test_missing_host_raises_config_error() -> None:
    with pytest.raises(ConfigError):
        config.from_toml({"bearer": "token"})


def test_missing_file_raises_config_error(tmp_path) -> None:
    with pytest.raises(ConfigError):
        config.load_config(str(tmp_path / "absent.toml"))


def test_invalid_toml_raises_config_error(tmp_path) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text("host = ", encoding="utf-8")

    with pytest.raises(ConfigError):
        config.load_config(str(cfg_path))


def test_config_path_uses_user_config_dir(monkeypatch) -> None:
    monkeypatch.setattr(config, "user_config_dir", lambda app: f"/cfg/{app}")
    assert config.config_path() == "/cfg/eoshttp/config.toml"


def test_normalize_host_defaults_to_https() -> None:
    assert config.normalize_host("example.com") == "https://example.com"


def test_normalize_host_defaults_to_http_for_localhost() -> None:
    assert config.normalize_host("127.0.0.1:8010") == "http://127.0.0.1:8010"


def test_normalize_host_strips_trailing_slash() -> None:
    assert config.normalize_host(" https://example.com/ ") == "https://example.com"


def test_normalize_host_keeps_base_path_for_local_hosts() -> None:
    assert config.normalize_host("localhost:8010/api/") == "http://localhost:8010/api"
    assert config.normalize_host("[::1]:8010") == "http://[::1]:8010"


def test_normalize_host_keeps_explicit_scheme() -> None:
    assert config.normalize_host("http://example.com/v1/") == "http://example.com/v1"
