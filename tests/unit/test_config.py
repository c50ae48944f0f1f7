"""Unit tests for netdash.config."""

import pytest

from netdash import config as config_module
from netdash.config import NetdashConfig, get_config, set_config


def test_defaults() -> None:
    config = NetdashConfig()
    assert config.ipwhois_url == "https://ipwho.is"
    assert config.doh_url == "https://dns.google/resolve"
    assert config.http_timeout == 10.0
    assert config.vlsm_strict is False


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NETDASH_RDAP_URL", "https://rdap.test")
    monkeypatch.setenv("NETDASH_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("NETDASH_LOG_LEVEL", "debug")
    monkeypatch.setenv("NETDASH_VLSM_STRICT", "yes")
    config = NetdashConfig.from_env()
    assert config.rdap_url == "https://rdap.test"
    assert config.http_timeout == 2.5
    assert config.log_level == "DEBUG"
    assert config.vlsm_strict is True


@pytest.mark.parametrize("raw,expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("no", False)])
def test_strict_flag_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("NETDASH_VLSM_STRICT", raw)
    assert NetdashConfig.from_env().vlsm_strict is expected


def test_bad_timeout_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NETDASH_HTTP_TIMEOUT", "soon")
    assert NetdashConfig.from_env().http_timeout == 10.0


def test_get_config_loads_once(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_module, "ENV_LOCATIONS", [])
    monkeypatch.setenv("NETDASH_DOH_URL", "https://doh.test")
    set_config(None)
    first = get_config()
    assert first.doh_url == "https://doh.test"
    assert get_config() is first


def test_load_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("NETDASH_IPAPI_CO_URL=https://ipapi.test\n")
    monkeypatch.setenv("NETDASH_IPAPI_CO_URL", "")
    monkeypatch.delenv("NETDASH_IPAPI_CO_URL")
    monkeypatch.setattr(config_module, "ENV_LOCATIONS", [tmp_path / "missing.env", env_file])
    assert config_module.load_env_file() == env_file
    assert NetdashConfig.from_env().ipapi_co_url == "https://ipapi.test"
