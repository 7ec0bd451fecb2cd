from __future__ import annotations

import pytest
import yaml

from solapi_messaging import ClientConfig, ConfigurationError, SolapiMessageService, load_config, save_config


def test_load_config_from_yaml(tmp_path) -> None:
    path = tmp_path / "solapi.yaml"
    path.write_text(
        "api_key: KEY123\napi_secret: SECRET456\nbase_url: https://sandbox.solapi.test/\n"
        "timeout_seconds: 5\ntimezone: Asia/Seoul\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.api_key == "KEY123"
    assert config.base_url == "https://sandbox.solapi.test"
    assert config.timeout_seconds == 5.0
    assert config.timezone == "Asia/Seoul"
    assert "SECRET456" not in repr(config)

    service = SolapiMessageService.from_config(config)
    assert service.base_url == "https://sandbox.solapi.test"
    assert service.timezone == "Asia/Seoul"
    assert service.fetcher.timeout_seconds == 5.0


def test_missing_credentials_raise(tmp_path) -> None:
    path = tmp_path / "solapi.yaml"
    path.write_text("api_key: KEY123\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)
    path.write_text("- not\n- a mapping\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_save_config_omits_secret_by_default(tmp_path) -> None:
    config = ClientConfig(api_key="KEY123", api_secret="SECRET456", app_id="APP1")
    path = tmp_path / "out" / "solapi.yaml"
    save_config(config, path)
    saved = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert saved["api_key"] == "KEY123"
    assert saved["app_id"] == "APP1"
    assert "api_secret" not in saved

    save_config(config, path, include_secret=True)
    assert load_config(path).api_secret == "SECRET456"


def test_unknown_timezone_is_a_configuration_error(tmp_path) -> None:
    path = tmp_path / "solapi.yaml"
    path.write_text("api_key: KEY123\napi_secret: SECRET456\ntimezone: Mars/Base\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)
    with pytest.raises(ConfigurationError):
        ClientConfig(api_key="KEY123", api_secret="SECRET456", timezone="Mars/Base")


def test_blank_timezone_falls_back_to_utc() -> None:
    config = ClientConfig.from_dict({"api_key": "KEY123", "api_secret": "SECRET456", "timezone": None})
    assert config.timezone == "UTC"
