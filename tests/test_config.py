from datetime import timedelta

import pytest

from shopsavvy import Config, ConfigError, load_config
from shopsavvy.utils.config_loader import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


def test_new_uses_defaults():
    config = Config.new("ss_live_abc123")
    assert config.api_key == "ss_live_abc123"
    assert config.base_url == DEFAULT_BASE_URL == "https://api.shopsavvy.com/v1"
    assert config.timeout == DEFAULT_TIMEOUT == 30.0


def test_malformed_key_does_not_fail_config():
    assert Config.new("").api_key == ""
    assert Config.new("not a key").api_key == "not a key"


def test_with_methods_return_new_values():
    base = Config.new("ss_live_abc123")

    updated = base.with_base_url("http://localhost:9000/v1").with_timeout(60)

    assert updated.base_url == "http://localhost:9000/v1"
    assert updated.timeout == 60.0
    assert base.base_url == DEFAULT_BASE_URL
    assert base.timeout == DEFAULT_TIMEOUT


def test_with_timeout_accepts_timedelta():
    assert Config.new("ss_live_abc123").with_timeout(timedelta(minutes=1)).timeout == 60.0


def test_config_is_frozen():
    config = Config.new("ss_live_abc123")
    with pytest.raises(Exception):
        config.api_key = "ss_live_other"


def test_repr_hides_api_key():
    assert "ss_live_secret1" not in repr(Config.new("ss_live_secret1"))


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("SHOPSAVVY_API_KEY", "ss_test_env123")
    monkeypatch.setenv("SHOPSAVVY_BASE_URL", "http://localhost:9000/v1")
    monkeypatch.setenv("SHOPSAVVY_TIMEOUT", "5")

    config = Config.from_env(dotenv_path=tmp_path / "missing.env")

    assert config.api_key == "ss_test_env123"
    assert config.base_url == "http://localhost:9000/v1"
    assert config.timeout == 5.0


def test_from_env_reads_dotenv_file(monkeypatch, tmp_path):
    monkeypatch.delenv("SHOPSAVVY_API_KEY", raising=False)
    monkeypatch.delenv("SHOPSAVVY_BASE_URL", raising=False)
    monkeypatch.delenv("SHOPSAVVY_TIMEOUT", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("SHOPSAVVY_API_KEY=ss_live_fromfile1\n", encoding="utf-8")

    config = Config.from_env(dotenv_path=env_file)

    assert config.api_key == "ss_live_fromfile1"
    assert config.base_url == DEFAULT_BASE_URL


def test_from_env_without_key_gives_empty_key(monkeypatch, tmp_path):
    monkeypatch.delenv("SHOPSAVVY_API_KEY", raising=False)
    monkeypatch.delenv("SHOPSAVVY_TIMEOUT", raising=False)
    assert Config.from_env(dotenv_path=tmp_path / "missing.env").api_key == ""


def test_from_env_rejects_non_numeric_timeout(monkeypatch, tmp_path):
    monkeypatch.setenv("SHOPSAVVY_TIMEOUT", "soon")
    with pytest.raises(ConfigError):
        Config.from_env(dotenv_path=tmp_path / "missing.env")


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "shopsavvy.yml"
    path.write_text(
        "api_key: ss_live_yaml123\nbase_url: http://localhost:9000/v1\ntimeout: 10\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config == Config(api_key="ss_live_yaml123", base_url="http://localhost:9000/v1", timeout=10.0)


def test_load_config_falls_back_to_env_key(monkeypatch, tmp_path):
    monkeypatch.setenv("SHOPSAVVY_API_KEY", "ss_test_env123")
    path = tmp_path / "shopsavvy.yml"
    path.write_text("timeout: 15\n", encoding="utf-8")

    config = load_config(path)

    assert config.api_key == "ss_test_env123"
    assert config.timeout == 15.0


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yml")


@pytest.mark.parametrize("contents", ["- just\n- a list\n", "timeout: -3\napi_key: ss_live_a1\n", "key: [unclosed\n"])
def test_load_config_rejects_bad_contents(tmp_path, contents):
    path = tmp_path / "shopsavvy.yml"
    path.write_text(contents, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize("timeout", [0, -1, -5.0, timedelta(seconds=0)])
def test_with_timeout_rejects_non_positive_values(timeout):
    with pytest.raises(ConfigError):
        Config.new("ss_live_abc123").with_timeout(timeout)


def test_with_api_key_returns_validated_copy():
    base = Config.new("ss_live_abc123").with_timeout(5)

    updated = base.with_api_key("ss_test_other1")

    assert updated.api_key == "ss_test_other1"
    assert updated.timeout == 5.0
    assert base.api_key == "ss_live_abc123"
