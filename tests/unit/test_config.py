"""Tests for settings.json handling.

Uses isolated directories via tmp_path and ROSTER_CONFIG_PATH
to avoid touching real settings.
"""

import json

import pytest

from roster.sdk import (
    ConfigError,
    DEFAULT_DEPARTMENTS,
    get_config_dir,
    get_setting,
    get_settings_path,
    load_roster_settings,
    load_settings,
    set_setting,
    unset_setting,
)


# === FIXTURES ===


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the SDK at an empty config directory."""
    path = tmp_path / "config"
    monkeypatch.setenv("ROSTER_CONFIG_PATH", str(path))
    return path


# === TESTS ===


class TestConfigDir:

    def test_env_var_wins(self, config_dir):
        assert get_config_dir() == config_dir
        assert get_settings_path() == config_dir / "settings.json"

    def test_xdg_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("ROSTER_CONFIG_PATH", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        assert get_config_dir() == tmp_path / "xdg" / "roster"


class TestDefaults:

    def test_missing_file_gives_defaults(self, config_dir):
        assert load_settings() == {}

        settings = load_roster_settings()
        assert settings.departments == DEFAULT_DEPARTMENTS
        assert settings.raise_threshold == 4.5
        assert settings.raise_amount == 1000.0
        assert settings.top_paid_limit == 5
        assert settings.first_employee_id == 1000
        assert settings.seed_file is None

    def test_defaults_are_not_shared(self, config_dir):
        first = load_roster_settings()
        first.departments.append("Legal")
        assert "Legal" not in load_roster_settings().departments


class TestSetSetting:

    def test_set_and_get(self, config_dir):
        path = set_setting("raise_amount", 1500)

        assert path == config_dir / "settings.json"
        assert json.loads(path.read_text()) == {"raise_amount": 1500}
        assert get_setting("raise_amount") == 1500
        assert load_roster_settings().raise_amount == 1500.0

    def test_invalid_value_is_not_written(self, config_dir):
        set_setting("top_paid_limit", 3)
        with pytest.raises(ConfigError, match="top_paid_limit"):
            set_setting("top_paid_limit", -1)
        assert get_setting("top_paid_limit") == 3

    def test_unknown_key_is_rejected(self, config_dir):
        with pytest.raises(ConfigError, match="bogus"):
            set_setting("bogus", 1)
        assert not get_settings_path().exists()

    def test_unset(self, config_dir):
        set_setting("raise_threshold", 3.0)
        assert unset_setting("raise_threshold") is True
        assert unset_setting("raise_threshold") is False
        assert load_roster_settings().raise_threshold == 4.5


class TestBrokenSettings:

    def test_invalid_json(self, config_dir):
        config_dir.mkdir()
        (config_dir / "settings.json").write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_settings()

    def test_not_an_object(self, config_dir):
        config_dir.mkdir()
        (config_dir / "settings.json").write_text("[1, 2]")
        with pytest.raises(ConfigError, match="JSON object"):
            load_settings()

    def test_invalid_values(self, config_dir):
        config_dir.mkdir()
        (config_dir / "settings.json").write_text(json.dumps({"raise_threshold": 9}))
        with pytest.raises(ConfigError, match="raise_threshold"):
            load_roster_settings()
