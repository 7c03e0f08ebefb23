"""
Tests for layered routing configuration.
"""

import pytest
from genuine.config import ConfigError, RoutingConfig


pytestmark = pytest.mark.usefixtures("clean_env")


class TestDefaults:

    def test_defaults(self):
        config = RoutingConfig.load()
        assert config.strip_trailing_slash is True
        assert config.reject_empty_params is False
        assert config.log_level == "WARNING"

    def test_to_dict(self):
        assert RoutingConfig().to_dict() == {
            "strip_trailing_slash": True,
            "reject_empty_params": False,
            "log_level": "WARNING",
        }


class TestSources:

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("GENUINE_STRIP_TRAILING_SLASH", "false")
        monkeypatch.setenv("GENUINE_REJECT_EMPTY_PARAMS", "yes")

        config = RoutingConfig.load()
        assert config.strip_trailing_slash is False
        assert config.reject_empty_params is True

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GENUINE_LOG_LEVEL=debug\nGENUINE_REJECT_EMPTY_PARAMS=on\nOTHER=1\n")

        config = RoutingConfig.load(env_file=str(env_file))
        assert config.log_level == "DEBUG"
        assert config.reject_empty_params is True

    def test_environment_overrides_env_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("GENUINE_LOG_LEVEL=DEBUG\n")
        monkeypatch.setenv("GENUINE_LOG_LEVEL", "ERROR")

        assert RoutingConfig.load(env_file=str(env_file)).log_level == "ERROR"

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("GENUINE_STRIP_TRAILING_SLASH", "true")

        config = RoutingConfig.load(overrides={"STRIP_TRAILING_SLASH": False})
        assert config.strip_trailing_slash is False

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("ROUTES_LOG_LEVEL", "info")
        assert RoutingConfig.load(env_prefix="ROUTES_").log_level == "INFO"


class TestValidation:

    def test_invalid_bool(self):
        with pytest.raises(ConfigError):
            RoutingConfig.from_dict({"strip_trailing_slash": "maybe"})

    def test_invalid_log_level(self):
        with pytest.raises(ConfigError):
            RoutingConfig.from_dict({"log_level": "loud"})

    def test_unknown_keys_ignored(self):
        assert RoutingConfig.from_dict({"colour": "blue"}) == RoutingConfig()

    def test_none_values_ignored(self):
        assert RoutingConfig.from_dict({"log_level": None}).log_level == "WARNING"

    def test_config_is_frozen(self):
        config = RoutingConfig()
        with pytest.raises(Exception):
            config.log_level = "DEBUG"
