"""
Unit tests for configuration loading and the configuration models.
"""

import pytest

from tesla_inventory_watch.models.config import (
    Configuration,
    SearchQuery,
    TelegramConfig,
)
from tesla_inventory_watch.services.config_manager import ConfigurationManager
from tesla_inventory_watch.utils.error_handling import ConfigurationError


class TestConfigurationManager:
    """Test cases for ConfigurationManager."""

    def test_load_config_from_environment(self):
        """Test credentials are read from the environment mapping."""
        manager = ConfigurationManager(
            {"TELEGRAM_TOKEN": "123:abc", "TELEGRAM_CHAT_ID": " 4242 "}
        )

        config = manager.load_config()

        assert config.telegram.bot_token == "123:abc"
        assert config.telegram.chat_id == "4242"
        assert config.max_price == 29000
        assert config.min_range_km == 600
        assert config.notification_delay == 0.4
        assert config.request_timeout is None
        assert config.log_dir is None

    def test_log_dir_from_environment(self):
        """Test an optional log directory is read from the environment."""
        manager = ConfigurationManager(
            {
                "TELEGRAM_TOKEN": "123:abc",
                "TELEGRAM_CHAT_ID": "4242",
                "TESLA_WATCH_LOG_DIR": " /var/log/tesla-watch ",
            }
        )

        assert manager.load_config().log_dir == "/var/log/tesla-watch"

    @pytest.mark.parametrize(
        "environ",
        [
            {},
            {"TELEGRAM_TOKEN": "123:abc"},
            {"TELEGRAM_CHAT_ID": "4242"},
            {"TELEGRAM_TOKEN": "", "TELEGRAM_CHAT_ID": "4242"},
            {"TELEGRAM_TOKEN": "123:abc", "TELEGRAM_CHAT_ID": "   "},
        ],
    )
    def test_missing_credentials(self, environ):
        """Test a missing credential raises a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager(environ).load_config()

        assert "Missing TELEGRAM_TOKEN or TELEGRAM_CHAT_ID." in str(exc_info.value)

    def test_reads_os_environ_by_default(self, monkeypatch):
        """Test os.environ is used when no mapping is injected."""
        monkeypatch.setenv("TELEGRAM_TOKEN", "env-token")
        monkeypatch.setenv("TELEGRAM_CHAT_ID", "env-chat")

        config = ConfigurationManager().load_config()

        assert config.telegram.bot_token == "env-token"
        assert config.telegram.chat_id == "env-chat"


class TestConfigurationModels:
    """Test cases for configuration model validation."""

    def test_defaults_validate(self, sample_configuration):
        """Test the default configuration is valid."""
        assert sample_configuration.validate() is True

    def test_invalid_threshold(self):
        """Test a non-positive price threshold is rejected."""
        config = Configuration(
            telegram=TelegramConfig("tok", "1"), max_price=0
        )

        with pytest.raises(ValueError, match="Maximum price"):
            config.validate()

    def test_invalid_url(self):
        """Test a malformed API URL is rejected."""
        config = Configuration(telegram=TelegramConfig("tok", "1"), api_url="not-a-url")

        with pytest.raises(ValueError, match="api_url"):
            config.validate()

    def test_empty_token(self):
        """Test an empty bot token is rejected."""
        with pytest.raises(ValueError, match="bot token"):
            TelegramConfig(bot_token=" ", chat_id="1").validate()

    def test_search_query_count_bounds(self):
        """Test the page size is bounded."""
        with pytest.raises(ValueError, match="Result count"):
            SearchQuery(count=0).validate()

    def test_search_query_object_is_copy(self):
        """Test the query object does not share the options dictionary."""
        search = SearchQuery()

        search.to_query_object()["options"]["TRIM"] = ["LRAWD"]

        assert search.options == {}
