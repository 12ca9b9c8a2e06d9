"""
Configuration management for the Tesla Inventory Watch.

Credentials and an optional log directory come from the environment;
everything else uses the defaults baked into the configuration models.
"""

import os
from typing import Mapping, Optional

from ..models.config import Configuration, TelegramConfig
from ..utils.error_handling import ConfigurationError

TOKEN_ENV_VAR = "TELEGRAM_TOKEN"
CHAT_ID_ENV_VAR = "TELEGRAM_CHAT_ID"
LOG_DIR_ENV_VAR = "TESLA_WATCH_LOG_DIR"


class ConfigurationManager:
    """Loads and validates the system configuration."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize the configuration manager.

        Args:
            environ: Environment mapping to read from. If None, uses os.environ.
        """
        self.environ = environ if environ is not None else os.environ

    def load_config(self) -> Configuration:
        """
        Load configuration from the environment.

        Returns:
            Configuration object with validated settings.

        Raises:
            ConfigurationError: If a credential is missing or the
                configuration is invalid.
        """
        bot_token = (self.environ.get(TOKEN_ENV_VAR) or "").strip()
        chat_id = (self.environ.get(CHAT_ID_ENV_VAR) or "").strip()

        if not bot_token or not chat_id:
            raise ConfigurationError(
                f"Missing {TOKEN_ENV_VAR} or {CHAT_ID_ENV_VAR}."
            )

        log_dir = (self.environ.get(LOG_DIR_ENV_VAR) or "").strip() or None

        config = Configuration(
            telegram=TelegramConfig(bot_token=bot_token, chat_id=chat_id),
            log_dir=log_dir,
        )

        try:
            config.validate()
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        return config
