"""
Tests for the process entry point.
"""

import logging
from unittest.mock import AsyncMock, patch

import pytest

from tesla_inventory_watch import main as main_module
from tesla_inventory_watch.utils.logging import ROOT_LOGGER_NAME, setup_logging


class TestMain:
    """Test cases for main()."""

    def test_missing_credentials_exit_before_network(self, monkeypatch, capsys):
        """Test missing credentials print a diagnostic and exit 1."""
        monkeypatch.delenv("TELEGRAM_TOKEN", raising=False)
        monkeypatch.delenv("TELEGRAM_CHAT_ID", raising=False)

        with patch.object(main_module, "InventoryWatchOrchestrator") as orchestrator:
            with pytest.raises(SystemExit) as exc_info:
                main_module.main()

        assert exc_info.value.code == 1
        assert "Missing TELEGRAM_TOKEN or TELEGRAM_CHAT_ID." in capsys.readouterr().err
        orchestrator.assert_not_called()

    @pytest.mark.parametrize("run_result", [0, 1])
    def test_exit_code_from_orchestrator(self, monkeypatch, run_result):
        """Test the process exits with the orchestrator's status."""
        monkeypatch.delenv("TESLA_WATCH_LOG_DIR", raising=False)
        monkeypatch.setenv("TELEGRAM_TOKEN", "123:abc")
        monkeypatch.setenv("TELEGRAM_CHAT_ID", "4242")

        with patch.object(main_module, "InventoryWatchOrchestrator") as orchestrator:
            orchestrator.return_value.run = AsyncMock(return_value=run_result)

            with pytest.raises(SystemExit) as exc_info:
                main_module.main()

        assert exc_info.value.code == run_result
        config = orchestrator.call_args[0][0]
        assert config.telegram.bot_token == "123:abc"

    def test_log_dir_enables_file_logging(self, monkeypatch, tmp_path):
        """Test the configured log directory receives the run summary."""
        log_dir = tmp_path / "logs"
        monkeypatch.setenv("TELEGRAM_TOKEN", "123:abc")
        monkeypatch.setenv("TELEGRAM_CHAT_ID", "4242")
        monkeypatch.setenv("TESLA_WATCH_LOG_DIR", str(log_dir))

        with patch.object(main_module, "InventoryWatchOrchestrator") as orchestrator:
            orchestrator.return_value.run = AsyncMock(return_value=0)

            with pytest.raises(SystemExit):
                main_module.main()

        for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
            handler.flush()
        content = (log_dir / "tesla_inventory_watch.log").read_text(encoding="utf-8")
        assert "Tesla inventory check finished" in content
        assert "error_stats" in content

        setup_logging()
