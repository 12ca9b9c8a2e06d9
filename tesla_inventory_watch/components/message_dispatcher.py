"""
Message dispatching for the Tesla Inventory Watch.

This module delivers alert messages through the Telegram Bot API. A
delivery is a single best-effort attempt: failures are reported through
the returned DeliveryResult and never raised, so one failed message does
not stop the remaining ones.
"""

import logging
from datetime import datetime
from typing import Optional

import requests

from ..models.alert import FormattedAlert
from ..models.config import TELEGRAM_API_URL
from ..models.delivery import DeliveryResult

logger = logging.getLogger(__name__)


class TelegramDispatcher:
    """Telegram Bot API message dispatcher."""

    def __init__(
        self,
        bot_token: str,
        chat_id: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        api_url: str = TELEGRAM_API_URL,
    ):
        """
        Initialize Telegram dispatcher.

        Args:
            bot_token: Telegram bot token
            chat_id: Target chat ID for messages
            session: HTTP session to use (a new one is created if omitted)
            timeout: Request timeout in seconds, None for no timeout
            api_url: Bot API base URL
        """
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.session = session or requests.Session()
        self.timeout = timeout
        self.base_url = f"{api_url}/bot{bot_token}"

    def send_alert(self, alert: FormattedAlert) -> DeliveryResult:
        """
        Send a formatted alert.

        Args:
            alert: Formatted alert to send

        Returns:
            DeliveryResult: Result of delivery attempt
        """
        return self.send_text(alert.message)

    def send_text(self, text: str) -> DeliveryResult:
        """
        Send a plain text message via the sendMessage endpoint.

        Args:
            text: Message text

        Returns:
            DeliveryResult: Result of delivery attempt
        """
        url = f"{self.base_url}/sendMessage"
        payload = {"chat_id": self.chat_id, "text": text}

        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except Exception as e:
            logger.error(f"Failed to reach Telegram: {e}")
            return DeliveryResult.failure(f"Telegram request failed: {e}")

        if not response.ok:
            body = response.text
            logger.error(f"Telegram API error {response.status_code}: {body}")
            return DeliveryResult.failure(
                f"Telegram API HTTP {response.status_code}: {body}"
            )

        logger.info(f"Message sent to Telegram chat {self.chat_id}")
        result = DeliveryResult(
            success=True, delivery_time=datetime.now(), error_message=None
        )
        result.validate()
        return result
