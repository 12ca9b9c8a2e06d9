"""
Main application orchestrator for the Tesla Inventory Watch.

This module runs one inventory check from start to finish: harvest the
session cookie, fetch the inventory, filter it, and notify each match.
Every failure bubbles up to `run`, which turns it into an operator
message and a non-zero exit status.
"""

import asyncio
from typing import List, Optional

import requests

from .components.alert_formatter import AlertFormatter
from .components.filter_engine import FilterEngine
from .components.inventory_fetcher import InventoryFetcher
from .components.listing_extractor import ListingExtractor
from .components.message_dispatcher import TelegramDispatcher
from .components.query_builder import QueryBuilder
from .components.session_bootstrap import SessionBootstrap
from .interfaces import (
    IAlertFormatter,
    IFilterEngine,
    IInventoryFetcher,
    IMessageDispatcher,
    IQueryBuilder,
    ISessionBootstrap,
)
from .models.config import Configuration
from .models.delivery import DeliveryResult
from .models.listing import Match
from .utils.error_handling import (
    BlockedAccessError,
    ErrorCategory,
    ErrorSeverity,
    categorize_exception,
    get_error_tracker,
)
from .utils.logging import get_logger

EXIT_OK = 0
EXIT_FAILURE = 1

BLOCKED_MESSAGE = (
    "⚠️ Tesla inventory API blocked the request (HTTP 403). "
    "Will retry on the next scheduled run."
)
FAILURE_MESSAGE_PREFIX = "⚠️ Tesla checker failed: "


class InventoryWatchOrchestrator:
    """
    Coordinates one inventory check.

    Components are built from the configuration unless injected, and all
    HTTP components share a single requests session.
    """

    def __init__(
        self,
        config: Configuration,
        session: Optional[requests.Session] = None,
        query_builder: Optional[IQueryBuilder] = None,
        session_bootstrap: Optional[ISessionBootstrap] = None,
        inventory_fetcher: Optional[IInventoryFetcher] = None,
        filter_engine: Optional[IFilterEngine] = None,
        alert_formatter: Optional[IAlertFormatter] = None,
        message_dispatcher: Optional[IMessageDispatcher] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            config: Validated system configuration
            session: Shared HTTP session (created if omitted)
            query_builder, session_bootstrap, inventory_fetcher,
            filter_engine, alert_formatter, message_dispatcher:
                Optional component overrides
        """
        self.logger = get_logger("orchestrator")
        self.error_tracker = get_error_tracker()
        self.config = config
        self.session = session or requests.Session()

        timeout = config.request_timeout
        extractor = ListingExtractor(config.site_origin, config.referer_url)

        self._query_builder = query_builder or QueryBuilder(
            config.search, config.api_url
        )
        self._session_bootstrap = session_bootstrap or SessionBootstrap(
            self.session, config.referer_url, timeout
        )
        self._inventory_fetcher = inventory_fetcher or InventoryFetcher(
            self.session, config.referer_url, timeout
        )
        self._filter_engine = filter_engine or FilterEngine(
            config.max_price, config.min_range_km, extractor
        )
        self._alert_formatter = alert_formatter or AlertFormatter(
            config.vehicle_name, config.language, extractor
        )
        self._message_dispatcher = message_dispatcher or TelegramDispatcher(
            config.telegram.bot_token,
            config.telegram.chat_id,
            session=self.session,
            timeout=timeout,
        )

    async def run(self) -> int:
        """
        Run one inventory check.

        Returns:
            Process exit status: 0 on completion (with or without
            matches), 1 on any failure.
        """
        try:
            await self.check_inventory()
            return EXIT_OK

        except BlockedAccessError as e:
            self.error_tracker.record_error(
                component="inventory_fetcher",
                category=ErrorCategory.BLOCKED_ACCESS,
                severity=ErrorSeverity.HIGH,
                message=str(e),
                context={"body_snippet": e.body_snippet},
            )
            self.logger.warning(
                "Inventory API blocked the request",
                extra={"status_code": e.status_code, "body_snippet": e.body_snippet},
            )
            await self.notify_or_ignore(BLOCKED_MESSAGE)
            return EXIT_FAILURE

        except Exception as e:
            self.error_tracker.record_error(
                component="orchestrator",
                category=categorize_exception(e),
                severity=ErrorSeverity.CRITICAL,
                message=f"Checker error: {e}",
                exception=e,
            )
            self.logger.critical("Checker error", extra={"error": str(e)}, exc_info=True)
            await self.notify_or_ignore(f"{FAILURE_MESSAGE_PREFIX}{e}")
            return EXIT_FAILURE

        finally:
            self.session.close()

    async def check_inventory(self) -> List[Match]:
        """
        Fetch, filter and notify.

        Returns:
            The matches that were notified, in upstream order.
        """
        loop = asyncio.get_running_loop()

        cookie = await loop.run_in_executor(None, self._session_bootstrap.fetch_cookie)
        self.logger.info("Session bootstrap finished", extra={"has_cookie": bool(cookie)})

        url = self._query_builder.build_url()
        records = await loop.run_in_executor(
            None, self._inventory_fetcher.fetch_results, url, cookie
        )

        matches = self._filter_engine.select_matches(records)
        self.logger.info(
            "Inventory filtered",
            extra={"result_count": len(records), "match_count": len(matches)},
        )

        if not matches:
            self.logger.info("No matching vehicles today.")
            return matches

        await self._notify_matches(matches)
        return matches

    async def _notify_matches(self, matches: List[Match]) -> None:
        """Send one message per match, pausing between successive sends."""
        loop = asyncio.get_running_loop()
        failed = 0

        for index, match in enumerate(matches):
            if index > 0:
                await asyncio.sleep(self.config.notification_delay)

            alert = self._alert_formatter.format_alert(match)
            result = await loop.run_in_executor(
                None, self._message_dispatcher.send_alert, alert
            )

            if result.success:
                self.logger.info(
                    "Alert sent successfully",
                    extra={"title": alert.title, "price": match.price},
                )
            else:
                failed += 1
                self.error_tracker.record_error(
                    component="message_dispatcher",
                    category=ErrorCategory.MESSAGE_DELIVERY,
                    severity=ErrorSeverity.LOW,
                    message=result.error_message,
                    context={"title": alert.title},
                )

        self.logger.info(
            "Notifications finished",
            extra={"sent": len(matches) - failed, "failed": failed},
        )

    async def notify_or_ignore(self, text: str) -> DeliveryResult:
        """
        Best-effort operator notification.

        The dispatcher reports failures through its result instead of
        raising, so the outcome is only logged here.
        """
        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(
            None, self._message_dispatcher.send_text, text
        )

        if not result.success:
            self.logger.warning(
                "Operator notification failed",
                extra={"error": result.error_message},
            )
        return result
