"""
Inventory fetching for the Tesla Inventory Watch.

This module issues the inventory API request with browser-like headers
and turns the JSON response into a list of raw listing records.
"""

import logging
from typing import Dict, List, Optional

import requests

from ..models.config import REFERER_URL
from ..models.listing import ListingRecord
from ..utils.error_handling import BlockedAccessError, UpstreamError
from .session_bootstrap import ACCEPT_LANGUAGE, USER_AGENT

logger = logging.getLogger(__name__)

RESULT_KEYS = ("results", "Results")


class InventoryFetcher:
    """Fetches raw result records from the inventory API."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        referer_url: str = REFERER_URL,
        timeout: Optional[float] = None,
    ):
        """
        Initialize inventory fetcher.

        Args:
            session: HTTP session to use (a new one is created if omitted)
            referer_url: Referer page sent with the API request
            timeout: Request timeout in seconds, None for no timeout
        """
        self.session = session or requests.Session()
        self.referer_url = referer_url
        self.timeout = timeout

    def build_headers(self, cookie: str = "") -> Dict[str, str]:
        """Return the browser-like header set for the API request."""
        headers = {
            "user-agent": USER_AGENT,
            "accept": "application/json, text/plain, */*",
            "accept-language": ACCEPT_LANGUAGE,
            "cache-control": "no-cache",
            "referer": self.referer_url,
            "sec-fetch-dest": "empty",
            "sec-fetch-mode": "cors",
            "sec-fetch-site": "same-origin",
        }
        if cookie:
            headers["cookie"] = cookie
        return headers

    def fetch_results(self, url: str, cookie: str = "") -> List[ListingRecord]:
        """
        Fetch inventory results.

        Args:
            url: Fully encoded inventory API URL
            cookie: Optional Cookie header value from the session bootstrap

        Returns:
            List of raw listing records (empty if the response has none)

        Raises:
            BlockedAccessError: If the API answers HTTP 403
            UpstreamError: If the API answers any other non-success status
            ValueError: If the body is not valid JSON
        """
        logger.debug(f"Fetching inventory: {url}")
        response = self.session.get(
            url, headers=self.build_headers(cookie), timeout=self.timeout
        )

        if response.status_code == 403:
            raise BlockedAccessError(response.status_code, response.text)

        if not response.ok:
            raise UpstreamError(
                f"Inventory API HTTP {response.status_code}", response.status_code
            )

        data = response.json()
        results = self._extract_results(data)
        logger.info(f"Inventory API returned {len(results)} result(s)")
        return results

    @staticmethod
    def _extract_results(data) -> List[ListingRecord]:
        """Pick the result list from whichever key casing is present."""
        if not isinstance(data, dict):
            return []

        for key in RESULT_KEYS:
            results = data.get(key)
            if results:
                if not isinstance(results, list):
                    return []
                return [record for record in results if isinstance(record, dict)]

        return []
