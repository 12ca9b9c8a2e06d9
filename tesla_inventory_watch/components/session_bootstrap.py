"""
Session bootstrap for the inventory API.

Loads the human-facing search page first so the inventory API sees a
request carrying the site's session cookies.
"""

import logging
from typing import List, Optional

import requests

from ..models.config import REFERER_URL

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)
ACCEPT_LANGUAGE = "de-DE,de;q=0.9,en;q=0.8"

PAGE_HEADERS = {
    "user-agent": USER_AGENT,
    "accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "accept-language": ACCEPT_LANGUAGE,
    "cache-control": "no-cache",
}


def cookie_header_from_set_cookies(set_cookies: List[str]) -> str:
    """Reduce Set-Cookie header values to a single Cookie header value.

    Attributes (``Path``, ``Expires``, ...) are dropped; only the leading
    ``name=value`` pair of each header is kept.
    """
    pairs = []
    for set_cookie in set_cookies:
        pair = set_cookie.split(";", 1)[0].strip()
        if pair:
            pairs.append(pair)
    return "; ".join(pairs)


class SessionBootstrap:
    """Harvests session cookies from the referer page."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        referer_url: str = REFERER_URL,
        timeout: Optional[float] = None,
    ):
        """
        Initialize session bootstrap.

        Args:
            session: HTTP session to use (a new one is created if omitted)
            referer_url: Human-facing search page URL
            timeout: Request timeout in seconds, None for no timeout
        """
        self.session = session or requests.Session()
        self.referer_url = referer_url
        self.timeout = timeout

    def fetch_cookie(self) -> str:
        """
        Load the referer page and return its cookies as a Cookie header.

        Returns:
            "name=value; name2=value2", or an empty string when the page
            set no cookies or the raw headers cannot be read.

        Raises:
            requests.RequestException: If the page cannot be reached
        """
        logger.debug(f"Fetching session cookies from {self.referer_url}")
        response = self.session.get(
            self.referer_url, headers=PAGE_HEADERS, timeout=self.timeout
        )

        set_cookies = self._get_set_cookie_headers(response)
        if set_cookies is None:
            logger.info("Set-Cookie headers unavailable, continuing without cookie")
            return ""

        cookie = cookie_header_from_set_cookies(set_cookies)
        logger.info(f"Harvested {len(set_cookies)} session cookie(s)")
        return cookie

    @staticmethod
    def _get_set_cookie_headers(response: requests.Response) -> Optional[List[str]]:
        """Return every Set-Cookie header, or None if they cannot be listed."""
        # requests folds repeated headers into one string; urllib3 keeps them apart
        raw_headers = getattr(getattr(response, "raw", None), "headers", None)
        getlist = getattr(raw_headers, "getlist", None)
        if not callable(getlist):
            return None
        return list(getlist("Set-Cookie"))
