"""
Protocol interfaces for the Tesla Inventory Watch.

This module defines the protocol interfaces that establish the
boundaries between pipeline stages and enable dependency injection
in the orchestrator and its tests.
"""

from typing import Iterable, List, Protocol

from .models.alert import FormattedAlert
from .models.delivery import DeliveryResult
from .models.filter import FilterResult
from .models.listing import ExtractedListing, ListingRecord, Match


class IQueryBuilder(Protocol):
    """Protocol for building the inventory search URL."""

    def build_url(self) -> str:
        """Return the fully encoded inventory API URL."""
        ...


class ISessionBootstrap(Protocol):
    """Protocol for harvesting session cookies before the API call."""

    def fetch_cookie(self) -> str:
        """Return a Cookie header value, or an empty string."""
        ...


class IInventoryFetcher(Protocol):
    """Protocol for fetching raw inventory records."""

    def fetch_results(self, url: str, cookie: str = "") -> List[ListingRecord]:
        """Fetch the result records for the given API URL."""
        ...


class IListingExtractor(Protocol):
    """Protocol for deriving typed fields from an inventory record."""

    def extract(self, record: ListingRecord) -> ExtractedListing:
        """Extract price, range and display fields from a record."""
        ...


class IFilterEngine(Protocol):
    """Protocol for filtering listings by price and range."""

    def apply_filters(self, listing: ExtractedListing) -> FilterResult:
        """Apply the price and range bounds to one listing."""
        ...

    def select_matches(self, records: Iterable[ListingRecord]) -> List[Match]:
        """Return the matching records in input order."""
        ...


class IAlertFormatter(Protocol):
    """Protocol for formatting matches into chat messages."""

    def format_alert(self, match: Match) -> FormattedAlert:
        """Format a match into an alert message."""
        ...


class IMessageDispatcher(Protocol):
    """Protocol for delivering messages to the chat bot."""

    def send_alert(self, alert: FormattedAlert) -> DeliveryResult:
        """Send a formatted alert."""
        ...

    def send_text(self, text: str) -> DeliveryResult:
        """Send a plain text message."""
        ...
