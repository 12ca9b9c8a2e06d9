"""
Core components for the Tesla Inventory Watch.

This module contains the pipeline stages: query building, session
bootstrap, inventory fetching, field extraction, filtering, alert
formatting and message dispatching.
"""

from .alert_formatter import AlertFormatter
from .filter_engine import FilterEngine, PriceFilter, RangeFilter
from .inventory_fetcher import InventoryFetcher
from .listing_extractor import ListingExtractor
from .message_dispatcher import TelegramDispatcher
from .query_builder import QueryBuilder
from .session_bootstrap import SessionBootstrap

__all__ = [
    "QueryBuilder",
    "SessionBootstrap",
    "InventoryFetcher",
    "ListingExtractor",
    "FilterEngine",
    "PriceFilter",
    "RangeFilter",
    "AlertFormatter",
    "TelegramDispatcher",
]
