"""
Data models for the Tesla Inventory Watch.

This module contains the data classes used throughout the application
for configuration, extracted listings, filter results and deliveries.
"""

from .alert import FormattedAlert
from .config import Configuration, SearchQuery, TelegramConfig
from .delivery import DeliveryResult
from .filter import FilterResult
from .listing import ExtractedListing, ListingRecord, Match

__all__ = [
    "Configuration",
    "SearchQuery",
    "TelegramConfig",
    "ListingRecord",
    "ExtractedListing",
    "Match",
    "FilterResult",
    "FormattedAlert",
    "DeliveryResult",
]
