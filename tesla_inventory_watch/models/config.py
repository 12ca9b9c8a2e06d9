"""
Configuration models for the system.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import urlparse

SITE_ORIGIN = "https://www.tesla.com"
INVENTORY_API_URL = f"{SITE_ORIGIN}/inventory/api/v4/inventory-results"
REFERER_URL = f"{SITE_ORIGIN}/de_DE/inventory/used/m3?arrangeby=plh&range=0"
TELEGRAM_API_URL = "https://api.telegram.org"

DEFAULT_MAX_PRICE = 29000
DEFAULT_MIN_RANGE_KM = 600
DEFAULT_NOTIFICATION_DELAY = 0.4


@dataclass
class SearchQuery:
    """Filter parameters for the used-inventory search."""

    model: str = "m3"
    condition: str = "used"
    options: Dict[str, Any] = field(default_factory=dict)
    arrangeby: str = "plh"  # price low -> high
    order: str = "asc"
    market: str = "DE"
    language: str = "de"
    super_region: str = "eu"
    zip: str = "10115"  # Berlin
    lat: float = 52.52
    lng: float = 13.405
    range: int = 0  # 0 = nationwide
    region: str = "DE"
    offset: int = 0
    count: int = 50
    outside_search: bool = False
    outside_offset: int = 0

    def to_query_object(self) -> Dict[str, Any]:
        """Return the structured filter object embedded in the query string."""
        return {
            "model": self.model,
            "condition": self.condition,
            "options": dict(self.options),
            "arrangeby": self.arrangeby,
            "order": self.order,
            "market": self.market,
            "language": self.language,
            "super_region": self.super_region,
            "zip": self.zip,
            "lat": self.lat,
            "lng": self.lng,
            "range": self.range,
            "region": self.region,
        }

    def validate(self) -> bool:
        """Validate search query parameters."""
        if not self.model or not self.model.strip():
            raise ValueError("Vehicle model code cannot be empty")

        if not self.market or not self.market.strip():
            raise ValueError("Market code cannot be empty")

        if self.offset < 0:
            raise ValueError("Offset cannot be negative")

        if not (0 < self.count <= 100):
            raise ValueError("Result count must be between 1 and 100")

        if self.range < 0:
            raise ValueError("Search range cannot be negative")

        return True


@dataclass
class TelegramConfig:
    """Credentials for the Telegram bot."""

    bot_token: str
    chat_id: str

    def validate(self) -> bool:
        """Validate Telegram credentials."""
        if not self.bot_token or not self.bot_token.strip():
            raise ValueError("Telegram bot token cannot be empty")

        if not self.chat_id or not str(self.chat_id).strip():
            raise ValueError("Telegram chat ID cannot be empty")

        return True


@dataclass
class Configuration:
    """System configuration."""

    telegram: TelegramConfig
    search: SearchQuery = field(default_factory=SearchQuery)
    max_price: float = DEFAULT_MAX_PRICE
    min_range_km: float = DEFAULT_MIN_RANGE_KM
    notification_delay: float = DEFAULT_NOTIFICATION_DELAY
    request_timeout: Optional[float] = None
    log_dir: Optional[str] = None
    vehicle_name: str = "Tesla Model 3"
    language: str = "de"
    api_url: str = INVENTORY_API_URL
    referer_url: str = REFERER_URL
    site_origin: str = SITE_ORIGIN

    def validate(self) -> bool:
        """Validate system configuration."""
        if self.max_price <= 0:
            raise ValueError("Maximum price must be positive")

        if self.min_range_km < 0:
            raise ValueError("Minimum range cannot be negative")

        if self.notification_delay < 0:
            raise ValueError("Notification delay cannot be negative")

        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ValueError("Request timeout must be positive when set")

        for name in ("api_url", "referer_url", "site_origin"):
            parsed_url = urlparse(getattr(self, name))
            if parsed_url.scheme not in ["http", "https"] or not parsed_url.netloc:
                raise ValueError(f"Invalid URL for {name}: {getattr(self, name)}")

        # Validate nested configurations
        self.telegram.validate()
        self.search.validate()

        return True
