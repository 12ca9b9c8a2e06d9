"""
Listing data models for the Tesla Inventory Watch.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# One inventory record as returned upstream; key names are not stable.
ListingRecord = Dict[str, Any]


@dataclass
class ExtractedListing:
    """Fields derived from a single inventory record."""

    price: Optional[float]
    range_km: Optional[float]
    year: str
    trim: str
    odometer_km: Optional[float]
    url: str


@dataclass
class Match:
    """A record that passed the price and range filter."""

    record: ListingRecord
    price: float
    range_km: float

    def validate(self, max_price: float, min_range_km: float) -> bool:
        """Validate that the match satisfies the filter bounds."""
        if not isinstance(self.record, dict):
            raise ValueError("record must be a dictionary")

        if not self.price < max_price:
            raise ValueError(f"Price {self.price} is not below {max_price}")

        if not self.range_km > min_range_km:
            raise ValueError(f"Range {self.range_km} is not above {min_range_km}")

        return True
