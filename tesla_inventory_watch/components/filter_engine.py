"""Filter engine for applying price and range bounds to listings."""

import logging
from typing import Iterable, List, Optional

from ..interfaces import IListingExtractor
from ..models.config import DEFAULT_MAX_PRICE, DEFAULT_MIN_RANGE_KM
from ..models.filter import FilterResult
from ..models.listing import ExtractedListing, ListingRecord, Match
from .listing_extractor import ListingExtractor

logger = logging.getLogger(__name__)


class PriceFilter:
    """Handles price-based filtering logic."""

    def __init__(self, max_price: float = DEFAULT_MAX_PRICE):
        """Initialize price filter with maximum price threshold."""
        self.max_price = max_price

    def check_price_threshold(self, price: Optional[float]) -> bool:
        """Check that the price is known and strictly below the threshold."""
        return price is not None and price < self.max_price


class RangeFilter:
    """Handles range-based filtering logic."""

    def __init__(self, min_range_km: float = DEFAULT_MIN_RANGE_KM):
        """Initialize range filter with minimum range threshold."""
        self.min_range_km = min_range_km

    def check_range_threshold(self, range_km: Optional[float]) -> bool:
        """Check that the range is known and strictly above the threshold."""
        return range_km is not None and range_km > self.min_range_km


class FilterEngine:
    """Main filter engine that applies the price and range criteria."""

    def __init__(
        self,
        max_price: float = DEFAULT_MAX_PRICE,
        min_range_km: float = DEFAULT_MIN_RANGE_KM,
        extractor: Optional[IListingExtractor] = None,
    ):
        """Initialize filter engine with price and range thresholds."""
        self.extractor: IListingExtractor = extractor or ListingExtractor()
        self.max_price = max_price
        self.min_range_km = min_range_km
        self.price_filter = PriceFilter(max_price)
        self.range_filter = RangeFilter(min_range_km)

        logger.info(
            f"FilterEngine initialized with max_price={max_price}, "
            f"min_range_km={min_range_km}"
        )

    def check(self, price: Optional[float], range_km: Optional[float]) -> FilterResult:
        """Apply both bounds to an extracted price and range."""
        price_match = self.price_filter.check_price_threshold(price)
        range_match = self.range_filter.check_range_threshold(range_km)

        result = FilterResult(
            passes_filters=price_match and range_match,
            price_match=price_match,
            range_match=range_match,
        )
        result.validate()
        return result

    def apply_filters(self, listing: ExtractedListing) -> FilterResult:
        """Apply the price and range bounds to one extracted listing."""
        return self.check(listing.price, listing.range_km)

    def select_matches(self, records: Iterable[ListingRecord]) -> List[Match]:
        """
        Extract and filter every record.

        Records whose price or range cannot be extracted are skipped
        silently. Input order (price ascending upstream) is preserved.
        """
        matches = []
        for record in records:
            listing = self.extractor.extract(record)
            result = self.apply_filters(listing)
            logger.debug(
                f"Filter result for {listing.url}: passes={result.passes_filters} "
                f"(price: {listing.price}, range: {listing.range_km})"
            )

            if result.passes_filters:
                match = Match(record=record, price=listing.price, range_km=listing.range_km)
                match.validate(self.max_price, self.min_range_km)
                matches.append(match)

        logger.info(f"{len(matches)} listing(s) passed the filters")
        return matches
