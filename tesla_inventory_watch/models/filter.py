"""
Filter result models.
"""

from dataclasses import dataclass


@dataclass
class FilterResult:
    """Result of applying the price and range filter to a listing."""

    passes_filters: bool
    price_match: bool
    range_match: bool

    def validate(self) -> bool:
        """Validate filter result data."""
        if not isinstance(self.passes_filters, bool):
            raise ValueError("passes_filters must be a boolean")

        if not isinstance(self.price_match, bool):
            raise ValueError("price_match must be a boolean")

        if not isinstance(self.range_match, bool):
            raise ValueError("range_match must be a boolean")

        if self.passes_filters != (self.price_match and self.range_match):
            raise ValueError("passes_filters must equal price_match and range_match")

        return True
