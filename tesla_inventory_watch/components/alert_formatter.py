"""
Alert formatting component for the Tesla Inventory Watch.

This module turns a matching listing into the three-line chat message:
a title line, a price/range/mileage line and the detail-page link.
"""

import math
from typing import Optional

from ..interfaces import IListingExtractor
from ..models.alert import FormattedAlert
from ..models.listing import Match
from .listing_extractor import ListingExtractor

VEHICLE_ICON = "🚗"
BULLET = " • "
EURO_SUFFIX = "\u00a0€"
DISTANCE_UNIT = "km"

RANGE_LABELS = {
    "de": "Reichweite",
    "en": "Range",
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding up."""
    return int(math.floor(value + 0.5))


def format_eur(amount) -> str:
    """
    Format an amount as a German euro string ("25.000,00 €").

    The euro sign follows a non-breaking space, as in the de-DE locale.
    Falls back to "<amount> €" when the amount cannot be formatted.
    """
    try:
        grouped = f"{float(amount):,.2f}"
    except (TypeError, ValueError):
        return f"{amount} €"

    # swap the en-US separators for de-DE ones
    localized = grouped.replace(",", "\0").replace(".", ",").replace("\0", ".")
    return f"{localized}{EURO_SUFFIX}"


class AlertFormatter:
    """Formats matches into chat messages."""

    def __init__(
        self,
        vehicle_name: str = "Tesla Model 3",
        language: str = "de",
        extractor: Optional[IListingExtractor] = None,
    ):
        """
        Initialize the alert formatter.

        Args:
            vehicle_name: Fixed model name used in the title line
            language: Language of the range label ("de" or "en")
            extractor: Extractor used for year, trim, mileage and link
        """
        self.vehicle_name = vehicle_name
        self.range_label = RANGE_LABELS.get(language, RANGE_LABELS["en"])
        self.extractor: IListingExtractor = extractor or ListingExtractor()

    def format_alert(self, match: Match) -> FormattedAlert:
        """
        Format a match into an alert message.

        Args:
            match: The matching record with its extracted price and range

        Returns:
            FormattedAlert: Formatted alert ready for delivery
        """
        listing = self.extractor.extract(match.record)

        title = self._create_title(listing.year, listing.trim)
        details = self._create_details_line(
            match.price, match.range_km, listing.odometer_km
        )

        alert = FormattedAlert(
            title=title,
            message="\n".join([title, details, listing.url]),
        )
        alert.validate()
        return alert

    def _create_title(self, year: str, trim: str) -> str:
        """Create the icon-prefixed title line."""
        year_prefix = f"{year} " if year else ""
        return f"{VEHICLE_ICON} {year_prefix}{self.vehicle_name} {trim}".strip()

    def _create_details_line(
        self, price: float, range_km: float, odometer_km: Optional[float]
    ) -> str:
        """Create the price, range and optional mileage line."""
        line = (
            f"{format_eur(price)}{BULLET}"
            f"{self.range_label} ~{round_half_up(range_km)} {DISTANCE_UNIT}"
        )

        # a zero reading carries no information
        if odometer_km:
            line += f"{BULLET}{round_half_up(odometer_km)} {DISTANCE_UNIT}"

        return line
