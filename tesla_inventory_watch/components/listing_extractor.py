"""
Listing field extraction for the Tesla Inventory Watch.

Inventory records have no stable schema: the same value shows up under
different key names (and sometimes nested under ``Spec``) depending on
the upstream source. Each logical field is therefore an ordered tuple of
accessor functions; the first accessor whose value coerces wins.
"""

import math
import re
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple

from ..models.config import REFERER_URL, SITE_ORIGIN
from ..models.listing import ExtractedListing, ListingRecord

Accessor = Callable[[Mapping[str, Any]], Any]

NON_NUMERIC_CHARS = re.compile(r"[^\d.]")
LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")
ABSOLUTE_URL = re.compile(r"^https?:")


def field(name: str) -> Accessor:
    """Accessor for a top-level key."""

    def accessor(record: Mapping[str, Any]) -> Any:
        return record.get(name)

    accessor.__name__ = f"field_{name}"
    return accessor


def path(*keys: str) -> Accessor:
    """Accessor for a nested key path, None as soon as a level is missing."""

    def accessor(record: Mapping[str, Any]) -> Any:
        value: Any = record
        for key in keys:
            if not isinstance(value, Mapping):
                return None
            value = value.get(key)
        return value

    accessor.__name__ = "path_" + "_".join(keys)
    return accessor


PRICE_ACCESSORS: Tuple[Accessor, ...] = (
    field("PurchasePrice"),
    field("Price"),
    field("TotalPrice"),
    field("TotalPriceAndFees"),
)

RANGE_ACCESSORS: Tuple[Accessor, ...] = (
    field("Range"),
    field("WLTPRange"),
    field("BatteryRange"),
    field("EUCombinedRange"),
    path("Spec", "Range"),
    path("Spec", "WLTPRange"),
    path("Spec", "EUCombinedRange"),
    path("Spec", "wltp_range"),
    path("Spec", "range"),
)

HREF_ACCESSORS: Tuple[Accessor, ...] = (
    field("PrcUrl"),
    field("PermaLink"),
    field("WebUrl"),
    field("permalink"),
)

VIN_ACCESSORS: Tuple[Accessor, ...] = (
    field("VIN"),
    field("Vin"),
    field("vin"),
    field("VehicleVin"),
)

YEAR_ACCESSORS: Tuple[Accessor, ...] = (field("Year"), field("year"))

TRIM_ACCESSORS: Tuple[Accessor, ...] = (
    field("TrimName"),
    field("Trim"),
    field("SpecName"),
)

ODOMETER_ACCESSORS: Tuple[Accessor, ...] = (
    field("Odometer"),
    field("Mileage"),
    field("Km"),
)

# Estimated WLTP range by trim, checked in order against the trim label
TRIM_RANGE_ESTIMATES: Tuple[Tuple[re.Pattern, float], ...] = (
    (re.compile(r"long\s*range|maximale\s+reichweite"), 620.0),
    (re.compile(r"performance"), 560.0),
    (re.compile(r"standard|rear[\s-]*wheel|hinterradantrieb|\brwd\b"), 490.0),
)


def number_from(value: Any) -> Optional[float]:
    """
    Coerce a loosely-typed value to a finite float.

    Numbers pass through; text keeps only digits and decimal points
    before parsing the leading number ("29.990 €" -> 29.99,
    "€ 25,000" -> 25000.0). Anything else yields None.
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        cleaned = NON_NUMERIC_CHARS.sub("", value)
        match = LEADING_NUMBER.match(cleaned)
        if not match:
            return None
        number = float(match.group(0))
    else:
        return None

    return number if math.isfinite(number) else None


def first_number(record: Mapping[str, Any], accessors: Sequence[Accessor]) -> Optional[float]:
    """Return the first accessor value that coerces to a number."""
    for accessor in accessors:
        number = number_from(accessor(record))
        if number is not None:
            return number
    return None


def first_present(record: Mapping[str, Any], accessors: Sequence[Accessor]) -> Any:
    """Return the first accessor value that is not None."""
    for accessor in accessors:
        value = accessor(record)
        if value is not None:
            return value
    return None


def first_truthy(record: Mapping[str, Any], accessors: Sequence[Accessor]) -> Any:
    """Return the first accessor value that is not empty."""
    for accessor in accessors:
        value = accessor(record)
        if value:
            return value
    return None


def extract_price(record: ListingRecord) -> Optional[float]:
    """Return the listing price, or None if no candidate field is usable."""
    return first_number(record, PRICE_ACCESSORS)


def extract_trim(record: ListingRecord) -> str:
    """Return the trim/spec label, or an empty string."""
    trim = first_truthy(record, TRIM_ACCESSORS)
    return str(trim) if trim else ""


def estimate_range_from_trim(trim: str) -> Optional[float]:
    """Estimate the range from the trim label when no range field exists."""
    label = trim.lower()
    for pattern, estimate in TRIM_RANGE_ESTIMATES:
        if pattern.search(label):
            return estimate
    return None


def extract_range_km(record: ListingRecord) -> Optional[float]:
    """Return the range in km, falling back to a trim-based estimate."""
    range_km = first_number(record, RANGE_ACCESSORS)
    if range_km is not None:
        return range_km
    return estimate_range_from_trim(extract_trim(record))


def extract_year(record: ListingRecord) -> str:
    """Return the model year as text, or an empty string."""
    year = first_truthy(record, YEAR_ACCESSORS)
    return str(year) if year else ""


def extract_odometer_km(record: ListingRecord) -> Optional[float]:
    """Return the odometer reading of the first present odometer field."""
    return number_from(first_present(record, ODOMETER_ACCESSORS))


def resolve_detail_url(
    record: ListingRecord,
    site_origin: str = SITE_ORIGIN,
    referer_url: str = REFERER_URL,
) -> str:
    """
    Resolve the detail-page URL of a listing.

    An href-like field wins; relative values are prefixed with the site
    origin unchanged. Without one, the referer page is linked with the
    VIN (or "result") as fragment.
    """
    href = first_truthy(record, HREF_ACCESSORS)
    if href:
        href = str(href)
        return href if ABSOLUTE_URL.match(href) else f"{site_origin}{href}"

    vin = first_truthy(record, VIN_ACCESSORS)
    return f"{referer_url}#{vin or 'result'}"


class ListingExtractor:
    """Derives typed fields from raw inventory records."""

    def __init__(self, site_origin: str = SITE_ORIGIN, referer_url: str = REFERER_URL):
        self.site_origin = site_origin
        self.referer_url = referer_url

    def extract(self, record: ListingRecord) -> ExtractedListing:
        """Extract price, range and display fields from a record."""
        return ExtractedListing(
            price=extract_price(record),
            range_km=extract_range_km(record),
            year=extract_year(record),
            trim=extract_trim(record),
            odometer_km=extract_odometer_km(record),
            url=self.resolve_url(record),
        )

    def resolve_url(self, record: ListingRecord) -> str:
        """Resolve the detail-page URL using this extractor's site settings."""
        return resolve_detail_url(record, self.site_origin, self.referer_url)
