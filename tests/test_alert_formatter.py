"""Unit tests for the AlertFormatter component."""

import pytest

from tesla_inventory_watch.components.alert_formatter import (
    AlertFormatter,
    format_eur,
    round_half_up,
)
from tesla_inventory_watch.models.config import REFERER_URL, SITE_ORIGIN
from tesla_inventory_watch.models.listing import Match


class TestFormatHelpers:
    """Test cases for the formatting helpers."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (25000, "25.000,00\u00a0€"),
            (28990.5, "28.990,50\u00a0€"),
            (999, "999,00\u00a0€"),
            (1234567.891, "1.234.567,89\u00a0€"),
        ],
    )
    def test_format_eur(self, amount, expected):
        """Test German currency formatting."""
        assert format_eur(amount) == expected

    def test_format_eur_uses_non_breaking_space(self):
        """Test the euro sign is separated by a non-breaking space."""
        formatted = format_eur(25000)

        assert formatted[-2] == "\u00a0"
        assert " " not in formatted

    def test_format_eur_fallback(self):
        """Test unformattable amounts fall back to a plain suffix."""
        assert format_eur("auf Anfrage") == "auf Anfrage €"

    @pytest.mark.parametrize(
        "value,expected", [(649.5, 650), (649.49, 649), (650, 650), (0.5, 1)]
    )
    def test_round_half_up(self, value, expected):
        """Test halves round up."""
        assert round_half_up(value) == expected


class TestAlertFormatter:
    """Test cases for AlertFormatter class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.formatter = AlertFormatter()

    def test_format_alert_three_lines(self, sample_match):
        """Test the message has title, details and link lines."""
        alert = self.formatter.format_alert(sample_match)

        lines = alert.message.split("\n")
        assert lines == [
            "🚗 2021 Tesla Model 3 Long Range Allradantrieb",
            "25.000,00\u00a0€ • Reichweite ~650 km • 42124 km",
            f"{SITE_ORIGIN}/de_DE/m3/order/5YJ3E7EB1LF000001",
        ]
        assert alert.title == lines[0]
        assert alert.validate() is True

    def test_title_without_year_or_trim(self):
        """Test the title is trimmed when year and trim are missing."""
        match = Match(record={}, price=24000.0, range_km=601.2)

        alert = self.formatter.format_alert(match)

        assert alert.title == "🚗 Tesla Model 3"
        assert alert.message.split("\n")[1] == "24.000,00\u00a0€ • Reichweite ~601 km"
        assert alert.message.split("\n")[2] == f"{REFERER_URL}#result"

    def test_odometer_omitted_when_zero_or_missing(self):
        """Test a zero or unusable odometer reading is left out."""
        zero = Match(record={"Odometer": 0}, price=20000.0, range_km=610.0)
        unusable = Match(record={"Mileage": "n/a"}, price=20000.0, range_km=610.0)

        for match in (zero, unusable):
            details = self.formatter.format_alert(match).message.split("\n")[1]
            assert details == "20.000,00\u00a0€ • Reichweite ~610 km"

    def test_english_range_label(self, sample_match):
        """Test the range label follows the configured language."""
        formatter = AlertFormatter(language="en")

        alert = formatter.format_alert(sample_match)

        assert "Range ~650 km" in alert.message

    def test_custom_vehicle_name(self):
        """Test the vehicle name in the title is configurable."""
        formatter = AlertFormatter(vehicle_name="Tesla Model Y")
        match = Match(record={"Year": 2022}, price=28000.0, range_km=620.0)

        assert formatter.format_alert(match).title == "🚗 2022 Tesla Model Y"
