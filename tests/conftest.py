"""
Pytest configuration and shared fixtures.

This module provides common fixtures for the Tesla Inventory Watch test
suite: sample inventory records, configuration, and mocked HTTP
responses for the requests session.
"""

from unittest.mock import Mock

import pytest

from tesla_inventory_watch.models.config import Configuration, TelegramConfig
from tesla_inventory_watch.models.listing import Match


def make_response(status_code=200, json_data=None, text="", set_cookies=None):
    """Build a mocked requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text
    response.json.return_value = json_data if json_data is not None else {}
    response.raw.headers.getlist.return_value = list(set_cookies or [])
    return response


@pytest.fixture
def response_factory():
    """Factory fixture for mocked HTTP responses."""
    return make_response


@pytest.fixture
def sample_record():
    """Create a qualifying inventory record."""
    return {
        "VIN": "5YJ3E7EB1LF000001",
        "Year": 2021,
        "TrimName": "Long Range Allradantrieb",
        "PurchasePrice": 25000,
        "WLTPRange": 650,
        "Odometer": 42123.6,
        "PrcUrl": "/de_DE/m3/order/5YJ3E7EB1LF000001",
    }


@pytest.fixture
def expensive_record():
    """Create a record priced above the threshold."""
    return {
        "VIN": "5YJ3E7EB1LF000002",
        "Year": 2023,
        "TrimName": "Performance",
        "PurchasePrice": 41990,
        "Range": 547,
    }


@pytest.fixture
def sample_match(sample_record):
    """Create a Match for the sample record."""
    return Match(record=sample_record, price=25000.0, range_km=650.0)


@pytest.fixture
def sample_configuration():
    """Create a sample Configuration for testing."""
    return Configuration(
        telegram=TelegramConfig(bot_token="123:test-token", chat_id="4242"),
        notification_delay=0.4,
    )


@pytest.fixture
def mock_session():
    """Create a mocked requests session."""
    session = Mock()
    session.post.return_value = make_response(200, {"ok": True})
    return session
