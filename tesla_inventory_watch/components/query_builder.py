"""Builds the inventory search request URL."""

import json
from urllib.parse import urlencode

from ..models.config import INVENTORY_API_URL, SearchQuery


class QueryBuilder:
    """Encodes a SearchQuery into the inventory API URL."""

    def __init__(self, search: SearchQuery, api_url: str = INVENTORY_API_URL):
        self.search = search
        self.api_url = api_url

    def build_params(self) -> dict:
        """Return the flat query-string parameters.

        The structured filter object travels as compact JSON text inside
        the single ``query`` parameter; pagination and the outside-search
        flags are flat key/value pairs.
        """
        return {
            "query": json.dumps(self.search.to_query_object(), separators=(",", ":")),
            "offset": str(self.search.offset),
            "count": str(self.search.count),
            "outsideSearch": "true" if self.search.outside_search else "false",
            "outsideOffset": str(self.search.outside_offset),
        }

    def build_url(self) -> str:
        """Return the fully encoded inventory API URL."""
        return f"{self.api_url}?{urlencode(self.build_params())}"
