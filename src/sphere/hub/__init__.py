"""Remote registry access."""

from .client import HTTPClient, HTTPResponse, UrllibHTTPClient
from .fetcher import HubFetcher, parse_hub_index

__all__ = ["HTTPClient", "HTTPResponse", "HubFetcher", "UrllibHTTPClient", "parse_hub_index"]
