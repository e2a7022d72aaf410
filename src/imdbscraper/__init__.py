"""Scrape IMDb watchlist, lists and ratings with session cookies."""

from imdbscraper.client import (
    ImdbClient,
    Outcome,
    TransportResult,
    classify_status,
    create_client,
)
from imdbscraper.config import ScraperConfig
from imdbscraper.errors import (
    ApiError,
    AuthorizationError,
    DecodeError,
    ImdbError,
    ListNotFoundError,
    ScrapeNotFoundError,
    SessionError,
    TransportError,
    UnexpectedStatusError,
)
from imdbscraper.export import decode_list_export, decode_ratings_export
from imdbscraper.models import (
    ImdbItem,
    ImdbList,
    RequestFields,
    normalize_slug,
)
from imdbscraper.parser import (
    HtmlQuery,
    SoupQuery,
    find_list_ids,
    scrape_attribute,
)
from imdbscraper.session import (
    SessionCredentials,
    SessionTokens,
    build_cookies,
)
from imdbscraper.settings import AppSettings, SettingsError, load_settings

__all__ = [
    "ApiError",
    "AppSettings",
    "AuthorizationError",
    "DecodeError",
    "HtmlQuery",
    "ImdbClient",
    "ImdbError",
    "ImdbItem",
    "ImdbList",
    "ListNotFoundError",
    "Outcome",
    "RequestFields",
    "ScrapeNotFoundError",
    "ScraperConfig",
    "SessionCredentials",
    "SessionError",
    "SessionTokens",
    "SettingsError",
    "TransportError",
    "TransportResult",
    "UnexpectedStatusError",
    "build_cookies",
    "classify_status",
    "create_client",
    "decode_list_export",
    "decode_ratings_export",
    "find_list_ids",
    "load_settings",
    "normalize_slug",
    "scrape_attribute",
]
