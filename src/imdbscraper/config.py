"""Configuration for imdbscraper."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScraperConfig:
    """All configurable values for the IMDb client.

    Timeout values are in seconds.
    """

    # Site
    base_url: str = "https://www.imdb.com"
    user_agent: str = "imdbscraper/0.1.0"
    timeout: float = 30.0

    # Session cookies
    cookie_at_main: str = "at-main"
    cookie_ubid_main: str = "ubid-main"

    # Paths
    path_profile: str = "/profile"
    path_watchlist: str = "/watchlist"
    path_lists: str = "/user/{user_id}/lists"
    path_list_export: str = "/list/{list_id}/export"
    path_ratings_export: str = "/user/{user_id}/ratings/export"

    # CSS selectors and attributes
    user_id_selector: str = ".user-profile.userId"
    user_id_attribute: str = "data-userid"
    watchlist_id_selector: str = "meta[property='pageId']"
    watchlist_id_attribute: str = "content"
    user_list_selector: str = ".user-list"
    user_list_attribute: str = "id"
