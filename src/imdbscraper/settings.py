"""Configuration loading from config.toml and env vars."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TIMEOUT = 30.0


class SettingsError(RuntimeError):
    """Raised when required settings are missing."""


def _default_config_path() -> Path:
    """Return the default config file path."""
    return Path.home() / ".config" / "imdbscraper" / "config.toml"


@dataclass(frozen=True)
class AppSettings:
    """Application-wide settings.

    Loaded from config.toml and overridden by env vars. A user id
    of "" or "scrape" means it is scraped from the profile page.
    """

    cookie_at_main: str = ""
    cookie_ubid_main: str = ""
    user_id: str = "scrape"
    watchlist_id: str = ""
    timeout: float = DEFAULT_TIMEOUT

    def require_cookies(self) -> None:
        """Ensure both session cookies are available."""
        if not self.cookie_at_main or not self.cookie_ubid_main:
            raise SettingsError(
                "IMDb cookies are required. Set cookie_at_main and "
                "cookie_ubid_main in config.toml or the "
                "IMDB_COOKIE_AT_MAIN and IMDB_COOKIE_UBID_MAIN env vars."
            )


def load_settings(
    config_path: Path | None = None,
) -> AppSettings:
    """Load settings from config file and env vars.

    Priority: env vars > config.toml > defaults.

    Args:
        config_path: Path to config.toml. Uses default
            (~/.config/imdbscraper/config.toml) if None.

    Returns:
        Frozen AppSettings instance.
    """
    if config_path is None:
        config_path = _default_config_path()

    file_cfg: dict[str, dict[str, object]] = {}
    if config_path.exists():
        with open(config_path, "rb") as f:
            file_cfg = tomllib.load(f)

    imdb_cfg = file_cfg.get("imdb", {})

    at_main = str(imdb_cfg.get("cookie_at_main", ""))
    ubid_main = str(imdb_cfg.get("cookie_ubid_main", ""))
    user_id = str(imdb_cfg.get("user_id", "scrape"))
    watchlist_id = str(imdb_cfg.get("watchlist_id", ""))

    at_main = os.environ.get("IMDB_COOKIE_AT_MAIN", at_main)
    ubid_main = os.environ.get("IMDB_COOKIE_UBID_MAIN", ubid_main)
    user_id = os.environ.get("IMDB_USER_ID", user_id)
    watchlist_id = os.environ.get("IMDB_WATCHLIST_ID", watchlist_id)

    timeout_raw = imdb_cfg.get("timeout", DEFAULT_TIMEOUT)
    timeout = (
        float(timeout_raw)
        if isinstance(timeout_raw, (int, float))
        else DEFAULT_TIMEOUT
    )

    return AppSettings(
        cookie_at_main=at_main,
        cookie_ubid_main=ubid_main,
        user_id=user_id,
        watchlist_id=watchlist_id,
        timeout=timeout,
    )
