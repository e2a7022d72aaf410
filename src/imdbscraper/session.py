"""Session cookies and the ids discovered for them."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from urllib.parse import urlparse

import httpx

from imdbscraper.config import ScraperConfig
from imdbscraper.errors import SessionError

SCRAPE_MARKER = "scrape"


@dataclass(frozen=True)
class SessionTokens:
    """Cookie values copied from a signed-in browser session."""

    at_main: str
    ubid_main: str

    def __repr__(self) -> str:
        return "SessionTokens(at_main=***, ubid_main=***)"


@dataclass
class SessionCredentials:
    """Tokens plus the account ids resolved for them.

    The ids start out as configured and are overwritten by the
    identity resolver. Hold ``lock`` while writing them.
    """

    tokens: SessionTokens
    user_id: str = ""
    watchlist_id: str = ""
    lock: threading.Lock = field(
        default_factory=threading.Lock,
        repr=False,
        compare=False,
    )

    @property
    def needs_user_id(self) -> bool:
        """True when the user id must be scraped from the profile."""
        return self.user_id in ("", SCRAPE_MARKER)


def build_cookies(
    tokens: SessionTokens,
    base_url: str,
    config: ScraperConfig,
) -> httpx.Cookies:
    """Create a cookie jar holding both tokens for the site origin.

    Args:
        tokens: Session cookie values.
        base_url: Origin the cookies are scoped to.
        config: Scraper configuration with cookie names.

    Returns:
        Cookie jar to hand to the HTTP client.

    Raises:
        SessionError: If base_url has no scheme or host.
    """
    try:
        parsed = urlparse(base_url)
    except ValueError as exc:
        raise SessionError(
            f"failure parsing {base_url} as url: {exc}"
        ) from exc
    if not parsed.scheme or not parsed.hostname:
        raise SessionError(f"failure parsing {base_url} as url")

    cookies = httpx.Cookies()
    cookies.set(
        config.cookie_at_main,
        tokens.at_main,
        domain=parsed.hostname,
        path="/",
    )
    cookies.set(
        config.cookie_ubid_main,
        tokens.ubid_main,
        domain=parsed.hostname,
        path="/",
    )
    return cookies
