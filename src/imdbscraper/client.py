"""Cookie-authenticated IMDb client."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from imdbscraper.config import ScraperConfig
from imdbscraper.errors import (
    AuthorizationError,
    ImdbError,
    ListNotFoundError,
    TransportError,
    UnexpectedStatusError,
)
from imdbscraper.export import decode_list_export, decode_ratings_export
from imdbscraper.models import ImdbItem, ImdbList, RequestFields
from imdbscraper.parser import SoupQuery, find_list_ids, scrape_attribute
from imdbscraper.session import (
    SessionCredentials,
    SessionTokens,
    build_cookies,
)

if TYPE_CHECKING:
    from imdbscraper.settings import AppSettings

logger = logging.getLogger(__name__)

CLIENT_NAME = "imdb"


class Outcome(enum.Enum):
    """Classification of a response status."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    AUTH_FAILURE = "auth_failure"
    UNEXPECTED = "unexpected"


def classify_status(status_code: int) -> Outcome:
    """Map an HTTP status code to an Outcome."""
    if status_code == httpx.codes.OK:
        return Outcome.SUCCESS
    if status_code == httpx.codes.NOT_FOUND:
        return Outcome.NOT_FOUND
    if status_code == httpx.codes.FORBIDDEN:
        return Outcome.AUTH_FAILURE
    return Outcome.UNEXPECTED


@dataclass(frozen=True)
class TransportResult:
    """A response together with its classified outcome."""

    outcome: Outcome
    response: httpx.Response


class ImdbClient:
    """Scrapes lists and ratings for the account behind a cookie pair.

    Ids missing from the credentials are filled in by ``hydrate``.
    Use ``create_client`` to get a hydrated instance.
    """

    def __init__(
        self,
        credentials: SessionCredentials,
        config: ScraperConfig | None = None,
    ) -> None:
        if config is None:
            config = ScraperConfig()
        self.config = config
        self.credentials = credentials
        self._client = httpx.Client(
            base_url=config.base_url,
            cookies=build_cookies(
                credentials.tokens,
                config.base_url,
                config,
            ),
            headers={"User-Agent": config.user_agent},
            timeout=config.timeout,
            follow_redirects=True,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ImdbClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # Transport

    def _fields(self, path: str) -> RequestFields:
        return RequestFields.get(self.config.base_url, path)

    def send(self, fields: RequestFields) -> TransportResult:
        """Send a request and classify the response without raising.

        Raises:
            TransportError: If no response was received.
        """
        logger.debug("%s %s", fields.method, fields.url)
        try:
            response = self._client.request(
                fields.method,
                fields.url,
                content=fields.body,
            )
        except httpx.HTTPError as exc:
            raise TransportError(fields.method, fields.url, str(exc)) from exc
        return TransportResult(classify_status(response.status_code), response)

    def execute(self, fields: RequestFields) -> TransportResult:
        """Send a request, raising on authorization or unexpected status.

        Not-found responses are returned for the caller to handle.

        Raises:
            AuthorizationError: On HTTP 403.
            UnexpectedStatusError: On any status but 200, 403, 404.
            TransportError: If no response was received.
        """
        result = self.send(fields)
        if result.outcome is Outcome.AUTH_FAILURE:
            raise AuthorizationError(
                client_name=CLIENT_NAME,
                method=fields.method,
                url=fields.url,
                status_code=result.response.status_code,
                details=(
                    "imdb authorization failure - "
                    "update the imdb cookie values"
                ),
            )
        if result.outcome is Outcome.UNEXPECTED:
            status = result.response.status_code
            raise UnexpectedStatusError(
                client_name=CLIENT_NAME,
                method=fields.method,
                url=fields.url,
                status_code=status,
                details=f"unexpected status code {status}",
            )
        return result

    # Identity

    def resolve_user_id(self) -> str:
        """Scrape the account id from the profile page.

        Raises:
            ScrapeNotFoundError: If the page lacks the user id.
        """
        result = self.execute(self._fields(self.config.path_profile))
        user_id = scrape_attribute(
            SoupQuery(result.response.text),
            self.config.user_id_selector,
            self.config.user_id_attribute,
        )
        with self.credentials.lock:
            self.credentials.user_id = user_id
        logger.info("Resolved imdb user id %s", user_id)
        return user_id

    def resolve_watchlist_id(self) -> str:
        """Scrape the watchlist id from the watchlist page.

        Raises:
            ScrapeNotFoundError: If the page lacks the page id.
        """
        result = self.execute(self._fields(self.config.path_watchlist))
        watchlist_id = scrape_attribute(
            SoupQuery(result.response.text),
            self.config.watchlist_id_selector,
            self.config.watchlist_id_attribute,
        )
        with self.credentials.lock:
            self.credentials.watchlist_id = watchlist_id
        logger.info("Resolved imdb watchlist id %s", watchlist_id)
        return watchlist_id

    def hydrate(self) -> None:
        """Fill in the ids the other operations depend on.

        The user id is scraped only when it was not configured.
        The watchlist id is always scraped.
        """
        if self.credentials.needs_user_id:
            try:
                self.resolve_user_id()
            except ImdbError:
                logger.error("Failure scraping imdb user id")
                raise
        try:
            self.resolve_watchlist_id()
        except ImdbError:
            logger.error("Failure scraping imdb watchlist id")
            raise

    # Lists

    def fetch_list(self, list_id: str) -> ImdbList:
        """Fetch and decode the CSV export of one list.

        Raises:
            ListNotFoundError: If IMDb has no list with this id.
            DecodeError: If the export cannot be decoded.
        """
        fields = self._fields(
            self.config.path_list_export.format(list_id=list_id),
        )
        result = self.execute(fields)
        if result.outcome is Outcome.NOT_FOUND:
            raise ListNotFoundError(
                list_id,
                client_name=CLIENT_NAME,
                method=fields.method,
                url=fields.url,
                status_code=result.response.status_code,
            )
        imdb_list = decode_list_export(
            result.response.text,
            result.response.headers.get("Content-Disposition"),
            list_id,
        )
        logger.debug(
            "Fetched list %s (%s) with %d items",
            list_id,
            imdb_list.list_name,
            len(imdb_list.items),
        )
        return imdb_list

    def fetch_watchlist(self) -> ImdbList:
        """Fetch the watchlist, flagged as such."""
        imdb_list = self.fetch_list(self.credentials.watchlist_id)
        imdb_list.is_watchlist = True
        return imdb_list

    def fetch_all_lists(self) -> list[ImdbList]:
        """Fetch every custom list on the account.

        Lists that fail to load are logged and left out. Lists are
        fetched one at a time in page order.

        Raises:
            AuthorizationError: If any request is rejected. No partial
                result is returned.
        """
        fields = self._fields(
            self.config.path_lists.format(user_id=self.credentials.user_id),
        )
        result = self.execute(fields)
        list_ids = find_list_ids(
            SoupQuery(result.response.text),
            self.config.user_list_selector,
            self.config.user_list_attribute,
        )
        if not list_ids:
            logger.info("Found no imdb lists")
            return []

        lists: list[ImdbList] = []
        for list_id in list_ids:
            try:
                lists.append(self.fetch_list(list_id))
            except AuthorizationError:
                raise
            except ImdbError:
                logger.error(
                    "Unexpected error while scraping imdb list %s",
                    list_id,
                    exc_info=True,
                )
        logger.info(
            "Fetched %d of %d imdb lists",
            len(lists),
            len(list_ids),
        )
        return lists

    # Ratings

    def fetch_ratings(self) -> list[ImdbItem]:
        """Fetch and decode the ratings export.

        Raises:
            DecodeError: If any row has a bad rating or date.
        """
        fields = self._fields(
            self.config.path_ratings_export.format(
                user_id=self.credentials.user_id,
            ),
        )
        result = self.execute(fields)
        ratings = decode_ratings_export(result.response.text)
        logger.info("Fetched %d imdb ratings", len(ratings))
        return ratings


def create_client(
    settings: AppSettings,
    config: ScraperConfig | None = None,
) -> ImdbClient:
    """Create a client for the configured cookies and hydrate it.

    Args:
        settings: Application settings with cookies and ids.
        config: Scraper configuration. Uses defaults if None.

    Returns:
        ImdbClient with user and watchlist ids resolved.

    Raises:
        SettingsError: If a cookie is not configured.
        ImdbError: If an id cannot be resolved.
    """
    settings.require_cookies()
    if config is None:
        config = ScraperConfig(timeout=settings.timeout)
    credentials = SessionCredentials(
        tokens=SessionTokens(
            at_main=settings.cookie_at_main,
            ubid_main=settings.cookie_ubid_main,
        ),
        user_id=settings.user_id,
        watchlist_id=settings.watchlist_id,
    )
    client = ImdbClient(credentials, config)
    try:
        client.hydrate()
    except Exception:
        client.close()
        raise
    return client
