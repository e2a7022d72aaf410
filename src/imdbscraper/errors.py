"""Exception hierarchy for IMDb scraping."""

from __future__ import annotations


class ImdbError(Exception):
    """Base class for all imdbscraper failures."""


class SessionError(ImdbError):
    """Raised when the session cookies cannot be bound to the origin."""


class TransportError(ImdbError):
    """Raised when a request cannot be sent or no response arrives."""

    def __init__(self, method: str, url: str, reason: str) -> None:
        self.method = method
        self.url = url
        super().__init__(
            f"failure sending http request {method} {url}: {reason}"
        )


class ApiError(ImdbError):
    """A request completed with a status the caller cannot use."""

    def __init__(
        self,
        *,
        client_name: str,
        method: str,
        url: str,
        status_code: int,
        details: str,
    ) -> None:
        self.client_name = client_name
        self.method = method
        self.url = url
        self.status_code = status_code
        self.details = details
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"{self.client_name} api error: {self.method} {self.url} "
            f"returned status {self.status_code}: {self.details}"
        )


class AuthorizationError(ApiError):
    """Session cookies were rejected (HTTP 403)."""


class UnexpectedStatusError(ApiError):
    """Any status other than 200, 403 or 404."""


class ListNotFoundError(ApiError):
    """The requested list does not exist."""

    def __init__(
        self,
        list_id: str,
        *,
        client_name: str,
        method: str,
        url: str,
        status_code: int,
    ) -> None:
        self.list_id = list_id
        super().__init__(
            client_name=client_name,
            method=method,
            url=url,
            status_code=status_code,
            details=f"list with id {list_id} could not be found",
        )


class ScrapeNotFoundError(ImdbError):
    """An expected HTML element or attribute is missing."""

    def __init__(self, selector: str, attribute: str) -> None:
        self.selector = selector
        self.attribute = attribute
        super().__init__(
            f"no element matching {selector!r} with attribute {attribute!r}"
        )


class DecodeError(ImdbError):
    """An export response could not be decoded."""
