"""Domain models for imdbscraper."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any

_NON_SLUG_CHARS = re.compile(r"[^-a-z0-9]+")


def normalize_slug(name: str) -> str:
    """Turn a free-text list name into a Trakt list slug.

    Lowercases, joins whitespace-separated words with hyphens and
    drops every character outside ``[a-z0-9-]``.

    Args:
        name: Human-readable list name.

    Returns:
        Slug string, possibly empty.
    """
    formatted = "-".join(name.lower().split())
    return _NON_SLUG_CHARS.sub("", formatted)


@dataclass(frozen=True)
class ImdbItem:
    """A title found in a list or ratings export."""

    id: str
    title_type: str
    rating: int | None = None
    rating_date: date | None = None

    def __post_init__(self) -> None:
        if (self.rating is None) != (self.rating_date is None):
            raise ValueError(
                "rating and rating_date must be set together"
            )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "id": self.id,
            "title_type": self.title_type,
            "rating": self.rating,
            "rating_date": (
                self.rating_date.isoformat() if self.rating_date else None
            ),
        }


@dataclass
class ImdbList:
    """A watchlist or custom list with its items."""

    list_id: str
    list_name: str
    trakt_list_slug: str
    items: list[ImdbItem] = field(default_factory=list)
    is_watchlist: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping."""
        return {
            "list_id": self.list_id,
            "list_name": self.list_name,
            "trakt_list_slug": self.trakt_list_slug,
            "is_watchlist": self.is_watchlist,
            "items": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class RequestFields:
    """Description of one outbound request."""

    method: str
    endpoint: str
    path: str
    url: str
    body: bytes | None = None

    @classmethod
    def get(cls, endpoint: str, path: str) -> RequestFields:
        """Describe a GET of ``path`` on ``endpoint``."""
        return cls(
            method="GET",
            endpoint=endpoint,
            path=path,
            url=endpoint.rstrip("/") + path,
        )
