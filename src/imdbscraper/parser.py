"""Pure HTML scraping functions for IMDb pages."""

from __future__ import annotations

from typing import Protocol, TypeVar

from bs4 import BeautifulSoup, Tag

from imdbscraper.errors import ScrapeNotFoundError

E = TypeVar("E")


class HtmlQuery(Protocol[E]):
    """The two DOM operations the scrapers rely on."""

    def find(self, selector: str) -> list[E]: ...

    def attribute(self, element: E, name: str) -> str | None: ...


class SoupQuery:
    """HtmlQuery backed by BeautifulSoup with the lxml parser."""

    def __init__(self, html: str) -> None:
        self._soup = BeautifulSoup(html or "", "lxml")

    def find(self, selector: str) -> list[Tag]:
        return self._soup.select(selector)

    def attribute(self, element: Tag, name: str) -> str | None:
        value = element.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            # multi-valued attributes such as class
            return " ".join(value)
        return str(value)


def scrape_attribute(
    query: HtmlQuery[E],
    selector: str,
    attribute: str,
) -> str:
    """Read an attribute from the first element matching selector.

    Args:
        query: Parsed document.
        selector: CSS selector of the element.
        attribute: Attribute name to read.

    Returns:
        The attribute value.

    Raises:
        ScrapeNotFoundError: If no element matches or it lacks
            the attribute.
    """
    elements = query.find(selector)
    if not elements:
        raise ScrapeNotFoundError(selector, attribute)
    value = query.attribute(elements[0], attribute)
    if not value:
        raise ScrapeNotFoundError(selector, attribute)
    return value


def find_list_ids(
    query: HtmlQuery[E],
    selector: str = ".user-list",
    attribute: str = "id",
) -> list[str]:
    """Collect list ids from the lists overview page.

    Elements without the attribute are skipped. Order follows
    the document.

    Args:
        query: Parsed lists overview page.
        selector: CSS selector of one list entry.
        attribute: Attribute holding the list id.

    Returns:
        List ids, possibly empty.
    """
    ids: list[str] = []
    for element in query.find(selector):
        list_id = query.attribute(element, attribute)
        if list_id:
            ids.append(list_id)
    return ids
