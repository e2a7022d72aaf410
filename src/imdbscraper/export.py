"""Decoding of IMDb CSV exports.

Column positions are fixed by the export format. Each one is read
through a named accessor so a format change is a one-line edit.
"""

from __future__ import annotations

import csv
import io
import re
from datetime import date, datetime
from email.message import Message

from imdbscraper.errors import DecodeError
from imdbscraper.models import ImdbItem, ImdbList, normalize_slug

RATING_DATE_FORMAT = "%Y-%m-%d"

_RATING_RE = re.compile(r"[+-]?[0-9]+")
_RATING_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# Lone carriage returns are field data, not row ends.
_LONE_CR_RE = re.compile(r"\r(?!\n)")
_CR_PLACEHOLDER = "\ue000"


def _column(row: list[str], index: int, name: str) -> str:
    try:
        return row[index]
    except IndexError:
        raise DecodeError(
            f"row has {len(row)} fields, missing {name} column {index}"
        ) from None


# List export: Position, Const, Created, Modified, Description,
# Title, URL, Title Type, ...
def list_item_id(row: list[str]) -> str:
    return _column(row, 1, "item id")


def list_title_type(row: list[str]) -> str:
    return _column(row, 7, "title type")


# Ratings export: Const, Your Rating, Date Rated, Title, URL,
# Title Type, ...
def rating_item_id(row: list[str]) -> str:
    return _column(row, 0, "item id")


def rating_title_type(row: list[str]) -> str:
    return _column(row, 5, "title type")


def rating_value(row: list[str]) -> int:
    raw = _column(row, 1, "rating")
    if not _RATING_RE.fullmatch(raw):
        raise DecodeError(
            f"failure parsing imdb rating value {raw!r} to integer"
        )
    return int(raw)


def rating_date(row: list[str]) -> date:
    raw = _column(row, 2, "rating date")
    if not _RATING_DATE_RE.fullmatch(raw):
        raise DecodeError(f"failure parsing imdb rating date {raw!r}")
    try:
        return datetime.strptime(raw, RATING_DATE_FORMAT).date()
    except ValueError as exc:
        raise DecodeError(
            f"failure parsing imdb rating date {raw!r}"
        ) from exc


def read_rows(text: str) -> list[list[str]]:
    """Read CSV text into data rows, skipping the header.

    Quoting is lenient and rows may have any number of fields.
    Blank lines are ignored and a lone carriage return is kept as
    part of its field.

    Raises:
        DecodeError: If the csv module rejects the input.
    """
    text = _LONE_CR_RE.sub(_CR_PLACEHOLDER, text.lstrip("\ufeff"))
    reader = csv.reader(io.StringIO(text))
    try:
        rows = [
            [field.replace(_CR_PLACEHOLDER, "\r") for field in row]
            for row in reader
            if row
        ]
    except csv.Error as exc:
        raise DecodeError(f"failure reading from imdb response: {exc}") from exc
    return rows[1:]


def list_name_from_disposition(header: str | None) -> str:
    """Extract the list name from a Content-Disposition header.

    The name is the ``filename`` parameter up to its first dot.

    Raises:
        DecodeError: If the header or its filename is missing.
    """
    if not header:
        raise DecodeError(
            "failure reading header Content-Disposition from imdb response"
        )
    msg = Message()
    msg["Content-Disposition"] = header
    filename = msg.get_filename()
    if not filename:
        raise DecodeError(
            "failure parsing filename from imdb header "
            f"Content-Disposition: {header!r}"
        )
    return filename.split(".", 1)[0]


def decode_list_export(
    text: str,
    content_disposition: str | None,
    list_id: str,
) -> ImdbList:
    """Decode a list export response.

    Args:
        text: CSV body.
        content_disposition: Value of the Content-Disposition header.
        list_id: Id the export was requested for.

    Returns:
        ImdbList with items in export order.

    Raises:
        DecodeError: On malformed CSV or a missing filename.
    """
    items = [
        ImdbItem(id=list_item_id(row), title_type=list_title_type(row))
        for row in read_rows(text)
    ]
    list_name = list_name_from_disposition(content_disposition)
    return ImdbList(
        list_id=list_id,
        list_name=list_name,
        trakt_list_slug=normalize_slug(list_name),
        items=items,
    )


def decode_ratings_export(text: str) -> list[ImdbItem]:
    """Decode a ratings export response.

    Any bad rating or date fails the whole export.

    Raises:
        DecodeError: On malformed CSV, rating or date.
    """
    return [
        ImdbItem(
            id=rating_item_id(row),
            title_type=rating_title_type(row),
            rating=rating_value(row),
            rating_date=rating_date(row),
        )
        for row in read_rows(text)
    ]
