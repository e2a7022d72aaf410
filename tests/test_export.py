"""Tests for CSV export decoding."""

from datetime import date

import pytest

from imdbscraper.errors import DecodeError
from imdbscraper.export import (
    decode_list_export,
    decode_ratings_export,
    list_name_from_disposition,
    read_rows,
)

LIST_HEADER = (
    "Position,Const,Created,Modified,Description,Title,URL,"
    "Title Type,IMDb Rating"
)

LIST_CSV = (
    f"{LIST_HEADER}\n"
    '1,tt0111161,2023-01-01,2023-01-01,,"The Shawshank Redemption",'
    "https://www.imdb.com/title/tt0111161/,movie,9.3\n"
    '2,tt0903747,2023-01-02,2023-01-02,,"Breaking Bad",'
    "https://www.imdb.com/title/tt0903747/,tvSeries,9.5\n"
)

RATINGS_HEADER = "Const,Your Rating,Date Rated,Title,URL,Title Type"

DISPOSITION = 'attachment; filename="My Watchlist.csv"'


class TestReadRows:
    def test_skips_header_and_blank_lines(self) -> None:
        rows = read_rows("a,b\n\n1,2\n\n3,4,5\n")
        assert rows == [["1", "2"], ["3", "4", "5"]]

    def test_strips_bom(self) -> None:
        rows = read_rows("\ufeffa,b\n1,2\n")
        assert rows == [["1", "2"]]

    def test_header_only(self) -> None:
        assert read_rows("a,b\n") == []

    def test_lenient_quotes(self) -> None:
        rows = read_rows('h\nsay "hi" there,x\n')
        assert rows == [['say "hi" there', "x"]]

    def test_lone_carriage_return_kept_in_field(self) -> None:
        rows = read_rows("a,b\nx\ry,z\n")
        assert rows == [["x\ry", "z"]]

    def test_crlf_line_endings(self) -> None:
        rows = read_rows("a,b\r\n1,2\r\n3,4\r\n")
        assert rows == [["1", "2"], ["3", "4"]]


class TestListNameFromDisposition:
    def test_quoted_filename(self) -> None:
        assert list_name_from_disposition(DISPOSITION) == "My Watchlist"

    def test_splits_on_first_dot(self) -> None:
        header = 'attachment; filename="Vol. 2 picks.csv"'
        assert list_name_from_disposition(header) == "Vol"

    def test_missing_header(self) -> None:
        with pytest.raises(DecodeError, match="Content-Disposition"):
            list_name_from_disposition(None)

    def test_missing_filename(self) -> None:
        with pytest.raises(DecodeError, match="filename"):
            list_name_from_disposition("attachment")


class TestDecodeListExport:
    def test_builds_list(self) -> None:
        imdb_list = decode_list_export(LIST_CSV, DISPOSITION, "ls001")
        assert imdb_list.list_id == "ls001"
        assert imdb_list.list_name == "My Watchlist"
        assert imdb_list.trakt_list_slug == "my-watchlist"
        assert imdb_list.is_watchlist is False
        assert len(imdb_list.items) == 2
        first, second = imdb_list.items
        assert (first.id, first.title_type) == ("tt0111161", "movie")
        assert (second.id, second.title_type) == ("tt0903747", "tvSeries")
        assert first.rating is None
        assert first.rating_date is None

    def test_empty_list(self) -> None:
        imdb_list = decode_list_export(LIST_HEADER + "\n", DISPOSITION, "ls1")
        assert imdb_list.items == []

    def test_short_row(self) -> None:
        csv_text = f"{LIST_HEADER}\n1,tt0111161,2023-01-01\n"
        with pytest.raises(DecodeError, match="title type"):
            decode_list_export(csv_text, DISPOSITION, "ls001")

    def test_missing_disposition(self) -> None:
        with pytest.raises(DecodeError):
            decode_list_export(LIST_CSV, None, "ls001")


class TestDecodeRatingsExport:
    def test_decodes_row(self) -> None:
        csv_text = f"{RATINGS_HEADER}\ntt0111161,9,2022-05-01,x,y,movie\n"
        (item,) = decode_ratings_export(csv_text)
        assert item.id == "tt0111161"
        assert item.rating == 9
        assert item.rating_date == date(2022, 5, 1)
        assert item.title_type == "movie"

    def test_every_item_has_rating_and_date(self) -> None:
        csv_text = (
            f"{RATINGS_HEADER}\n"
            "tt1,7,2021-01-01,A,u,movie\n"
            "tt2,10,2021-02-03,B,u,tvSeries\n"
        )
        items = decode_ratings_export(csv_text)
        assert [i.rating for i in items] == [7, 10]
        assert all(i.rating_date is not None for i in items)

    def test_bad_date_fails_whole_export(self) -> None:
        csv_text = (
            f"{RATINGS_HEADER}\n"
            "tt1,7,2021-01-01,A,u,movie\n"
            "tt2,8,01/05/2022,B,u,movie\n"
        )
        with pytest.raises(DecodeError, match="date"):
            decode_ratings_export(csv_text)

    def test_bad_rating(self) -> None:
        csv_text = f"{RATINGS_HEADER}\ntt1,nine,2021-01-01,A,u,movie\n"
        with pytest.raises(DecodeError, match="integer"):
            decode_ratings_export(csv_text)

    def test_missing_title_type(self) -> None:
        csv_text = f"{RATINGS_HEADER}\ntt1,7,2021-01-01\n"
        with pytest.raises(DecodeError):
            decode_ratings_export(csv_text)

    @pytest.mark.parametrize("raw", ["1_0", " 9", "9 ", "٩", "9.0", ""])
    def test_rejects_loose_rating(self, raw: str) -> None:
        csv_text = f"{RATINGS_HEADER}\ntt1,{raw},2021-01-01,A,u,movie\n"
        with pytest.raises(DecodeError, match="integer"):
            decode_ratings_export(csv_text)

    @pytest.mark.parametrize(
        "raw",
        ["2022-5-1", "2022-05-1", " 2022-05-01", "2022-05-01T00:00", "22-05-01"],
    )
    def test_rejects_loose_date(self, raw: str) -> None:
        csv_text = f"{RATINGS_HEADER}\ntt1,9,{raw},A,u,movie\n"
        with pytest.raises(DecodeError, match="date"):
            decode_ratings_export(csv_text)

    def test_signed_rating_accepted(self) -> None:
        csv_text = f"{RATINGS_HEADER}\ntt1,+7,2021-01-01,A,u,movie\n"
        (item,) = decode_ratings_export(csv_text)
        assert item.rating == 7
