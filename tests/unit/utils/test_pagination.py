"""Tests for pagination normalization."""

import pytest
from pydantic import ValidationError

from mcp_jira.utils.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PaginationType,
    ResponsePagination,
    clamp_page_size,
    extract_pagination_info,
    parse_start_at,
)


class TestOffsetPagination:
    """Tests for startAt/maxResults/total envelopes."""

    def test_more_results_available(self):
        data = {"startAt": 0, "maxResults": 25, "total": 100, "issues": [{}] * 25}

        result = extract_pagination_info(data, PaginationType.OFFSET)

        assert result == ResponsePagination(
            count=25, has_more=True, next_cursor="25", total=100
        )

    def test_last_page(self):
        data = {"startAt": 75, "maxResults": 25, "total": 100, "values": [{}] * 25}

        result = extract_pagination_info(data, PaginationType.OFFSET)

        assert result.has_more is False
        assert result.next_cursor is None
        assert result.count == 25
        assert result.total == 100

    def test_item_keys_checked_in_order(self):
        data = {"values": [1, 2], "issues": [1], "comments": []}
        assert extract_pagination_info(data, PaginationType.OFFSET).count == 2

        data = {"comments": [1, 2, 3], "startAt": 0}
        assert extract_pagination_info(data, PaginationType.OFFSET).count == 3

    def test_count_unknown_without_items(self):
        result = extract_pagination_info({"startAt": 0}, PaginationType.OFFSET)
        assert result.count is None
        assert result.has_more is False

    def test_next_page_link(self):
        data = {
            "values": [{}],
            "nextPage": "https://test.atlassian.net/rest/api/3/project/search?startAt=50",
        }

        result = extract_pagination_info(data, PaginationType.OFFSET)

        assert result.has_more is True
        assert result.next_cursor == data["nextPage"]

    def test_empty_page_with_zero_total(self):
        data = {"startAt": 0, "maxResults": 25, "total": 0, "issues": []}

        result = extract_pagination_info(data, PaginationType.OFFSET)

        assert result == ResponsePagination(count=0, has_more=False, total=0)


class TestCursorPagination:
    """Tests for _links.next cursor envelopes."""

    def test_cursor_is_decoded(self):
        data = {
            "results": [{}, {}],
            "_links": {"next": "/wiki/api/v2/pages?cursor=abc%3D%3D&limit=2"},
        }

        result = extract_pagination_info(data, PaginationType.CURSOR)

        assert result.count == 2
        assert result.has_more is True
        assert result.next_cursor == "abc=="

    def test_no_next_link(self):
        result = extract_pagination_info(
            {"results": [{}], "_links": {}}, PaginationType.CURSOR
        )
        assert result.has_more is False
        assert result.next_cursor is None

    def test_empty_cursor_value(self):
        data = {"results": [], "_links": {"next": "/pages?cursor=&limit=2"}}
        assert extract_pagination_info(data, PaginationType.CURSOR).has_more is False

    def test_malformed_cursor_encoding(self):
        data = {"results": [{}], "_links": {"next": "/x?cursor=%E0%A4%A"}}

        result = extract_pagination_info(data, PaginationType.CURSOR)

        assert result == ResponsePagination(has_more=False)


class TestPagePagination:
    """Tests for page-number envelopes."""

    def test_page_from_next_url(self):
        data = {"values": [{}], "next": "https://api.example.com/2.0/repos?pagelen=10&page=3"}

        result = extract_pagination_info(data, PaginationType.PAGE)

        assert result == ResponsePagination(count=1, has_more=True, next_cursor="3")

    def test_next_url_without_page(self):
        data = {"values": [{}], "next": "https://api.example.com/2.0/repos?pagelen=10"}
        assert extract_pagination_info(data, PaginationType.PAGE).has_more is False


class TestDegradedExtraction:
    """Extraction never fails the request."""

    @pytest.mark.parametrize("data", [None, {}, []])
    def test_empty_input(self, data):
        assert extract_pagination_info(data, PaginationType.OFFSET) == ResponsePagination()

    def test_malformed_input(self):
        result = extract_pagination_info(["not", "an", "object"], PaginationType.OFFSET)
        assert result.has_more is False

    def test_mistyped_values(self):
        data = {"startAt": "0", "maxResults": 25, "total": 100, "issues": []}
        assert extract_pagination_info(data, PaginationType.OFFSET).has_more is False

    def test_unknown_type(self):
        result = extract_pagination_info({"values": []}, "bogus", source="test")
        assert result.has_more is False


def test_pagination_is_immutable():
    pagination = ResponsePagination(count=1)
    with pytest.raises(ValidationError):
        pagination.count = 2


class TestPageSizeHelpers:
    """Tests for page size and cursor helpers."""

    @pytest.mark.parametrize(
        ("limit", "expected"),
        [
            (None, DEFAULT_PAGE_SIZE),
            (0, 1),
            (-5, 1),
            (50, 50),
            (500, MAX_PAGE_SIZE),
        ],
    )
    def test_clamp_page_size(self, limit, expected):
        assert clamp_page_size(limit) == expected

    @pytest.mark.parametrize(
        ("cursor", "expected"),
        [(None, 0), ("", 0), ("25", 25), (50, 50), ("-3", 0)],
    )
    def test_parse_start_at(self, cursor, expected):
        assert parse_start_at(cursor) == expected

    def test_parse_start_at_rejects_non_numeric(self):
        with pytest.raises(ValueError, match="Invalid cursor 'abc'"):
            parse_start_at("abc")
