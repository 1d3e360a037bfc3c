from __future__ import annotations

import math

import pytest

from jobboard.services.pagination import DEFAULT_LIMIT, Pagination, parse_int


@pytest.mark.parametrize(
    ("page", "limit", "expected"),
    [
        (None, None, (1, 10)),
        (0, 10, (1, 10)),
        (-3, 10, (1, 10)),
        (2, 0, (2, DEFAULT_LIMIT)),
        (2, -5, (2, DEFAULT_LIMIT)),
        (2, 101, (2, DEFAULT_LIMIT)),
        (3, 100, (3, 100)),
        (1, 1, (1, 1)),
    ],
)
def test_normalize_clamps_untrusted_values(page, limit, expected) -> None:
    p = Pagination.normalize(page, limit)
    assert (p.page, p.limit) == expected


def test_skip_is_offset_of_first_row() -> None:
    assert Pagination.normalize(1, 10).skip == 0
    assert Pagination.normalize(3, 25).skip == 50


@pytest.mark.parametrize("total", [0, 1, 9, 10, 11, 99, 100, 101, 1000])
@pytest.mark.parametrize("limit", [1, 3, 10, 100])
def test_total_pages_is_ceiling(total: int, limit: int) -> None:
    p = Pagination.normalize(1, limit)
    assert p.total_pages(total) == math.ceil(total / limit)


@pytest.mark.parametrize(
    ("page", "limit", "total", "has_more"),
    [
        (1, 10, 0, False),
        (1, 10, 10, False),
        (1, 10, 11, True),
        (2, 10, 11, False),
        (2, 5, 11, True),
        (5, 1, 4, False),
    ],
)
def test_has_more(page: int, limit: int, total: int, has_more: bool) -> None:
    assert Pagination.normalize(page, limit).has_more(total) is has_more


def test_meta_for_empty_result() -> None:
    assert Pagination.normalize(1, 10).meta(0) == {
        "page": 1,
        "limit": 10,
        "total": 0,
        "total_pages": 0,
        "has_more": False,
    }


@pytest.mark.parametrize(("raw", "expected"), [("3", 3), (" 7 ", 7), ("-2", -2), ("abc", None), ("", None), (None, None), ("1.5", None)])
def test_parse_int_is_lenient(raw, expected) -> None:
    assert parse_int(raw) == expected
