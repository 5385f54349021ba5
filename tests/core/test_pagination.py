from __future__ import annotations

import pytest

from quiz_catalog.core.pagination import (
    MAX_OFFSET,
    PageWindow,
    parse_page_value,
    resolve_page_window,
)


def test_resolve_page_window_defaults() -> None:
    assert resolve_page_window() == PageWindow(limit=10, page=1, offset=0)


def test_resolve_page_window_computes_offset() -> None:
    assert resolve_page_window(2, 2) == PageWindow(limit=2, page=2, offset=2)
    assert resolve_page_window(25, 4).offset == 75


@pytest.mark.parametrize(
    ("limit", "page", "expected"),
    [
        (0, 1, PageWindow(limit=1, page=1, offset=0)),
        (-5, 3, PageWindow(limit=1, page=3, offset=2)),
        (10, 0, PageWindow(limit=10, page=1, offset=0)),
        (10, -2, PageWindow(limit=10, page=1, offset=0)),
        (500, 2, PageWindow(limit=100, page=2, offset=100)),
    ],
)
def test_resolve_page_window_clamps(limit: int, page: int, expected: PageWindow) -> None:
    assert resolve_page_window(limit, page) == expected


def test_resolve_page_window_respects_configured_bounds() -> None:
    window = resolve_page_window(None, None, default_limit=5, max_limit=20)
    assert window == PageWindow(limit=5, page=1, offset=0)
    assert resolve_page_window(50, 1, max_limit=20).limit == 20


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, None),
        ("3", 3),
        (" 7 ", 7),
        ("-1", -1),
        ("abc", None),
        ("2.5", None),
        ("", None),
        (4, 4),
    ],
)
def test_parse_page_value(raw, expected) -> None:
    assert parse_page_value(raw) == expected


def test_resolve_page_window_keeps_offset_within_bigint() -> None:
    window = resolve_page_window(10, 10**20)

    assert window.page == MAX_OFFSET // 10 + 1
    assert 0 <= window.offset <= MAX_OFFSET
