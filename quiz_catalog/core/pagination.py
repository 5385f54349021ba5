from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PAGE_LIMIT = 10
DEFAULT_PAGE = 1
MAX_PAGE_LIMIT = 100
# OFFSET is a signed 64-bit integer on every supported engine
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True, slots=True)
class PageWindow:
    limit: int
    page: int
    offset: int


def resolve_page_window(
    limit: int | None = None,
    page: int | None = None,
    *,
    default_limit: int = DEFAULT_PAGE_LIMIT,
    max_limit: int = MAX_PAGE_LIMIT,
) -> PageWindow:
    resolved_limit = default_limit if limit is None else int(limit)
    resolved_limit = min(max(resolved_limit, 1), max(max_limit, 1))
    resolved_page = DEFAULT_PAGE if page is None else int(page)
    resolved_page = min(max(resolved_page, 1), MAX_OFFSET // resolved_limit + 1)
    return PageWindow(
        limit=resolved_limit,
        page=resolved_page,
        offset=(resolved_page - 1) * resolved_limit,
    )


def parse_page_value(raw: str | int | None) -> int | None:
    """Parses a raw limit/page query value; anything that is not an integer yields None."""
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(raw.strip())
    except ValueError:
        return None
