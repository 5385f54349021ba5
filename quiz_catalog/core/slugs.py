from __future__ import annotations

import re

WHITESPACE_RE = re.compile(r"\s+")
UNSAFE_SLUG_CHARS_RE = re.compile(r"[^\w-]+")
REPEATED_HYPHENS_RE = re.compile(r"-{2,}")


def slugify_title(title: str) -> str:
    """Lowercases the title and joins its words with hyphens."""
    slug = WHITESPACE_RE.sub("-", title.strip().lower())
    slug = UNSAFE_SLUG_CHARS_RE.sub("", slug)
    slug = REPEATED_HYPHENS_RE.sub("-", slug)
    return slug.strip("-")
