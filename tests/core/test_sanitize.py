from __future__ import annotations

import pytest

from quiz_catalog.core.sanitize import sanitize

SAMPLES = [
    "",
    "plain text",
    "<script>alert('x')</script>",
    "Tom & Jerry",
    "&amp;",
    "&amp;amp;",
    "&lt;b&gt;",
    "5 > 3 && 2 < 4",
    'say "hi"',
    "&#x27;quoted&#39;",
    "&notanentity;",
    "null\x00byte and bell\x07",
    "tabs\tand\nnewlines\r",
    "Hvað er 2+2?",
]


def test_sanitize_escapes_markup() -> None:
    assert sanitize("<script>alert('x')</script>") == (
        "&lt;script&gt;alert(&#x27;x&#x27;)&lt;/script&gt;"
    )


def test_sanitize_leaves_plain_text_untouched() -> None:
    assert sanitize("What is 2+2?") == "What is 2+2?"
    assert sanitize("Hvað er 2+2?") == "Hvað er 2+2?"


def test_sanitize_keeps_existing_entities_stable() -> None:
    assert sanitize("Tom &amp; Jerry") == "Tom &amp; Jerry"
    assert sanitize("Tom & Jerry") == "Tom &amp; Jerry"


def test_sanitize_strips_control_characters_but_keeps_whitespace() -> None:
    assert sanitize("a\x00b\x07c") == "abc"
    assert sanitize("a\tb\nc\r") == "a\tb\nc\r"


@pytest.mark.parametrize("text", SAMPLES)
def test_sanitize_is_idempotent(text: str) -> None:
    once = sanitize(text)
    assert sanitize(once) == once
