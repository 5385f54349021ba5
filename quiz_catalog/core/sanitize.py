from __future__ import annotations

import html
import re

CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def sanitize(text: str) -> str:
    """Escapes HTML-significant characters so the text renders inert.

    Existing character references are decoded before escaping, which keeps
    the function idempotent: already sanitized text passes through unchanged.
    """
    decoded = html.unescape(text)
    return html.escape(CONTROL_CHARS_RE.sub("", decoded), quote=True)
