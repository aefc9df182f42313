"""HTML-to-plain-text cleanup for operator-entered descriptions."""

from __future__ import annotations

import re
from html import unescape

from bs4 import BeautifulSoup

_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_description(raw: str | None) -> str:
    """Strip tags, scripts and styles from *raw* and collapse whitespace.

    Entities are decoded.  No length limit is applied.
    """
    if not raw:
        return ""
    soup = BeautifulSoup(raw, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    text = soup.get_text(separator=" ")
    return _WHITESPACE_RE.sub(" ", unescape(text)).strip()
