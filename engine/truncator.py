"""Word-safe excerpt truncation.

Pure functions without collaborators or caching.
"""

from __future__ import annotations

from html import unescape

ELLIPSIS = "..."
_STOPS = (".", "?", "!")


def _drop_last_word(cut: str, last_word: str) -> str:
    return cut[: len(cut) - len(last_word)]


def truncate(text: str, max_chars: int) -> str:
    """Shorten *text* to at most *max_chars* characters on a word boundary.

    Text that already fits is only trimmed.  Longer text is cut, loses any
    partial final word and gets terminal punctuation: a trailing ``;`` turns
    into ``.``, anything other than ``.``, ``?`` or ``!`` gets ``...``.
    The result never exceeds ``max_chars + len(ELLIPSIS)``.
    """
    if len(text) <= max_chars:
        return text.strip()

    stripped = text.strip()
    # Output of an earlier truncation: already within budget plus ellipsis.
    if stripped.endswith(ELLIPSIS) and len(stripped) - len(ELLIPSIS) <= max_chars:
        return stripped

    cut = unescape(text[:max_chars]).strip()
    cut_words = cut.split(" ")
    cut_total = len(cut_words)

    # At most cut_total + 1 pieces; the extra piece is the unconsumed rest,
    # so the full text never yields more whole words than the cut.
    orig_words = stripped.split(" ", cut_total)
    orig_total = min(len(orig_words), cut_total)

    excerpt = cut
    if orig_total == cut_total and len(orig_words[cut_total - 1]) > len(cut_words[-1]):
        # Final word is falling off.
        excerpt = _drop_last_word(cut, cut_words[-1])

    excerpt = excerpt.strip(" ,")

    if excerpt.endswith(";"):
        excerpt = excerpt.rstrip(" ,.?!;") + "."
    elif not excerpt.endswith(_STOPS):
        excerpt += ELLIPSIS

    return excerpt.strip()
