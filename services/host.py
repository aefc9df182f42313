"""Interfaces the hosting application implements for the summary pipeline."""

from __future__ import annotations

from typing import Protocol

from schemas.content import ContentKind, ContentRef, ResolutionRequest, Term, Variant
from schemas.summary import Additions


class ContentHost(Protocol):
    """Storage, content retrieval and request-context lookups owned by the host."""

    # ── Overrides ──────────────────────────────────────────────────────

    def get_override(self, content: ContentRef, variant: Variant) -> str | None:
        """Operator-entered summary for *content* and *variant*, if any."""
        ...

    # ── Content sources ────────────────────────────────────────────────

    def fetch_body_excerpt(self, content_id: int) -> str:
        """Plain-text excerpt derived from the item's body."""
        ...

    def fetch_term(self, term_id: int, taxonomy: str | None) -> Term | None:
        ...

    def fetch_term_excerpt(self, term_id: int, taxonomy: str | None) -> str:
        """Excerpt of the most recent item associated with the term."""
        ...

    def fetch_author_bio(self, author_id: int) -> str:
        ...

    def fetch_title(self, content_id: int) -> str:
        ...

    def has_manual_excerpt(self, content_id: int) -> bool:
        """Whether the author wrote an excerpt by hand for this item."""
        ...

    def is_blog_page(self, content_id: int) -> bool:
        ...

    # ── Policy and request context ─────────────────────────────────────

    def is_protected(self, content_id: int) -> bool:
        ...

    def is_front_item(self, content_id: int) -> bool:
        ...

    def is_search_context(self) -> bool:
        ...

    def is_admin_context(self) -> bool:
        ...


class Transformer:
    """Optional post-processing points.  Every method is the identity here;
    hosts subclass and override the ones they need."""

    def transform_override(self, text: str, request: ResolutionRequest) -> str:
        return text

    def transform_generated(self, text: str, request: ResolutionRequest) -> str:
        return text

    def transform_additions(self, additions: Additions, content: ContentRef, ignore: bool) -> Additions:
        return additions

    def transform_excerpt(self, text: str, content: ContentRef) -> str:
        return text


def is_front_content(host: ContentHost, content: ContentRef) -> bool:
    """FRONT content, or a singular item the host designates as the front page.

    Term and author ids live in their own number spaces, so only singular ids
    are checked against the host's front item.
    """
    if content.kind is ContentKind.FRONT:
        return True
    return content.kind is ContentKind.SINGULAR and host.is_front_item(content.id)
