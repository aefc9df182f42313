"""Per-episode memoization.

One ``EpisodeCache`` lives for the handling of a single external request and
is discarded afterwards; nothing here is process-global.
"""

from __future__ import annotations

from schemas.content import ContentRef, Term, Variant
from schemas.summary import RawExcerptEntry

ItemKey = tuple[str, int, int | None]


def item_key(content: ContentRef, term_id: int | None) -> ItemKey:
    return (content.kind.value, content.id, term_id)


class EpisodeCache:
    def __init__(self) -> None:
        self._excerpts: dict[ItemKey, RawExcerptEntry] = {}
        self._generated: dict[tuple[ItemKey, Variant], str] = {}
        self._titles: dict[tuple[ItemKey, bool], str] = {}
        # A stored None records a lookup that found nothing.
        self._terms: dict[tuple[str, int], Term | None] = {}

    # ── Raw excerpts ───────────────────────────────────────────────────

    def get_excerpt(self, key: ItemKey) -> RawExcerptEntry | None:
        return self._excerpts.get(key)

    def set_excerpt(self, key: ItemKey, entry: RawExcerptEntry) -> None:
        self._excerpts[key] = entry

    # ── Generated summaries ────────────────────────────────────────────

    def get_generated(self, key: ItemKey, variant: Variant) -> str | None:
        return self._generated.get((key, variant))

    def set_generated(self, key: ItemKey, variant: Variant, text: str) -> None:
        self._generated[(key, variant)] = text

    # ── Additions titles ───────────────────────────────────────────────

    def get_title(self, key: ItemKey, ignore: bool) -> str | None:
        return self._titles.get((key, ignore))

    def set_title(self, key: ItemKey, ignore: bool, title: str) -> None:
        self._titles[(key, ignore)] = title

    # ── Terms ──────────────────────────────────────────────────────────

    def has_term(self, content: ContentRef) -> bool:
        return (content.kind.value, content.id) in self._terms

    def get_term(self, content: ContentRef) -> Term | None:
        return self._terms.get((content.kind.value, content.id))

    def set_term(self, content: ContentRef, term: Term | None) -> None:
        self._terms[(content.kind.value, content.id)] = term
