"""Shared fakes and fixtures for the summary pipeline tests."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from config import Settings
from schemas.content import ContentKind, ContentRef, Term, Variant
from services.ttl_cache import MemoryTTLStore


@dataclass
class FakeHost:
    """In-memory ``ContentHost`` with call counters for the content sources."""

    overrides: dict[tuple[int, Variant], str] = field(default_factory=dict)
    bodies: dict[int, str] = field(default_factory=dict)
    titles: dict[int, str] = field(default_factory=dict)
    terms: dict[int, Term] = field(default_factory=dict)
    term_excerpts: dict[int, str] = field(default_factory=dict)
    author_bios: dict[int, str] = field(default_factory=dict)
    manual_excerpts: set[int] = field(default_factory=set)
    blog_pages: set[int] = field(default_factory=set)
    protected: set[int] = field(default_factory=set)
    front_id: int | None = None
    search: bool = False
    admin: bool = False
    calls: dict[str, int] = field(default_factory=dict)

    def _count(self, name: str) -> None:
        self.calls[name] = self.calls.get(name, 0) + 1

    def get_override(self, content: ContentRef, variant: Variant) -> str | None:
        self._count("get_override")
        return self.overrides.get((content.id, variant))

    def fetch_body_excerpt(self, content_id: int) -> str:
        self._count("fetch_body_excerpt")
        return self.bodies.get(content_id, "")

    def fetch_term(self, term_id: int, taxonomy: str | None) -> Term | None:
        self._count("fetch_term")
        return self.terms.get(term_id)

    def fetch_term_excerpt(self, term_id: int, taxonomy: str | None) -> str:
        self._count("fetch_term_excerpt")
        return self.term_excerpts.get(term_id, "")

    def fetch_author_bio(self, author_id: int) -> str:
        self._count("fetch_author_bio")
        return self.author_bios.get(author_id, "")

    def fetch_title(self, content_id: int) -> str:
        return self.titles.get(content_id, "")

    def has_manual_excerpt(self, content_id: int) -> bool:
        return content_id in self.manual_excerpts

    def is_blog_page(self, content_id: int) -> bool:
        return content_id in self.blog_pages

    def is_protected(self, content_id: int) -> bool:
        return content_id in self.protected

    def is_front_item(self, content_id: int) -> bool:
        return self.front_id is not None and content_id == self.front_id

    def is_search_context(self) -> bool:
        return self.search

    def is_admin_context(self) -> bool:
        return self.admin


class FakeClock:
    def __init__(self, now: float = 1_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


# ── Helpers ────────────────────────────────────────────────────────────

def post(content_id: int = 1) -> ContentRef:
    return ContentRef(id=content_id, kind=ContentKind.SINGULAR)


def category(term_id: int = 7) -> ContentRef:
    return ContentRef(id=term_id, kind=ContentKind.TAXONOMY, taxonomy_name="category")


def author(author_id: int = 3) -> ContentRef:
    return ContentRef(id=author_id, kind=ContentKind.AUTHOR)


# ── Fixtures ───────────────────────────────────────────────────────────

@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def options() -> Settings:
    return Settings(_env_file=None, site_name="Example Blog", home_tagline="Just another site")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> MemoryTTLStore:
    return MemoryTTLStore(clock=clock)
