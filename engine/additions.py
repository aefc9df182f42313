"""The "Title on Site Name" prefix of generated summaries."""

from __future__ import annotations

import logging

from config import Settings
from engine.episode import EpisodeCache, item_key
from schemas.content import ContentKind, ContentRef, Term
from schemas.summary import Additions
from services.host import ContentHost, Transformer, is_front_content

logger = logging.getLogger("metasummary.engine.additions")


class AdditionsComposer:
    def __init__(
        self,
        host: ContentHost,
        options: Settings,
        episode: EpisodeCache,
        transformer: Transformer,
    ) -> None:
        self.host = host
        self.options = options
        self.episode = episode
        self.transformer = transformer

    def compose(self, content: ContentRef, term: Term | None = None, *, ignore: bool = False) -> Additions:
        """Build the additions tuple for *content*.

        ``ignore=True`` bypasses the site options and always fills in title
        and site name; it is used for the additions-only fallbacks.
        """
        additions = Additions.ignored()
        if ignore or self.options.summary_additions_enabled:
            title = self._title(content, term, ignore)
            site_name = self.options.site_name.strip()
            if title and site_name and (ignore or self.options.include_site_name_in_additions):
                additions = Additions(
                    title=title,
                    connector=self.options.additions_connector,
                    site_name=site_name,
                    separator=self.options.summary_separator,
                )

        return self.transformer.transform_additions(additions, content, ignore)

    def title_on_site_name(self, content: ContentRef, term: Term | None = None, *, ignore: bool = False) -> str:
        return self.compose(content, term, ignore=ignore).title_on_site_name()

    def _title(self, content: ContentRef, term: Term | None, ignore: bool) -> str:
        key = item_key(content, term.id if term else None)
        cached = self.episode.get_title(key, ignore)
        if cached is None:
            cached = self.generate_title(content, term)
            self.episode.set_title(key, ignore, cached)
        return cached

    def generate_title(self, content: ContentRef, term: Term | None = None) -> str:
        """Title used inside the additions.

        Front item → home tagline; blog listing → ``Latest posts: {title}``;
        term → doc title, name or slug; anything else → the item's title.
        """
        if is_front_content(self.host, content):
            title = self.options.home_tagline
        elif content.kind is ContentKind.TAXONOMY:
            title = ""
            if term is not None:
                title = term.doc_title or term.name or term.slug
        elif content.kind is ContentKind.SINGULAR and self.host.is_blog_page(content.id):
            title = f"Latest posts: {self.host.fetch_title(content.id) or ''}"
        else:
            title = self.host.fetch_title(content.id) or ""
        return title.strip()
