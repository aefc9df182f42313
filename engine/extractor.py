"""Raw excerpt extraction. Picks the text source by content kind."""

from __future__ import annotations

import logging

from engine.episode import EpisodeCache, item_key
from schemas.content import ContentKind, ContentRef, Term
from schemas.summary import RawExcerptEntry
from services.host import ContentHost, Transformer
from services.sanitize import sanitize_description

logger = logging.getLogger("metasummary.engine.extractor")


class ExcerptExtractor:
    def __init__(self, host: ContentHost, episode: EpisodeCache, transformer: Transformer) -> None:
        self.host = host
        self.episode = episode
        self.transformer = transformer

    def term_for(self, content: ContentRef) -> Term | None:
        """Return the term object for TAXONOMY content, else ``None``.

        A missing or mismatched term counts as "no data".  Looked up at most
        once per episode.
        """
        if content.kind is not ContentKind.TAXONOMY:
            return None
        if self.episode.has_term(content):
            return self.episode.get_term(content)

        term = self.host.fetch_term(content.id, content.taxonomy_name)
        if term is None or term.id != content.id:
            logger.debug("No term found for %s/%d.", content.taxonomy_name, content.id)
            term = None
        self.episode.set_term(content, term)
        return term

    def extract_excerpt(self, content: ContentRef, term: Term | None = None) -> str:
        """Return the raw, untrimmed excerpt for *content*.

        Memoized per item within the episode, so every variant and every
        length budget reads the same snapshot.
        """
        if term is None:
            term = self.term_for(content)
        key = item_key(content, term.id if term else None)

        cached = self.episode.get_excerpt(key)
        if cached is not None:
            return cached.text

        text = self.transformer.transform_excerpt(self._fetch(content, term), content)
        self.episode.set_excerpt(key, RawExcerptEntry(text=text))
        logger.debug("Extracted %d-character excerpt for %s %d.", len(text), content.kind.value, content.id)
        return text

    def _fetch(self, content: ContentRef, term: Term | None) -> str:
        if content.kind is ContentKind.SINGULAR:
            return self.host.fetch_body_excerpt(content.id) or ""
        if content.kind is ContentKind.TAXONOMY:
            if term is None:
                return ""
            if term.description:
                return sanitize_description(term.description)
            return self.host.fetch_term_excerpt(term.id, term.taxonomy or content.taxonomy_name) or ""
        if content.kind is ContentKind.AUTHOR:
            return sanitize_description(self.host.fetch_author_bio(content.id))
        return ""
