"""Summary generation from additions, excerpt and truncation.

Normal summaries get a 300-character budget shared with the additions prefix;
social summaries get a flat 200 characters and never fall back to the
additions alone.
"""

from __future__ import annotations

import logging
from html import unescape

from config import Settings
from engine.additions import AdditionsComposer
from engine.episode import EpisodeCache, item_key
from engine.extractor import ExcerptExtractor
from engine.truncator import truncate
from schemas.content import ContentKind, ContentRef, ResolutionRequest, Term, Variant
from schemas.summary import Additions, GeneratedPair
from services.host import ContentHost, Transformer, is_front_content
from services.ttl_cache import SummaryCache, summary_cache_key

logger = logging.getLogger("metasummary.engine.generator")

NORMAL_MAX_CHARS = 300
SOCIAL_MAX_CHARS = 200
# Longer prefixes are dropped and the excerpt gets the whole normal budget.
ADDITIONS_MAX_CHARS = 71


class Generator:
    def __init__(
        self,
        host: ContentHost,
        options: Settings,
        episode: EpisodeCache,
        transformer: Transformer,
        cache: SummaryCache | None = None,
    ) -> None:
        self.host = host
        self.options = options
        self.episode = episode
        self.transformer = transformer
        self.cache = cache
        self.extractor = ExcerptExtractor(host, episode, transformer)
        self.additions = AdditionsComposer(host, options, episode, transformer)

    # ── Public API ─────────────────────────────────────────────────────

    def generate(self, content: ContentRef, variant: Variant = Variant.NORMAL) -> str:
        """Return the generated summary of *content* for *variant*.

        Empty when auto summaries are off, the item is protected, or nothing
        usable exists.
        """
        if not self.options.auto_summary_enabled:
            return ""

        term = self.extractor.term_for(content)
        key = item_key(content, term.id if term else None)
        cached = self.episode.get_generated(key, variant)
        if cached is not None:
            return cached

        if self._is_front(content):
            summary = self.additions.title_on_site_name(content, ignore=False)
        elif content.kind is ContentKind.SINGULAR and self.host.is_protected(content.id):
            logger.debug("Skipping protected %s %d.", content.kind.value, content.id)
            summary = ""
        else:
            pair = self._excerpts(content, term, social=variant.is_social)
            if variant.is_social:
                summary = pair.social
            else:
                summary = self._compose_normal(content, term, pair)

        if summary:
            request = ResolutionRequest(content=content, variant=variant, allow_override=False)
            summary = self.transformer.transform_generated(summary.strip(), request)
        summary = summary.strip()

        self.episode.set_generated(key, variant, summary)
        return summary

    def generate_front(self, content: ContentRef) -> str:
        """Front page summary with additions forced on, regardless of site options."""
        return self.additions.title_on_site_name(content, ignore=True)

    # ── Excerpts ───────────────────────────────────────────────────────

    def _excerpts(self, content: ContentRef, term: Term | None, *, social: bool) -> GeneratedPair:
        if self._use_shared_cache():
            cache_key = summary_cache_key(content.kind.value, content.id, term.id if term else None)
            pair = self.cache.get(cache_key)
            if pair is not None:
                logger.debug("Summary cache hit for %s.", cache_key)
                return pair
            if not social:
                normal, trimmed = self.normal_excerpt(content, term)
                pair = GeneratedPair(
                    normal=normal,
                    normal_was_trimmed_for_length=trimmed,
                    social=self.social_excerpt(content, term),
                )
                self.cache.set(cache_key, pair)
                logger.debug("Summary cache stored %s.", cache_key)
                return pair

        if social:
            return GeneratedPair(social=self.social_excerpt(content, term))
        normal, trimmed = self.normal_excerpt(content, term)
        return GeneratedPair(normal=normal, normal_was_trimmed_for_length=trimmed)

    def normal_excerpt(self, content: ContentRef, term: Term | None = None) -> tuple[str, bool]:
        """Return ``(excerpt, prefix_dropped)`` for the normal summary."""
        additions = self._prefix_additions(content, term)
        prefix = additions.title_on_site_name()
        if prefix:
            prefix += " "
        prefix_length = len(unescape(prefix))

        if prefix_length > ADDITIONS_MAX_CHARS:
            max_chars, trimmed = NORMAL_MAX_CHARS, True
        else:
            # The separator is composed in after the prefix and shares its budget.
            if prefix and self.options.separator_in_summary and additions.separator:
                prefix_length += len(unescape(additions.separator)) + 1
            max_chars, trimmed = NORMAL_MAX_CHARS - prefix_length, False
        logger.debug("Normal budget for %s %d: %d (prefix %d).", content.kind.value, content.id, max_chars, prefix_length)

        return truncate(self.extractor.extract_excerpt(content, term), max_chars), trimmed

    def social_excerpt(self, content: ContentRef, term: Term | None = None) -> str:
        return truncate(self.extractor.extract_excerpt(content, term), SOCIAL_MAX_CHARS)

    # ── Composition ────────────────────────────────────────────────────

    def _compose_normal(self, content: ContentRef, term: Term | None, pair: GeneratedPair) -> str:
        if not pair.normal:
            # Nothing to describe; the additions alone still say something.
            return self.additions.title_on_site_name(content, term, ignore=True)
        if pair.normal_was_trimmed_for_length:
            return pair.normal

        additions = self._prefix_additions(content, term)
        parts = [additions.title_on_site_name()]
        if self.options.separator_in_summary and not additions.is_ignored and additions.separator:
            parts.append(additions.separator)
        parts.append(pair.normal)
        return " ".join(part for part in parts if part)

    def _prefix_additions(self, content: ContentRef, term: Term | None) -> Additions:
        # Hand-written excerpts stand on their own.
        if content.kind is ContentKind.SINGULAR and self.host.has_manual_excerpt(content.id):
            return Additions.ignored()
        return self.additions.compose(content, term, ignore=False)

    # ── Context ────────────────────────────────────────────────────────

    def _is_front(self, content: ContentRef) -> bool:
        return is_front_content(self.host, content)

    def _use_shared_cache(self) -> bool:
        return (
            self.cache is not None
            and self.options.cache_summaries
            and not self.host.is_search_context()
            and not self.host.is_admin_context()
        )
