"""Summary resolution: override first, generated second.

``SummaryService`` holds the long-lived collaborators; every external request
opens its own ``Resolver`` through ``SummaryService.episode()`` so that memoized
results never outlive the request that produced them.
"""

from __future__ import annotations

import logging

from config import Settings, settings as default_settings
from engine.episode import EpisodeCache
from engine.generator import Generator
from schemas.content import ContentRef, ResolutionRequest, Variant
from services.host import ContentHost, Transformer, is_front_content
from services.ttl_cache import MemoryTTLStore, SummaryCache, TTLStore

logger = logging.getLogger("metasummary.engine.resolver")

# Variants whose override falls back to another variant's override.
_OVERRIDE_FALLBACKS: dict[Variant, tuple[Variant, ...]] = {
    Variant.NORMAL: (Variant.NORMAL,),
    Variant.SOCIAL: (Variant.SOCIAL,),
    Variant.TWITTER: (Variant.TWITTER, Variant.SOCIAL),
}


class Resolver:
    """Resolves summaries for the duration of one resolution episode."""

    def __init__(
        self,
        host: ContentHost,
        *,
        options: Settings | None = None,
        cache: SummaryCache | None = None,
        transformer: Transformer | None = None,
        episode: EpisodeCache | None = None,
    ) -> None:
        self.host = host
        self.options = options or default_settings
        self.transformer = transformer or Transformer()
        self.episode = episode or EpisodeCache()
        self.generator = Generator(host, self.options, self.episode, self.transformer, cache)

    def resolve(
        self,
        content: ContentRef,
        variant: Variant = Variant.NORMAL,
        allow_override: bool = True,
    ) -> str:
        """Return the summary of *content* for *variant*.

        An explicit override wins when allowed and non-empty; otherwise the
        generated summary is returned.  The two are never mixed.
        """
        request = ResolutionRequest(content=content, variant=variant, allow_override=allow_override)

        if allow_override:
            override = self._override(content, variant)
            if override:
                logger.debug("Using override for %s %d (%s).", content.kind.value, content.id, variant.value)
                return self.transformer.transform_override(override, request)

        return self.generator.generate(content, variant)

    def _override(self, content: ContentRef, variant: Variant) -> str:
        if variant is Variant.NORMAL and self._is_front(content):
            home = self.options.home_summary_override
            if home and home.strip():
                return home

        for source in _OVERRIDE_FALLBACKS[variant]:
            text = self.host.get_override(content, source)
            if text and text.strip():
                return text
        return ""

    def _is_front(self, content: ContentRef) -> bool:
        return is_front_content(self.host, content)


class SummaryService:
    """Long-lived entry point: owns the shared cache and opens episodes."""

    def __init__(
        self,
        host: ContentHost,
        *,
        options: Settings | None = None,
        store: TTLStore | None = None,
        transformer: Transformer | None = None,
    ) -> None:
        self.host = host
        self.options = options or default_settings
        self.transformer = transformer or Transformer()
        self.cache = SummaryCache(store if store is not None else MemoryTTLStore(), self.options.summary_cache_ttl)

    def episode(self) -> Resolver:
        """Open a fresh resolution episode with its own memo."""
        return Resolver(
            self.host,
            options=self.options,
            cache=self.cache,
            transformer=self.transformer,
            episode=EpisodeCache(),
        )

    def resolve(
        self,
        content: ContentRef,
        variant: Variant = Variant.NORMAL,
        allow_override: bool = True,
    ) -> str:
        """Resolve in a single-call episode."""
        return self.episode().resolve(content, variant, allow_override)
