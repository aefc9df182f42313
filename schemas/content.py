"""Input schemas: what the host asks a summary for."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


# ── Enums ──────────────────────────────────────────────────────────────

class ContentKind(str, Enum):
    SINGULAR = "singular"
    TAXONOMY = "taxonomy"
    AUTHOR = "author"
    FRONT = "front"
    ARCHIVE = "archive"


class Variant(str, Enum):
    NORMAL = "normal"
    SOCIAL = "social"
    TWITTER = "twitter"

    @property
    def is_social(self) -> bool:
        return self is not Variant.NORMAL


# ── Models ─────────────────────────────────────────────────────────────

class ContentRef(BaseModel):
    """Identifies the page, post, term or author profile to summarise."""

    model_config = {"frozen": True}

    id: int = Field(ge=0)
    kind: ContentKind
    taxonomy_name: str | None = Field(
        default=None,
        description="Taxonomy the term belongs to; only meaningful for TAXONOMY content.",
    )


class Term(BaseModel):
    """Taxonomy term metadata as handed over by the host."""

    model_config = {"frozen": True}

    id: int
    taxonomy: str = ""
    name: str = ""
    slug: str = ""
    description: str = ""
    doc_title: str = Field(default="", description="Operator-entered document title for the term.")


class ResolutionRequest(BaseModel):
    """One resolve call.  Also handed to transformation hooks as context."""

    model_config = {"frozen": True}

    content: ContentRef
    variant: Variant = Variant.NORMAL
    allow_override: bool = True
