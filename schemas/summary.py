"""Intermediate and cached records of the summary pipeline."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class Additions(BaseModel):
    """Title / connector / site name / separator prefix for generated summaries.

    Either every field is empty (the "ignored" state) or title and site name
    are both populated; a title is never composed without its site name.
    Connector and separator come from configuration and may be blank.
    """

    model_config = {"frozen": True}

    title: str = ""
    connector: str = ""
    site_name: str = ""
    separator: str = ""

    @model_validator(mode="after")
    def _matching_presence(self) -> "Additions":
        if bool(self.title) != bool(self.site_name):
            raise ValueError("Additions title and site_name must be both empty or both populated.")
        if not self.title and (self.connector or self.separator):
            raise ValueError("Ignored additions must not carry a connector or separator.")
        return self

    @classmethod
    def ignored(cls) -> "Additions":
        return cls()

    @property
    def is_ignored(self) -> bool:
        return not self.title

    def title_on_site_name(self) -> str:
        """Return ``"{title} {connector} {site_name}"``, or ``""`` when ignored."""
        if self.is_ignored:
            return ""
        return f"{self.title} {self.connector} {self.site_name}".strip()


class RawExcerptEntry(BaseModel):
    """Untrimmed excerpt text, shared by every truncation budget."""

    model_config = {"frozen": True}

    text: str = ""

    @property
    def length(self) -> int:
        return len(self.text)


class GeneratedPair(BaseModel):
    """Both truncated excerpts of one item; the unit stored in the shared cache."""

    model_config = {"frozen": True}

    normal: str = ""
    normal_was_trimmed_for_length: bool = Field(
        default=False,
        description="True when the additions prefix was too long and got dropped.",
    )
    social: str = ""


class CacheEntry(BaseModel):
    model_config = {"frozen": True}

    value: GeneratedPair
    expires_at: float = Field(description="Epoch seconds after which the entry is stale.")

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at
