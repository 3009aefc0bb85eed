from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .local_lexicon import IndustryProfile


class LexiconProvider(Protocol):
    def get(self, industry: str | None) -> IndustryProfile | None:
        """Return the industry entry for a (possibly aliased) industry name, or None."""

    def available_industries(self) -> list[str]:
        """Return the canonical industry keys."""

    def detect_industry(self, text: str) -> str | None:
        """Return the best-matching industry key for free text, or None."""
