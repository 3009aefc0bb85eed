from functools import lru_cache

from .local_lexicon import IndustryProfile, KeywordMapping, LocalLexicon
from .provider import LexiconProvider


@lru_cache(maxsize=1)
def get_default_lexicon() -> LexiconProvider:
    return LocalLexicon()


__all__ = ["IndustryProfile", "KeywordMapping", "LexiconProvider", "LocalLexicon", "get_default_lexicon"]
