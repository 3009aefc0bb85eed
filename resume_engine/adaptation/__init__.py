from .keyword_adapter import (
    AdaptationConfig,
    AdaptationResult,
    KeywordAdapter,
    Replacement,
    TextAnalysis,
    adapt_text_for_industry,
    adapt_texts_for_industry,
)

__all__ = [
    "AdaptationConfig",
    "AdaptationResult",
    "KeywordAdapter",
    "Replacement",
    "TextAnalysis",
    "adapt_text_for_industry",
    "adapt_texts_for_industry",
]
