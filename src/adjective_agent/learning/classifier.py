"""Keyword-based category classification for learned words."""

from adjective_agent.constants import (
    CATEGORY_KEYWORDS,
    DEFAULT_CATEGORY,
    TAG_CATEGORY,
    TEXT_CONTEXTS,
    Context,
)
from adjective_agent.models import normalize_word


def classify(word: str, context: str) -> str:
    """Assign a category to a word.

    Keyword lists are checked in priority order (mood, visual, temporal,
    spatial, emotional). Words that match none fall back to a category
    derived from the context they were seen in.

    Args:
        word: Candidate word
        context: Context label the word was learned under

    Returns:
        Category name

    Example:
        >>> classify("calm", "title")
        'mood'
        >>> classify("hazy", "tag")
        'categorized'
    """
    normalized = normalize_word(word)
    for category, keywords in CATEGORY_KEYWORDS:
        if normalized in keywords:
            return category

    if context in TEXT_CONTEXTS:
        return DEFAULT_CATEGORY
    if context == Context.TAG.value:
        return TAG_CATEGORY
    return DEFAULT_CATEGORY
