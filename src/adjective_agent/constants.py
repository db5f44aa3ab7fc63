"""Application-wide constants.

Word lists, patterns and defaults shared across the extractor, classifier,
store and selector. The lists are hand-picked; they are a heuristic, not a
linguistic classification.
"""

from enum import Enum
from typing import Final

# =============================================================================
# VERSION AND METADATA
# =============================================================================

APP_NAME: Final[str] = "adjective-agent"
AGENT_NAME: Final[str] = "AdjectiveAgent"
SNAPSHOT_VERSION: Final[str] = "1.0"

# =============================================================================
# SEED CATALOG
# =============================================================================

SEED_CATEGORIES: Final[dict[str, tuple[str, ...]]] = {
    "mood": (
        "serene", "vibrant", "melancholic", "energetic",
        "peaceful", "dramatic", "whimsical", "mysterious",
    ),
    "visual": (
        "luminous", "shadowy", "colorful", "monochromatic",
        "textured", "smooth", "geometric", "organic",
    ),
    "temporal": (
        "timeless", "nostalgic", "modern", "vintage",
        "ephemeral", "eternal", "fleeting", "enduring",
    ),
    "spatial": (
        "expansive", "intimate", "vast", "confined",
        "open", "layered", "minimal", "dense",
    ),
    "emotional": (
        "inspiring", "contemplative", "joyful", "somber",
        "hopeful", "introspective", "uplifting", "profound",
    ),
}

SEED_WORDS: Final[frozenset[str]] = frozenset(
    word for words in SEED_CATEGORIES.values() for word in words
)

# =============================================================================
# CONTEXTS AND CATEGORY FALLBACKS
# =============================================================================


class Context(str, Enum):
    """Context labels with special meaning to the engine."""

    TITLE = "title"
    DESCRIPTION = "description"
    TAG = "tag"
    GENERAL = "general"
    CUSTOM = "custom"


TEXT_CONTEXTS: Final[frozenset[str]] = frozenset({"title", "description"})

DEFAULT_CATEGORY: Final[str] = "descriptive"
TAG_CATEGORY: Final[str] = "categorized"

# =============================================================================
# CANDIDATE FILTERS
# =============================================================================

MIN_WORD_LENGTH: Final[int] = 3

# Articles, conjunctions, prepositions, auxiliaries, modals, demonstratives
STOPWORDS: Final[frozenset[str]] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "is", "are", "was", "were", "be", "been", "being", "have",
    "has", "had", "do", "does", "did", "will", "would", "could", "should",
    "may", "might", "can", "this", "that", "these", "those",
})

# Overused adjectives, rejected only when learning from text
GENERIC_WORDS: Final[frozenset[str]] = frozenset({
    "good", "bad", "big", "small", "new", "old", "high", "low", "long",
    "short", "right", "left", "up", "down", "in", "out", "on", "off",
    "over", "under",
})

# =============================================================================
# CLASSIFIER KEYWORDS (evaluated in order, first match wins)
# =============================================================================
# Each seed category recognizes its own catalog words plus a few indicators.

CATEGORY_INDICATORS: Final[dict[str, tuple[str, ...]]] = {
    "mood": ("happy", "sad", "angry", "excited", "calm", "nervous", "relaxed", "tense"),
    "visual": ("bright", "dark", "colorful", "dull", "shiny", "matte", "clear", "blurry"),
    "temporal": ("old", "new", "ancient", "modern", "temporary", "permanent", "quick", "slow"),
    "spatial": ("large", "small", "wide", "narrow", "deep", "shallow", "near", "far"),
    "emotional": ("loving", "hateful", "caring", "cold", "warm", "passionate", "indifferent"),
}

CATEGORY_KEYWORDS: Final[tuple[tuple[str, frozenset[str]], ...]] = tuple(
    (name, frozenset(SEED_CATEGORIES[name]) | frozenset(CATEGORY_INDICATORS[name]))
    for name in ("mood", "visual", "temporal", "spatial", "emotional")
)

# =============================================================================
# EXISTING-WORD DETECTION
# =============================================================================

COMPLIMENT_WORDS: Final[tuple[str, ...]] = (
    "beautiful", "stunning", "amazing", "gorgeous", "lovely",
    "nice", "great", "wonderful", "excellent", "perfect",
)

# =============================================================================
# THEME RULES
# =============================================================================
# Each rule lists the photo fields it scans. "title" and "description" are
# substring checks, "tags" is an exact match against lower-cased tags.

THEME_RULES: Final[tuple[dict, ...]] = (
    {
        "name": "sunset",
        "markers": ("sunset", "sunrise"),
        "fields": ("title", "description"),
        "words": ("golden", "warm", "radiant", "glowing", "fiery", "amber", "crimson"),
    },
    {
        "name": "night",
        "markers": ("night", "dark"),
        "fields": ("title", "description"),
        "words": ("mysterious", "shadowy", "ethereal", "nocturnal", "twilight", "starry", "moonlit"),
    },
    {
        "name": "nature",
        "markers": ("nature", "forest", "mountain"),
        "fields": ("title", "tags"),
        "words": ("natural", "organic", "wild", "untamed", "pristine", "rustic", "earthy"),
    },
    {
        "name": "urban",
        "markers": ("city", "urban", "street"),
        "fields": ("title", "tags"),
        "words": ("urban", "metropolitan", "cosmopolitan", "bustling", "dynamic", "modern", "architectural"),
    },
    {
        "name": "water",
        "markers": ("water", "ocean", "river", "lake"),
        "fields": ("title", "tags"),
        "words": ("flowing", "fluid", "reflective", "crystalline", "aquatic", "marine", "rippling"),
    },
)

# Reduced rules for the non-expanded selection path
LEGACY_THEME_RULES: Final[tuple[dict, ...]] = (
    {
        "name": "sunset",
        "markers": ("sunset", "sunrise"),
        "fields": ("title",),
        "words": ("golden", "warm", "radiant"),
    },
    {
        "name": "night",
        "markers": ("night", "dark"),
        "fields": ("title",),
        "words": ("mysterious", "shadowy", "ethereal"),
    },
)

# =============================================================================
# SELECTION AND CONFIDENCE
# =============================================================================

LEARNED_WORDS_LIMIT: Final[int] = 5
DESCRIPTION_WORDS: Final[int] = 3

# Per-word learning confidence
WORD_CONFIDENCE_BASE: Final[float] = 0.5
WORD_CONFIDENCE_PER_CONTEXT: Final[float] = 0.1
WORD_CONFIDENCE_PER_USE: Final[float] = 0.05
WORD_CONFIDENCE_USE_CAP: Final[float] = 0.3
WORD_CONFIDENCE_TEXT_BONUS: Final[float] = 0.1

# Per-photo confidence
PHOTO_CONFIDENCE_BASE: Final[float] = 0.5
PHOTO_CONFIDENCE_TITLE: Final[float] = 0.1
PHOTO_CONFIDENCE_DESCRIPTION: Final[float] = 0.2
PHOTO_CONFIDENCE_TAGS: Final[float] = 0.1
PHOTO_CONFIDENCE_METADATA: Final[float] = 0.1

# =============================================================================
# ANALYSIS DEFAULTS
# =============================================================================

DEFAULT_MAX_ADJECTIVES: Final[int] = 10
DEFAULT_FREQUENT_LIMIT: Final[int] = 10

# =============================================================================
# CLI
# =============================================================================


class ExitCode(int, Enum):
    """CLI exit codes."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    INVALID_INPUT = 3
    KEYBOARD_INTERRUPT = 130
