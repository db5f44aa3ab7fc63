"""Data models for adjective-agent.

Defines the photo input record, per-word learning records, vocabulary
statistics and the analysis options/result pair.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from adjective_agent.constants import (
    DEFAULT_MAX_ADJECTIVES,
    PHOTO_CONFIDENCE_BASE,
    PHOTO_CONFIDENCE_DESCRIPTION,
    PHOTO_CONFIDENCE_METADATA,
    PHOTO_CONFIDENCE_TAGS,
    PHOTO_CONFIDENCE_TITLE,
)


@dataclass(frozen=True)
class Photo:
    """A photo record as supplied by the caller.

    Only the text metadata is analyzed; there is no pixel access.

    Attributes:
        id: Caller's identifier for the photo
        title: Optional title text
        description: Optional free-text description
        tags: Optional list of tag strings
        metadata: Optional free-form metadata mapping
        path: Optional file path (carried, not analyzed)
        filename: Optional file name (carried, not analyzed)
    """

    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    metadata: Optional[dict] = None
    path: Optional[str] = None
    filename: Optional[str] = None

    @property
    def has_tags(self) -> bool:
        """True when at least one tag is present."""
        return bool(self.tags)

    @classmethod
    def from_dict(cls, data: Mapping) -> "Photo":
        """Build a Photo from a loosely shaped mapping.

        Missing or mistyped fields are treated as absent rather than
        rejected. Accepts both ``mimeType``-style records and plain dicts.

        Args:
            data: Mapping with any of the Photo fields

        Returns:
            Photo instance
        """
        tags = data.get("tags")
        if isinstance(tags, str):
            tags = [tags]
        elif isinstance(tags, (list, tuple)):
            tags = [t for t in tags if isinstance(t, str)]
        else:
            tags = None

        metadata = data.get("metadata")
        if not isinstance(metadata, Mapping):
            metadata = None

        return cls(
            id=str(data["id"]) if data.get("id") is not None else "",
            title=_optional_str(data.get("title")),
            description=_optional_str(data.get("description")),
            tags=tags,
            metadata=dict(metadata) if metadata is not None else None,
            path=_optional_str(data.get("path")),
            filename=_optional_str(data.get("filename")),
        )

    def confidence(self) -> float:
        """Confidence that the metadata is rich enough to describe the photo.

        Returns:
            Score in [0.5, 1.0]
        """
        score = PHOTO_CONFIDENCE_BASE
        if self.title:
            score += PHOTO_CONFIDENCE_TITLE
        if self.description:
            score += PHOTO_CONFIDENCE_DESCRIPTION
        if self.has_tags:
            score += PHOTO_CONFIDENCE_TAGS
        if self.metadata is not None:
            score += PHOTO_CONFIDENCE_METADATA
        return round(min(score, 1.0), 2)


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def normalize_word(word: str) -> str:
    """Normalize a word for consistent matching.

    Args:
        word: Raw word

    Returns:
        Normalized word (lowercase, trimmed)
    """
    return word.lower().strip()


@dataclass
class LearningRecord:
    """What the store knows about one learned word.

    Attributes:
        word: Normalized word
        category: Category of the most recent learn event
        context: Context label of the most recent learn event
        frequency: Number of learn events for this word
        confidence: Derived confidence score (0-1)
        last_used: Time of the most recent learn event
    """

    word: str
    category: str
    context: str
    frequency: int = 0
    confidence: float = 0.5
    last_used: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "word": self.word,
            "category": self.category,
            "context": self.context,
            "frequency": self.frequency,
            "confidence": self.confidence,
            "last_used": self.last_used.isoformat() if self.last_used else None,
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "LearningRecord":
        """Rebuild a record produced by ``to_dict``.

        Raises:
            KeyError: If a required field is missing
            ValueError: If ``last_used`` is not an ISO-8601 timestamp
        """
        last_used = data.get("last_used")
        return cls(
            word=data["word"],
            category=data["category"],
            context=data["context"],
            frequency=data["frequency"],
            confidence=data["confidence"],
            last_used=datetime.fromisoformat(last_used) if last_used else None,
        )


@dataclass
class VocabularyStats:
    """Vocabulary statistics, recomputed on every request."""

    total_words: int = 0
    category_count: int = 0
    learned_count: int = 0
    category_counts: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "total_words": self.total_words,
            "category_count": self.category_count,
            "learned_count": self.learned_count,
            "category_counts": dict(self.category_counts),
        }


@dataclass
class AnalysisOptions:
    """Options for a single photo analysis.

    Attributes:
        max_adjectives: Cap on the number of returned words
        include_categories: Group returned words by category
        enhance_description: Build an enhanced description sentence
        learn_from_input: Learn vocabulary from the photo before selecting
        expand_vocabulary: Use learned/catalog blending instead of the legacy path
    """

    max_adjectives: int = DEFAULT_MAX_ADJECTIVES
    include_categories: bool = True
    enhance_description: bool = True
    learn_from_input: bool = True
    expand_vocabulary: bool = True

    @classmethod
    def from_config(cls, config: dict) -> "AnalysisOptions":
        """Build options from the ``[analysis]`` table of a config dict.

        Keys that are absent fall back to the dataclass defaults.
        """
        from adjective_agent.utils.config import get_value

        defaults = cls()
        return cls(
            max_adjectives=int(get_value(config, "analysis.max_adjectives", defaults.max_adjectives)),
            include_categories=bool(get_value(config, "analysis.include_categories", defaults.include_categories)),
            enhance_description=bool(get_value(config, "analysis.enhance_description", defaults.enhance_description)),
            learn_from_input=bool(get_value(config, "analysis.learn_from_input", defaults.learn_from_input)),
            expand_vocabulary=bool(get_value(config, "analysis.expand_vocabulary", defaults.expand_vocabulary)),
        )


@dataclass
class AdjectiveResult:
    """Outcome of analyzing one photo."""

    photo_id: str
    adjectives: list[str]
    categories: dict[str, list[str]]
    enhanced_description: str
    confidence: float
    timestamp: str
    vocabulary_stats: Optional[VocabularyStats] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "photo_id": self.photo_id,
            "adjectives": list(self.adjectives),
            "categories": {k: list(v) for k, v in self.categories.items()},
            "enhanced_description": self.enhanced_description,
            "confidence": self.confidence,
            "timestamp": self.timestamp,
            "vocabulary_stats": self.vocabulary_stats.to_dict() if self.vocabulary_stats else None,
        }
