"""High-level API for adjective-agent.

Provides a simple interface for describing photos with adjectives and
growing the vocabulary those adjectives come from.
"""

import logging
import random
import re
from collections.abc import Iterable, Mapping
from dataclasses import fields
from datetime import datetime, timezone

from adjective_agent.constants import (
    AGENT_NAME,
    COMPLIMENT_WORDS,
    DEFAULT_CATEGORY,
    DEFAULT_FREQUENT_LIMIT,
    DESCRIPTION_WORDS,
    SEED_WORDS,
    Context,
)
from adjective_agent.core.selector import AdjectiveSelector, dedupe
from adjective_agent.learning.learner import learn_from_photo, learn_from_text, learn_from_texts
from adjective_agent.models import (
    AdjectiveResult,
    AnalysisOptions,
    Photo,
    VocabularyStats,
    normalize_word,
)
from adjective_agent.storage.memory import VocabularyStore

logger = logging.getLogger(__name__)

COMPLIMENT_PATTERN = re.compile(r"\b(" + "|".join(COMPLIMENT_WORDS) + r")\b", re.IGNORECASE)


def _as_photo(photo) -> Photo:
    """Accept a Photo, a mapping, or any object exposing the Photo fields as attributes."""
    if isinstance(photo, Photo):
        return photo
    if isinstance(photo, Mapping):
        return Photo.from_dict(photo)
    return Photo.from_dict({f.name: getattr(photo, f.name, None) for f in fields(Photo)})


class AdjectiveAgent:
    """High-level API for photo adjectives and vocabulary learning.

    Provides a simple interface for:
    - Analyzing photos (single or batch)
    - Learning vocabulary from free text
    - Adding custom words and categories
    - Vocabulary statistics and export/import

    Example:
        >>> agent = AdjectiveAgent()
        >>> result = agent.analyze({"id": "p1", "title": "Golden Sunset"})
        >>> "golden" in result.adjectives
        True
        >>> agent.learn_from_text("A misty, windswept and rugged coastline")
        ['misty', 'rugged', 'windswept']
    """

    name = AGENT_NAME

    def __init__(
        self,
        store: VocabularyStore | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize AdjectiveAgent.

        Args:
            store: Vocabulary store to use (default: fresh seeded store)
            rng: Random source for catalog fills (default: unseeded)
        """
        self._store = store or VocabularyStore()
        self._selector = AdjectiveSelector(self._store, rng=rng)

    @property
    def store(self) -> VocabularyStore:
        """The vocabulary store owned by this agent."""
        return self._store

    @property
    def version(self) -> str:
        """Installed package version."""
        from adjective_agent import __version__

        return __version__

    # =========================================================================
    # ANALYSIS
    # =========================================================================

    def analyze(
        self,
        photo: Photo | Mapping,
        options: AnalysisOptions | None = None,
    ) -> AdjectiveResult:
        """Describe a photo with adjectives.

        Args:
            photo: Photo record, a mapping with photo fields, or an object
                with the same attributes
            options: Analysis options (default: AnalysisOptions())

        Returns:
            AdjectiveResult with words, categories, enhanced description,
            confidence and vocabulary statistics
        """
        photo = _as_photo(photo)
        options = options or AnalysisOptions()

        if options.learn_from_input:
            learn_from_photo(self._store, photo)

        existing = self._existing_adjectives(photo)
        if options.expand_vocabulary:
            adjectives = self._selector.select(
                photo,
                existing,
                options.max_adjectives,
                use_learning=True,
                prefer_frequent=True,
            )
        else:
            adjectives = self._selector.select_legacy(photo, existing, options.max_adjectives)

        categories = self._categorize(adjectives) if options.include_categories else {}
        if options.enhance_description:
            description = self._enhanced_description(photo, adjectives)
        else:
            description = photo.description or ""

        logger.debug(f"Analyzed photo {photo.id}: {len(adjectives)} adjectives")

        return AdjectiveResult(
            photo_id=photo.id,
            adjectives=adjectives,
            categories=categories,
            enhanced_description=description,
            confidence=photo.confidence(),
            timestamp=datetime.now(timezone.utc).isoformat(),
            vocabulary_stats=self._store.get_stats(),
        )

    def analyze_batch(
        self,
        photos: Iterable[Photo | Mapping],
        options: AnalysisOptions | None = None,
    ) -> list[AdjectiveResult]:
        """Analyze photos one after another against the shared vocabulary.

        Words learned from earlier photos are available to later ones.
        """
        return [self.analyze(photo, options) for photo in photos]

    def _existing_adjectives(self, photo: Photo) -> list[str]:
        """Adjectives the photo's own metadata already uses.

        Compliments are matched in the description only, never the title.
        """
        found = []
        if photo.description:
            found.extend(m.lower() for m in COMPLIMENT_PATTERN.findall(photo.description))

        for tag in photo.tags or []:
            word = normalize_word(tag)
            if word in SEED_WORDS:
                found.append(word)

        return dedupe(found)

    def _categorize(self, adjectives: list[str]) -> dict[str, list[str]]:
        categorized: dict[str, list[str]] = {}
        for adjective in adjectives:
            category = self._store.find_category(adjective) or DEFAULT_CATEGORY
            categorized.setdefault(category, []).append(adjective)
        return categorized

    def _enhanced_description(self, photo: Photo, adjectives: list[str]) -> str:
        base = photo.description or f'A photo titled "{photo.title or "Untitled"}"'
        if not adjectives:
            return base
        phrase = ", ".join(adjectives[:DESCRIPTION_WORDS])
        return f"{base}. This {phrase} image captures a unique moment."

    # =========================================================================
    # LEARNING
    # =========================================================================

    def learn_from_photo(self, photo: Photo | Mapping) -> list[str]:
        """Learn vocabulary from a photo's title, description and tags."""
        return learn_from_photo(self._store, _as_photo(photo))

    def learn_from_text(self, text: str, context: str = Context.GENERAL.value) -> list[str]:
        """Learn vocabulary from free text.

        Args:
            text: Text to scan
            context: Context label to record (default: 'general')

        Returns:
            Words learned from the text
        """
        return learn_from_text(self._store, text, context)

    def learn_from_text_batch(
        self,
        texts: Iterable[str],
        context: str = Context.GENERAL.value,
    ) -> list[str]:
        """Learn vocabulary from several texts under one context."""
        return learn_from_texts(self._store, texts, context)

    def add_custom_word(
        self,
        word: str,
        category: str,
        context: str = Context.CUSTOM.value,
    ) -> None:
        """Add a word to a category, creating the category if needed."""
        self._store.add_word(word, category, context)

    # =========================================================================
    # RETRIEVAL
    # =========================================================================

    def get_stats(self) -> VocabularyStats:
        """Get current vocabulary statistics."""
        return self._store.get_stats()

    def get_all_categories(self) -> list[str]:
        """Get all category names, including custom ones."""
        return self._store.get_categories()

    def get_words_by_category(self, category: str) -> list[str]:
        """Get the words of a category (empty if the category is unknown)."""
        return self._store.get_words(category)

    def get_most_frequent(self, limit: int = DEFAULT_FREQUENT_LIMIT) -> list[tuple[str, int]]:
        """Get the most frequently learned words with their counts."""
        return self._store.get_most_frequent(limit)

    # =========================================================================
    # EXPORT / IMPORT
    # =========================================================================

    def export_vocabulary(self) -> dict:
        """Export the vocabulary as a JSON-compatible snapshot."""
        return self._store.export_snapshot()

    def import_vocabulary(self, snapshot: dict) -> None:
        """Replace the vocabulary with a snapshot.

        Raises:
            SnapshotError: If the snapshot is malformed; the current
                vocabulary is left untouched
        """
        self._store.import_snapshot(snapshot)
