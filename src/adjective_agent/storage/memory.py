"""In-memory vocabulary store.

Holds the category word lists, per-word learning records, usage
frequencies and per-context word lists for one agent instance. All access
goes through a re-entrant lock so the store can be shared by concurrent
callers.
"""

import copy
import logging
import threading
from datetime import datetime, timezone
from typing import Optional

from adjective_agent.constants import (
    SEED_CATEGORIES,
    SNAPSHOT_VERSION,
    TEXT_CONTEXTS,
    WORD_CONFIDENCE_BASE,
    WORD_CONFIDENCE_PER_CONTEXT,
    WORD_CONFIDENCE_PER_USE,
    WORD_CONFIDENCE_TEXT_BONUS,
    WORD_CONFIDENCE_USE_CAP,
)
from adjective_agent.models import LearningRecord, VocabularyStats, normalize_word
from adjective_agent.storage.snapshot import parse_snapshot

logger = logging.getLogger(__name__)


def calculate_word_confidence(context_count: int, frequency: int, context: str) -> float:
    """Calculate the learning confidence of a word.

    Args:
        context_count: Number of distinct contexts the word was learned in
            before this event
        frequency: Number of times the word was learned before this event
        context: Context of the learn event being recorded

    Returns:
        Confidence in [0, 1]
    """
    confidence = WORD_CONFIDENCE_BASE
    confidence += context_count * WORD_CONFIDENCE_PER_CONTEXT
    confidence += min(WORD_CONFIDENCE_USE_CAP, frequency * WORD_CONFIDENCE_PER_USE)
    if context in TEXT_CONTEXTS:
        confidence += WORD_CONFIDENCE_TEXT_BONUS
    return round(min(1.0, max(0.0, confidence)), 2)


class VocabularyStore:
    """Mutable vocabulary state for one agent.

    A fresh store holds the five seed categories. Categories created by
    ``add_word`` are remembered as custom categories.

    Example:
        >>> store = VocabularyStore()
        >>> store.add_word("Hazy", "atmosphere", "description")
        >>> store.get_words("atmosphere")
        ['hazy']
        >>> store.get_frequency("hazy")
        1
    """

    def __init__(self, seed: Optional[dict[str, tuple[str, ...]]] = None):
        """Initialize the store.

        Args:
            seed: Category name -> words to start with (default: seed catalog)
        """
        seed = SEED_CATEGORIES if seed is None else seed
        self._lock = threading.RLock()
        self._categories: dict[str, list[str]] = {
            name: list(dict.fromkeys(words)) for name, words in seed.items()
        }
        self._learning_data: dict[str, LearningRecord] = {}
        self._custom_categories: list[str] = []
        self._frequency: dict[str, int] = {}
        self._context_patterns: dict[str, list[str]] = {}

    # =========================================================================
    # MUTATION
    # =========================================================================

    def add_word(self, word: str, category: str, context: str) -> None:
        """Record one learn event for a word.

        Creates the category when needed, appends the word to it and to
        the context's word list (once each), bumps the usage count and
        refreshes the learning record.

        Args:
            word: Word to record (normalized here)
            category: Category to file it under
            context: Context label it was observed in
        """
        normalized = normalize_word(word)
        if not normalized:
            logger.debug(f"Ignoring empty word for category '{category}'")
            return

        with self._lock:
            if category not in self._categories:
                self._categories[category] = []
                self._custom_categories.append(category)
                logger.info(f"Created category '{category}'")

            words = self._categories[category]
            if normalized not in words:
                words.append(normalized)

            # Confidence reflects what was known before this event
            previous_frequency = self._frequency.get(normalized, 0)
            previous_contexts = sum(
                1 for listed in self._context_patterns.values() if normalized in listed
            )
            self._learning_data[normalized] = LearningRecord(
                word=normalized,
                category=category,
                context=context,
                frequency=previous_frequency + 1,
                confidence=calculate_word_confidence(previous_contexts, previous_frequency, context),
                last_used=datetime.now(timezone.utc),
            )

            self._frequency[normalized] = previous_frequency + 1
            context_words = self._context_patterns.setdefault(context, [])
            if normalized not in context_words:
                context_words.append(normalized)

    # =========================================================================
    # RETRIEVAL
    # =========================================================================

    def get_categories(self) -> list[str]:
        """All category names, seed categories first."""
        with self._lock:
            return list(self._categories)

    def get_custom_categories(self) -> list[str]:
        """Category names created at runtime."""
        with self._lock:
            return list(self._custom_categories)

    def get_words(self, category: str) -> list[str]:
        """Words of a category, or an empty list for unknown categories."""
        with self._lock:
            return list(self._categories.get(category, []))

    def category_items(self) -> list[tuple[str, list[str]]]:
        """Copies of all (category, words) pairs in insertion order."""
        with self._lock:
            return [(name, list(words)) for name, words in self._categories.items()]

    def find_category(self, word: str) -> Optional[str]:
        """First category containing a word.

        Returns:
            Category name, or None if no category holds the word
        """
        normalized = normalize_word(word)
        with self._lock:
            for name, words in self._categories.items():
                if normalized in words:
                    return name
        return None

    def get_frequency(self, word: str) -> int:
        """Number of learn events recorded for a word."""
        with self._lock:
            return self._frequency.get(normalize_word(word), 0)

    def get_record(self, word: str) -> Optional[LearningRecord]:
        """Copy of the learning record for a word, if it was ever learned."""
        with self._lock:
            record = self._learning_data.get(normalize_word(word))
            return copy.copy(record) if record else None

    def get_context_patterns(self) -> dict[str, list[str]]:
        """Copy of the context -> words mapping."""
        with self._lock:
            return {context: list(words) for context, words in self._context_patterns.items()}

    def get_stats(self) -> VocabularyStats:
        """Compute vocabulary statistics from the current state."""
        with self._lock:
            counts = {name: len(words) for name, words in self._categories.items()}
            return VocabularyStats(
                total_words=sum(counts.values()),
                category_count=len(counts),
                learned_count=len(self._learning_data),
                category_counts=counts,
            )

    def get_most_frequent(self, limit: int = 10) -> list[tuple[str, int]]:
        """Most frequently learned words.

        Args:
            limit: Maximum entries to return

        Returns:
            (word, count) pairs, highest count first; equal counts keep
            the order in which the words were first learned
        """
        if limit <= 0:
            return []
        with self._lock:
            ranked = sorted(self._frequency.items(), key=lambda item: -item[1])
        return ranked[:limit]

    # =========================================================================
    # EXPORT / IMPORT
    # =========================================================================

    def export_snapshot(self) -> dict:
        """Export the complete state as a JSON-compatible dict.

        The returned value shares nothing with the live store.
        """
        with self._lock:
            return {
                "version": SNAPSHOT_VERSION,
                "categories": copy.deepcopy(self._categories),
                "learning_data": {
                    word: record.to_dict() for word, record in self._learning_data.items()
                },
                "custom_categories": list(self._custom_categories),
                "word_frequency": dict(self._frequency),
                "context_patterns": copy.deepcopy(self._context_patterns),
            }

    def import_snapshot(self, snapshot: dict) -> None:
        """Replace the complete state with a snapshot.

        Nothing is merged. The snapshot is validated before any state
        changes; later changes to ``snapshot`` do not affect the store.

        Raises:
            SnapshotError: If the snapshot is malformed
        """
        state = parse_snapshot(snapshot)
        with self._lock:
            self._categories = state.categories
            self._learning_data = state.learning_data
            self._custom_categories = state.custom_categories
            self._frequency = state.word_frequency
            self._context_patterns = state.context_patterns

        logger.info(
            f"Imported vocabulary: {len(state.categories)} categories, "
            f"{len(state.learning_data)} learned words"
        )
