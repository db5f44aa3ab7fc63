"""Adjective selection.

Blends three sources into one ordered, de-duplicated word list:
1. Theme rules triggered by markers in the photo's text
2. Words learned under the photo's populated contexts
3. One word per vocabulary category
"""

import logging
import random
from collections.abc import Iterable

from ..constants import (
    LEARNED_WORDS_LIMIT,
    LEGACY_THEME_RULES,
    SEED_CATEGORIES,
    THEME_RULES,
    Context,
)
from ..models import Photo
from ..storage.memory import VocabularyStore

logger = logging.getLogger(__name__)


def dedupe(words: Iterable[str]) -> list[str]:
    """Remove duplicates, keeping first occurrences in order."""
    return list(dict.fromkeys(words))


def match_themes(photo: Photo, rules: Iterable[dict]) -> list[str]:
    """Collect the word bundles of every rule the photo triggers.

    Args:
        photo: Photo to scan
        rules: Theme rules (see ``constants.THEME_RULES``)

    Returns:
        Concatenated bundles of all matching rules, in rule order
    """
    fields = {
        "title": (photo.title or "").lower(),
        "description": (photo.description or "").lower(),
    }
    tags = {tag.lower() for tag in photo.tags or []}

    words: list[str] = []
    for rule in rules:
        matched = False
        for field_name in rule["fields"]:
            if field_name == "tags":
                matched = any(marker in tags for marker in rule["markers"])
            else:
                matched = any(marker in fields[field_name] for marker in rule["markers"])
            if matched:
                break
        if matched:
            logger.debug(f"Theme '{rule['name']}' matched for photo {photo.id}")
            words.extend(rule["words"])
    return words


class AdjectiveSelector:
    """Selects adjectives for a photo from rules, learned words and the catalog.

    Random choices go through ``rng`` so callers can pass a seeded
    ``random.Random`` for reproducible output.

    Example:
        >>> selector = AdjectiveSelector(VocabularyStore(), rng=random.Random(7))
        >>> selector.select(Photo(id="p1", title="Sunset"), [], 3)
        ['golden', 'warm', 'radiant']
    """

    def __init__(self, store: VocabularyStore, rng: random.Random | None = None):
        self.store = store
        self._rng = rng or random.Random()

    def thematic_words(self, photo: Photo) -> list[str]:
        """Words from every theme rule the photo triggers."""
        return match_themes(photo, THEME_RULES)

    def learned_words(self, photo: Photo, prefer_frequent: bool = True) -> list[str]:
        """Words learned under the contexts the photo has content for.

        Args:
            photo: Photo being described
            prefer_frequent: Rank by usage count before truncating

        Returns:
            Up to five learned words
        """
        present = {
            Context.TITLE.value: bool(photo.title),
            Context.DESCRIPTION.value: bool(photo.description),
            Context.TAG.value: photo.has_tags,
        }

        words: list[str] = []
        for context, context_words in self.store.get_context_patterns().items():
            if present.get(context):
                words.extend(context_words)
        words = dedupe(words)

        if prefer_frequent:
            words.sort(key=lambda w: -self.store.get_frequency(w))
        return words[:LEARNED_WORDS_LIMIT]

    def catalog_words(
        self,
        exclude: Iterable[str],
        prefer_frequent: bool = True,
    ) -> list[str]:
        """Pick one word from each vocabulary category.

        Args:
            exclude: Words that may not be picked (existing and already selected)
            prefer_frequent: Pick the most used word instead of a random one

        Returns:
            At most one word per category, in category order
        """
        taken = set(exclude)
        picked = []
        for _category, words in self.store.category_items():
            available = [w for w in words if w not in taken]
            if not available:
                continue
            if prefer_frequent:
                # max() keeps the first of equally frequent words
                word = max(available, key=self.store.get_frequency)
            else:
                word = self._rng.choice(available)
            picked.append(word)
            taken.add(word)
        return picked

    def select(
        self,
        photo: Photo,
        existing: list[str],
        max_words: int,
        use_learning: bool = True,
        prefer_frequent: bool = True,
    ) -> list[str]:
        """Select adjectives for a photo.

        Args:
            photo: Photo being described
            existing: Words already attached to the photo; they come first
            max_words: Cap on the result length
            use_learning: Include words learned under the photo's contexts
            prefer_frequent: Prefer frequently used words over random ones

        Returns:
            De-duplicated words, at most ``max_words``
        """
        if max_words <= 0:
            return []

        generated = self.thematic_words(photo)
        if use_learning:
            generated.extend(self.learned_words(photo, prefer_frequent))
        generated.extend(self.catalog_words([*existing, *generated], prefer_frequent))

        return dedupe([*existing, *generated])[:max_words]

    def select_legacy(self, photo: Photo, existing: list[str], max_words: int) -> list[str]:
        """Select adjectives without the learned vocabulary.

        Uses the reduced title-only theme rules and one random word from
        each seed category.
        """
        if max_words <= 0:
            return []

        generated = match_themes(photo, LEGACY_THEME_RULES)
        taken = set(existing) | set(generated)
        for words in SEED_CATEGORIES.values():
            available = [w for w in words if w not in taken]
            if available:
                word = self._rng.choice(available)
                generated.append(word)
                taken.add(word)

        return dedupe([*existing, *generated])[:max_words]
