"""Vocabulary learning from free text and photo metadata.

Glue between the extractor, the classifier and the store: every accepted
candidate is classified and recorded with ``VocabularyStore.add_word``.
"""

import logging
from collections.abc import Iterable

from adjective_agent.constants import Context
from adjective_agent.learning.classifier import classify
from adjective_agent.learning.extractor import (
    extract_candidates,
    is_generic_word,
    is_valid_candidate,
)
from adjective_agent.models import Photo, normalize_word
from adjective_agent.storage.memory import VocabularyStore

logger = logging.getLogger(__name__)


def learn_from_text(
    store: VocabularyStore,
    text: str,
    context: str = Context.GENERAL.value,
) -> list[str]:
    """Learn descriptive words from a piece of text.

    Args:
        store: Vocabulary store to record into
        text: Free text to scan
        context: Context label recorded with each word

    Returns:
        Words learned from this text, in extraction order
    """
    learned = []
    for word in extract_candidates(text):
        if not is_valid_candidate(word) or is_generic_word(word):
            continue
        store.add_word(word, classify(word, context), context)
        learned.append(word)

    if learned:
        logger.debug(f"Learned {len(learned)} words under '{context}': {', '.join(learned)}")
    return learned


def learn_from_texts(
    store: VocabularyStore,
    texts: Iterable[str],
    context: str = Context.GENERAL.value,
) -> list[str]:
    """Learn from several texts under one context.

    Returns:
        Concatenation of the words learned from each text
    """
    learned: list[str] = []
    for text in texts:
        learned.extend(learn_from_text(store, text, context))
    return learned


def learn_from_photo(store: VocabularyStore, photo: Photo) -> list[str]:
    """Learn from a photo's title, description and tags.

    Title and description go through full extraction. Tags are recorded
    as-is under the ``tag`` context when they pass the candidate filter.

    Args:
        store: Vocabulary store to record into
        photo: Photo record

    Returns:
        Words learned from the photo
    """
    learned = []
    if photo.title:
        learned.extend(learn_from_text(store, photo.title, Context.TITLE.value))
    if photo.description:
        learned.extend(learn_from_text(store, photo.description, Context.DESCRIPTION.value))

    for tag in photo.tags or []:
        word = normalize_word(tag)
        if is_valid_candidate(word):
            store.add_word(word, classify(word, Context.TAG.value), Context.TAG.value)
            learned.append(word)

    return learned
