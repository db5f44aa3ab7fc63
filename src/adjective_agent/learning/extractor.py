"""Candidate word extraction and filtering.

Scans free text with surface patterns (suffix shapes, comparative and
superlative shapes, hyphenated compounds, "and"/"or" runs) and filters
out function words. The patterns are heuristics: a word ending in "-y" is
not necessarily an adjective.
"""

import re

from adjective_agent.constants import GENERIC_WORDS, MIN_WORD_LENGTH, STOPWORDS
from adjective_agent.models import normalize_word

SUFFIX_PATTERN = re.compile(
    r"\b([a-z]+(?:ing|ed|ful|ous|ive|al|ic|able|ible|less|like|ish|y))\b",
    re.IGNORECASE,
)
DEGREE_PATTERN = re.compile(r"\b([a-z]+(?:er|est))\b", re.IGNORECASE)
COMPOUND_PATTERN = re.compile(r"\b([a-z]+-[a-z]+)\b", re.IGNORECASE)

# A run of words separated by commas and/or "and"/"or"; only runs that
# contain an "and"/"or" joiner count as descriptive pairs.
PHRASE_PATTERN = re.compile(
    r"\b[a-z][a-z-]*(?:(?:,?\s+(?:and|or)\s+|\s*,\s*)[a-z][a-z-]*)+",
    re.IGNORECASE,
)
JOINER_PATTERN = re.compile(r"\s(?:and|or)\s", re.IGNORECASE)
PHRASE_SEPARATOR = re.compile(r"\s*,\s*(?:(?:and|or)\s+)?|\s+(?:and|or)\s+", re.IGNORECASE)

WORD_PATTERN = re.compile(r"[a-zA-Z-]+")


def _phrase_members(text: str) -> list[str]:
    members = []
    for match in PHRASE_PATTERN.finditer(text):
        run = match.group(0)
        if not JOINER_PATTERN.search(run):
            continue
        members.extend(part for part in PHRASE_SEPARATOR.split(run) if part)
    return members


def extract_candidates(text: str) -> list[str]:
    """Extract raw candidate words from text.

    Runs four independent passes over the same text and unions their
    results in first-seen order.

    Args:
        text: Free text (title, description, arbitrary prose)

    Returns:
        Lower-cased candidates with duplicates removed

    Example:
        >>> extract_candidates("A well-lit and colorful street")
        ['colorful', 'well-lit']
    """
    if not isinstance(text, str) or not text:
        return []

    raw: list[str] = []
    raw.extend(SUFFIX_PATTERN.findall(text))
    raw.extend(DEGREE_PATTERN.findall(text))
    raw.extend(COMPOUND_PATTERN.findall(text))
    raw.extend(_phrase_members(text))

    return list(dict.fromkeys(normalize_word(word) for word in raw))


def is_valid_candidate(word: str) -> bool:
    """Check that a candidate is a plausible descriptive word.

    Rejects short words, words with characters outside letters and
    hyphens, and function words.
    """
    if not isinstance(word, str) or len(word) < MIN_WORD_LENGTH:
        return False
    if not WORD_PATTERN.fullmatch(word):
        return False
    return word.lower() not in STOPWORDS


def is_generic_word(word: str) -> bool:
    """Check whether a word is too generic to be worth learning."""
    return isinstance(word, str) and word.lower() in GENERIC_WORDS
