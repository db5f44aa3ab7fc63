"""Vocabulary learning for adjective-agent.

Provides candidate extraction, filtering, classification and the learning
pipeline that records accepted words into a store.
"""

from adjective_agent.learning.classifier import classify
from adjective_agent.learning.extractor import extract_candidates, is_generic_word, is_valid_candidate
from adjective_agent.learning.learner import learn_from_photo, learn_from_text, learn_from_texts

__all__ = [
    "classify",
    "extract_candidates",
    "is_generic_word",
    "is_valid_candidate",
    "learn_from_photo",
    "learn_from_text",
    "learn_from_texts",
]
