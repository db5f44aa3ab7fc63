"""Core adjective-agent logic.

This module contains:
- AdjectiveSelector: blends theme, learned and catalog words
"""

from .selector import AdjectiveSelector, dedupe, match_themes

__all__ = [
    "AdjectiveSelector",
    "dedupe",
    "match_themes",
]
