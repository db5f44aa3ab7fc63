"""adjective-agent - Descriptive words for photos from a growing vocabulary.

Assigns adjectives to photo records by blending a fixed seed vocabulary
with vocabulary learned at runtime from titles, descriptions, tags and
arbitrary text.

Features:
- Candidate extraction from free text (suffix, degree, compound and phrase patterns)
- Keyword-based category classification with dynamic categories
- Frequency and per-context tracking of learned words
- Theme rules, learned words and catalog fill for adjective selection
- Snapshot export/import of the full vocabulary

Example:
    >>> from adjective_agent import AdjectiveAgent
    >>> agent = AdjectiveAgent()
    >>> agent.learn_from_text("A hazy, sun-drenched and tranquil harbour", "description")
    ['hazy', 'drenched', 'sun-drenched', 'tranquil']
    >>> result = agent.analyze({"id": "p1", "title": "Harbour", "description": "Hazy morning"})
    >>> result.confidence
    0.8
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _get_version() -> str:
    """Get version from package metadata or VERSION file."""
    try:
        return version("adjective-agent")
    except PackageNotFoundError:
        pass

    version_file = Path(__file__).parent.parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()

    return "0.0.0"


__version__ = _get_version()

from adjective_agent.api import AdjectiveAgent  # noqa: E402
from adjective_agent.app_config import AppConfig  # noqa: E402
from adjective_agent.core.selector import AdjectiveSelector  # noqa: E402
from adjective_agent.exceptions import AdjectiveAgentError, ConfigError, SnapshotError  # noqa: E402
from adjective_agent.models import (  # noqa: E402
    AdjectiveResult,
    AnalysisOptions,
    LearningRecord,
    Photo,
    VocabularyStats,
    normalize_word,
)
from adjective_agent.storage.memory import VocabularyStore  # noqa: E402

__all__ = [
    "AdjectiveAgent",
    "AdjectiveSelector",
    "AppConfig",
    "VocabularyStore",
    "Photo",
    "AnalysisOptions",
    "AdjectiveResult",
    "LearningRecord",
    "VocabularyStats",
    "normalize_word",
    "AdjectiveAgentError",
    "SnapshotError",
    "ConfigError",
]
