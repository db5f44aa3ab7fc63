"""Storage for adjective-agent.

Provides the in-memory vocabulary store and snapshot file I/O.
"""

from adjective_agent.storage.memory import VocabularyStore
from adjective_agent.storage.snapshot import load_snapshot, parse_snapshot, save_snapshot

__all__ = ["VocabularyStore", "load_snapshot", "parse_snapshot", "save_snapshot"]
