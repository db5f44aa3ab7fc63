"""Vocabulary snapshot validation and JSON file I/O.

A snapshot is a plain JSON-compatible dict holding the complete store
state. ``parse_snapshot`` validates one and builds fresh structures from
it so that the store can swap them in atomically.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from adjective_agent.exceptions import SnapshotError
from adjective_agent.models import LearningRecord

logger = logging.getLogger(__name__)

REQUIRED_KEYS = (
    "categories",
    "learning_data",
    "custom_categories",
    "word_frequency",
    "context_patterns",
)


@dataclass
class SnapshotState:
    """Validated, independent copy of a snapshot's contents."""

    categories: dict[str, list[str]] = field(default_factory=dict)
    learning_data: dict[str, LearningRecord] = field(default_factory=dict)
    custom_categories: list[str] = field(default_factory=list)
    word_frequency: dict[str, int] = field(default_factory=dict)
    context_patterns: dict[str, list[str]] = field(default_factory=dict)


def _is_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _word_lists(data, key: str) -> dict[str, list[str]]:
    value = data[key]
    if not isinstance(value, Mapping):
        raise SnapshotError(f"'{key}' must be a mapping, got {type(value).__name__}")

    result = {}
    for name, words in value.items():
        if not isinstance(name, str):
            raise SnapshotError(f"'{key}' has a non-string key: {name!r}")
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise SnapshotError(f"'{key}.{name}' must be a list of strings")
        result[name] = list(words)
    return result


def _learning_records(data) -> dict[str, LearningRecord]:
    value = data["learning_data"]
    if not isinstance(value, Mapping):
        raise SnapshotError("'learning_data' must be a mapping")

    records = {}
    for word, raw in value.items():
        if not isinstance(raw, Mapping):
            raise SnapshotError(f"Learning record for {word!r} must be a mapping")
        try:
            record = LearningRecord.from_dict(raw)
        except KeyError as e:
            raise SnapshotError(f"Learning record for {word!r} is missing {e}") from e
        except (TypeError, ValueError) as e:
            raise SnapshotError(f"Learning record for {word!r} is invalid: {e}") from e

        if not all(isinstance(v, str) for v in (record.word, record.category, record.context)):
            raise SnapshotError(f"Learning record for {word!r} has non-string fields")
        if not _is_count(record.frequency):
            raise SnapshotError(f"Learning record for {word!r} has an invalid frequency")
        if isinstance(record.confidence, bool) or not isinstance(record.confidence, (int, float)):
            raise SnapshotError(f"Learning record for {word!r} has an invalid confidence")
        record.confidence = min(1.0, max(0.0, float(record.confidence)))
        records[word] = record
    return records


def parse_snapshot(snapshot) -> SnapshotState:
    """Validate a snapshot and build a state independent of it.

    Args:
        snapshot: Value previously returned by ``export_snapshot``

    Returns:
        SnapshotState sharing no mutable objects with ``snapshot``

    Raises:
        SnapshotError: If the snapshot is not a mapping or any part of it
            is missing or mistyped
    """
    if not isinstance(snapshot, Mapping):
        raise SnapshotError(f"Snapshot must be a mapping, got {type(snapshot).__name__}")

    missing = [key for key in REQUIRED_KEYS if key not in snapshot]
    if missing:
        raise SnapshotError(f"Snapshot is missing keys: {', '.join(missing)}")

    custom = snapshot["custom_categories"]
    if not isinstance(custom, (list, tuple)) or not all(isinstance(c, str) for c in custom):
        raise SnapshotError("'custom_categories' must be a list of strings")

    frequency = snapshot["word_frequency"]
    if not isinstance(frequency, Mapping):
        raise SnapshotError("'word_frequency' must be a mapping")
    for word, count in frequency.items():
        if not isinstance(word, str) or not _is_count(count):
            raise SnapshotError(f"Invalid frequency entry: {word!r} -> {count!r}")

    return SnapshotState(
        categories=_word_lists(snapshot, "categories"),
        learning_data=_learning_records(snapshot),
        custom_categories=list(dict.fromkeys(custom)),
        word_frequency=dict(frequency),
        context_patterns=_word_lists(snapshot, "context_patterns"),
    )


def save_snapshot(snapshot: dict, path: str | Path) -> None:
    """Write a snapshot to a JSON file.

    Args:
        snapshot: Snapshot dict
        path: Output file path (parent directories are created)
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(snapshot, f, indent=2)
    logger.debug(f"Saved vocabulary snapshot to {path}")


def load_snapshot(path: str | Path) -> dict:
    """Read a snapshot from a JSON file.

    The content is not validated here; ``VocabularyStore.import_snapshot``
    does that.

    Raises:
        SnapshotError: If the file is not valid JSON
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Failed to parse snapshot {path}: {e}") from e

    logger.debug(f"Loaded vocabulary snapshot from {path}")
    return data
