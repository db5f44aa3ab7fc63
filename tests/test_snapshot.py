"""Tests for snapshot validation and file I/O."""

import json

import pytest

from adjective_agent.exceptions import SnapshotError
from adjective_agent.storage import VocabularyStore, load_snapshot, parse_snapshot, save_snapshot


@pytest.fixture
def snapshot():
    """Export of a store with a little learned vocabulary."""
    store = VocabularyStore()
    store.add_word("hazy", "atmosphere", "description")
    store.add_word("rugged", "spatial", "tag")
    return store.export_snapshot()


class TestParseSnapshot:
    """Tests for snapshot validation."""

    def test_valid_snapshot(self, snapshot):
        """Test a fresh export parses into independent structures."""
        state = parse_snapshot(snapshot)

        assert state.categories == snapshot["categories"]
        assert state.categories is not snapshot["categories"]
        assert state.custom_categories == ["atmosphere"]
        assert state.word_frequency == {"hazy": 1, "rugged": 1}
        assert state.learning_data["hazy"].context == "description"

    def test_version_optional(self, snapshot):
        """Test the version key is not required."""
        del snapshot["version"]
        parse_snapshot(snapshot)

    @pytest.mark.parametrize("value", [None, [], "snapshot", 3])
    def test_not_a_mapping(self, value):
        """Test non-mapping snapshots are rejected."""
        with pytest.raises(SnapshotError, match="must be a mapping"):
            parse_snapshot(value)

    @pytest.mark.parametrize(
        "key",
        ["categories", "learning_data", "custom_categories", "word_frequency", "context_patterns"],
    )
    def test_missing_key(self, snapshot, key):
        """Test every state key is required."""
        del snapshot[key]
        with pytest.raises(SnapshotError, match=key):
            parse_snapshot(snapshot)

    def test_category_words_must_be_strings(self, snapshot):
        """Test category word lists are type-checked."""
        snapshot["categories"]["mood"] = ["serene", 7]
        with pytest.raises(SnapshotError):
            parse_snapshot(snapshot)

    @pytest.mark.parametrize("count", [-1, 1.5, True, "2"])
    def test_invalid_frequency(self, snapshot, count):
        """Test frequencies must be non-negative integers."""
        snapshot["word_frequency"]["hazy"] = count
        with pytest.raises(SnapshotError):
            parse_snapshot(snapshot)

    def test_record_missing_field(self, snapshot):
        """Test learning records need every field."""
        del snapshot["learning_data"]["hazy"]["category"]
        with pytest.raises(SnapshotError, match="missing"):
            parse_snapshot(snapshot)

    def test_record_bad_timestamp(self, snapshot):
        """Test last_used must be an ISO-8601 timestamp."""
        snapshot["learning_data"]["hazy"]["last_used"] = "yesterday"
        with pytest.raises(SnapshotError):
            parse_snapshot(snapshot)

    def test_record_confidence_clamped(self, snapshot):
        """Test out-of-range confidence is clamped rather than rejected."""
        snapshot["learning_data"]["hazy"]["confidence"] = 3
        state = parse_snapshot(snapshot)
        assert state.learning_data["hazy"].confidence == 1.0

    def test_custom_categories_deduplicated(self, snapshot):
        """Test repeated custom category names collapse."""
        snapshot["custom_categories"] = ["atmosphere", "atmosphere"]
        assert parse_snapshot(snapshot).custom_categories == ["atmosphere"]


class TestSnapshotFiles:
    """Tests for saving and loading snapshot files."""

    def test_save_and_load(self, snapshot, temp_dir):
        """Test a saved snapshot loads and imports cleanly."""
        path = temp_dir / "nested" / "vocabulary.json"
        save_snapshot(snapshot, path)

        assert path.exists()
        loaded = load_snapshot(path)
        store = VocabularyStore()
        store.import_snapshot(loaded)
        assert store.get_frequency("hazy") == 1
        assert store.get_record("hazy").last_used is not None

    def test_saved_as_json(self, snapshot, temp_dir):
        """Test the file is plain indented JSON."""
        path = temp_dir / "vocabulary.json"
        save_snapshot(snapshot, path)
        data = json.loads(path.read_text())
        assert data["version"] == "1.0"
        assert data["word_frequency"] == {"hazy": 1, "rugged": 1}

    def test_load_invalid_json(self, temp_dir):
        """Test unparseable files raise SnapshotError."""
        path = temp_dir / "broken.json"
        path.write_text("{not json")
        with pytest.raises(SnapshotError, match="Failed to parse"):
            load_snapshot(path)

    def test_load_missing_file(self, temp_dir):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_snapshot(temp_dir / "missing.json")
