"""Pytest configuration and fixtures."""

import json
import random
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def isolated_config():
    """Redirect the user config file into a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "adjective-agent" / "config.toml"
        with patch("adjective_agent.utils.config.get_config_path", return_value=config_path):
            yield config_path


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def cli():
    """Get the actual CLI command for testing."""
    from adjective_agent.cli import main
    return main


@pytest.fixture
def temp_dir():
    """Create a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def vocab_path(temp_dir):
    """Snapshot file location for CLI runs (not created)."""
    return temp_dir / "vocab" / "vocabulary.json"


@pytest.fixture
def rng():
    """Seeded random source for reproducible catalog fills."""
    return random.Random(42)


@pytest.fixture
def store():
    """Create a fresh seeded vocabulary store."""
    from adjective_agent.storage.memory import VocabularyStore
    return VocabularyStore()


@pytest.fixture
def agent(store, rng):
    """Create an agent over the fresh store with a seeded random source."""
    from adjective_agent.api import AdjectiveAgent
    return AdjectiveAgent(store=store, rng=rng)


@pytest.fixture
def sunset_photo():
    """Photo record with a title and a complimentary description."""
    return {
        "id": "sunset-001",
        "title": "Golden Sunset",
        "description": "A beautiful sunset over the mountains",
    }


@pytest.fixture
def photo_file(temp_dir, sunset_photo):
    """JSON file holding a single photo record."""
    path = temp_dir / "photo.json"
    path.write_text(json.dumps(sunset_photo))
    return path
